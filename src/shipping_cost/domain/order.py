from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .country import Country
from .money import Money
from .order_date import OrderDate
from .weight import Weight


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    price: Money
    weight: Weight
    quantity: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError(f"Product quantity must be a positive integer, got: {self.quantity!r}")

    @property
    def total_price(self) -> Money:
        return self.price.multiply(self.quantity)

    @property
    def total_weight(self) -> Weight:
        return self.weight.multiply(self.quantity)


@dataclass(frozen=True, slots=True)
class Order:
    # Order is the read-only input of a calculation; use the factories below to build it.
    id: str
    country: Country
    order_date: OrderDate
    total_weight: Weight
    cart_value: Money
    products: tuple[Product, ...] = ()

    @classmethod
    def create(
        cls,
        id: str,
        products: Iterable[Product],
        country: Country,
        order_date: OrderDate,
    ) -> Order:
        # Totals are derived from line items, so at least one is required.
        items = tuple(products)
        if not items:
            raise ValueError("Order must contain at least one product")
        for item in items:
            if not isinstance(item, Product):
                raise ValueError("All items must be Product instances")

        total_weight = Weight.zero()
        cart_value = Money.zero(items[0].price.currency)
        for item in items:
            total_weight = total_weight.add(item.total_weight)
            cart_value = cart_value.add(item.total_price)

        return cls(
            id=id,
            country=country,
            order_date=order_date,
            total_weight=total_weight,
            cart_value=cart_value,
            products=items,
        )

    @classmethod
    def with_explicit_values(
        cls,
        id: str,
        country: Country,
        order_date: OrderDate,
        total_weight: Weight,
        cart_value: Money,
        products: Iterable[Product] = (),
    ) -> Order:
        return cls(
            id=id,
            country=country,
            order_date=order_date,
            total_weight=total_weight,
            cart_value=cart_value,
            products=tuple(products),
        )

    @property
    def product_count(self) -> int:
        return sum(item.quantity for item in self.products)
