from __future__ import annotations

import pytest

from shipping_cost.adapters.config_loaders import InMemoryConfigLoader
from shipping_cost.domain.country import Country
from shipping_cost.domain.money import Money
from shipping_cost.domain.order import Order
from shipping_cost.domain.order_date import OrderDate
from shipping_cost.domain.weight import Weight
from shipping_cost.kernel.context import CalculationContext
from shipping_cost.usecases.rule_configs import FridayPromotionConfig
from shipping_cost.usecases.rules import FridayPromotionRule

FRIDAY = "2024-01-19"
MONDAY = "2024-01-15"


def _rule() -> FridayPromotionRule:
    return FridayPromotionRule(config_loader=InMemoryConfigLoader(FridayPromotionConfig(discount_percent=50)))


def _context(day: str, cost: str) -> CalculationContext:
    order = Order.with_explicit_values(
        "order_1",
        country=Country.create("PL", "Poland"),
        order_date=OrderDate.from_string(day),
        total_weight=Weight.from_kilograms("2"),
        cart_value=Money.from_decimal("100"),
    )
    return CalculationContext.for_order(order).with_cost(Money.from_decimal(cost), "base_country_rate", "base")


def test_fires_only_on_friday() -> None:
    assert _rule().supports(_context(FRIDAY, "10.00"))
    assert not _rule().supports(_context(MONDAY, "10.00"))


def test_does_not_fire_when_shipping_is_already_free() -> None:
    assert not _rule().supports(_context(FRIDAY, "0.00"))


def test_apply_halves_current_cost() -> None:
    result = _rule().apply(_context(FRIDAY, "19.00"))
    assert result.current_cost.cents == 950
    assert result.events[-1].description == "Friday promotion: 50% discount = 9.50 PLN"


def test_config_rejects_out_of_range_percent() -> None:
    with pytest.raises(ValueError):
        FridayPromotionConfig(discount_percent=101)
    with pytest.raises(ValueError):
        FridayPromotionConfig(discount_percent=-1)
