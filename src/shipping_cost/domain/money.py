from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .errors import CurrencyMismatchError, MoneyParseError

DEFAULT_CURRENCY = "PLN"

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")
_AMOUNT_PATTERN = re.compile(r"^\d+(?:\.\d{1,2})?$")
_CURRENCY_AFFIX = re.compile(r"^(?P<prefix>[A-Za-z]{3})?(?P<amount>[^A-Za-z]+?)(?P<suffix>[A-Za-z]{3})?$")


@dataclass(frozen=True, slots=True)
class Money:
    # Amount is kept in minor units (cents) so arithmetic stays exact.
    cents: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValueError("Money amount must be an integer number of cents")
        if self.cents < 0:
            raise ValueError("Money amount must be non-negative")
        if not _CURRENCY_PATTERN.match(self.currency):
            raise ValueError(f"Currency must be a three-letter uppercase code, got: {self.currency!r}")

    @classmethod
    def from_cents(cls, cents: int, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(cents=cents, currency=currency)

    @classmethod
    def from_decimal(cls, amount: Decimal | int | str, currency: str = DEFAULT_CURRENCY) -> Money:
        # Major units are rounded half-up to the nearest cent.
        try:
            value = Decimal(amount)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise MoneyParseError(amount) from exc
        if not value.is_finite():
            raise MoneyParseError(amount)
        cents = (value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return cls(cents=int(cents), currency=currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(cents=0, currency=currency)

    def as_decimal(self) -> Decimal:
        return (Decimal(self.cents) / 100).quantize(Decimal("0.01"))

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.cents + other.cents, self.currency)

    def subtract(self, other: Money) -> Money:
        # Subtraction floors at zero instead of going negative.
        self._assert_same_currency(other)
        return Money(max(0, self.cents - other.cents), self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        product = Decimal(self.cents) * Decimal(factor)
        return Money(_round_cents(product), self.currency)

    def percentage(self, percent: int) -> Money:
        # percentage(50) is half of the amount, rounded half-up to a cent.
        return Money(_round_cents(Decimal(self.cents * percent) / 100), self.currency)

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_greater_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents > other.cents

    def is_greater_than_or_equal(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents >= other.cents

    def is_less_than(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents < other.cents

    def format(self) -> str:
        return f"{self.as_decimal()} {self.currency}"

    def __str__(self) -> str:
        return self.format()

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)


def _round_cents(value: Decimal) -> int:
    rounded = int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if rounded < 0:
        raise ValueError("Money amount must be non-negative")
    return rounded


def parse_money(raw: str, *, currency: str = DEFAULT_CURRENCY) -> Money:
    # Accepts "400", "399.9", "399.99" with an optional currency code before or after.
    if not isinstance(raw, str):
        raise MoneyParseError(raw)

    text = re.sub(r"\s+", "", raw)
    match = _CURRENCY_AFFIX.match(text)
    if match is None:
        raise MoneyParseError(raw)

    prefix = match.group("prefix")
    suffix = match.group("suffix")
    if prefix and suffix:
        raise MoneyParseError(raw)
    code = (prefix or suffix or currency).upper()

    amount = match.group("amount")
    if not _AMOUNT_PATTERN.match(amount):
        raise MoneyParseError(raw)
    return Money.from_decimal(Decimal(amount), currency=code)
