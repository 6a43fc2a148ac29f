from __future__ import annotations

import pytest

from shipping_cost.adapters.config_loaders import InMemoryConfigLoader
from shipping_cost.domain.country import Country
from shipping_cost.domain.money import Money
from shipping_cost.domain.order import Order
from shipping_cost.domain.order_date import OrderDate
from shipping_cost.domain.weight import Weight
from shipping_cost.kernel.context import CalculationContext
from shipping_cost.usecases.rule_configs import WeightSurchargeConfig
from shipping_cost.usecases.rules import WeightSurchargeRule


def _rule() -> WeightSurchargeRule:
    config = WeightSurchargeConfig(limit=Weight.from_kilograms("5"), surcharge_per_kg=Money.from_decimal("3.00"))
    return WeightSurchargeRule(config_loader=InMemoryConfigLoader(config))


def _context(kilograms: str) -> CalculationContext:
    order = Order.with_explicit_values(
        "order_1",
        country=Country.create("PL", "Poland"),
        order_date=OrderDate.from_string("2024-01-15"),
        total_weight=Weight.from_kilograms(kilograms),
        cart_value=Money.from_decimal("100"),
    )
    return CalculationContext.for_order(order).with_cost(Money.from_decimal("10.00"), "base_country_rate", "base")


@pytest.mark.parametrize("kilograms", ["0", "4.99", "5", "5.0"])
def test_no_surcharge_at_or_below_limit(kilograms: str) -> None:
    assert not _rule().supports(_context(kilograms))


@pytest.mark.parametrize(
    ("kilograms", "expected_cents"),
    [("5.001", 1300), ("5.1", 1300), ("6", 1300), ("6.001", 1600), ("7.2", 1900)],
)
def test_surcharge_counts_started_kilograms(kilograms: str, expected_cents: int) -> None:
    rule = _rule()
    context = _context(kilograms)
    assert rule.supports(context)
    assert rule.apply(context).current_cost.cents == expected_cents


def test_description_names_excess_and_limit() -> None:
    result = _rule().apply(_context("7.2"))
    assert result.events[-1].description == "Weight surcharge: 3 excess kg(s) above 5.00 kg limit = +9.00 PLN"
    assert result.applied_rules == ("base_country_rate", "weight_surcharge")
