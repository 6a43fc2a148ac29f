from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from shipping_cost.kernel.context import CalculationContext
from shipping_cost.kernel.rule import PRIORITY_VALUE_PROMOTION
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.usecases.rule_configs import HalfPriceShippingConfig

DEFAULT_PRIORITY = PRIORITY_VALUE_PROMOTION + 5


@dataclass
class HalfPriceShippingRule:
    # Percentage reduction of the cost accumulated so far (surcharges included), not a flat rate.
    name: ClassVar[str] = "half_price_shipping"

    config_loader: RuleConfigLoader[HalfPriceShippingConfig]
    priority: int = DEFAULT_PRIORITY
    _config: HalfPriceShippingConfig | None = field(default=None, init=False, repr=False)

    def supports(self, context: CalculationContext) -> bool:
        config = self._load_config()
        if not config.applies_to_country(context.order.country):
            return False
        return context.order.cart_value.is_greater_than_or_equal(config.threshold)

    def apply(self, context: CalculationContext) -> CalculationContext:
        config = self._load_config()
        discounted = context.current_cost.percentage(100 - config.discount_percent)
        return context.with_cost(
            discounted,
            self.name,
            f"Half-price shipping (cart >= {config.threshold.format()}): "
            f"{config.discount_percent}% discount = {discounted.format()}",
        )

    def _load_config(self) -> HalfPriceShippingConfig:
        if self._config is None:
            self._config = self.config_loader.load()
        return self._config
