from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from shipping_cost.domain.money import Money
from shipping_cost.kernel.context import CalculationContext
from shipping_cost.kernel.rule import PRIORITY_VALUE_PROMOTION
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.usecases.rule_configs import FreeShippingConfig


@dataclass
class FreeShippingRule:
    # Eligible countries with a cart value at or above the threshold ship for free.
    name: ClassVar[str] = "free_shipping"

    config_loader: RuleConfigLoader[FreeShippingConfig]
    priority: int = PRIORITY_VALUE_PROMOTION
    _config: FreeShippingConfig | None = field(default=None, init=False, repr=False)

    def supports(self, context: CalculationContext) -> bool:
        config = self._load_config()
        if not config.applies_to_country(context.order.country):
            return False
        return context.order.cart_value.is_greater_than_or_equal(config.threshold)

    def apply(self, context: CalculationContext) -> CalculationContext:
        threshold = self._load_config().threshold
        return context.with_cost(
            Money.zero(threshold.currency),
            self.name,
            f"Free shipping (cart >= {threshold.format()})",
        )

    def _load_config(self) -> FreeShippingConfig:
        if self._config is None:
            self._config = self.config_loader.load()
        return self._config
