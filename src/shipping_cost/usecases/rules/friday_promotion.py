from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from shipping_cost.kernel.context import CalculationContext
from shipping_cost.kernel.rule import PRIORITY_TIME_PROMOTION
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.usecases.rule_configs import FridayPromotionConfig


@dataclass
class FridayPromotionRule:
    # Friday discount on whatever cost survives the earlier rules.
    # Never fires on a zero cost, so free shipping does not get a friday_promotion entry.
    name: ClassVar[str] = "friday_promotion"

    config_loader: RuleConfigLoader[FridayPromotionConfig]
    priority: int = PRIORITY_TIME_PROMOTION
    _config: FridayPromotionConfig | None = field(default=None, init=False, repr=False)

    def supports(self, context: CalculationContext) -> bool:
        return context.order.order_date.is_friday() and not context.is_free_shipping()

    def apply(self, context: CalculationContext) -> CalculationContext:
        config = self._load_config()
        discounted = context.current_cost.percentage(100 - config.discount_percent)
        return context.with_cost(
            discounted,
            self.name,
            f"Friday promotion: {config.discount_percent}% discount = {discounted.format()}",
        )

    def _load_config(self) -> FridayPromotionConfig:
        if self._config is None:
            self._config = self.config_loader.load()
        return self._config
