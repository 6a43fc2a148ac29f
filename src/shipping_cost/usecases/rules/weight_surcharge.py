from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from shipping_cost.kernel.context import CalculationContext
from shipping_cost.kernel.rule import PRIORITY_SURCHARGE
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.usecases.rule_configs import WeightSurchargeConfig


@dataclass
class WeightSurchargeRule:
    # Above the weight limit, every started kilogram adds the per-kilogram surcharge.
    # Example: 7.2 kg against a 5 kg limit is 3 started kilograms.
    name: ClassVar[str] = "weight_surcharge"

    config_loader: RuleConfigLoader[WeightSurchargeConfig]
    priority: int = PRIORITY_SURCHARGE
    _config: WeightSurchargeConfig | None = field(default=None, init=False, repr=False)

    def supports(self, context: CalculationContext) -> bool:
        # Exactly at the limit is not a surcharge.
        return context.order.total_weight.is_greater_than(self._load_config().limit)

    def apply(self, context: CalculationContext) -> CalculationContext:
        config = self._load_config()
        excess_kilograms = context.order.total_weight.excess_kilograms_above(config.limit)
        surcharge = config.surcharge_per_kg.multiply(excess_kilograms)
        return context.with_added_cost(
            surcharge,
            self.name,
            f"Weight surcharge: {excess_kilograms} excess kg(s) above "
            f"{config.limit.format()} limit = +{surcharge.format()}",
        )

    def _load_config(self) -> WeightSurchargeConfig:
        if self._config is None:
            self._config = self.config_loader.load()
        return self._config
