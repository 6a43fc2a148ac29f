from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from shipping_cost.kernel.context import CalculationContext
from shipping_cost.kernel.rule import PRIORITY_BASE_RATE
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.usecases.rule_configs import BaseCountryRateConfig


@dataclass
class BaseCountryRateRule:
    # Sets the cost to the configured rate for the delivery country, or the default rate.
    name: ClassVar[str] = "base_country_rate"

    config_loader: RuleConfigLoader[BaseCountryRateConfig]
    priority: int = PRIORITY_BASE_RATE
    # Cached for the lifetime of this instance; build a new rule when configuration changes.
    _config: BaseCountryRateConfig | None = field(default=None, init=False, repr=False)

    def supports(self, context: CalculationContext) -> bool:
        return True

    def apply(self, context: CalculationContext) -> CalculationContext:
        country = context.order.country
        rate = self._load_config().rate_for_country(country.code)
        return context.with_cost(
            rate,
            self.name,
            f"Base shipping rate for {country.name}: {rate.format()}",
        )

    def _load_config(self) -> BaseCountryRateConfig:
        if self._config is None:
            self._config = self.config_loader.load()
        return self._config
