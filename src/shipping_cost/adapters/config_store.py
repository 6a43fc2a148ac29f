from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from shipping_cost.config.loader import ConfigError, load_config
from shipping_cost.usecases.config_models import AppConfig, RuleSection, ShippingConfiguration

_SECTION_TITLES = {
    "base_rate": "Base rate",
    "weight_surcharge": "Weight surcharge",
    "free_shipping": "Free shipping",
    "half_price_shipping": "Half price shipping",
    "friday_promotion": "Friday promotion",
}


class ShippingConfigStore:
    """Resolves the currently active shipping configuration.

    The store asks its provider for a fresh ``AppConfig`` on every lookup, so a
    file-backed store picks up edits; rule instances still cache what they loaded.
    """

    def __init__(self, provider: Callable[[], AppConfig]) -> None:
        self._provider = provider

    @classmethod
    def from_config(cls, config: AppConfig) -> ShippingConfigStore:
        return cls(lambda: config)

    @classmethod
    def from_path(cls, path: Path) -> ShippingConfigStore:
        return cls(lambda: load_config(path))

    def app_config(self) -> AppConfig:
        return self._provider()

    def active_configuration(self) -> ShippingConfiguration:
        # Among active configurations the highest id wins.
        active = [c for c in self._provider().configurations if c.active]
        if not active:
            raise ConfigError("No active shipping configuration found")
        return max(active, key=lambda c: c.id)

    def section(self, key: str, configuration: ShippingConfiguration | None = None) -> RuleSection:
        # Missing and disabled sections are both hard failures.
        if key not in _SECTION_TITLES:
            raise ConfigError(f"Unknown rule configuration section: {key}")
        if configuration is None:
            configuration = self.active_configuration()
        section = getattr(configuration.rules, key)
        if section is None or not section.enabled:
            raise ConfigError(f"{_SECTION_TITLES[key]} configuration not found")
        return section
