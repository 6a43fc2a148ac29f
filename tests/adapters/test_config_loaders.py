from __future__ import annotations

import pytest

from shipping_cost.adapters.config_loaders import (
    ActiveBaseCountryRateConfigLoader,
    ActiveFreeShippingConfigLoader,
    ActiveFridayPromotionConfigLoader,
    ActiveHalfPriceShippingConfigLoader,
    ActiveWeightSurchargeConfigLoader,
    InMemoryConfigLoader,
    build_config_loaders,
)
from shipping_cost.adapters.config_store import ShippingConfigStore
from shipping_cost.adapters.country_repository import InMemoryCountryRepository
from shipping_cost.config.loader import ConfigError
from shipping_cost.domain.country import Country
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.usecases.config_models import AppConfig


def _countries() -> InMemoryCountryRepository:
    return InMemoryCountryRepository.from_countries(
        [Country.create("PL", "Poland"), Country.create("US", "United States")]
    )


def _store(rules: dict[str, object], currency: str = "EUR") -> ShippingConfigStore:
    return ShippingConfigStore.from_config(
        AppConfig.model_validate(
            {
                "version": 1,
                "configurations": [
                    {"id": 1, "name": "default", "active": True, "currency": currency, "rules": rules}
                ],
            }
        )
    )


def test_base_rate_loader_uses_configuration_currency_and_known_countries() -> None:
    store = _store({"base_rate": {"default_amount": "39.99", "rates": {"PL": "10", "ZZ": "1"}}})
    config = ActiveBaseCountryRateConfigLoader(store=store, countries=_countries()).load()
    assert config.rate_for_country("PL").format() == "10.00 EUR"
    assert config.rate_for_country("ZZ") == config.default_rate
    assert config.default_rate.cents == 3999


def test_weight_surcharge_loader_converts_units() -> None:
    store = _store({"weight_surcharge": {"limit_kg": "5.0", "surcharge_per_kg": "3.00"}})
    config = ActiveWeightSurchargeConfigLoader(store=store).load()
    assert config.limit.grams == 5000
    assert config.surcharge_per_kg.cents == 300


def test_value_promotion_loaders_resolve_countries() -> None:
    store = _store(
        {
            "free_shipping": {"threshold": "400", "countries": ["PL", "ZZ"]},
            "half_price_shipping": {"threshold": "400", "discount_percent": 50, "countries": ["US"]},
        }
    )
    free = ActiveFreeShippingConfigLoader(store=store, countries=_countries()).load()
    half = ActiveHalfPriceShippingConfigLoader(store=store, countries=_countries()).load()
    assert [country.code for country in free.countries] == ["PL"]
    assert free.threshold.cents == 40000
    assert half.applies_to_country(Country.create("US", "United States"))
    assert half.discount_percent == 50


def test_loader_raises_when_section_missing() -> None:
    store = _store({})
    with pytest.raises(ConfigError, match="Friday promotion configuration not found"):
        ActiveFridayPromotionConfigLoader(store=store).load()


def test_build_config_loaders_covers_every_rule_family() -> None:
    loaders = build_config_loaders(_store({}), _countries())
    assert set(loaders) == {
        "base_rate",
        "weight_surcharge",
        "free_shipping",
        "half_price_shipping",
        "friday_promotion",
    }
    assert all(isinstance(loader, RuleConfigLoader) for loader in loaders.values())


def test_in_memory_loader_returns_snapshot() -> None:
    snapshot = object()
    assert InMemoryConfigLoader(snapshot).load() is snapshot
