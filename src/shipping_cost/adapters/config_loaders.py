from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from shipping_cost.adapters.config_store import ShippingConfigStore
from shipping_cost.domain.country import Country
from shipping_cost.domain.money import Money
from shipping_cost.domain.weight import Weight
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.ports.country_repository import CountryRepository
from shipping_cost.usecases.config_models import (
    BaseRateSection,
    FreeShippingSection,
    FridayPromotionSection,
    HalfPriceShippingSection,
    WeightSurchargeSection,
)
from shipping_cost.usecases.rule_configs import (
    BaseCountryRateConfig,
    FreeShippingConfig,
    FridayPromotionConfig,
    HalfPriceShippingConfig,
    WeightSurchargeConfig,
)

ConfigT = TypeVar("ConfigT")


@dataclass(frozen=True, slots=True)
class InMemoryConfigLoader(Generic[ConfigT]):
    # Returns a fixed snapshot; used by tests and by callers embedding the engine.
    config: ConfigT

    def load(self) -> ConfigT:
        return self.config


def _resolve_countries(codes: Iterable[str], countries: CountryRepository) -> tuple[Country, ...]:
    # Codes unknown to the repository are skipped.
    resolved = (countries.find_by_code(code) for code in codes)
    return tuple(country for country in resolved if country is not None)


@dataclass(frozen=True, slots=True)
class ActiveBaseCountryRateConfigLoader:
    store: ShippingConfigStore
    countries: CountryRepository

    def load(self) -> BaseCountryRateConfig:
        configuration = self.store.active_configuration()
        currency = configuration.currency
        section = self.store.section("base_rate", configuration)
        assert isinstance(section, BaseRateSection)
        rates: dict[str, Money] = {}
        for code, amount in section.rates.items():
            country = self.countries.find_by_code(code)
            if country is not None:
                rates[country.code] = Money.from_decimal(amount, currency)
        return BaseCountryRateConfig(
            rates=rates,
            default_rate=Money.from_decimal(section.default_amount, currency),
        )


@dataclass(frozen=True, slots=True)
class ActiveWeightSurchargeConfigLoader:
    store: ShippingConfigStore

    def load(self) -> WeightSurchargeConfig:
        configuration = self.store.active_configuration()
        currency = configuration.currency
        section = self.store.section("weight_surcharge", configuration)
        assert isinstance(section, WeightSurchargeSection)
        return WeightSurchargeConfig(
            limit=Weight.from_kilograms(section.limit_kg),
            surcharge_per_kg=Money.from_decimal(section.surcharge_per_kg, currency),
        )


@dataclass(frozen=True, slots=True)
class ActiveFreeShippingConfigLoader:
    store: ShippingConfigStore
    countries: CountryRepository

    def load(self) -> FreeShippingConfig:
        configuration = self.store.active_configuration()
        currency = configuration.currency
        section = self.store.section("free_shipping", configuration)
        assert isinstance(section, FreeShippingSection)
        return FreeShippingConfig(
            threshold=Money.from_decimal(section.threshold, currency),
            countries=_resolve_countries(section.countries, self.countries),
        )


@dataclass(frozen=True, slots=True)
class ActiveHalfPriceShippingConfigLoader:
    store: ShippingConfigStore
    countries: CountryRepository

    def load(self) -> HalfPriceShippingConfig:
        configuration = self.store.active_configuration()
        currency = configuration.currency
        section = self.store.section("half_price_shipping", configuration)
        assert isinstance(section, HalfPriceShippingSection)
        return HalfPriceShippingConfig(
            threshold=Money.from_decimal(section.threshold, currency),
            discount_percent=section.discount_percent,
            countries=_resolve_countries(section.countries, self.countries),
        )


@dataclass(frozen=True, slots=True)
class ActiveFridayPromotionConfigLoader:
    store: ShippingConfigStore

    def load(self) -> FridayPromotionConfig:
        section = self.store.section("friday_promotion")
        assert isinstance(section, FridayPromotionSection)
        return FridayPromotionConfig(discount_percent=section.discount_percent)


def build_config_loaders(
    store: ShippingConfigStore, countries: CountryRepository
) -> dict[str, RuleConfigLoader[object]]:
    # Keys match rule-family keys used by the rule registry and the config file.
    return {
        "base_rate": ActiveBaseCountryRateConfigLoader(store=store, countries=countries),
        "weight_surcharge": ActiveWeightSurchargeConfigLoader(store=store),
        "free_shipping": ActiveFreeShippingConfigLoader(store=store, countries=countries),
        "half_price_shipping": ActiveHalfPriceShippingConfigLoader(store=store, countries=countries),
        "friday_promotion": ActiveFridayPromotionConfigLoader(store=store),
    }
