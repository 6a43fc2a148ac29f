from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from shipping_cost.domain.country import Country
from shipping_cost.domain.money import Money
from shipping_cost.domain.weight import Weight

# Rule configuration snapshots: one per rule family, immutable once loaded.


def _check_percent(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
        raise ValueError(f"Discount percent must be an integer between 0 and 100, got: {value!r}")


@dataclass(frozen=True, slots=True)
class BaseCountryRateConfig:
    rates: Mapping[str, Money]
    default_rate: Money

    def __post_init__(self) -> None:
        # Freeze the mapping so the snapshot cannot be changed through a shared reference.
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def rate_for_country(self, country_code: str) -> Money:
        # Unlisted countries fall back to the default rate; this is a business rule, not an error.
        return self.rates.get(country_code, self.default_rate)


@dataclass(frozen=True, slots=True)
class WeightSurchargeConfig:
    limit: Weight
    surcharge_per_kg: Money


@dataclass(frozen=True, slots=True)
class FreeShippingConfig:
    threshold: Money
    countries: tuple[Country, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "countries", tuple(self.countries))

    def applies_to_country(self, country: Country) -> bool:
        return any(eligible.code == country.code for eligible in self.countries)


@dataclass(frozen=True, slots=True)
class HalfPriceShippingConfig:
    threshold: Money
    discount_percent: int
    countries: tuple[Country, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_percent(self.discount_percent)
        object.__setattr__(self, "countries", tuple(self.countries))

    def applies_to_country(self, country: Country) -> bool:
        return any(eligible.code == country.code for eligible in self.countries)


@dataclass(frozen=True, slots=True)
class FridayPromotionConfig:
    discount_percent: int

    def __post_init__(self) -> None:
        _check_percent(self.discount_percent)
