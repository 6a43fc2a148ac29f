from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Config models map YAML sections to typed structures; every section forbids unknown keys.


def _normalize_code(code: str) -> str:
    normalized = code.strip().upper()
    if len(normalized) != 2 or not normalized.isalpha() or not normalized.isascii():
        raise ValueError(f"country code must be two letters, got: {code!r}")
    return normalized


class CountryDecl(BaseModel):
    # Country master data entry.
    model_config = ConfigDict(extra="forbid")
    code: str
    name: str = Field(min_length=1)
    active: bool = True

    @field_validator("code")
    @classmethod
    def _code(cls, value: str) -> str:
        return _normalize_code(value)


class RuleSection(BaseModel):
    # Common switches for every rule family; priority None means the family default.
    model_config = ConfigDict(extra="forbid")
    enabled: bool = True
    priority: int | None = None


class BaseRateSection(RuleSection):
    default_amount: Decimal = Field(ge=0)
    rates: dict[str, Decimal] = Field(default_factory=dict)

    @field_validator("rates")
    @classmethod
    def _rates(cls, value: dict[str, Decimal]) -> dict[str, Decimal]:
        normalized: dict[str, Decimal] = {}
        for code, amount in value.items():
            if amount < 0:
                raise ValueError(f"rate for {code} must be non-negative")
            normalized[_normalize_code(code)] = amount
        return normalized


class WeightSurchargeSection(RuleSection):
    limit_kg: Decimal = Field(ge=0)
    surcharge_per_kg: Decimal = Field(ge=0)


class FreeShippingSection(RuleSection):
    threshold: Decimal = Field(ge=0)
    countries: list[str] = Field(default_factory=list)

    @field_validator("countries")
    @classmethod
    def _countries(cls, value: list[str]) -> list[str]:
        return [_normalize_code(code) for code in value]


class HalfPriceShippingSection(RuleSection):
    threshold: Decimal = Field(ge=0)
    discount_percent: int = Field(ge=0, le=100)
    countries: list[str] = Field(default_factory=list)

    @field_validator("countries")
    @classmethod
    def _countries(cls, value: list[str]) -> list[str]:
        return [_normalize_code(code) for code in value]


class FridayPromotionSection(RuleSection):
    discount_percent: int = Field(ge=0, le=100)


class RulesConfig(BaseModel):
    # Section keys double as rule-family keys in the rule registry.
    model_config = ConfigDict(extra="forbid")
    base_rate: BaseRateSection | None = None
    weight_surcharge: WeightSurchargeSection | None = None
    free_shipping: FreeShippingSection | None = None
    half_price_shipping: HalfPriceShippingSection | None = None
    friday_promotion: FridayPromotionSection | None = None


class ShippingConfiguration(BaseModel):
    # One named configuration snapshot; at most one is expected to be active at a time.
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    active: bool = False
    currency: str = Field(default="PLN", pattern=r"^[A-Z]{3}$")
    rules: RulesConfig = Field(default_factory=RulesConfig)

    @model_validator(mode="after")
    def _value_promotions_do_not_overlap(self) -> ShippingConfiguration:
        # Free and half-price shipping would both fire for a shared country; reject that here.
        free = self.rules.free_shipping
        half = self.rules.half_price_shipping
        if free is None or half is None or not (free.enabled and half.enabled):
            return self
        overlap = sorted(set(free.countries) & set(half.countries))
        if overlap:
            raise ValueError(
                f"free_shipping and half_price_shipping both cover {overlap} in configuration {self.id}"
            )
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of the configuration file.
    model_config = ConfigDict(extra="forbid")
    version: int
    countries: list[CountryDecl] = Field(default_factory=list)
    configurations: list[ShippingConfiguration] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_ids(self) -> AppConfig:
        ids = [configuration.id for configuration in self.configurations]
        duplicates = sorted({value for value in ids if ids.count(value) > 1})
        if duplicates:
            raise ValueError(f"configuration ids must be unique, duplicated: {duplicates}")
        codes = [country.code for country in self.countries]
        duplicated_codes = sorted({code for code in codes if codes.count(code) > 1})
        if duplicated_codes:
            raise ValueError(f"country codes must be unique, duplicated: {duplicated_codes}")
        return self
