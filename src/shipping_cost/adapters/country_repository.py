from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from shipping_cost.domain.country import Country
from shipping_cost.ports.country_repository import CountryRepository
from shipping_cost.usecases.config_models import CountryDecl


@dataclass
class InMemoryCountryRepository(CountryRepository):
    # In-memory country master data, keyed by canonical (uppercase) code.
    _countries: dict[str, Country] = field(default_factory=dict)

    @classmethod
    def from_countries(cls, countries: Iterable[Country]) -> InMemoryCountryRepository:
        repository = cls()
        for country in countries:
            repository.add(country)
        return repository

    @classmethod
    def from_declarations(cls, declarations: Iterable[CountryDecl]) -> InMemoryCountryRepository:
        return cls.from_countries(
            Country.create(decl.code, decl.name, decl.active) for decl in declarations
        )

    def add(self, country: Country) -> None:
        self._countries[country.code] = country

    def find_by_code(self, code: str) -> Country | None:
        return self._countries.get(code.strip().upper())

    def find_all_active(self) -> list[Country]:
        return sorted((c for c in self._countries.values() if c.active), key=lambda c: c.name)
