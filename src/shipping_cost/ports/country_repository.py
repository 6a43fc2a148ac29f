from __future__ import annotations

from typing import Protocol, runtime_checkable

from shipping_cost.domain.country import Country


# CountryRepository resolves country codes used in configuration and on the command line.
@runtime_checkable
class CountryRepository(Protocol):
    def find_by_code(self, code: str) -> Country | None:
        """Return the country for ``code`` (case-insensitive, trimmed) or None."""
        raise NotImplementedError("CountryRepository is a port; use a concrete adapter.")

    def find_all_active(self) -> list[Country]:
        """Return active countries ordered by name."""
        raise NotImplementedError("CountryRepository is a port; use a concrete adapter.")
