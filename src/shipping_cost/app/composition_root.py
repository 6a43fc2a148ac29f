from __future__ import annotations

from dataclasses import dataclass

from shipping_cost.adapters.config_loaders import build_config_loaders
from shipping_cost.adapters.config_store import ShippingConfigStore
from shipping_cost.adapters.country_repository import InMemoryCountryRepository
from shipping_cost.kernel.calculator import Calculator
from shipping_cost.ports.country_repository import CountryRepository
from shipping_cost.ports.event_sink import EventSink
from shipping_cost.usecases.wiring import build_rules


@dataclass(frozen=True, slots=True)
class AppRuntime:
    # Bundle handed to the CLI: the calculator plus the country lookup used to build orders.
    calculator: Calculator
    countries: CountryRepository


def build_runtime(
    store: ShippingConfigStore,
    *,
    countries: CountryRepository | None = None,
    event_sink: EventSink | None = None,
) -> AppRuntime:
    # Store -> loaders -> rules -> calculator. Rule instances are fresh for every runtime.
    if countries is None:
        countries = InMemoryCountryRepository.from_declarations(store.app_config().countries)
    loaders = build_config_loaders(store, countries)
    rules = build_rules(store.active_configuration(), loaders)
    return AppRuntime(calculator=Calculator(rules, event_sink=event_sink), countries=countries)
