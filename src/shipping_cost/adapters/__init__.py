from .config_loaders import (
    ActiveBaseCountryRateConfigLoader,
    ActiveFreeShippingConfigLoader,
    ActiveFridayPromotionConfigLoader,
    ActiveHalfPriceShippingConfigLoader,
    ActiveWeightSurchargeConfigLoader,
    InMemoryConfigLoader,
    build_config_loaders,
)
from .config_store import ShippingConfigStore
from .country_repository import InMemoryCountryRepository
from .event_sinks import InMemoryEventSink, JsonlEventSink, StdoutEventSink, event_to_dict

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "ActiveBaseCountryRateConfigLoader",
    "ActiveFreeShippingConfigLoader",
    "ActiveFridayPromotionConfigLoader",
    "ActiveHalfPriceShippingConfigLoader",
    "ActiveWeightSurchargeConfigLoader",
    "InMemoryConfigLoader",
    "InMemoryCountryRepository",
    "InMemoryEventSink",
    "JsonlEventSink",
    "ShippingConfigStore",
    "StdoutEventSink",
    "build_config_loaders",
    "event_to_dict",
]
