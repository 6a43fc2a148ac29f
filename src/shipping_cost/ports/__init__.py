from .config_loader import RuleConfigLoader
from .country_repository import CountryRepository
from .event_sink import EventSink

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "CountryRepository",
    "EventSink",
    "RuleConfigLoader",
]
