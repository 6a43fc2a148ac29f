from __future__ import annotations

import pytest

from shipping_cost.domain.events import CalculationCompleted
from shipping_cost.domain.money import Money
from shipping_cost.ports.config_loader import RuleConfigLoader
from shipping_cost.ports.country_repository import CountryRepository
from shipping_cost.ports.event_sink import EventSink


class _SinkPort(EventSink):
    pass


class _RepositoryPort(CountryRepository):
    pass


class _LoaderPort(RuleConfigLoader[object]):
    pass


def test_port_methods_raise_on_direct_use() -> None:
    # Ports only describe the contract; adapters implement it.
    event = CalculationCompleted("o1", Money.zero(), Money.zero(), ())
    with pytest.raises(NotImplementedError):
        _SinkPort().emit(event)
    with pytest.raises(NotImplementedError):
        _RepositoryPort().find_by_code("PL")
    with pytest.raises(NotImplementedError):
        _RepositoryPort().find_all_active()
    with pytest.raises(NotImplementedError):
        _LoaderPort().load()


def test_ports_are_structural() -> None:
    class _Loader:
        def load(self) -> int:
            return 1

    assert isinstance(_Loader(), RuleConfigLoader)
    assert not isinstance(object(), EventSink)
