from __future__ import annotations

from typing import Protocol, runtime_checkable

from shipping_cost.domain.events import DomainEvent


# EventSink receives domain events after a calculation run; attaching one is optional.
@runtime_checkable
class EventSink(Protocol):
    def emit(self, event: DomainEvent) -> None:
        """Consume one RuleApplied or CalculationCompleted event."""
        raise NotImplementedError("EventSink is a port; use a concrete adapter.")
