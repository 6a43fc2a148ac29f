from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TextIO

from shipping_cost.domain.events import CalculationCompleted, DomainEvent, RuleApplied
from shipping_cost.ports.event_sink import EventSink


class StdoutEventSink(EventSink):
    # Prints one compact JSON record per event.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, event: DomainEvent) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(_dumps(event_to_dict(event)) + "\n")


class JsonlEventSink(EventSink):
    # Appends one JSON record per event to a file; flushes on every write.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = self._path.open("a", encoding="utf-8")

    def emit(self, event: DomainEvent) -> None:
        if self._file is None:
            raise ValueError(f"JsonlEventSink for {self._path} is closed")
        self._file.write(_dumps(event_to_dict(event)) + "\n")
        self._file.flush()

    def close(self) -> None:
        # Close is idempotent.
        if self._file is None:
            return
        self._file.close()
        self._file = None


@dataclass
class InMemoryEventSink(EventSink):
    # Keeps both the raw events and their serialized records, in arrival order.
    events: list[DomainEvent] = field(default_factory=list)
    records: list[dict[str, object]] = field(default_factory=list)

    def emit(self, event: DomainEvent) -> None:
        self.events.append(event)
        self.records.append(event_to_dict(event))

    def clear(self) -> None:
        self.events.clear()
        self.records.clear()


def event_to_dict(event: DomainEvent) -> dict[str, object]:
    if isinstance(event, RuleApplied):
        return {
            "type": "rule_applied",
            "order_id": event.order_id,
            "rule": event.rule_name,
            "cost_before": event.cost_before.format(),
            "cost_after": event.cost_after.format(),
            "description": event.description,
            "timestamp": _format_dt(event.occurred_at),
        }
    if isinstance(event, CalculationCompleted):
        return {
            "type": "calculation_completed",
            "order_id": event.order_id,
            "first_rule_cost": event.first_rule_cost.format(),
            "final_cost": event.final_cost.format(),
            "applied_rules": list(event.applied_rules),
            "timestamp": _format_dt(event.occurred_at),
        }
    raise TypeError(f"Unsupported event type: {type(event).__name__}")


def _dumps(payload: dict[str, object]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _format_dt(value: datetime) -> str:
    # RFC3339 UTC with Z suffix.
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")
