from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TypeAlias

from .money import Money


def _now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True, slots=True)
class RuleApplied:
    # Emitted once per rule whose apply() ran; occurred_at is excluded from equality.
    order_id: str
    rule_name: str
    cost_before: Money
    cost_after: Money
    description: str
    occurred_at: datetime = field(default_factory=_now, compare=False)

    @property
    def difference(self) -> Money:
        if self.cost_after.is_greater_than(self.cost_before):
            return self.cost_after.subtract(self.cost_before)
        return self.cost_before.subtract(self.cost_after)


@dataclass(frozen=True, slots=True)
class CalculationCompleted:
    # Emitted once per calculation, after all RuleApplied events.
    order_id: str
    first_rule_cost: Money
    final_cost: Money
    applied_rules: tuple[str, ...]
    occurred_at: datetime = field(default_factory=_now, compare=False)


DomainEvent: TypeAlias = RuleApplied | CalculationCompleted
