from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shipping_cost.domain.events import CalculationCompleted, DomainEvent
from shipping_cost.domain.money import Money
from shipping_cost.domain.order import Order
from shipping_cost.kernel.context import CalculationContext
from shipping_cost.kernel.rule import Rule, rule_sort_key
from shipping_cost.ports.event_sink import EventSink


@dataclass(frozen=True, slots=True)
class CalculationResult:
    order: Order
    shipping_cost: Money
    applied_rules: tuple[str, ...]
    events: tuple[DomainEvent, ...]

    @property
    def is_free_shipping(self) -> bool:
        return self.shipping_cost.is_zero()


class Calculator:
    # Calculator folds the ordered rule set over an immutable context.
    # It performs no I/O itself; exceptions from rules propagate unchanged.
    def __init__(self, rules: Iterable[Rule], event_sink: EventSink | None = None) -> None:
        self._rules = tuple(rules)
        names = [rule.name for rule in self._rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"rule names must be unique, duplicated: {duplicates}")
        self._event_sink = event_sink

    def ordered_rules(self) -> tuple[Rule, ...]:
        return tuple(sorted(self._rules, key=rule_sort_key))

    def calculate(self, order: Order) -> CalculationResult:
        context = CalculationContext.for_order(order)
        for rule in self.ordered_rules():
            if rule.supports(context):
                context = rule.apply(context)

        result = CalculationResult(
            order=order,
            shipping_cost=context.current_cost,
            applied_rules=context.applied_rules,
            events=context.events,
        )
        self._forward_events(context, result)
        return result

    def _forward_events(self, context: CalculationContext, result: CalculationResult) -> None:
        # Events are forwarded once per run, after the fold; no sink means nothing to forward.
        if self._event_sink is None:
            return
        for event in context.events:
            self._event_sink.emit(event)
        self._event_sink.emit(
            CalculationCompleted(
                order_id=result.order.id,
                first_rule_cost=context.reported_first_rule_cost(),
                final_cost=result.shipping_cost,
                applied_rules=result.applied_rules,
            )
        )