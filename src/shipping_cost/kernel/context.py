from __future__ import annotations

from dataclasses import dataclass, replace

from shipping_cost.domain.errors import CurrencyMismatchError
from shipping_cost.domain.events import DomainEvent, RuleApplied
from shipping_cost.domain.money import Money
from shipping_cost.domain.order import Order


@dataclass(frozen=True, slots=True)
class CalculationContext:
    """Immutable state threaded through the rule chain.

    Every transformation returns a new context; the previous one is left untouched,
    so a chain can be replayed or inspected step by step.
    """

    order: Order
    current_cost: Money
    first_rule_cost: Money | None = None
    events: tuple[DomainEvent, ...] = ()
    applied_rules: tuple[str, ...] = ()

    @classmethod
    def for_order(cls, order: Order) -> CalculationContext:
        # Zero is expressed in the cart currency so the first rule sees a consistent baseline.
        return cls(order=order, current_cost=Money.zero(order.cart_value.currency))

    def with_cost(self, new_cost: Money, rule_name: str, description: str) -> CalculationContext:
        # The cost never changes currency mid-chain; it stays in the currency of the starting zero.
        if new_cost.currency != self.current_cost.currency:
            raise CurrencyMismatchError(self.current_cost.currency, new_cost.currency)
        event = RuleApplied(
            order_id=self.order.id,
            rule_name=rule_name,
            cost_before=self.current_cost,
            cost_after=new_cost,
            description=description,
        )
        # First-rule cost is captured once: the cost right after the first rule that fired.
        first_rule_cost = self.first_rule_cost if self.first_rule_cost is not None else new_cost
        return replace(
            self,
            current_cost=new_cost,
            first_rule_cost=first_rule_cost,
            events=(*self.events, event),
            applied_rules=(*self.applied_rules, rule_name),
        )

    def with_added_cost(self, delta: Money, rule_name: str, description: str) -> CalculationContext:
        return self.with_cost(self.current_cost.add(delta), rule_name, description)

    def is_free_shipping(self) -> bool:
        return self.current_cost.is_zero()

    def has_applied_rule(self, rule_name: str) -> bool:
        return rule_name in self.applied_rules

    def reported_first_rule_cost(self) -> Money:
        # Falls back to the current cost when no rule has fired yet.
        return self.first_rule_cost if self.first_rule_cost is not None else self.current_cost
