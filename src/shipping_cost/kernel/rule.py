from __future__ import annotations

from typing import Protocol, runtime_checkable

from shipping_cost.kernel.context import CalculationContext

# Conventional priority bands; lower runs earlier. Bands are not enforced.
PRIORITY_BASE_RATE = 100
PRIORITY_SURCHARGE = 200
PRIORITY_VALUE_PROMOTION = 300
PRIORITY_TIME_PROMOTION = 400


@runtime_checkable
class Rule(Protocol):
    """A named, prioritized policy that conditionally transforms the calculation context.

    ``name`` must be unique across a rule set; it appears in events and in the
    applied-rule list. ``apply`` is only called after ``supports`` returned True
    for the same context.
    """

    @property
    def name(self) -> str:
        raise NotImplementedError("Rule is a protocol; use a concrete rule.")

    @property
    def priority(self) -> int:
        raise NotImplementedError("Rule is a protocol; use a concrete rule.")

    def supports(self, context: CalculationContext) -> bool:
        """Return True if the rule should fire for ``context``. Must be side-effect free."""
        raise NotImplementedError("Rule is a protocol; use a concrete rule.")

    def apply(self, context: CalculationContext) -> CalculationContext:
        """Return a new context derived through with_cost/with_added_cost."""
        raise NotImplementedError("Rule is a protocol; use a concrete rule.")


def rule_sort_key(rule: Rule) -> tuple[int, str]:
    # Priority ascending, then name ascending for a deterministic order on ties.
    return (rule.priority, rule.name)
