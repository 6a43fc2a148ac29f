from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from shipping_cost.kernel.rule import Rule


# Unknown rule families fail fast so a typo in config does not silently drop a rule.
class UnknownRuleError(KeyError):
    pass


# A factory receives the configured priority and the loader wiring.
RuleFactory = Callable[[int, Mapping[str, object]], Rule]


@dataclass
class RuleRegistry:
    # Registry maps rule-family keys (as used in config) to factories and default priorities.
    _factories: dict[str, RuleFactory] = field(default_factory=dict)
    _default_priorities: dict[str, int] = field(default_factory=dict)

    def register(self, key: str, factory: RuleFactory, *, default_priority: int) -> None:
        # Later registration overrides an earlier one for the same key.
        self._factories[key] = factory
        self._default_priorities[key] = default_priority

    def get(self, key: str) -> RuleFactory:
        if key not in self._factories:
            raise UnknownRuleError(key)
        return self._factories[key]

    def default_priority(self, key: str) -> int:
        if key not in self._default_priorities:
            raise UnknownRuleError(key)
        return self._default_priorities[key]

    def keys(self) -> list[str]:
        return list(self._factories)

    def build(self, key: str, wiring: Mapping[str, object], priority: int | None = None) -> Rule:
        factory = self.get(key)
        return factory(self.default_priority(key) if priority is None else priority, wiring)
