from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shipping_cost.kernel.rule import Rule
from shipping_cost.kernel.rule_registry import RuleRegistry
from shipping_cost.usecases.config_models import ShippingConfiguration
from shipping_cost.usecases.rules import (
    BaseCountryRateRule,
    FreeShippingRule,
    FridayPromotionRule,
    HalfPriceShippingRule,
    WeightSurchargeRule,
)

# Registry keys match the rule sections of the configuration file and the loader wiring keys.
DEFAULT_PRIORITIES: dict[str, int] = {
    "base_rate": BaseCountryRateRule.priority,
    "weight_surcharge": WeightSurchargeRule.priority,
    "free_shipping": FreeShippingRule.priority,
    "half_price_shipping": HalfPriceShippingRule.priority,
    "friday_promotion": FridayPromotionRule.priority,
}


def build_rule_registry() -> RuleRegistry:
    # Each factory pulls its config loader from wiring under the same key.
    registry = RuleRegistry()
    registry.register(
        "base_rate",
        lambda priority, w: BaseCountryRateRule(config_loader=_require(w, "base_rate"), priority=priority),
        default_priority=DEFAULT_PRIORITIES["base_rate"],
    )
    registry.register(
        "weight_surcharge",
        lambda priority, w: WeightSurchargeRule(config_loader=_require(w, "weight_surcharge"), priority=priority),
        default_priority=DEFAULT_PRIORITIES["weight_surcharge"],
    )
    registry.register(
        "free_shipping",
        lambda priority, w: FreeShippingRule(config_loader=_require(w, "free_shipping"), priority=priority),
        default_priority=DEFAULT_PRIORITIES["free_shipping"],
    )
    registry.register(
        "half_price_shipping",
        lambda priority, w: HalfPriceShippingRule(
            config_loader=_require(w, "half_price_shipping"), priority=priority
        ),
        default_priority=DEFAULT_PRIORITIES["half_price_shipping"],
    )
    registry.register(
        "friday_promotion",
        lambda priority, w: FridayPromotionRule(config_loader=_require(w, "friday_promotion"), priority=priority),
        default_priority=DEFAULT_PRIORITIES["friday_promotion"],
    )
    return registry


def build_rules(
    configuration: ShippingConfiguration,
    wiring: Mapping[str, object],
    registry: RuleRegistry | None = None,
) -> list[Rule]:
    # Every registered family becomes a rule. A missing or disabled section is not skipped here:
    # its loader raises ConfigError when the rule first needs the configuration.
    registry = registry or build_rule_registry()
    rules: list[Rule] = []
    for key in registry.keys():
        section = getattr(configuration.rules, key, None)
        priority = section.priority if section is not None else None
        rules.append(registry.build(key, wiring, priority))
    return rules


def _require(wiring: Mapping[str, object], key: str) -> Any:
    # Wiring must provide required loaders; raise KeyError to fail fast.
    if key not in wiring:
        raise KeyError(f"Missing wiring dependency: {key}")
    return wiring[key]
