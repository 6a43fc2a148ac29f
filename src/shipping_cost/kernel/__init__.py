from .calculator import CalculationResult, Calculator
from .context import CalculationContext
from .rule import Rule, rule_sort_key
from .rule_registry import RuleFactory, RuleRegistry, UnknownRuleError

# Kernel exports are minimal and calculation-focused.
__all__ = [
    "CalculationContext",
    "CalculationResult",
    "Calculator",
    "Rule",
    "RuleFactory",
    "RuleRegistry",
    "UnknownRuleError",
    "rule_sort_key",
]
