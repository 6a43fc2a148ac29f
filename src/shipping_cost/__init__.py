from shipping_cost.domain import Country, Money, Order, OrderDate, Product, Weight
from shipping_cost.kernel import CalculationContext, CalculationResult, Calculator, Rule

__all__ = [
    "CalculationContext",
    "CalculationResult",
    "Calculator",
    "Country",
    "Money",
    "Order",
    "OrderDate",
    "Product",
    "Rule",
    "Weight",
]
