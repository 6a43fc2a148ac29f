from .country import Country
from .errors import CurrencyMismatchError, MoneyParseError
from .events import CalculationCompleted, DomainEvent, RuleApplied
from .money import DEFAULT_CURRENCY, Money, parse_money
from .order import Order, Product
from .order_date import OrderDate
from .weight import Weight

# Public domain exports keep imports explicit across layers.
__all__ = [
    "CalculationCompleted",
    "Country",
    "CurrencyMismatchError",
    "DEFAULT_CURRENCY",
    "DomainEvent",
    "Money",
    "MoneyParseError",
    "Order",
    "OrderDate",
    "Product",
    "RuleApplied",
    "Weight",
    "parse_money",
]
