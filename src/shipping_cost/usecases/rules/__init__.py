from .base_country_rate import BaseCountryRateRule
from .free_shipping import FreeShippingRule
from .friday_promotion import FridayPromotionRule
from .half_price_shipping import HalfPriceShippingRule
from .weight_surcharge import WeightSurchargeRule

# Rule exports are used by wiring and tests.
__all__ = [
    "BaseCountryRateRule",
    "FreeShippingRule",
    "FridayPromotionRule",
    "HalfPriceShippingRule",
    "WeightSurchargeRule",
]
