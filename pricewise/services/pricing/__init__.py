"""
Pricing engine for Pricewise.

The catalog holds products and discount rules, the rule filter selects
the rules applicable to a purchase and the calculator applies them to a
tier's base price.
"""

from .catalog import Catalog
from .calculator import PriceCalculator, apply_rule
from .errors import PricingError, ProductNotFound, TierNotFound
from .rule_filter import filter_rules, rule_applies

__all__ = [
    "Catalog",
    "PriceCalculator",
    "PricingError",
    "ProductNotFound",
    "TierNotFound",
    "apply_rule",
    "filter_rules",
    "rule_applies",
]
