# pricewise/services/pricing/rule_filter.py
from __future__ import annotations

from typing import Iterable, List

from pricewise.models.models import PricingRule, PricingTier


def rule_applies(
    rule: PricingRule,
    pricing_tier: PricingTier,
    quantity: float,
    product_id: int,
    tier_id: int,
) -> bool:
    """Return True when ``rule`` is applicable to this purchase.

    ``max_quantity`` is intentionally not consulted.
    """
    if rule.product_id and rule.product_id != product_id:
        return False
    if rule.tier_id and rule.tier_id != tier_id:
        return False
    if rule.min_quantity and quantity < rule.min_quantity:
        return False
    # an empty list is set, so it matches no pricing model
    if (
        rule.applicable_pricing_models is not None
        and pricing_tier.pricing_model not in rule.applicable_pricing_models
    ):
        return False
    return True


def filter_rules(
    rules: Iterable[PricingRule],
    pricing_tier: PricingTier,
    quantity: float,
    product_id: int,
    tier_id: int,
) -> List[PricingRule]:
    """Applicable rules, in catalog order (which is also application order)."""
    return [
        rule
        for rule in rules
        if rule_applies(rule, pricing_tier, quantity, product_id, tier_id)
    ]
