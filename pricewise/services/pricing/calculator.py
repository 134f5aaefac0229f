# pricewise/services/pricing/calculator.py
"""
Price calculation engine.

Order of operations, on a running ``price`` starting at
``base_price * quantity``:

1. tier recurring discount (recurring tiers only),
2. applicable rules in catalog order, each on the current running price,
3. clamp at zero after rounding to cents.

Intermediate values keep full float precision; only the final price and
the savings are rounded.
"""

from __future__ import annotations

from typing import List, Optional

from pricewise.models.models import (
    BillingDetails,
    PriceCalculationResult,
    PricingModel,
    PricingRule,
    PricingTier,
    RuleType,
)
from pricewise.services.pricing.catalog import Catalog
from pricewise.services.pricing.errors import ProductNotFound, TierNotFound
from pricewise.services.pricing.rule_filter import filter_rules
from pricewise.utils.helper import round_money
from pricewise.utils.logger import get_logger


logger = get_logger(__name__)


def apply_rule(price: float, rule: PricingRule, quantity: float) -> float:
    """Apply one rule to the running price and return the new price."""
    if rule.type is RuleType.PERCENTAGE_DISCOUNT:
        return price - price * (rule.value / 100)
    if rule.type is RuleType.FIXED_DISCOUNT:
        return price - rule.value * quantity
    if rule.type is RuleType.BULK_DISCOUNT:
        if quantity >= (rule.min_quantity or 1):
            return price - rule.value * quantity
    return price


def _billing_details(
    pricing_tier: PricingTier, final_price: float
) -> Optional[BillingDetails]:
    if pricing_tier.pricing_model is not PricingModel.RECURRING:
        return None
    if not pricing_tier.billing_period:
        return None
    return BillingDetails(
        period=pricing_tier.billing_period,
        recurring_discount=pricing_tier.recurring_discount or 0,
        price_per_period=final_price,
    )


class PriceCalculator:
    """Computes final prices against a :class:`Catalog`."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def calculate(
        self,
        product_id: int,
        tier_id: int,
        quantity: float = 1,
        commitment_months: Optional[int] = None,
    ) -> PriceCalculationResult:
        """Calculate the price of ``quantity`` units of a product tier.

        Args:
            product_id: Catalog id of the product.
            tier_id: Id of the tier within that product.
            quantity: Number of units purchased.
            commitment_months: Accepted for API compatibility; it does not
                affect the result.

        Raises:
            ProductNotFound: no product has ``product_id``.
            TierNotFound: the product has no tier ``tier_id``.
        """
        product = self.catalog.find_product(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        pricing_tier = self.catalog.find_tier(product, tier_id)
        if pricing_tier is None:
            raise TierNotFound(tier_id, product_id=product_id)

        base_total = pricing_tier.base_price * quantity
        price = base_total

        if (
            pricing_tier.pricing_model is PricingModel.RECURRING
            and pricing_tier.recurring_discount
        ):
            price -= price * (pricing_tier.recurring_discount / 100)

        applied_rules: List[PricingRule] = filter_rules(
            self.catalog.list_rules(), pricing_tier, quantity, product_id, tier_id
        )
        for rule in applied_rules:
            price = apply_rule(price, rule, quantity)

        final_price = max(0.0, round_money(price))
        savings = round_money(base_total - final_price)

        logger.debug(
            "Price calculated | product=%s | tier=%s | qty=%s | base=%s | final=%s | rules=%s",
            product_id,
            tier_id,
            quantity,
            base_total,
            final_price,
            [r.id for r in applied_rules],
        )

        return PriceCalculationResult(
            product_name=product.name,
            tier_name=pricing_tier.name,
            base_price=base_total,
            final_price=final_price,
            applied_rules=applied_rules,
            savings=savings,
            features=pricing_tier.features,
            billing_details=_billing_details(pricing_tier, final_price),
        )
