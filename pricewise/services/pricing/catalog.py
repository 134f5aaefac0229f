# pricewise/services/pricing/catalog.py
"""
In-memory catalog of products (with nested tiers) and pricing rules.

Identifier assignment is a pure function of current contents: a new
product gets ``max(product ids) + 1``, each incoming tier gets
``max(tier ids across all products) + position + 1`` and a new rule gets
``max(rule ids) + 1``. All reads and writes share a single lock.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pricewise.models.models import (
    PricingRule,
    PricingRuleIn,
    PricingTier,
    PricingTierIn,
    Product,
)
from pricewise.services.pricing.seed import SEED_PRODUCTS, SEED_RULES
from pricewise.utils.logger import get_logger


logger = get_logger(__name__)


class Catalog:
    """Key-indexed store of products and rules, preserving insertion order."""

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        rules: Optional[Iterable[PricingRule]] = None,
    ):
        self._lock = threading.RLock()
        self._products: List[Product] = list(products or [])
        self._rules: List[PricingRule] = list(rules or [])

    @classmethod
    def seeded(cls) -> "Catalog":
        """Catalog berisi data awal; tiap panggilan menghasilkan salinan baru."""
        return cls(
            products=[Product.model_validate(p) for p in SEED_PRODUCTS],
            rules=[PricingRule.model_validate(r) for r in SEED_RULES],
        )

    # * --------------------------------------------------
    # * reads
    # * --------------------------------------------------
    def list_products(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def list_rules(self) -> List[PricingRule]:
        with self._lock:
            return list(self._rules)

    def find_product(self, product_id: Any) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    @staticmethod
    def find_tier(product: Product, tier_id: Any) -> Optional[PricingTier]:
        return next((t for t in product.pricing_tiers if t.id == tier_id), None)

    # * --------------------------------------------------
    # * appends
    # * --------------------------------------------------
    def add_product(
        self, name: str, description: str, tiers: Sequence[PricingTierIn]
    ) -> Product:
        with self._lock:
            next_product_id = max((p.id for p in self._products), default=0) + 1
            max_tier_id = max(
                (t.id for p in self._products for t in p.pricing_tiers), default=0
            )
            product = Product(
                id=next_product_id,
                name=name,
                description=description,
                pricing_tiers=[
                    PricingTier(**tier.model_dump(), id=max_tier_id + index + 1)
                    for index, tier in enumerate(tiers)
                ],
            )
            self._products.append(product)

        logger.info(
            "Product added | id=%s | name=%s | tiers=%s",
            product.id,
            product.name,
            [t.id for t in product.pricing_tiers],
        )
        return product

    def add_rule(self, rule: PricingRuleIn | Dict[str, Any]) -> PricingRule:
        fields = rule.model_dump() if isinstance(rule, PricingRuleIn) else dict(rule)
        with self._lock:
            next_rule_id = max((r.id for r in self._rules), default=0) + 1
            new_rule = PricingRule.model_validate({**fields, "id": next_rule_id})
            self._rules.append(new_rule)

        logger.info(
            "Pricing rule added | id=%s | name=%s | type=%s",
            new_rule.id,
            new_rule.name,
            new_rule.type.value,
        )
        return new_rule
