# pricewise/models/models.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PricingModel(str, Enum):
    ONE_OFF = "one_off"
    RECURRING = "recurring"


class BillingPeriod(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"
    LIFETIME = "lifetime"


class RuleType(str, Enum):
    PERCENTAGE_DISCOUNT = "percentage_discount"
    FIXED_DISCOUNT = "fixed_discount"
    BULK_DISCOUNT = "bulk_discount"


class CatalogModel(BaseModel):
    """Base model: snake_case di Python, camelCase di JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> Dict[str, Any]:
        """Serialise for the HTTP layer; unset optionals are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# * --------------------------------------------------
# * Catalog entries
# * --------------------------------------------------
class PricingTierIn(CatalogModel):
    """A tier as submitted by a client, before an id is assigned."""

    name: str
    pricing_model: PricingModel
    base_price: float = Field(ge=0, allow_inf_nan=False)
    billing_period: Optional[BillingPeriod] = None
    recurring_discount: Optional[float] = Field(
        default=None, ge=0, le=100, allow_inf_nan=False
    )
    features: Optional[List[str]] = None


class PricingTier(PricingTierIn):
    id: int


class ProductIn(CatalogModel):
    name: str
    description: str
    pricing_tiers: List[PricingTierIn] = Field(min_length=1)


class Product(CatalogModel):
    id: int
    name: str
    description: str
    pricing_tiers: List[PricingTier] = Field(min_length=1)


class PricingRuleIn(CatalogModel):
    """A discount rule before an id is assigned.

    ``value`` is a percentage for ``percentage_discount`` and a per-unit
    currency amount for ``fixed_discount`` and ``bulk_discount``.
    ``max_quantity`` is stored and returned but not used when filtering.
    """

    name: str
    type: RuleType
    value: float = Field(allow_inf_nan=False)
    min_quantity: Optional[int] = None
    max_quantity: Optional[int] = None
    product_id: Optional[int] = None
    tier_id: Optional[int] = None
    applicable_pricing_models: Optional[List[PricingModel]] = None


class PricingRule(PricingRuleIn):
    id: int


# * --------------------------------------------------
# * Calculation result
# * --------------------------------------------------
class BillingDetails(CatalogModel):
    period: BillingPeriod
    recurring_discount: float
    price_per_period: float


class PriceCalculationResult(CatalogModel):
    product_name: str
    tier_name: str
    base_price: float
    final_price: float
    applied_rules: List[PricingRule]
    savings: float
    features: Optional[List[str]] = None
    billing_details: Optional[BillingDetails] = None
