"""Lookup failures raised by the pricing engine."""

from __future__ import annotations

from typing import Any


class PricingError(LookupError):
    """Base class for pricing lookup failures."""

    message = "Pricing lookup failed"

    def __init__(self, identifier: Any):
        self.identifier = identifier
        super().__init__(self.message)


class ProductNotFound(PricingError):
    message = "Product not found"


class TierNotFound(PricingError):
    message = "Pricing tier not found"

    def __init__(self, identifier: Any, product_id: Any = None):
        self.product_id = product_id
        super().__init__(identifier)
