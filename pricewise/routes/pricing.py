# pricewise/routes/pricing.py
from __future__ import annotations

import math

from pydantic import ValidationError
from quart import Blueprint, current_app, jsonify, request

from pricewise.models.models import PricingRuleIn
from pricewise.services.pricing import PricingError
from pricewise.utils.helper import error_response, to_number, validation_details
from pricewise.utils.logger import get_logger


logger = get_logger(__name__)
pricing_bp = Blueprint("pricing", __name__)

RULE_FIELDS = (
    "name",
    "type",
    "value",
    "minQuantity",
    "maxQuantity",
    "productId",
    "tierId",
    "applicablePricingModels",
)


@pricing_bp.get("/pricing-rules")
async def list_rules():
    """Get all pricing rules."""
    catalog = current_app.extensions["catalog"]
    return jsonify([r.to_json() for r in catalog.list_rules()])


@pricing_bp.get("/pricing")
async def calculate_price():
    """Calculate the price for a product tier.

    Query: productId, tierId (required), quantity (default 1),
    commitmentMonths (optional, currently has no effect on the price).
    """
    product_id = to_number(request.args.get("productId"))
    tier_id = to_number(request.args.get("tierId"))
    if not product_id or not tier_id:
        return error_response("Valid productId and tierId are required", 400)

    quantity = to_number(request.args.get("quantity")) or 1
    commitment_months = to_number(request.args.get("commitmentMonths"))

    calculator = current_app.extensions["price_calculator"]
    try:
        result = calculator.calculate(
            product_id, tier_id, quantity, commitment_months
        )
    except PricingError as exc:
        logger.warning(
            "[pricing] %s | productId=%s | tierId=%s", exc, product_id, tier_id
        )
        return error_response(str(exc), 404)

    # unit price x quantity overflowed the float range
    if not math.isfinite(result.base_price):
        return error_response("Quantity is out of range", 400)

    return jsonify(result.to_json())


@pricing_bp.post("/pricing-rules")
async def create_rule():
    """Add a new pricing rule."""
    data = await request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = {}

    if not data.get("name") or not data.get("type") or data.get("value") is None:
        return error_response("Missing required fields", 400)

    try:
        payload = PricingRuleIn.model_validate(
            {key: data[key] for key in RULE_FIELDS if key in data}
        )
    except ValidationError as exc:
        logger.warning("[pricing] invalid rule payload: %s", exc.error_count())
        return error_response(
            "Invalid pricing rule payload", 400, details=validation_details(exc)
        )

    catalog = current_app.extensions["catalog"]
    rule = catalog.add_rule(payload)
    return jsonify(rule.to_json()), 201
