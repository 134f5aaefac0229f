"""
Products blueprint.

Lists products with their pricing tiers and accepts new products.  New
products and tiers receive ids from the catalog; ids in the request body
are ignored.  Mounted under ``/api/products`` in the application factory.
"""

from __future__ import annotations

from pydantic import ValidationError
from quart import Blueprint, current_app, jsonify, request

from pricewise.models.models import ProductIn
from pricewise.utils.helper import error_response, to_number, validation_details
from pricewise.utils.logger import get_logger


logger = get_logger(__name__)
products_bp = Blueprint("products", __name__)


@products_bp.get("")
async def list_products():
    """Get all products with their pricing tiers."""
    catalog = current_app.extensions["catalog"]
    return jsonify([p.to_json() for p in catalog.list_products()])


@products_bp.get("/<product_id>")
async def get_product(product_id: str):
    """Get a specific product with its pricing tiers."""
    catalog = current_app.extensions["catalog"]
    product = catalog.find_product(to_number(product_id))
    if product is None:
        return error_response("Product not found", 404)
    return jsonify(product.to_json())


@products_bp.post("")
async def create_product():
    """Add a new product with pricing tiers."""
    data = await request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = {}

    tiers = data.get("pricingTiers")
    if not data.get("name") or not data.get("description") or not tiers:
        return error_response("Missing required fields", 400)

    try:
        payload = ProductIn.model_validate(data)
    except ValidationError as exc:
        logger.warning("[products] invalid product payload: %s", exc.error_count())
        return error_response(
            "Invalid product payload", 400, details=validation_details(exc)
        )

    catalog = current_app.extensions["catalog"]
    product = catalog.add_product(
        payload.name, payload.description, payload.pricing_tiers
    )
    return jsonify(product.to_json()), 201
