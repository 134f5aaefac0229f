# pricewise/routes/main.py
from __future__ import annotations

from quart import Blueprint, current_app, jsonify


main_bp = Blueprint("main", __name__)


@main_bp.get("/health")
async def health():
    """Liveness check with catalog sizes."""
    catalog = current_app.extensions["catalog"]
    return jsonify(
        {
            "status": "ok",
            "products": len(catalog.list_products()),
            "rules": len(catalog.list_rules()),
        }
    ), 200
