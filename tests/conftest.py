from __future__ import annotations

import pytest

from pricewise import create_app
from pricewise.config import TestingConfig
from pricewise.models.models import PricingRule, Product
from pricewise.services.pricing import Catalog, PriceCalculator


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.seeded()


@pytest.fixture
def calculator(catalog: Catalog) -> PriceCalculator:
    return PriceCalculator(catalog)


@pytest.fixture
def widget_catalog():
    """Build a one-product catalog (unit price 100, one_off) with the given rules."""

    def _build(*rules: dict, base_price: float = 100.0, pricing_model: str = "one_off") -> Catalog:
        product = Product.model_validate(
            {
                "id": 1,
                "name": "Widget",
                "description": "Test widget",
                "pricingTiers": [
                    {
                        "id": 1,
                        "name": "Standard",
                        "pricingModel": pricing_model,
                        "basePrice": base_price,
                    }
                ],
            }
        )
        return Catalog(
            products=[product],
            rules=[
                PricingRule.model_validate({"id": index + 1, **rule})
                for index, rule in enumerate(rules)
            ],
        )

    return _build


@pytest.fixture
async def app():
    return await create_app(TestingConfig, catalog=Catalog.seeded())


@pytest.fixture
def client(app):
    return app.test_client()
