# pricewise/services/pricing/seed.py
"""Katalog awal yang dimuat saat startup."""

from __future__ import annotations

from typing import Any, Dict, List


SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Basic T-Shirt",
        "description": "Comfortable cotton t-shirt",
        "pricingTiers": [
            {
                "id": 1,
                "name": "Single Purchase",
                "pricingModel": "one_off",
                "basePrice": 19.99,
            },
        ],
    },
    {
        "id": 2,
        "name": "Premium Hoodie",
        "description": "High-quality hoodie",
        "pricingTiers": [
            {
                "id": 2,
                "name": "Single Purchase",
                "pricingModel": "one_off",
                "basePrice": 49.99,
            },
        ],
    },
    {
        "id": 3,
        "name": "Pro Software License",
        "description": "Professional software suite",
        "pricingTiers": [
            {
                "id": 3,
                "name": "Monthly Subscription",
                "pricingModel": "recurring",
                "basePrice": 29.99,
                "billingPeriod": "monthly",
                "recurringDiscount": 0,
                "features": ["Basic Features", "Cloud Storage", "Email Support"],
            },
            {
                "id": 4,
                "name": "Annual Subscription",
                "pricingModel": "recurring",
                "basePrice": 299.99,
                "billingPeriod": "yearly",
                "recurringDiscount": 15,
                "features": [
                    "Basic Features",
                    "Cloud Storage",
                    "Priority Support",
                    "Advanced Analytics",
                ],
            },
            {
                "id": 5,
                "name": "Lifetime Deal",
                "pricingModel": "one_off",
                "basePrice": 999.99,
                "billingPeriod": "lifetime",
                "features": [
                    "All Features",
                    "Lifetime Updates",
                    "Premium Support",
                    "Unlimited Storage",
                ],
            },
        ],
    },
]

SEED_RULES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Bulk Clothing Discount",
        "type": "percentage_discount",
        "value": 10,
        "minQuantity": 3,
        "applicablePricingModels": ["one_off"],
    },
    {
        "id": 2,
        "name": "Premium Hoodie Special",
        "type": "fixed_discount",
        "value": 5,
        "productId": 2,
        "applicablePricingModels": ["one_off"],
    },
    {
        "id": 3,
        "name": "Long-term Subscription Discount",
        "type": "percentage_discount",
        "value": 15,
        "applicablePricingModels": ["recurring"],
    },
]
