from __future__ import annotations

from pricewise.models.models import PricingModel, PricingRuleIn, PricingTierIn
from pricewise.services.pricing import Catalog


def _tier(name: str, price: float) -> PricingTierIn:
    return PricingTierIn(name=name, pricing_model=PricingModel.ONE_OFF, base_price=price)


def test_seeded_catalog_contents(catalog) -> None:
    assert [p.id for p in catalog.list_products()] == [1, 2, 3]
    assert [r.id for r in catalog.list_rules()] == [1, 2, 3]
    pro = catalog.find_product(3)
    assert [t.id for t in pro.pricing_tiers] == [3, 4, 5]


def test_seeded_catalogs_do_not_share_state() -> None:
    first = Catalog.seeded()
    second = Catalog.seeded()
    first.add_product("Mug", "Ceramic mug", [_tier("Single", 9.5)])
    assert len(first.list_products()) == 4
    assert len(second.list_products()) == 3
    assert first.find_product(1) is not second.find_product(1)


def test_find_product_and_tier(catalog) -> None:
    assert catalog.find_product(42) is None
    hoodie = catalog.find_product(2)
    assert hoodie.name == "Premium Hoodie"
    assert catalog.find_tier(hoodie, 2).base_price == 49.99
    assert catalog.find_tier(hoodie, 3) is None


def test_add_product_derives_tier_ids_from_global_max(catalog) -> None:
    product = catalog.add_product(
        "Course", "Online course", [_tier("Basic", 10), _tier("Plus", 20)]
    )
    assert product.id == 4
    assert [t.id for t in product.pricing_tiers] == [6, 7]
    assert catalog.find_product(4) == product

    another = catalog.add_product("Sticker", "Vinyl sticker", [_tier("Single", 1)])
    assert another.id == 5
    assert [t.id for t in another.pricing_tiers] == [8]


def test_empty_catalog_starts_ids_at_one() -> None:
    catalog = Catalog()
    product = catalog.add_product("First", "First product", [_tier("A", 1), _tier("B", 2)])
    assert product.id == 1
    assert [t.id for t in product.pricing_tiers] == [1, 2]

    rule = catalog.add_rule({"name": "Launch", "type": "fixed_discount", "value": 1})
    assert rule.id == 1


def test_add_rule_appends_in_order(catalog) -> None:
    rule = catalog.add_rule(
        PricingRuleIn(name="Course promo", type="percentage_discount", value=5, tier_id=6)
    )
    assert rule.id == 4
    assert catalog.list_rules()[-1] == rule
    assert rule.tier_id == 6


def test_list_snapshots_are_copies(catalog) -> None:
    rules = catalog.list_rules()
    rules.clear()
    assert len(catalog.list_rules()) == 3
