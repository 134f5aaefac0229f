from __future__ import annotations

from pricewise.models.models import PricingRule, PricingTier
from pricewise.services.pricing import filter_rules, rule_applies


ONE_OFF_TIER = PricingTier(id=7, name="Single", pricing_model="one_off", base_price=10)
RECURRING_TIER = PricingTier(
    id=8, name="Monthly", pricing_model="recurring", base_price=10, billing_period="monthly"
)


def _rule(**fields) -> PricingRule:
    return PricingRule(id=fields.pop("id", 1), name="Rule", type="fixed_discount", value=1, **fields)


def test_unrestricted_rule_applies_everywhere() -> None:
    rule = _rule()
    assert rule_applies(rule, ONE_OFF_TIER, 1, 1, 7)
    assert rule_applies(rule, RECURRING_TIER, 1, 2, 8)


def test_product_and_tier_restrictions() -> None:
    assert not rule_applies(_rule(product_id=2), ONE_OFF_TIER, 1, 1, 7)
    assert rule_applies(_rule(product_id=1), ONE_OFF_TIER, 1, 1, 7)
    assert not rule_applies(_rule(tier_id=8), ONE_OFF_TIER, 1, 1, 7)
    assert rule_applies(_rule(tier_id=7), ONE_OFF_TIER, 1, 1, 7)


def test_min_quantity_is_inclusive() -> None:
    rule = _rule(min_quantity=3)
    assert not rule_applies(rule, ONE_OFF_TIER, 2, 1, 7)
    assert rule_applies(rule, ONE_OFF_TIER, 3, 1, 7)


def test_max_quantity_is_not_enforced() -> None:
    assert rule_applies(_rule(max_quantity=2), ONE_OFF_TIER, 50, 1, 7)


def test_pricing_model_restriction() -> None:
    recurring_only = _rule(applicable_pricing_models=["recurring"])
    assert not rule_applies(recurring_only, ONE_OFF_TIER, 1, 1, 7)
    assert rule_applies(recurring_only, RECURRING_TIER, 1, 1, 8)


def test_empty_pricing_model_list_matches_nothing() -> None:
    rule = _rule(applicable_pricing_models=[])
    assert not rule_applies(rule, ONE_OFF_TIER, 1, 1, 7)
    assert not rule_applies(rule, RECURRING_TIER, 1, 1, 8)


def test_filter_preserves_catalog_order() -> None:
    rules = [
        _rule(id=5),
        _rule(id=2, product_id=9),
        _rule(id=9, min_quantity=2),
        _rule(id=1),
    ]
    assert [r.id for r in filter_rules(rules, ONE_OFF_TIER, 2, 1, 7)] == [5, 9, 1]
    assert [r.id for r in filter_rules(rules, ONE_OFF_TIER, 1, 1, 7)] == [5, 1]


def test_seed_rules_for_other_product_never_applied(catalog) -> None:
    hoodie_rule_ids = {r.id for r in catalog.list_rules() if r.product_id == 2}
    tier = catalog.find_tier(catalog.find_product(1), 1)
    applied = filter_rules(catalog.list_rules(), tier, 10, 1, 1)
    assert hoodie_rule_ids
    assert not hoodie_rule_ids & {r.id for r in applied}
