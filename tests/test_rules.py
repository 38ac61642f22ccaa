"""Tests for commission rule resolution."""
import pytest

from agencytrack.core.errors import NoMatchingRule
from agencytrack.core.rules import (
    commission_for_policy,
    compute_commission,
    filter_rules,
    find_rule,
    resolve_rule,
)
from agencytrack.core.sample_data import sample_rules
from agencytrack.models.schemas import PREMIUM_UNLIMITED, TENURE_UNLIMITED, CommissionRule, PolicyType


def _rule(rule_id, ptype="Life", pmin=0, pmax=50000, tmin=0, tmax=10, rate=5):
    return CommissionRule(
        id=rule_id, policy_type=ptype, premium_min=pmin, premium_max=pmax,
        tenure_min=tmin, tenure_max=tmax, commission_rate=rate,
    )


@pytest.fixture
def rules():
    return sample_rules()


def test_compute_commission():
    assert compute_commission(50000, 6) == 3000


def test_compute_commission_keeps_full_precision():
    assert compute_commission(12345, 3) == pytest.approx(370.35)
    assert compute_commission(333, 5.5) == pytest.approx(18.315)


def test_life_mid_premium_short_tenure(rules):
    rule, amount = commission_for_policy(rules, PolicyType.LIFE, 75000, 5)
    assert rule.id == "rule-002"
    assert rule.commission_rate == 6
    assert amount == 4500


def test_single_rule_example():
    rule = _rule("r", pmin=50001, pmax=100000, tmin=0, tmax=10, rate=6)
    matched, amount = commission_for_policy([rule], "Life", 75000, 5)
    assert matched is rule
    assert amount == 4500


@pytest.mark.parametrize(
    "ptype,premium,tenure,expected",
    [
        ("Life", 0, 0, "rule-001"),
        ("Life", 50000, 10, "rule-001"),
        ("Life", 50001, 10, "rule-002"),
        ("Life", 100000, 11, "rule-004"),
        ("Life", 50000, 20, "rule-003"),
        ("Health", 30000, 5, "rule-006"),
        ("Health", 30001, 6, "rule-009"),
        ("Auto", 15000, 1, "rule-010"),
        ("Auto", 15001, 0, "rule-011"),
        ("Auto", 500, 2, "rule-012"),
    ],
)
def test_bounds_are_inclusive(rules, ptype, premium, tenure, expected):
    assert resolve_rule(rules, ptype, premium, tenure).id == expected


def test_unlimited_sentinels_compare_as_numbers(rules):
    rule = resolve_rule(rules, "Health", 2_000_000, 40)
    assert rule.premium_max == PREMIUM_UNLIMITED
    assert rule.tenure_max == TENURE_UNLIMITED


def test_policy_type_must_match(rules):
    # Auto rule-012 covers any premium, but not Life policies
    assert resolve_rule(rules, "Life", 10, 1).policy_type == PolicyType.LIFE


def test_first_match_wins_on_overlap():
    first = _rule("first", pmin=0, pmax=100000, rate=5)
    second = _rule("second", pmin=40000, pmax=60000, rate=9)
    assert resolve_rule([first, second], "Life", 50000, 5).id == "first"
    assert resolve_rule([second, first], "Life", 50000, 5).id == "second"


def test_no_match_raises(rules):
    # Life 100001+ only starts at 20 years tenure
    with pytest.raises(NoMatchingRule) as err:
        resolve_rule(rules, "Life", 150000, 5)
    assert err.value.policy_type == "Life"
    assert err.value.premium_amount == 150000
    assert err.value.tenure == 5


def test_gap_between_integer_bounds_does_not_match(rules):
    with pytest.raises(NoMatchingRule):
        resolve_rule(rules, "Life", 50000.5, 5)


def test_find_rule_returns_none(rules):
    assert find_rule(rules, "Life", 150000, 5) is None
    assert find_rule([], "Auto", 100, 1) is None


def test_unknown_policy_type_has_no_rule(rules):
    assert find_rule(rules, "Boat", 100, 1) is None


def test_filter_rules(rules):
    assert len(filter_rules(rules, "all")) == 12
    health = filter_rules(rules, PolicyType.HEALTH)
    assert [r.id for r in health] == ["rule-006", "rule-007", "rule-008", "rule-009"]
    assert filter_rules(rules, "Auto")[0].id == "rule-010"
