"""Commission rule resolution.

Rules are matched structurally against a policy's type, premium and tenure.
Bounds are inclusive on both ends and the "unlimited" sentinels are compared
as plain numbers. When ranges overlap, the first rule in stored order wins.
"""
from typing import Iterable, List, Optional, Tuple

from ..models.schemas import CommissionRule, PolicyType
from .errors import NoMatchingRule


def _type_value(policy_type) -> str:
    return policy_type.value if isinstance(policy_type, PolicyType) else str(policy_type)


def _same_type(rule: CommissionRule, policy_type) -> bool:
    return _type_value(rule.policy_type) == _type_value(policy_type)


def rule_matches(rule: CommissionRule, policy_type, premium_amount: float, tenure: int) -> bool:
    return (
        _same_type(rule, policy_type)
        and rule.premium_min <= premium_amount <= rule.premium_max
        and rule.tenure_min <= tenure <= rule.tenure_max
    )


def find_rule(
    rules: Iterable[CommissionRule], policy_type, premium_amount: float, tenure: int
) -> Optional[CommissionRule]:
    """Return the first matching rule or ``None``."""
    for rule in rules:
        if rule_matches(rule, policy_type, premium_amount, tenure):
            return rule
    return None


def resolve_rule(
    rules: Iterable[CommissionRule], policy_type, premium_amount: float, tenure: int
) -> CommissionRule:
    """Return the first rule covering the policy.

    Raises:
        NoMatchingRule: If no rule covers the parameters. No default rate is
            assumed; the caller picks the fallback.
    """
    rule = find_rule(rules, policy_type, premium_amount, tenure)
    if rule is None:
        raise NoMatchingRule(policy_type, premium_amount, tenure)
    return rule


def compute_commission(premium_amount: float, rate: float) -> float:
    """Commission for ``premium_amount`` at ``rate`` percent, unrounded."""
    return premium_amount * (rate / 100)


def commission_for_policy(
    rules: Iterable[CommissionRule], policy_type, premium_amount: float, tenure: int
) -> Tuple[CommissionRule, float]:
    rule = resolve_rule(rules, policy_type, premium_amount, tenure)
    return rule, compute_commission(premium_amount, rule.commission_rate)


def filter_rules(rules: Iterable[CommissionRule], policy_type="all") -> List[CommissionRule]:
    if policy_type in (None, "all"):
        return list(rules)
    return [r for r in rules if _same_type(r, policy_type)]
