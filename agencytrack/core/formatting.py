"""Display formatting. Values are rounded here and nowhere else."""
from ..models.schemas import PREMIUM_UNLIMITED, TENURE_UNLIMITED, CommissionRule
from .rules import compute_commission

INFINITY = "∞"


def format_currency(value: float) -> str:
    """USD with separators and at most two decimals: ``$50,000``, ``$1,250.5``."""
    text = f"{abs(value):,.2f}".rstrip("0").rstrip(".")
    sign = "-" if value < 0 and text != "0" else ""
    return f"{sign}${text}"


def format_premium_bound(value: float) -> str:
    if value >= PREMIUM_UNLIMITED:
        return INFINITY
    return format_currency(value)


def format_tenure_bound(value: int) -> str:
    if value >= TENURE_UNLIMITED:
        return INFINITY
    return str(int(value))


def format_premium_range(rule: CommissionRule) -> str:
    return f"{format_premium_bound(rule.premium_min)} - {format_premium_bound(rule.premium_max)}"


def format_tenure_range(rule: CommissionRule) -> str:
    return f"{format_tenure_bound(rule.tenure_min)} - {format_tenure_bound(rule.tenure_max)} years"


def example_commission(rule: CommissionRule, premium: float = 50000) -> str:
    # preview column on the rules table
    return format_currency(compute_commission(premium, rule.commission_rate))
