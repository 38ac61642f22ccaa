"""Constraint utilities for agent and commission rule forms."""
from typing import Any, Dict


def validate_rule(details: Dict[str, Any]) -> None:
    """Validate commission rule bounds.

    Overlap with other rules is not checked; the resolver picks the first
    match in stored order.

    Raises:
        ValueError: If a constraint is violated.
    """
    premium_min = float(details.get("premium_min", 0))
    premium_max = float(details.get("premium_max", 0))
    if premium_min < 0:
        raise ValueError("Minimum premium cannot be negative")
    if premium_min > premium_max:
        raise ValueError("Minimum premium must not exceed maximum premium")

    tenure_min = int(details.get("tenure_min", 0))
    tenure_max = int(details.get("tenure_max", 0))
    if tenure_min < 0:
        raise ValueError("Minimum tenure cannot be negative")
    if tenure_min > tenure_max:
        raise ValueError("Minimum tenure must not exceed maximum tenure")

    rate = float(details.get("commission_rate", 0))
    if not (0 <= rate <= 100):
        raise ValueError("Commission rate must be between 0 and 100")


def validate_agent(details: Dict[str, Any]) -> None:
    """Validate agent form values.

    Raises:
        ValueError: If a constraint is violated.
    """
    if not str(details.get("name", "")).strip():
        raise ValueError("Agent name is required")

    target = float(details.get("sales_target", 0))
    if target <= 0:
        raise ValueError("Sales target must be positive")

    for field in ("current_sales", "commission"):
        if float(details.get(field, 0)) < 0:
            raise ValueError(f"{field.replace('_', ' ').capitalize()} cannot be negative")
