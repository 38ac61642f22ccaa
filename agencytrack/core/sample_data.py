"""Sample agency data every new session starts with."""
from typing import List

from ..models.schemas import (
    PREMIUM_UNLIMITED,
    TENURE_UNLIMITED,
    Activity,
    Agent,
    CommissionRule,
    PolicySale,
)

_AGENTS = [
    ("agent-001", "Sarah Johnson", "+1 (555) 123-4567", "North", 500000, 475000, 28500, "2023-01-15", "active"),
    ("agent-002", "Michael Chen", "+1 (555) 234-5678", "South", 450000, 520000, 35100, "2023-03-20", "active"),
    ("agent-003", "Emily Rodriguez", "+1 (555) 345-6789", "East", 400000, 380000, 22800, "2023-06-10", "active"),
    ("agent-004", "David Thompson", "+1 (555) 456-7890", "West", 550000, 610000, 42700, "2022-11-05", "active"),
    ("agent-005", "Jennifer Martinez", "+1 (555) 567-8901", "North", 480000, 495000, 31350, "2023-04-12", "active"),
    ("agent-006", "Robert Anderson", "+1 (555) 678-9012", "South", 420000, 395000, 23700, "2023-07-22", "active"),
    ("agent-007", "Lisa Williams", "+1 (555) 789-0123", "East", 500000, 450000, 27000, "2023-02-28", "inactive"),
    ("agent-008", "James Taylor", "+1 (555) 890-1234", "West", 460000, 485000, 30375, "2023-05-18", "active"),
]

_SALES = [
    ("sale-001", "agent-001", "Life", "LIFE-2025-001", "John Anderson", 50000, 20, 3000, "2025-01-15", "active"),
    ("sale-002", "agent-001", "Health", "HLTH-2025-045", "Emma Wilson", 25000, 5, 1250, "2025-02-10", "active"),
    ("sale-003", "agent-001", "Auto", "AUTO-2025-123", "Robert Brown", 15000, 1, 600, "2025-03-05", "active"),
    ("sale-004", "agent-001", "Life", "LIFE-2025-078", "Maria Garcia", 75000, 25, 5250, "2025-04-12", "active"),
    ("sale-005", "agent-002", "Health", "HLTH-2025-089", "William Johnson", 30000, 3, 1500, "2025-01-20", "active"),
    ("sale-006", "agent-002", "Auto", "AUTO-2025-156", "Sophie Miller", 12000, 1, 480, "2025-02-28", "active"),
    ("sale-007", "agent-003", "Life", "LIFE-2025-092", "Daniel Davis", 100000, 30, 7500, "2025-03-15", "active"),
    ("sale-008", "agent-004", "Health", "HLTH-2025-134", "Olivia Martinez", 40000, 10, 2400, "2025-04-05", "pending"),
]

# (policy_type, premium_min, premium_max, tenure_min, tenure_max, rate)
_RULES = [
    ("Life", 0, 50000, 0, 10, 5),
    ("Life", 50001, 100000, 0, 10, 6),
    ("Life", 0, 50000, 11, 20, 6),
    ("Life", 50001, 100000, 11, 20, 7),
    ("Life", 100001, PREMIUM_UNLIMITED, 20, TENURE_UNLIMITED, 8),
    ("Health", 0, 30000, 0, 5, 4),
    ("Health", 30001, PREMIUM_UNLIMITED, 0, 5, 5),
    ("Health", 0, 30000, 6, TENURE_UNLIMITED, 5),
    ("Health", 30001, PREMIUM_UNLIMITED, 6, TENURE_UNLIMITED, 6),
    ("Auto", 0, 15000, 0, 1, 3),
    ("Auto", 15001, PREMIUM_UNLIMITED, 0, 1, 4),
    ("Auto", 0, PREMIUM_UNLIMITED, 2, TENURE_UNLIMITED, 5),
]

_ACTIVITIES = [
    ("act-001", "sale", "New Life Insurance policy sold - $100,000 premium", "2025-11-21T10:30:00", "Daniel Davis"),
    ("act-002", "target_achieved", "Sales target achieved for Q4 2025", "2025-11-21T09:15:00", "David Thompson"),
    ("act-003", "commission_paid", "Commission payment processed - $3,500", "2025-11-20T16:45:00", "Michael Chen"),
    ("act-004", "sale", "New Health Insurance policy sold - $40,000 premium", "2025-11-20T14:20:00", "Olivia Martinez"),
    ("act-005", "agent_added", "New agent onboarded to the system", "2025-11-19T11:00:00", "James Taylor"),
    ("act-006", "sale", "Auto Insurance policy sold - $15,000 premium", "2025-11-19T08:30:00", "Sarah Johnson"),
]


def _email(name: str) -> str:
    return name.lower().replace(" ", ".") + "@insurance.com"


def sample_agents() -> List[Agent]:
    return [
        Agent(
            id=aid, name=name, email=_email(name), phone=phone, region=region,
            sales_target=target, current_sales=sales, commission=commission,
            join_date=joined, status=status,
        )
        for aid, name, phone, region, target, sales, commission, joined, status in _AGENTS
    ]


def sample_sales() -> List[PolicySale]:
    return [
        PolicySale(
            id=sid, agent_id=aid, policy_type=ptype, policy_number=number,
            customer_name=customer, premium_amount=premium, tenure=tenure,
            commission=commission, date=sold_on, status=status,
        )
        for sid, aid, ptype, number, customer, premium, tenure, commission, sold_on, status in _SALES
    ]


def sample_rules() -> List[CommissionRule]:
    return [
        CommissionRule(
            id=f"rule-{i:03d}", policy_type=ptype,
            premium_min=pmin, premium_max=pmax,
            tenure_min=tmin, tenure_max=tmax, commission_rate=rate,
        )
        for i, (ptype, pmin, pmax, tmin, tmax, rate) in enumerate(_RULES, start=1)
    ]


def sample_activities() -> List[Activity]:
    return [
        Activity(id=aid, type=kind, description=text, timestamp=ts, agent_name=who)
        for aid, kind, text, ts, who in _ACTIVITIES
    ]
