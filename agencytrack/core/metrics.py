"""Aggregate metrics over agent and policy sale snapshots.

Every function here is a read-only transform: inputs are iterated, never
mutated, so calling twice on the same snapshot gives the same answer.
"""
import math
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..models.schemas import Agent, AgentStatus, PolicySale, PolicyType, Region, SaleStatus
from .errors import ZeroTargetError

REGIONS = [r.value for r in Region]
POLICY_TYPES = [p.value for p in PolicyType]


def _value(v) -> str:
    return getattr(v, "value", v)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def total_sales(agents: Iterable[Agent]) -> float:
    return sum(a.current_sales for a in agents)


def total_commissions(agents: Iterable[Agent]) -> float:
    return sum(a.commission for a in agents)


def achievement_percent(agent) -> int:
    """Whole-number percentage of the sales target reached.

    Raises:
        ZeroTargetError: If the agent's sales target is zero.
    """
    if not agent.sales_target:
        raise ZeroTargetError(getattr(agent, "id", ""))
    return _round_half_up(agent.current_sales / agent.sales_target * 100)


def achievement_or_zero(agent) -> int:
    """Dashboard convention: an agent without a target shows 0%."""
    try:
        return achievement_percent(agent)
    except ZeroTargetError:
        return 0


def is_active(agent: Agent) -> bool:
    return _value(agent.status) == AgentStatus.ACTIVE.value


def active_agents(agents: Iterable[Agent]) -> List[Agent]:
    return [a for a in agents if is_active(a)]


def top_performers(agents: Iterable[Agent], limit: int = 5) -> List[Agent]:
    """Active agents by current sales, highest first.

    ``sorted`` is stable, so ties keep their input order.
    """
    ranked = sorted(active_agents(agents), key=lambda a: a.current_sales, reverse=True)
    return ranked[:max(limit, 0)]


def targets_achieved(agents: Iterable[Agent]) -> int:
    return sum(1 for a in agents if is_active(a) and a.current_sales >= a.sales_target)


def get_agent(agents: Iterable[Agent], agent_id: str) -> Optional[Agent]:
    return next((a for a in agents if a.id == agent_id), None)


def sales_by_agent(sales: Iterable[PolicySale], agent_id: str) -> List[PolicySale]:
    return [s for s in sales if s.agent_id == agent_id]


def active_policy_count(sales: Iterable[PolicySale]) -> int:
    return sum(1 for s in sales if _value(s.status) == SaleStatus.ACTIVE.value)


# Filters
def matches_search(agent: Agent, query: str) -> bool:
    q = (query or "").lower()
    return q in agent.name.lower() or q in str(agent.email).lower()


def matches_region(agent: Agent, region: str) -> bool:
    return region in (None, "all") or _value(agent.region) == _value(region)


def matches_status(agent: Agent, status: str) -> bool:
    return status in (None, "all") or _value(agent.status) == _value(status)


def filter_agents(
    agents: Iterable[Agent], search: str = "", region: str = "all", status: str = "all"
) -> List[Agent]:
    return [
        a for a in agents
        if matches_search(a, search) and matches_region(a, region) and matches_status(a, status)
    ]


# Rollups
def regional_performance(agents: Iterable[Agent]) -> List[Dict[str, Any]]:
    """Revenue, commission, headcount and average per agent for each region.

    All agents count regardless of status. Regions with no agents are
    reported with zeros so the chart always has four bars.
    """
    df = pd.DataFrame(
        [
            {"region": _value(a.region), "revenue": a.current_sales, "commission": a.commission}
            for a in agents
        ],
        columns=["region", "revenue", "commission"],
    )
    grouped = (
        df.groupby("region")
        .agg(revenue=("revenue", "sum"), commission=("commission", "sum"), agents=("revenue", "count"))
        .reindex(REGIONS, fill_value=0)
    )
    rows = []
    for region, row in grouped.iterrows():
        count = int(row["agents"])
        revenue = float(row["revenue"])
        rows.append({
            "region": region,
            "revenue": revenue,
            "commission": float(row["commission"]),
            "agents": count,
            "avg_per_agent": revenue / count if count else 0.0,
        })
    return rows


def sales_by_policy_type(sales: Iterable[PolicySale]) -> List[Dict[str, Any]]:
    """Premium value and policy count per policy type."""
    df = pd.DataFrame(
        [{"policy_type": _value(s.policy_type), "premium": s.premium_amount} for s in sales],
        columns=["policy_type", "premium"],
    )
    grouped = (
        df.groupby("policy_type")["premium"]
        .agg(["sum", "count"])
        .reindex(POLICY_TYPES, fill_value=0)
    )
    return [
        {"policy_type": ptype, "value": float(row["sum"]), "count": int(row["count"])}
        for ptype, row in grouped.iterrows()
    ]


def agent_comparison(agents: Iterable[Agent], limit: int = 6) -> List[Dict[str, Any]]:
    return [
        {
            "name": a.name.split(" ")[0],
            "sales": a.current_sales,
            "target": a.sales_target,
            "commission": a.commission,
        }
        for a in list(agents)[:limit]
    ]
