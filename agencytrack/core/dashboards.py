"""Dashboard views composed from a state snapshot."""
from typing import Any, Dict, List, Optional

from ..models.schemas import Agent, UserRole
from . import insights, metrics
from .store import AgencyState

DEFAULT_AGENT_ID = "agent-001"


def _with_achievement(agent: Agent) -> Dict[str, Any]:
    row = agent.model_dump(mode="json")
    row["achievement"] = metrics.achievement_or_zero(agent)
    return row


def login(role, agent_id: Optional[str] = None, default_agent_id: str = DEFAULT_AGENT_ID) -> Dict[str, Any]:
    """Mock sign-in: pick the landing screen for a role.

    No credentials are checked. An agent without an explicit id is signed in
    as the demo agent.
    """
    role = UserRole(role)
    if role is UserRole.ADMIN:
        return {"role": role.value, "agent_id": None, "screen": "admin-dashboard"}
    return {"role": role.value, "agent_id": agent_id or default_agent_id, "screen": "agent-dashboard"}


def admin_dashboard(state: AgencyState, limit: int = 5) -> Dict[str, Any]:
    snap = state.snapshot()
    return {
        "active_agents": len(metrics.active_agents(snap.agents)),
        "total_sales": metrics.total_sales(snap.agents),
        "total_commissions": metrics.total_commissions(snap.agents),
        "targets_achieved": metrics.targets_achieved(snap.agents),
        "top_performers": [_with_achievement(a) for a in metrics.top_performers(snap.agents, limit)],
        "regional_performance": metrics.regional_performance(snap.agents),
        "recent_activities": [a.model_dump(mode="json") for a in snap.activities],
        "ai_insights": insights.ADMIN_INSIGHTS,
        "ai_alerts": insights.ADMIN_ALERTS,
    }


def agent_dashboard(state: AgencyState, agent_id: str) -> Optional[Dict[str, Any]]:
    snap = state.snapshot()
    agent = metrics.get_agent(snap.agents, agent_id)
    if agent is None:
        return None
    sales = metrics.sales_by_agent(snap.sales, agent_id)
    return {
        "agent": agent.model_dump(mode="json"),
        "achievement": metrics.achievement_or_zero(agent),
        "total_policies": len(sales),
        "active_policies": metrics.active_policy_count(sales),
        "sales": [s.model_dump(mode="json") for s in sales],
        "sales_by_policy_type": metrics.sales_by_policy_type(sales),
        "ai_insights": insights.AGENT_PERSONAL_INSIGHTS,
        "ai_coach": insights.AGENT_COACH_INSIGHTS,
        "ai_goals": insights.AGENT_GOALS,
        "ai_commission_forecast": insights.AGENT_COMMISSION_FORECAST,
        "ai_sales_tips": insights.AGENT_SALES_TIPS,
    }


def report_agents(state: AgencyState, role, agent_id: Optional[str] = None, region: str = "all") -> List[Agent]:
    """Agents a report covers: an agent sees only itself, an admin sees active agents."""
    snap = state.snapshot()
    if UserRole(role) is UserRole.AGENT and agent_id:
        agent = metrics.get_agent(snap.agents, agent_id)
        return [agent] if agent else []
    return metrics.filter_agents(metrics.active_agents(snap.agents), region=region)


def report_view(
    state: AgencyState,
    role,
    agent_id: Optional[str] = None,
    region: str = "all",
    comparison_limit: int = 6,
) -> Dict[str, Any]:
    snap = state.snapshot()
    agents = report_agents(state, role, agent_id, region)
    if UserRole(role) is UserRole.AGENT and agent_id:
        sales = metrics.sales_by_agent(snap.sales, agent_id)
    else:
        ids = {a.id for a in agents}
        sales = [s for s in snap.sales if s.agent_id in ids]
    rows = []
    for agent in agents:
        row = _with_achievement(agent)
        row["policies_sold"] = len(metrics.sales_by_agent(snap.sales, agent.id))
        rows.append(row)
    return {
        "role": UserRole(role).value,
        "region": region,
        "agents": rows,
        "sales": [s.model_dump(mode="json") for s in sales],
        "sales_by_policy_type": metrics.sales_by_policy_type(sales),
        "regional_performance": metrics.regional_performance(snap.agents),
        "agent_comparison": metrics.agent_comparison(agents, comparison_limit),
        "total_sales": metrics.total_sales(agents),
        "total_commissions": metrics.total_commissions(agents),
        "suggested_queries": insights.SUGGESTED_QUERIES,
    }
