"""FastAPI router for agents, policies, commission rules and dashboards."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field

from ..config.config_manager import ConfigManager
from ..core import dashboards, metrics
from ..core.errors import NoMatchingRule
from ..core.formatting import example_commission, format_premium_range, format_tenure_range
from ..core.rules import commission_for_policy, filter_rules
from ..core.store import AgencyState
from ..models.schemas import (
    Agent,
    AgentCreate,
    AgentUpdate,
    CommissionRule,
    PolicyCreate,
    PolicySale,
    PolicyType,
    RuleCreate,
    RuleUpdate,
    UserRole,
)
from .deps import get_config, get_state

router = APIRouter(prefix="/v1", tags=["agency"])


def _not_found(what: str, ident: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found: {ident}")


def _bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


# ---------- Session ----------
class LoginRequest(BaseModel):
    role: UserRole = Field(..., examples=["agent"])
    agent_id: Optional[str] = None


class LoginResponse(BaseModel):
    role: UserRole
    agent_id: Optional[str]
    screen: str


@router.post("/session", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    state: AgencyState = Depends(get_state),
    config: ConfigManager = Depends(get_config),
) -> LoginResponse:
    """Pick the landing screen for a role. No credentials are checked."""
    default_agent = config.get("session", "default_agent_id", dashboards.DEFAULT_AGENT_ID)
    session = dashboards.login(payload.role, payload.agent_id, default_agent)
    if session["agent_id"] and metrics.get_agent(state.agents, session["agent_id"]) is None:
        raise _not_found("Agent", session["agent_id"])
    return LoginResponse(**session)


# ---------- Agents ----------
class AgentListResponse(BaseModel):
    agents: List[Dict[str, Any]]
    total: int
    shown: int
    active_shown: int


@router.get("/agents", response_model=AgentListResponse)
def list_agents(
    search: str = Query("", examples=["chen"]),
    region: str = Query("all", examples=["North"]),
    status_filter: str = Query("all", alias="status", examples=["active"]),
    state: AgencyState = Depends(get_state),
) -> AgentListResponse:
    """Agent management table with search, region and status filters."""
    snap = state.snapshot()
    shown = metrics.filter_agents(snap.agents, search=search, region=region, status=status_filter)
    rows = []
    for agent in shown:
        row = agent.model_dump(mode="json")
        row["achievement"] = metrics.achievement_or_zero(agent)
        rows.append(row)
    return AgentListResponse(
        agents=rows,
        total=len(snap.agents),
        shown=len(shown),
        active_shown=len(metrics.active_agents(shown)),
    )


@router.post("/agents", response_model=Agent, status_code=status.HTTP_201_CREATED)
def create_agent(payload: AgentCreate, state: AgencyState = Depends(get_state)) -> Agent:
    try:
        return state.add_agent(payload)
    except ValueError as exc:
        raise _bad_request(exc)


@router.get("/agents/{agent_id}", response_model=Agent)
def read_agent(agent_id: str, state: AgencyState = Depends(get_state)) -> Agent:
    agent = metrics.get_agent(state.agents, agent_id)
    if agent is None:
        raise _not_found("Agent", agent_id)
    return agent


@router.put("/agents/{agent_id}", response_model=Agent)
def update_agent(agent_id: str, payload: AgentUpdate, state: AgencyState = Depends(get_state)) -> Agent:
    try:
        agent = state.update_agent(agent_id, payload)
    except ValueError as exc:
        raise _bad_request(exc)
    if agent is None:
        raise _not_found("Agent", agent_id)
    return agent


@router.delete("/agents/{agent_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_agent(agent_id: str, state: AgencyState = Depends(get_state)) -> Response:
    if not state.delete_agent(agent_id):
        raise _not_found("Agent", agent_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------- Policies ----------
@router.get("/agents/{agent_id}/policies", response_model=List[PolicySale])
def list_policies(agent_id: str, state: AgencyState = Depends(get_state)) -> List[PolicySale]:
    return metrics.sales_by_agent(state.sales, agent_id)


@router.post(
    "/agents/{agent_id}/policies",
    response_model=PolicySale,
    status_code=status.HTTP_201_CREATED,
)
def create_policy(agent_id: str, payload: PolicyCreate, state: AgencyState = Depends(get_state)) -> PolicySale:
    sale = state.add_policy(agent_id, payload)
    if sale is None:
        raise _not_found("Agent", agent_id)
    return sale


# ---------- Commission rules ----------
class RuleRow(BaseModel):
    rule: CommissionRule
    premium_range: str
    tenure_range: str
    example_commission: str


class RuleListResponse(BaseModel):
    rules: List[RuleRow]
    total: int
    shown: int


@router.get("/rules", response_model=RuleListResponse)
def list_rules(
    policy_type: str = Query("all", examples=["Life"]),
    state: AgencyState = Depends(get_state),
) -> RuleListResponse:
    shown = filter_rules(state.rules, policy_type)
    rows = [
        RuleRow(
            rule=r,
            premium_range=format_premium_range(r),
            tenure_range=format_tenure_range(r),
            example_commission=example_commission(r),
        )
        for r in shown
    ]
    return RuleListResponse(rules=rows, total=len(state.rules), shown=len(shown))


@router.post("/rules", response_model=CommissionRule, status_code=status.HTTP_201_CREATED)
def create_rule(payload: RuleCreate, state: AgencyState = Depends(get_state)) -> CommissionRule:
    try:
        return state.add_rule(payload)
    except ValueError as exc:
        raise _bad_request(exc)


@router.put("/rules/{rule_id}", response_model=CommissionRule)
def update_rule(rule_id: str, payload: RuleUpdate, state: AgencyState = Depends(get_state)) -> CommissionRule:
    try:
        rule = state.update_rule(rule_id, payload)
    except ValueError as exc:
        raise _bad_request(exc)
    if rule is None:
        raise _not_found("Rule", rule_id)
    return rule


@router.delete("/rules/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rule(rule_id: str, state: AgencyState = Depends(get_state)) -> Response:
    if not state.delete_rule(rule_id):
        raise _not_found("Rule", rule_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


class ResolveResponse(BaseModel):
    rule: CommissionRule
    commission: float


@router.get(
    "/rules/resolve",
    response_model=ResolveResponse,
    responses={404: {"description": "No commission rule covers the policy"}},
)
def resolve(
    policy_type: PolicyType,
    premium_amount: float = Query(..., gt=0, examples=[75000]),
    tenure: int = Query(..., ge=0, examples=[5]),
    state: AgencyState = Depends(get_state),
) -> ResolveResponse:
    """Find the commission rule for a policy and the commission it pays."""
    try:
        rule, amount = commission_for_policy(state.rules, policy_type, premium_amount, tenure)
    except NoMatchingRule as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return ResolveResponse(rule=rule, commission=amount)


# ---------- Dashboards ----------
@router.get("/dashboard/admin")
def admin_dashboard(
    state: AgencyState = Depends(get_state),
    config: ConfigManager = Depends(get_config),
) -> Dict[str, Any]:
    limit = int(config.get("dashboard", "top_performers_limit", 5))
    return dashboards.admin_dashboard(state, limit=limit)


@router.get("/dashboard/agents/{agent_id}")
def agent_dashboard(agent_id: str, state: AgencyState = Depends(get_state)) -> Dict[str, Any]:
    view = dashboards.agent_dashboard(state, agent_id)
    if view is None:
        raise _not_found("Agent", agent_id)
    return view
