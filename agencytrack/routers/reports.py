"""FastAPI router for reports and exports."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field

from ..config.config_manager import ConfigManager
from ..core import dashboards
from ..core.insights import AIReport, generate_ai_report
from ..core.store import AgencyState
from ..export import csv_template, excel_pack
from ..models.schemas import UserRole
from .deps import get_config, get_state

router = APIRouter(prefix="/v1", tags=["reports"])


@router.get("/reports")
def report(
    role: UserRole = Query(UserRole.ADMIN),
    agent_id: Optional[str] = Query(None, examples=["agent-001"]),
    region: str = Query("all", examples=["West"]),
    state: AgencyState = Depends(get_state),
    config: ConfigManager = Depends(get_config),
) -> Dict[str, Any]:
    """Reports screen data, scoped to the caller's role."""
    if role is UserRole.AGENT and not agent_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="agent_id is required for agents")
    limit = int(config.get("dashboard", "comparison_limit", 6))
    return dashboards.report_view(state, role, agent_id, region, comparison_limit=limit)


class AIReportRequest(BaseModel):
    query: str = Field("", examples=["Show me top 3 agents by growth potential"])


@router.post("/reports/ai", response_model=AIReport)
def ai_report(payload: AIReportRequest, config: ConfigManager = Depends(get_config)):
    """Canned natural-language report, chosen by keywords in the query."""
    delay = float(config.get("reports", "generation_delay_seconds", 0.0))
    return generate_ai_report(payload.query, delay=delay)


@router.get(
    "/export/template",
    responses={200: {"content": {"text/csv": {}}, "description": "Policy import template"}},
)
def export_template() -> Response:
    return Response(
        csv_template.template_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{csv_template.TEMPLATE_FILENAME}"'},
    )


@router.get(
    "/export/agents.csv",
    responses={200: {"content": {"text/csv": {}}, "description": "Agent report"}},
)
def export_agents_csv(
    role: UserRole = Query(UserRole.ADMIN),
    agent_id: Optional[str] = Query(None),
    region: str = Query("all"),
    state: AgencyState = Depends(get_state),
) -> Response:
    agents = dashboards.report_agents(state, role, agent_id, region)
    return Response(
        excel_pack.export_agents_csv(agents),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="agents_report.csv"'},
    )


@router.get(
    "/export/excel",
    responses={
        200: {
            "content": {"application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {}},
            "description": "Binary Excel workbook",
        },
    },
)
def export_excel(state: AgencyState = Depends(get_state)) -> Response:
    content = excel_pack.generate_workbook(state)
    return Response(
        content,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": 'attachment; filename="agency_report.xlsx"'},
    )
