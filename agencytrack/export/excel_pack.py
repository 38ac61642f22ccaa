"""Report exports (CSV and Excel)."""
from io import BytesIO
from typing import Iterable

import pandas as pd

from ..core import metrics
from ..core.formatting import format_premium_bound, format_tenure_bound
from ..core.store import AgencyState
from ..models.schemas import Agent

AGENT_COLUMNS = [
    "id", "name", "email", "phone", "region", "status",
    "sales_target", "current_sales", "commission", "achievement", "join_date",
]


def agents_frame(agents: Iterable[Agent]) -> pd.DataFrame:
    rows = []
    for agent in agents:
        row = agent.model_dump(mode="json")
        row["achievement"] = metrics.achievement_or_zero(agent)
        rows.append(row)
    return pd.DataFrame(rows, columns=AGENT_COLUMNS)


def export_agents_csv(agents: Iterable[Agent]) -> str:
    return agents_frame(agents).to_csv(index=False)


def generate_workbook(state: AgencyState) -> bytes:
    """Build an ``.xlsx`` report with agents, sales, regions and rules sheets."""
    snap = state.snapshot()
    rules = pd.DataFrame([
        {
            "id": r.id,
            "policy_type": r.policy_type.value,
            "premium_min": format_premium_bound(r.premium_min),
            "premium_max": format_premium_bound(r.premium_max),
            "tenure_min": format_tenure_bound(r.tenure_min),
            "tenure_max": format_tenure_bound(r.tenure_max),
            "commission_rate": r.commission_rate,
        }
        for r in snap.rules
    ])
    sales = pd.DataFrame([s.model_dump(mode="json") for s in snap.sales])

    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as xw:
        agents_frame(snap.agents).to_excel(xw, sheet_name="Agents", index=False)
        sales.to_excel(xw, sheet_name="Sales", index=False)
        pd.DataFrame(metrics.regional_performance(snap.agents)).to_excel(xw, sheet_name="Regions", index=False)
        rules.to_excel(xw, sheet_name="Rules", index=False)
    return buf.getvalue()
