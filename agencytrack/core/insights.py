"""Canned "AI" insights and the natural-language report stub.

Nothing here does inference. The dashboard insight sets are fixed literals
and ``generate_ai_report`` picks one of three canned reports by looking for
keywords in the query.
"""
import logging
import time
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class AgentInsight(BaseModel):
    agent: str
    score: int
    reason: str
    growth_potential: str
    recommendation: str


class MetricInsight(BaseModel):
    metric: str
    value: str
    trend: Literal["up", "down", "flat"]
    description: str


class AgentGrowthReport(BaseModel):
    kind: Literal["agent_growth"] = "agent_growth"
    title: str
    query: str
    insights: List[AgentInsight]
    summary: str


class MetricsOverviewReport(BaseModel):
    kind: Literal["metrics_overview"] = "metrics_overview"
    title: str
    query: str
    insights: List[MetricInsight]
    summary: str


AIReport = Annotated[Union[AgentGrowthReport, MetricsOverviewReport], Field(discriminator="kind")]

GROWTH_KEYWORDS = ("growth potential", "top 3", "top agents")
UNDERPERFORMING_KEYWORDS = ("underperforming", "struggling")

SUGGESTED_QUERIES = [
    "Show me top 3 agents by growth potential",
    "Which regions are underperforming?",
    "Analyze Life Insurance policy trends",
    "Compare North vs South region performance",
    "Predict next quarter commission payouts",
    "Identify agents who need additional support",
]


def _growth_report(query: str) -> AgentGrowthReport:
    return AgentGrowthReport(
        title="Top 3 Agents by Growth Potential",
        query=query or "Show me top 3 agents by growth potential",
        insights=[
            AgentInsight(
                agent="David Thompson",
                score=95,
                reason="Exceeded target by 11% with strong momentum in West region. "
                       "Historical data shows 28% quarter-over-quarter growth.",
                growth_potential="+35%",
                recommendation="Increase sales target by 15% and provide mentorship opportunities.",
            ),
            AgentInsight(
                agent="Jennifer Martinez",
                score=88,
                reason="Consistently meeting targets with 103% achievement. "
                       "Strong performance in Life Insurance segment.",
                growth_potential="+22%",
                recommendation="Cross-train in Health Insurance to diversify portfolio.",
            ),
            AgentInsight(
                agent="Michael Chen",
                score=85,
                reason="Outstanding 116% target achievement. "
                       "Leader in South region with excellent customer retention.",
                growth_potential="+18%",
                recommendation="Consider for team lead role to scale expertise.",
            ),
        ],
        summary="Based on performance trends, sales velocity, and market conditions, these three agents "
                "show the highest potential for continued growth in the next quarter.",
    )


def _underperforming_report(query: str) -> AgentGrowthReport:
    return AgentGrowthReport(
        title="Underperforming Agents Analysis",
        query=query,
        insights=[
            AgentInsight(
                agent="Emily Rodriguez",
                score=45,
                reason="Currently at 95% of target. Recent 2-month slowdown detected.",
                growth_potential="Needs Support",
                recommendation="Provide additional training and adjust territory coverage.",
            ),
            AgentInsight(
                agent="Robert Anderson",
                score=52,
                reason="At 94% of target with declining monthly trends.",
                growth_potential="Needs Support",
                recommendation="Review commission structure and provide coaching.",
            ),
        ],
        summary="Two agents require immediate attention and support to get back on track with their targets.",
    )


def _overview_report(query: str) -> MetricsOverviewReport:
    return MetricsOverviewReport(
        title="AI-Generated Performance Report",
        query=query or "General performance overview",
        insights=[
            MetricInsight(
                metric="Overall Performance",
                value="87%",
                trend="up",
                description="Company-wide target achievement is strong at 87%, up 5% from last quarter.",
            ),
            MetricInsight(
                metric="Revenue Growth",
                value="+15.3%",
                trend="up",
                description="Total revenue increased by 15.3% compared to previous period, "
                            "driven by Life Insurance sales.",
            ),
            MetricInsight(
                metric="Agent Productivity",
                value="20.6 policies/agent",
                trend="up",
                description="Average productivity per agent increased, indicating improved efficiency.",
            ),
        ],
        summary="Overall company performance is strong with positive trends across all key metrics. "
                "Focus areas identified for East region.",
    )


def generate_ai_report(query: str = "", delay: float = 0.0) -> Union[AgentGrowthReport, MetricsOverviewReport]:
    """Return the canned report whose keywords appear in ``query``.

    ``delay`` is a fixed cosmetic pause before answering.
    """
    query = query or ""
    if delay > 0:
        time.sleep(delay)

    lowered = query.lower()
    if any(k in lowered for k in GROWTH_KEYWORDS):
        report = _growth_report(query)
    elif any(k in lowered for k in UNDERPERFORMING_KEYWORDS):
        report = _underperforming_report(query)
    else:
        report = _overview_report(query)
    logger.info("AI report %r -> %s", query, report.title)
    return report


# Dashboard literals
ADMIN_INSIGHTS = [
    {
        "id": "insight-1",
        "type": "prediction",
        "title": "Sarah Johnson likely to exceed target by 15%",
        "description": "Based on current trajectory and historical performance patterns",
        "confidence": 92,
        "trend": "positive",
    },
    {
        "id": "insight-2",
        "type": "trend",
        "title": "North region trending +20% this quarter",
        "description": "Strong momentum in Life Insurance policies",
        "confidence": 88,
        "trend": "positive",
    },
    {
        "id": "insight-3",
        "type": "forecast",
        "title": "Commission payout estimate: $285,000",
        "description": "Projected for end of quarter based on current sales pipeline",
        "confidence": 85,
        "trend": "neutral",
    },
]

ADMIN_ALERTS = [
    {
        "id": "alert-1",
        "severity": "warning",
        "title": "East Region Underperforming",
        "description": "Sales 18% below target. AI recommends increasing commission by 2% for Q3 to boost motivation.",
        "action": "Adjust Commission Rules",
        "impact": "High",
    },
    {
        "id": "alert-2",
        "severity": "info",
        "title": "Optimal Time for Health Insurance Push",
        "description": "Historical data shows 35% higher conversion rates for Health Insurance in the next 2 weeks.",
        "action": "View Campaign Details",
        "impact": "Medium",
    },
]

AGENT_PERSONAL_INSIGHTS = [
    {
        "id": "ai-1",
        "title": "You're on track to exceed your target by 15%!",
        "description": "Keep up the great work. At this pace, you'll finish the quarter strong.",
        "type": "success",
    },
    {
        "id": "ai-2",
        "title": "Best time to contact leads: 2-4 PM",
        "description": "Your historical data shows 45% higher conversion rates during this window.",
        "type": "tip",
    },
    {
        "id": "ai-3",
        "title": "Life Insurance policies trending high",
        "description": "Consider focusing on Life Insurance this week - 23% higher demand predicted.",
        "type": "opportunity",
    },
]

AGENT_COACH_INSIGHTS = [
    {"id": "coach-1", "message": "You're 95% to target - on track for bonus!", "type": "achievement"},
    {"id": "coach-2", "message": "Try focusing on Health Insurance - 35% higher conversion in your region",
     "type": "recommendation"},
    {"id": "coach-3", "message": "Your Life Insurance sales are 20% above team average", "type": "praise"},
]

AGENT_GOALS = {
    "current_month": {"target": 55000, "confidence": 92},
    "next_month": {"target": 58000, "confidence": 87},
    "quarter_end": {"target": 175000, "confidence": 85},
}

AGENT_COMMISSION_FORECAST = {
    "this_month": {"amount": 4200, "status": "confirmed"},
    "next_month": {"amount": 4800, "status": "projected"},
    "quarter_end": {"amount": 14500, "status": "total"},
}

AGENT_SALES_TIPS = [
    {"id": "tip-1", "tip": "Contact leads from Q2 - 45% conversion potential", "priority": "high"},
    {"id": "tip-2", "tip": "Upsell Auto to your Life clients - 60% success rate", "priority": "medium"},
    {"id": "tip-3", "tip": "Avoid cold calls on Wednesdays - low response days", "priority": "low"},
]
