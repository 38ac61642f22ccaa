"""Tests for dashboard composition and formatting."""
import pytest

from agencytrack.core import dashboards
from agencytrack.core.formatting import (
    example_commission,
    format_currency,
    format_premium_bound,
    format_premium_range,
    format_tenure_bound,
    format_tenure_range,
)
from agencytrack.core.sample_data import sample_rules
from agencytrack.models.schemas import AgentCreate


class TestLogin:
    def test_admin(self):
        assert dashboards.login("admin") == {"role": "admin", "agent_id": None, "screen": "admin-dashboard"}

    def test_agent_defaults_to_demo_agent(self):
        session = dashboards.login("agent")
        assert session["agent_id"] == "agent-001"
        assert session["screen"] == "agent-dashboard"

    def test_unknown_role(self):
        with pytest.raises(ValueError):
            dashboards.login("manager")


class TestAdminDashboard:
    def test_figures(self, state):
        view = dashboards.admin_dashboard(state)
        assert view["active_agents"] == 7
        assert view["total_sales"] == 3810000
        assert view["total_commissions"] == 241525
        assert view["targets_achieved"] == 4
        assert len(view["top_performers"]) == 5
        assert view["top_performers"][0]["name"] == "David Thompson"
        assert view["top_performers"][0]["achievement"] == 111
        assert len(view["recent_activities"]) == 6
        assert len(view["ai_insights"]) == 3

    def test_reflects_new_agents(self, state):
        state.add_agent(AgentCreate(name="Top Seller", email="top.seller@insurance.com",
                                    sales_target=500000, current_sales=900000))
        view = dashboards.admin_dashboard(state, limit=1)
        assert [a["name"] for a in view["top_performers"]] == ["Top Seller"]
        assert view["total_sales"] == 3810000 + 900000


class TestAgentDashboard:
    def test_known_agent(self, state):
        view = dashboards.agent_dashboard(state, "agent-001")
        assert view["achievement"] == 95
        assert view["total_policies"] == 4
        assert view["active_policies"] == 4
        assert view["agent"]["name"] == "Sarah Johnson"

    def test_agent_without_sales(self, state):
        view = dashboards.agent_dashboard(state, "agent-006")
        assert view["sales"] == []
        assert view["total_policies"] == 0

    def test_unknown_agent(self, state):
        assert dashboards.agent_dashboard(state, "agent-404") is None


class TestReportView:
    def test_admin_sees_active_agents(self, state):
        view = dashboards.report_view(state, "admin")
        assert len(view["agents"]) == 7
        assert "Lisa Williams" not in [a["name"] for a in view["agents"]]

    def test_admin_region_filter(self, state):
        view = dashboards.report_view(state, "admin", region="West")
        assert [a["name"] for a in view["agents"]] == ["David Thompson", "James Taylor"]
        assert [s["id"] for s in view["sales"]] == ["sale-008"]

    def test_agent_sees_only_itself(self, state):
        view = dashboards.report_view(state, "agent", agent_id="agent-002")
        assert [a["id"] for a in view["agents"]] == ["agent-002"]
        assert [s["id"] for s in view["sales"]] == ["sale-005", "sale-006"]
        assert view["total_sales"] == 520000

    def test_rows_count_policies_sold(self, state):
        view = dashboards.report_view(state, "admin")
        sold = {a["id"]: a["policies_sold"] for a in view["agents"]}
        assert sold["agent-001"] == 4
        assert sold["agent-002"] == 2
        assert sold["agent-006"] == 0

    def test_comparison_limit(self, state):
        view = dashboards.report_view(state, "admin", comparison_limit=2)
        assert [row["name"] for row in view["agent_comparison"]] == ["Sarah", "Michael"]
        assert len(dashboards.report_view(state, "admin")["agent_comparison"]) == 6


class TestFormatting:
    @pytest.mark.parametrize(
        "value,text",
        [(50000, "$50,000"), (1250.5, "$1,250.5"), (0, "$0"), (1234.567, "$1,234.57"), (-300, "-$300")],
    )
    def test_currency(self, value, text):
        assert format_currency(value) == text

    def test_unlimited_bounds_render_as_infinity(self):
        assert format_premium_bound(999_999_999) == "∞"
        assert format_premium_bound(100000) == "$100,000"
        assert format_tenure_bound(999) == "∞"
        assert format_tenure_bound(20) == "20"

    def test_rule_rows(self):
        rules = {r.id: r for r in sample_rules()}
        assert format_premium_range(rules["rule-005"]) == "$100,001 - ∞"
        assert format_tenure_range(rules["rule-005"]) == "20 - ∞ years"
        assert format_tenure_range(rules["rule-001"]) == "0 - 10 years"
        assert example_commission(rules["rule-002"]) == "$3,000"
