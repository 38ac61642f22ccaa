"""Tests for the aggregate metrics helpers."""
from datetime import date
from types import SimpleNamespace

import pytest

from agencytrack.core import metrics
from agencytrack.core.errors import ZeroTargetError
from agencytrack.core.sample_data import sample_agents, sample_sales
from agencytrack.models.schemas import Agent


@pytest.fixture
def agents():
    return tuple(sample_agents())


@pytest.fixture
def sales():
    return tuple(sample_sales())


def _agent(agent_id, sales, target=100000, status="active", region="North", name=None):
    return Agent(
        id=agent_id, name=name or f"Agent {agent_id}", email=f"{agent_id}@insurance.com",
        region=region, sales_target=target, current_sales=sales, commission=0,
        join_date=date(2024, 1, 1), status=status,
    )


def test_totals_over_sample(agents):
    assert metrics.total_sales(agents) == sum(a.current_sales for a in agents) == 3810000
    assert metrics.total_commissions(agents) == sum(a.commission for a in agents) == 241525


def test_adding_agent_increases_total_sales_by_its_sales(agents):
    before = metrics.total_sales(agents)
    extra = _agent("agent-009", 123456)
    assert metrics.total_sales(agents + (extra,)) == before + 123456


def test_totals_include_inactive_agents(agents):
    lisa = metrics.get_agent(agents, "agent-007")
    assert lisa.status.value == "inactive"
    active_total = sum(a.current_sales for a in metrics.active_agents(agents))
    assert metrics.total_sales(agents) == active_total + lisa.current_sales


def test_achievement_percent():
    agent = SimpleNamespace(id="a", current_sales=475000, sales_target=500000)
    assert metrics.achievement_percent(agent) == 95


def test_achievement_rounds_half_up():
    assert metrics.achievement_percent(SimpleNamespace(current_sales=1, sales_target=200)) == 1
    assert metrics.achievement_percent(SimpleNamespace(current_sales=5, sales_target=200)) == 3
    assert metrics.achievement_percent(SimpleNamespace(current_sales=520000, sales_target=450000)) == 116


def test_achievement_zero_target():
    agent = SimpleNamespace(id="agent-x", current_sales=10, sales_target=0)
    with pytest.raises(ZeroTargetError):
        metrics.achievement_percent(agent)
    with pytest.raises(ZeroDivisionError):
        metrics.achievement_percent(agent)
    assert metrics.achievement_or_zero(agent) == 0


def test_top_performers_sample(agents):
    top = metrics.top_performers(agents, 3)
    assert [a.name for a in top] == ["David Thompson", "Michael Chen", "Jennifer Martinez"]
    assert [a.current_sales for a in top] == [610000, 520000, 495000]


def test_top_performers_skips_inactive_and_truncates(agents):
    top = metrics.top_performers(agents, 10)
    assert len(top) == 7
    assert all(a.status.value == "active" for a in top)
    assert metrics.top_performers(agents, 0) == []


def test_top_performers_ties_keep_input_order():
    tied = [_agent("a", 100), _agent("b", 200), _agent("c", 100), _agent("d", 200)]
    assert [a.id for a in metrics.top_performers(tied, 4)] == ["b", "d", "a", "c"]


def test_engine_is_idempotent_and_does_not_mutate(agents, sales):
    copy_agents = list(agents)
    first = (
        metrics.total_sales(agents),
        metrics.top_performers(agents, 5),
        metrics.regional_performance(agents),
        metrics.sales_by_agent(sales, "agent-001"),
    )
    second = (
        metrics.total_sales(agents),
        metrics.top_performers(agents, 5),
        metrics.regional_performance(agents),
        metrics.sales_by_agent(sales, "agent-001"),
    )
    assert first == second
    assert list(agents) == copy_agents


def test_sales_by_agent(sales):
    ids = [s.id for s in metrics.sales_by_agent(sales, "agent-001")]
    assert ids == ["sale-001", "sale-002", "sale-003", "sale-004"]


def test_sales_by_agent_without_sales_is_empty(sales):
    assert metrics.sales_by_agent(sales, "agent-005") == []
    assert metrics.sales_by_agent(sales, "nobody") == []


def test_get_agent_not_found(agents):
    assert metrics.get_agent(agents, "agent-404") is None
    assert metrics.get_agent(agents, "agent-002").name == "Michael Chen"


def test_targets_achieved(agents):
    # Michael, David, Jennifer, James
    assert metrics.targets_achieved(agents) == 4


def test_active_policy_count(sales):
    assert metrics.active_policy_count(sales) == 7


@pytest.mark.parametrize(
    "search,region,status,expected",
    [
        ("", "all", "all", 8),
        ("CHEN", "all", "all", 1),
        ("insurance.com", "all", "all", 8),
        ("", "North", "all", 2),
        ("", "East", "inactive", 1),
        ("", "all", "inactive", 1),
        ("sarah", "South", "all", 0),
        ("williams", "East", "active", 0),
    ],
)
def test_filter_agents(agents, search, region, status, expected):
    assert len(metrics.filter_agents(agents, search=search, region=region, status=status)) == expected


def test_search_matches_email_case_insensitively(agents):
    found = metrics.filter_agents(agents, search="JAMES.TAYLOR@")
    assert [a.id for a in found] == ["agent-008"]


def test_regional_performance(agents):
    rows = {r["region"]: r for r in metrics.regional_performance(agents)}
    assert list(rows) == ["North", "South", "East", "West"]
    assert rows["North"] == {
        "region": "North", "revenue": 970000, "commission": 59850, "agents": 2, "avg_per_agent": 485000,
    }
    assert rows["South"]["revenue"] == 915000
    assert rows["East"]["revenue"] == 830000
    assert rows["West"]["avg_per_agent"] == 547500


def test_regional_commission_counts_every_agent(agents):
    rows = {r["region"]: r["commission"] for r in metrics.regional_performance(agents)}
    assert rows == {"North": 59850, "South": 58800, "East": 49800, "West": 73075}


def test_regional_performance_empty_regions():
    rows = metrics.regional_performance([_agent("a", 1000, region="West")])
    assert [r["agents"] for r in rows] == [0, 0, 0, 1]
    assert rows[0]["avg_per_agent"] == 0.0
    assert all(r["revenue"] == 0 and r["commission"] == 0 for r in metrics.regional_performance([]))


def test_sales_by_policy_type(sales):
    rows = {r["policy_type"]: r for r in metrics.sales_by_policy_type(sales)}
    assert rows["Life"] == {"policy_type": "Life", "value": 225000, "count": 3}
    assert rows["Health"]["count"] == 3
    assert rows["Auto"]["value"] == 27000


def test_agent_comparison(agents):
    rows = metrics.agent_comparison(agents)
    assert len(rows) == 6
    assert rows[0] == {"name": "Sarah", "sales": 475000, "target": 500000, "commission": 28500}
