"""In-memory agency state for a single session.

``AgencyState`` is the only object that mutates collections. It is owned by
the web shell and handed to the pure helpers as snapshots.
"""
import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from ..models.schemas import (
    Activity,
    Agent,
    AgentCreate,
    AgentUpdate,
    CommissionRule,
    PolicyCreate,
    PolicySale,
    PolicyType,
    RuleCreate,
    RuleUpdate,
)
from . import sample_data
from .constraints import validate_agent, validate_rule
from .errors import NoMatchingRule
from .metrics import get_agent
from .rules import commission_for_policy

logger = logging.getLogger(__name__)

POLICY_PREFIXES = {
    PolicyType.LIFE: "LIFE",
    PolicyType.HEALTH: "HLTH",
    PolicyType.AUTO: "AUTO",
}


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


@dataclass
class Snapshot:
    agents: Tuple[Agent, ...]
    sales: Tuple[PolicySale, ...]
    rules: Tuple[CommissionRule, ...]
    activities: Tuple[Activity, ...]


@dataclass
class AgencyState:
    agents: List[Agent] = field(default_factory=list)
    sales: List[PolicySale] = field(default_factory=list)
    rules: List[CommissionRule] = field(default_factory=list)
    activities: List[Activity] = field(default_factory=list)
    unmatched_commission: float = 0.0

    @classmethod
    def from_sample(cls, **kwargs) -> "AgencyState":
        return cls(
            agents=sample_data.sample_agents(),
            sales=sample_data.sample_sales(),
            rules=sample_data.sample_rules(),
            activities=sample_data.sample_activities(),
            **kwargs,
        )

    def snapshot(self) -> Snapshot:
        return Snapshot(
            agents=tuple(self.agents),
            sales=tuple(self.sales),
            rules=tuple(self.rules),
            activities=tuple(self.activities),
        )

    # ---------- Agents ----------
    def add_agent(self, form: AgentCreate) -> Agent:
        values = form.model_dump()
        validate_agent(values)
        agent = Agent(id=_new_id("agent"), join_date=date.today(), **values)
        self.agents.append(agent)
        logger.info("Added agent %s (%s)", agent.id, agent.name)
        return agent

    def update_agent(self, agent_id: str, changes: AgentUpdate) -> Optional[Agent]:
        current = get_agent(self.agents, agent_id)
        if current is None:
            return None
        updates = changes.model_dump(exclude_unset=True, exclude_none=True)
        validate_agent({**current.model_dump(), **updates})
        updated = current.model_copy(update=updates)
        self.agents[self.agents.index(current)] = updated
        logger.info("Updated agent %s: %s", agent_id, sorted(updates))
        return updated

    def delete_agent(self, agent_id: str) -> bool:
        """Remove an agent. Their policy sales are left in place."""
        before = len(self.agents)
        self.agents = [a for a in self.agents if a.id != agent_id]
        removed = len(self.agents) < before
        if removed:
            logger.info("Deleted agent %s", agent_id)
        return removed

    # ---------- Commission rules ----------
    def get_rule(self, rule_id: str) -> Optional[CommissionRule]:
        return next((r for r in self.rules if r.id == rule_id), None)

    def add_rule(self, form: RuleCreate) -> CommissionRule:
        values = form.model_dump()
        validate_rule(values)
        rule = CommissionRule(id=_new_id("rule"), **values)
        self.rules.append(rule)
        logger.info("Added commission rule %s (%s %s%%)", rule.id, rule.policy_type.value, rule.commission_rate)
        return rule

    def update_rule(self, rule_id: str, changes: RuleUpdate) -> Optional[CommissionRule]:
        current = self.get_rule(rule_id)
        if current is None:
            return None
        updates = changes.model_dump(exclude_unset=True, exclude_none=True)
        validate_rule({**current.model_dump(), **updates})
        updated = current.model_copy(update=updates)
        self.rules[self.rules.index(current)] = updated
        logger.info("Updated commission rule %s: %s", rule_id, sorted(updates))
        return updated

    def delete_rule(self, rule_id: str) -> bool:
        before = len(self.rules)
        self.rules = [r for r in self.rules if r.id != rule_id]
        removed = len(self.rules) < before
        if removed:
            logger.info("Deleted commission rule %s", rule_id)
        return removed

    # ---------- Policy sales ----------
    def _policy_number(self, policy_type: PolicyType, sold_on: date) -> str:
        """Next free ``<PREFIX>-<year>-<seq>`` number, one past the highest in use."""
        stem = f"{POLICY_PREFIXES[PolicyType(policy_type)]}-{sold_on.year}-"
        used = [
            int(s.policy_number[len(stem):])
            for s in self.sales
            if s.policy_number.startswith(stem) and s.policy_number[len(stem):].isdigit()
        ]
        return f"{stem}{max(used, default=0) + 1:03d}"

    def add_policy(self, agent_id: str, form: PolicyCreate) -> Optional[PolicySale]:
        """Record a sale for ``agent_id`` with its commission precomputed.

        The agent's ``current_sales`` and ``commission`` totals are not
        touched. Returns ``None`` for an unknown agent.
        """
        if get_agent(self.agents, agent_id) is None:
            return None
        try:
            _, commission = commission_for_policy(
                self.rules, form.policy_type, form.premium_amount, form.tenure
            )
        except NoMatchingRule as exc:
            logger.warning("%s; recording commission %s", exc, self.unmatched_commission)
            commission = self.unmatched_commission

        sale = PolicySale(
            id=_new_id("sale"),
            agent_id=agent_id,
            policy_type=form.policy_type,
            policy_number=self._policy_number(form.policy_type, form.start_date),
            customer_name=form.customer_name,
            premium_amount=form.premium_amount,
            tenure=form.tenure,
            commission=commission,
            date=form.start_date,
            status=form.status,
        )
        self.sales.append(sale)
        logger.info("Added policy %s for agent %s (commission %.2f)", sale.policy_number, agent_id, commission)
        return sale

    def summary(self) -> Dict[str, Any]:
        return {
            "agents": len(self.agents),
            "sales": len(self.sales),
            "rules": len(self.rules),
            "activities": len(self.activities),
        }
