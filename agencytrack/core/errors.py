"""Recoverable conditions raised by the commission and metrics helpers."""


class NoMatchingRule(LookupError):
    """No commission rule covers the given policy parameters."""

    def __init__(self, policy_type, premium_amount: float, tenure: int):
        self.policy_type = getattr(policy_type, "value", policy_type)
        self.premium_amount = premium_amount
        self.tenure = tenure
        super().__init__(
            f"No commission rule for {self.policy_type} policy "
            f"(premium={premium_amount}, tenure={tenure})"
        )


class ZeroTargetError(ZeroDivisionError):
    """Achievement was requested for an agent whose sales target is zero."""

    def __init__(self, agent_id: str = ""):
        self.agent_id = agent_id
        super().__init__(f"Sales target is zero for agent {agent_id or '<unknown>'}")
