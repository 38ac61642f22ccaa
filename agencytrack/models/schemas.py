# models/schemas.py - Pydantic models for agents, policy sales and commission rules
"""
Records are frozen so the pure functions in ``agencytrack.core`` always work
on immutable snapshots. The state object replaces records with
``model_copy(update=...)`` instead of mutating them in place.
"""
import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# Upper bounds that mean "no limit" on the rules screen.
PREMIUM_UNLIMITED = 999_999_999
TENURE_UNLIMITED = 999


class PolicyType(str, Enum):
    LIFE = "Life"
    HEALTH = "Health"
    AUTO = "Auto"


class Region(str, Enum):
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"


class AgentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class SaleStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    CANCELLED = "cancelled"


class ActivityType(str, Enum):
    SALE = "sale"
    AGENT_ADDED = "agent_added"
    COMMISSION_PAID = "commission_paid"
    TARGET_ACHIEVED = "target_achieved"


class UserRole(str, Enum):
    ADMIN = "admin"
    AGENT = "agent"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# Core records
class Agent(_Record):
    id: str
    name: str
    email: EmailStr
    phone: str = ""
    region: Region
    sales_target: float = Field(..., gt=0)
    current_sales: float = Field(0.0, ge=0)
    commission: float = Field(0.0, ge=0)
    join_date: dt.date
    status: AgentStatus = AgentStatus.ACTIVE


class PolicySale(_Record):
    id: str
    agent_id: str
    policy_type: PolicyType
    policy_number: str
    customer_name: str
    premium_amount: float = Field(..., gt=0)
    tenure: int = Field(..., ge=0)
    commission: float = Field(0.0, ge=0)
    date: dt.date
    status: SaleStatus = SaleStatus.ACTIVE


class CommissionRule(_Record):
    """A single row of the commission rate table, bounds inclusive."""
    id: str
    policy_type: PolicyType
    premium_min: float = Field(0.0, ge=0)
    premium_max: float = PREMIUM_UNLIMITED
    tenure_min: int = Field(0, ge=0)
    tenure_max: int = TENURE_UNLIMITED
    commission_rate: float = Field(..., ge=0, le=100)


class Activity(_Record):
    id: str
    type: ActivityType
    description: str
    timestamp: dt.datetime
    agent_name: Optional[str] = None


# Form payloads
class AgentCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Sarah Johnson"])
    email: EmailStr = Field(..., examples=["sarah.johnson@insurance.com"])
    phone: str = ""
    region: Region = Region.NORTH
    sales_target: float = Field(..., gt=0, examples=[500000])
    current_sales: float = Field(0.0, ge=0)
    commission: float = Field(0.0, ge=0)
    status: AgentStatus = AgentStatus.ACTIVE


class AgentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    region: Optional[Region] = None
    sales_target: Optional[float] = Field(None, gt=0)
    current_sales: Optional[float] = Field(None, ge=0)
    commission: Optional[float] = Field(None, ge=0)
    status: Optional[AgentStatus] = None


class RuleCreate(BaseModel):
    policy_type: PolicyType = PolicyType.LIFE
    premium_min: float = Field(0.0, ge=0)
    premium_max: float = Field(50000.0, ge=0)
    tenure_min: int = Field(0, ge=0)
    tenure_max: int = Field(10, ge=0)
    commission_rate: float = Field(5.0, ge=0, le=100)


class RuleUpdate(BaseModel):
    policy_type: Optional[PolicyType] = None
    premium_min: Optional[float] = Field(None, ge=0)
    premium_max: Optional[float] = Field(None, ge=0)
    tenure_min: Optional[int] = Field(None, ge=0)
    tenure_max: Optional[int] = Field(None, ge=0)
    commission_rate: Optional[float] = Field(None, ge=0, le=100)


class PolicyCreate(BaseModel):
    """Fields of the "Add Policy" form on the agent dashboard."""
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: Optional[EmailStr] = None
    phone: str = ""
    address: str = ""
    policy_type: PolicyType = PolicyType.LIFE
    premium_amount: float = Field(..., gt=0, examples=[75000])
    tenure: int = Field(..., ge=0, examples=[5])
    start_date: dt.date = Field(default_factory=dt.date.today)
    status: SaleStatus = SaleStatus.ACTIVE

    @property
    def customer_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
