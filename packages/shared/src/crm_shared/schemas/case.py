from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Dict, List, Literal, Optional
import enum


class CaseType(str, enum.Enum):
    COMPLAINT = "Complaint"
    ENQUIRY = "Enquiry"
    EWR = "EWR"
    ONBOARDING = "Onboarding"
    DUNNING = "Dunning"


class CaseStatus(str, enum.Enum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    PENDING = "Pending"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class CasePriority(str, enum.Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class SLAStatus(str, enum.Enum):
    ON_TRACK = "On Track"
    AT_RISK = "At Risk"
    BREACHED = "Breached"


class PendingReason(str, enum.Enum):
    CUSTOMER = "Customer"
    THIRD_PARTY = "3rd Party"
    ON_HOLD = "On Hold"


class CamelModel(BaseModel):
    """Base for wire models: snake_case in Python, camelCase in JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class Attachment(CamelModel):
    id: str
    name: str
    type: str
    size: str
    uploaded_by: str
    uploaded_date: str


class Communication(CamelModel):
    id: str
    type: Literal["Email", "Phone", "Note", "System"]
    direction: Literal["Inbound", "Outbound", "Internal"]
    from_: str = Field(alias="from")
    to: str
    subject: str
    body: str
    timestamp: str
    attachments: List[Attachment] = []


class Activity(CamelModel):
    id: str
    type: Literal[
        "Status Change",
        "Assignment",
        "Comment",
        "Attachment",
        "SLA Update",
        "Created",
        "Email Sent",
        "Email Received",
        "Note Added",
    ]
    description: str
    user: str
    timestamp: str
    metadata: Optional[Dict[str, str]] = None


class CaseBase(CamelModel):
    case_number: str
    account_id: str
    account_name: str
    type: CaseType
    sub_type: str
    status: CaseStatus
    priority: CasePriority
    sla_status: SLAStatus
    sla_deadline: str
    sla_time_remaining: str
    owner: str
    team: str
    created_date: str
    updated_date: str
    description: str = ""
    resolution: str = ""
    communications: List[Communication] = []
    activities: List[Activity] = []
    attachments: List[Attachment] = []
    related_cases: List[str] = []
    pending_reason: Optional[PendingReason] = None


class CaseCreate(CaseBase):
    pass


class CaseUpdate(CamelModel):
    """Partial case. Only fields present in the request body are applied."""

    case_number: Optional[str] = None
    account_id: Optional[str] = None
    account_name: Optional[str] = None
    type: Optional[CaseType] = None
    sub_type: Optional[str] = None
    status: Optional[CaseStatus] = None
    priority: Optional[CasePriority] = None
    sla_status: Optional[SLAStatus] = None
    sla_deadline: Optional[str] = None
    sla_time_remaining: Optional[str] = None
    owner: Optional[str] = None
    team: Optional[str] = None
    created_date: Optional[str] = None
    updated_date: Optional[str] = None
    description: Optional[str] = None
    resolution: Optional[str] = None
    communications: Optional[List[Communication]] = None
    activities: Optional[List[Activity]] = None
    attachments: Optional[List[Attachment]] = None
    related_cases: Optional[List[str]] = None
    pending_reason: Optional[PendingReason] = None

    @model_validator(mode="after")
    def _only_pending_reason_nullable(self):
        for name in self.model_fields_set:
            if name != "pending_reason" and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class CaseResponse(CaseBase):
    id: str


class CaseSummary(CamelModel):
    total: int
    by_status: Dict[str, int]
    by_priority: Dict[str, int]
    by_sla_status: Dict[str, int]
    by_type: Dict[str, int]
