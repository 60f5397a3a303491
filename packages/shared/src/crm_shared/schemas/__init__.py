from .case import (
    CamelModel,
    CaseType,
    CaseStatus,
    CasePriority,
    SLAStatus,
    PendingReason,
    Attachment,
    Communication,
    Activity,
    CaseBase,
    CaseCreate,
    CaseUpdate,
    CaseResponse,
    CaseSummary,
)
from .customer import (
    AccountType,
    EnergyType,
    PipelineStage,
    Site,
    Org,
    OrgDetail,
    Contact,
    Account,
    ContactWithAccount,
    Quote,
    Opportunity,
    PipelineColumn,
    CaseTypeCatalog,
)

__all__ = [
    "CamelModel",
    "CaseType",
    "CaseStatus",
    "CasePriority",
    "SLAStatus",
    "PendingReason",
    "Attachment",
    "Communication",
    "Activity",
    "CaseBase",
    "CaseCreate",
    "CaseUpdate",
    "CaseResponse",
    "CaseSummary",
    "AccountType",
    "EnergyType",
    "PipelineStage",
    "Site",
    "Org",
    "OrgDetail",
    "Contact",
    "Account",
    "ContactWithAccount",
    "Quote",
    "Opportunity",
    "PipelineColumn",
    "CaseTypeCatalog",
]
