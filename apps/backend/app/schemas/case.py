"""Case wire models - re-exported from the shared package."""

from crm_shared.schemas.case import (
    Activity,
    Attachment,
    CaseCreate,
    CaseResponse,
    CaseSummary,
    CaseUpdate,
    Communication,
)

__all__ = [
    "Activity",
    "Attachment",
    "CaseCreate",
    "CaseResponse",
    "CaseSummary",
    "CaseUpdate",
    "Communication",
]
