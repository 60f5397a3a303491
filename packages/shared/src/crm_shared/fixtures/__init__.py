"""In-memory data for mock mode and demo seeding. Never persisted."""

from .customers import (
    ORGS,
    ACCOUNTS,
    get_org_by_id,
    get_account_by_id,
    get_accounts_by_org_id,
    get_all_contacts_with_account,
    get_contact_with_account,
)
from .opportunities import OPPORTUNITIES, get_opportunity_by_id, pipeline_columns
from .case_types import (
    CASE_TYPE_GROUPS,
    CASE_GROUP_TO_TYPE,
    CASE_GROUP_TO_REASON,
    CASE_REASON_OPTIONS,
    CASE_TYPE_TO_GROUP,
)
from .cases import DEMO_CASES

__all__ = [
    "ORGS",
    "ACCOUNTS",
    "get_org_by_id",
    "get_account_by_id",
    "get_accounts_by_org_id",
    "get_all_contacts_with_account",
    "get_contact_with_account",
    "OPPORTUNITIES",
    "get_opportunity_by_id",
    "pipeline_columns",
    "CASE_TYPE_GROUPS",
    "CASE_GROUP_TO_TYPE",
    "CASE_GROUP_TO_REASON",
    "CASE_REASON_OPTIONS",
    "CASE_TYPE_TO_GROUP",
    "DEMO_CASES",
]
