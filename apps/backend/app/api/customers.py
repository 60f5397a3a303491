"""Read-only customer, pipeline and catalogue endpoints.

Served from in-memory fixtures in every mode; nothing here touches the
database.
"""

from fastapi import APIRouter, Query
from typing import List, Optional

from crm_shared import fixtures
from crm_shared.schemas.customer import (
    Account,
    CaseTypeCatalog,
    ContactWithAccount,
    Opportunity,
    Org,
    OrgDetail,
    PipelineColumn,
    PipelineStage,
)
from crm_shared.utils.errors import NotFound

router = APIRouter(prefix="/api", tags=["customers"])

NOT_FOUND = {404: {"description": "Not found (body is null)"}}


@router.get("/orgs", response_model=List[Org], response_model_exclude_none=True)
def list_orgs():
    return fixtures.ORGS


@router.get("/orgs/{org_id}", response_model=OrgDetail, response_model_exclude_none=True, responses=NOT_FOUND)
def get_org(org_id: str):
    """Org with its accounts"""
    org = fixtures.get_org_by_id(org_id)
    if org is None:
        raise NotFound("Org", org_id)
    return OrgDetail(**org.model_dump(), accounts=fixtures.get_accounts_by_org_id(org_id))


@router.get("/accounts", response_model=List[Account], response_model_exclude_none=True)
def list_accounts(org_id: Optional[str] = Query(None, alias="orgId")):
    if org_id:
        return fixtures.get_accounts_by_org_id(org_id)
    return fixtures.ACCOUNTS


@router.get("/accounts/{account_id}", response_model=Account, response_model_exclude_none=True, responses=NOT_FOUND)
def get_account(account_id: str):
    account = fixtures.get_account_by_id(account_id)
    if account is None:
        raise NotFound("Account", account_id)
    return account


@router.get("/contacts", response_model=List[ContactWithAccount], response_model_exclude_none=True)
def list_contacts():
    """Every contact paired with an account listing it"""
    return fixtures.get_all_contacts_with_account()


@router.get(
    "/contacts/{contact_id}",
    response_model=ContactWithAccount,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_contact(contact_id: str):
    found = fixtures.get_contact_with_account(contact_id)
    if found is None:
        raise NotFound("Contact", contact_id)
    return found


@router.get("/opportunities", response_model=List[Opportunity], response_model_exclude_none=True)
def list_opportunities(stage: Optional[PipelineStage] = None):
    if stage is not None:
        return [o for o in fixtures.OPPORTUNITIES if o.stage == stage]
    return fixtures.OPPORTUNITIES


@router.get(
    "/opportunities/{opportunity_id}",
    response_model=Opportunity,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_opportunity(opportunity_id: str):
    opportunity = fixtures.get_opportunity_by_id(opportunity_id)
    if opportunity is None:
        raise NotFound("Opportunity", opportunity_id)
    return opportunity


@router.get("/pipeline", response_model=List[PipelineColumn], response_model_exclude_none=True)
def get_pipeline():
    """Pipeline board: one column per stage with total and weighted value"""
    return fixtures.pipeline_columns()


@router.get("/case-types", response_model=CaseTypeCatalog)
def get_case_types():
    return CaseTypeCatalog(
        groups=fixtures.CASE_TYPE_GROUPS,
        type_to_group=fixtures.CASE_TYPE_TO_GROUP,
        group_to_type={group: case_type.value for group, case_type in fixtures.CASE_GROUP_TO_TYPE.items()},
        group_to_reason=fixtures.CASE_GROUP_TO_REASON,
        reasons=fixtures.CASE_REASON_OPTIONS,
    )
