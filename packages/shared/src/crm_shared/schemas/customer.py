"""Read-only customer and pipeline models served from fixtures."""

from typing import Dict, List, Literal, Optional
import enum

from crm_shared.schemas.case import Activity, Attachment, CamelModel


class AccountType(str, enum.Enum):
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"


class EnergyType(str, enum.Enum):
    ELECTRICITY = "Electricity"
    GAS = "Gas"
    DUAL_FUEL = "Dual Fuel"


class PipelineStage(str, enum.Enum):
    DISCOVERY = "Discovery"
    QUALIFICATION = "Qualification"
    PROPOSAL = "Proposal"
    NEGOTIATION = "Negotiation"
    CLOSED_WON = "Closed Won"
    CLOSED_LOST = "Closed Lost"


class Site(CamelModel):
    id: str
    name: str


class Org(CamelModel):
    id: str
    name: str
    type: Optional[Literal["Parent Company", "Subsidiary", "Division"]] = None
    address: Optional[str] = None
    abn_acn: Optional[str] = None


class Contact(CamelModel):
    id: str
    name: str
    role: str
    email: str
    phone: str
    is_primary: bool
    create_date: Optional[str] = None
    preferred_channels: Optional[str] = None
    lead_status: Optional[str] = None
    lifecycle_stage: Optional[str] = None
    last_activity_date: Optional[str] = None


class Account(CamelModel):
    id: str
    org_id: str
    name: str
    account_number: str
    type: AccountType
    status: Literal["Active", "Suspended", "Closed"]
    sites: List[Site] = []
    nmis: List[str] = []
    energy_type: EnergyType
    primary_contact: Contact
    contacts: List[Contact] = []
    address: str
    annual_consumption: str
    account_balance: str
    last_payment_date: str
    last_payment_amount: str
    contract_end_date: str
    linked_account_ids: Optional[List[str]] = None


class OrgDetail(Org):
    accounts: List[Account] = []


class ContactWithAccount(CamelModel):
    contact: Contact
    account: Account


class Quote(CamelModel):
    id: str
    name: str
    value: float
    status: Literal["Draft", "Sent", "Accepted", "Rejected", "Expired"]
    created_date: str
    expiry_date: str


class Opportunity(CamelModel):
    id: str
    name: str
    account_id: str
    account_name: str
    stage: PipelineStage
    value: float
    probability: int
    owner: str
    expected_close_date: str
    created_date: str
    updated_date: str
    description: str
    competition: str
    energy_type: EnergyType
    annual_volume: str
    contract_term: str
    contacts: List[Contact] = []
    activities: List[Activity] = []
    attachments: List[Attachment] = []
    docu_sign_status: Literal["Not Started", "Sent", "Viewed", "Signed", "Completed"]
    linked_quotes: List[Quote] = []


class PipelineColumn(CamelModel):
    stage: PipelineStage
    total_value: float
    weighted_value: float
    opportunities: List[Opportunity]


class CaseTypeCatalog(CamelModel):
    groups: Dict[str, List[str]]
    type_to_group: Dict[str, str]
    group_to_type: Dict[str, str]
    group_to_reason: Dict[str, str]
    reasons: List[str]
