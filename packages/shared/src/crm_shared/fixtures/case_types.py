"""Case type catalogue for the new-case form."""

from typing import Dict, List

from crm_shared.schemas.case import CaseType

CASE_TYPE_GROUPS: Dict[str, List[str]] = {
    "Billing & Invoicing": [
        "Invoice dispute - usage",
        "Invoice dispute - pricing/tariff",
        "Invoice dispute - pass-through charges",
        "Missing invoice",
        "Estimated read challenge",
        "Back-bill investigation",
        "Rebill request",
        "Credit note / adjustment request",
        "Tax / GST query",
        "Invoice delivery / eInvoicing issue",
        "Payment allocation issue",
        "Statement / account balance query",
    ],
    "Metering & Data Issues": [
        "Missing interval data",
        "Interval data correction request",
        "Data substitution / estimation correction",
        "Interval file rejection (MDFF)",
        "Meter fault investigation",
        "Meter test / accuracy test",
        "Meter change coordination",
        "CT/VT ratio error",
        "Multiplier / register configuration issue",
        "NMI/MIRN standing data correction",
        "Settlement-ready data issue",
    ],
    "Move-In / Move-Out & Account Changes": [
        "Site onboarding",
        "Move-in (supply start)",
        "Move-out (supply end)",
        "Change of tenancy",
        "Change of legal entity",
        "Site closure",
        "De-energisation request",
        "Re-energisation request",
        "Retailer transfer issue (churn)",
        "Market transfer objection",
        "Portfolio / multi-site maintenance",
    ],
    "Contract & Pricing": [
        "Contract variation request",
        "Renewal negotiation support",
        "Market offer vs contract mismatch",
        "Pricing error investigation",
        "Tariff mapping error",
        "Indexation / CPI application",
        "Pass-through configuration issue",
        "Load reforecast request",
        "Hedging discrepancy",
        "Demand charges query",
    ],
    "Credit & Collections": [
        "Payment extension request",
        "Payment plan request",
        "Security deposit review",
        "Bank guarantee processing",
        "Credit limit breach",
        "Collections hold / dispute hold",
        "Dishonour / failed payment",
        "Insolvency monitoring",
        "Settlement / write-off request",
    ],
    "Market & Compliance": [
        "MSATS standing data issue",
        "B2B transaction issue",
        "Market transfer objection",
        "Settlement reconciliation discrepancy",
        "Regulator complaint (AER/ESC)",
        "Energy ombudsman complaint",
        "Life support registration",
        "Audit / compliance evidence request",
    ],
    "Operational / Service Orders": [
        "Special read request",
        "Service order status query",
        "Energisation request",
        "Disconnection warning issued",
        "Disconnection request",
        "Reconnection request",
        "Embedded network coordination",
        "Demand reset request",
        "Site access / appointment scheduling",
    ],
    "Complex Investigation / Root Cause": [
        "System pricing defect",
        "Tariff/rate configuration defect",
        "MDFF ingestion failure",
        "Settlement under/over recovery",
        "Network tariff update not applied",
        "Bulk impact incident (multiple customers)",
        "Root cause analysis (RCA)",
    ],
    "Relationship / Account Management": [
        "Executive escalation",
        "Quarterly review action tracking",
        "Sustainability / ESG data request",
        "GreenPower / LGC query",
        "Load optimisation advisory",
        "Key account service issue",
    ],
}

# detailed type -> group; a type listed under two groups maps to the later one
CASE_TYPE_TO_GROUP: Dict[str, str] = {
    case_type: group
    for group, types in CASE_TYPE_GROUPS.items()
    for case_type in types
}

CASE_GROUP_TO_TYPE: Dict[str, CaseType] = {
    "Billing & Invoicing": CaseType.ENQUIRY,
    "Metering & Data Issues": CaseType.ENQUIRY,
    "Move-In / Move-Out & Account Changes": CaseType.ONBOARDING,
    "Contract & Pricing": CaseType.ENQUIRY,
    "Credit & Collections": CaseType.DUNNING,
    "Market & Compliance": CaseType.COMPLAINT,
    "Operational / Service Orders": CaseType.ENQUIRY,
    "Complex Investigation / Root Cause": CaseType.ENQUIRY,
    "Relationship / Account Management": CaseType.ENQUIRY,
}

CASE_REASON_OPTIONS: List[str] = [
    "Billing Dispute",
    "Service Quality",
    "Meter Issue",
    "Rate Review",
    "New Connection",
    "Contract Amendment",
    "Payment Issue",
    "General Enquiry",
    "Other",
]

CASE_GROUP_TO_REASON: Dict[str, str] = {
    "Billing & Invoicing": "Billing Dispute",
    "Metering & Data Issues": "Meter Issue",
    "Move-In / Move-Out & Account Changes": "New Connection",
    "Contract & Pricing": "Contract Amendment",
    "Credit & Collections": "Payment Issue",
    "Market & Compliance": "General Enquiry",
    "Operational / Service Orders": "Service Quality",
    "Complex Investigation / Root Cause": "Other",
    "Relationship / Account Management": "General Enquiry",
}

