"""Demo cases inserted by ``python -m app.seed``."""

from typing import List

from crm_shared.schemas.case import CaseCreate

DEMO_CASES: List[CaseCreate] = [
    CaseCreate(
        case_number="CS-2026-001847",
        account_id="acc-001",
        account_name="Bowen Basin Mining Corp",
        type="Complaint",
        sub_type="Billing Dispute",
        status="In Progress",
        priority="High",
        sla_status="At Risk",
        sla_deadline="12/02/2026 17:00",
        sla_time_remaining="1d 14h",
        owner="Priya Sharma",
        team="Large Market Support",
        created_date="07/02/2026",
        updated_date="10/02/2026",
        description=(
            "Customer is disputing the January invoice for NMI 3012345678. They believe the "
            "demand charges are incorrect based on their contracted rate schedule."
        ),
        communications=[
            {
                "id": "comm-001",
                "type": "Email",
                "direction": "Inbound",
                "from": "j.whitfield@bowenbasin.com.au",
                "to": "largemarket@tally.com.au",
                "subject": "January invoice - demand charges",
                "body": "The demand charges on our January invoice do not match our contract. Please review.",
                "timestamp": "07/02/2026 09:12",
                "attachments": [
                    {
                        "id": "att-001",
                        "name": "Invoice-INV-2026-0145.pdf",
                        "type": "PDF",
                        "size": "245 KB",
                        "uploadedBy": "James Whitfield",
                        "uploadedDate": "07/02/2026",
                    },
                ],
            },
            {
                "id": "comm-002",
                "type": "Note",
                "direction": "Internal",
                "from": "Priya Sharma",
                "to": "Large Market Support",
                "subject": "Rate schedule check",
                "body": "Billing applied the superseded schedule from the 2024 contract.",
                "timestamp": "10/02/2026 14:30",
            },
        ],
        activities=[
            {
                "id": "act-001",
                "type": "Created",
                "description": "Case created from inbound email",
                "user": "System",
                "timestamp": "07/02/2026 09:15",
            },
            {
                "id": "act-002",
                "type": "Status Change",
                "description": "Status changed from New to In Progress",
                "user": "Priya Sharma",
                "timestamp": "08/02/2026 10:02",
                "metadata": {"from": "New", "to": "In Progress"},
            },
        ],
        attachments=[
            {
                "id": "att-001",
                "name": "Invoice-INV-2026-0145.pdf",
                "type": "PDF",
                "size": "245 KB",
                "uploadedBy": "James Whitfield",
                "uploadedDate": "07/02/2026",
            },
        ],
        related_cases=["CS-2026-001790"],
    ),
    CaseCreate(
        case_number="CS-2026-001832",
        account_id="acc-002",
        account_name="Gladstone Aluminium Smelter",
        type="EWR",
        sub_type="Meter Replacement",
        status="Pending",
        priority="Medium",
        sla_status="On Track",
        sla_deadline="20/02/2026 17:00",
        sla_time_remaining="10d 8h",
        owner="Daniel Cooper",
        team="Large Market Support",
        created_date="03/02/2026",
        updated_date="08/02/2026",
        description=(
            "Embedded works request for meter replacement at NMI 3098765434. Current CT meter "
            "is due for scheduled replacement as per the compliance programme."
        ),
        pending_reason="3rd Party",
    ),
    CaseCreate(
        case_number="CS-2026-001790",
        account_id="acc-003",
        account_name="Mackay Sugar Mill Operations",
        type="Enquiry",
        sub_type="Rate Review",
        status="New",
        priority="Low",
        sla_status="On Track",
        sla_deadline="17/02/2026 17:00",
        sla_time_remaining="7d 2h",
        owner="John Smith",
        team="Large Market Support",
        created_date="05/02/2026",
        updated_date="05/02/2026",
        description=(
            "Customer requesting a review of their current rate schedule ahead of contract "
            "renewal in September 2027."
        ),
    ),
]
