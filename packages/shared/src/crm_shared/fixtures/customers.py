"""Orgs, accounts and contacts used in mock mode."""

from typing import List, Optional

from crm_shared.schemas.customer import Account, ContactWithAccount, Org


def _contact(id, name, role, email, phone, is_primary=False, **extra) -> dict:
    return dict(id=id, name=name, role=role, email=email, phone=phone, is_primary=is_primary, **extra)


ORGS: List[Org] = [
    Org(id="org-001", name="Bowen Basin Mining Corp"),
    Org(id="org-002", name="Gladstone Aluminium"),
    Org(id="org-003", name="Mackay Sugar"),
    Org(id="org-004", name="Brisbane Convention Centre"),
    Org(id="org-005", name="Townsville Port Authority"),
    Org(id="org-006", name="Melbourne Recycled Energy Solutions", type="Parent Company"),
]

_whitfield = _contact(
    "con-001", "James Whitfield", "Energy Manager",
    "j.whitfield@bowenbasin.com.au", "07 4921 3300", True,
)
_torres = _contact(
    "con-003", "Michael Torres", "Procurement Manager",
    "m.torres@gladstone-aluminium.com.au", "07 4972 1100", True,
)
_patterson = _contact(
    "con-005", "David Patterson", "Operations Director",
    "d.patterson@mackaysugar.com.au", "07 4944 2500", True,
)
_foster = _contact(
    "con-006", "Amanda Foster", "Facilities Manager",
    "a.foster@brisbanecc.com.au", "07 3308 3000", True,
    create_date="16/07/2025 7:49 AM AEST", lifecycle_stage="Subscriber",
)
_mitchell = _contact(
    "con-008", "Karen Mitchell", "Infrastructure Manager",
    "k.mitchell@townsvilleport.com.au", "07 4781 1500", True,
)

_ACCOUNT_DATA = [
    dict(
        id="acc-001", org_id="org-001", name="Bowen Basin Mining Corp",
        account_number="LM-0045721", type="Industrial", status="Active",
        sites=[
            {"id": "site-acc001-1", "name": "Moranbah Main Site"},
            {"id": "site-acc001-2", "name": "Peak Downs"},
        ],
        nmis=["3012345678", "3012345679"], energy_type="Electricity",
        primary_contact=_whitfield,
        contacts=[
            _whitfield,
            _contact("con-002", "Sarah Chen", "Finance Director", "s.chen@bowenbasin.com.au", "07 4921 3301"),
        ],
        address="145 Mining Access Rd, Moranbah QLD 4744",
        annual_consumption="12,500,000 kWh", account_balance="-$45,230.00",
        last_payment_date="28/01/2026", last_payment_amount="$187,500.00",
        contract_end_date="30/06/2027",
    ),
    dict(
        id="acc-002", org_id="org-002", name="Gladstone Aluminium Smelter",
        account_number="LM-0045890", type="Industrial", status="Active",
        sites=[
            {"id": "site-acc002-1", "name": "Boyne Island Smelter"},
            {"id": "site-acc002-2", "name": "Power Station"},
        ],
        nmis=["3098765432", "3098765433", "3098765434"], energy_type="Dual Fuel",
        primary_contact=_torres,
        contacts=[
            _torres,
            _contact(
                "con-004", "Rebecca Liu", "Sustainability Officer",
                "r.liu@gladstone-aluminium.com.au", "07 4972 1102",
            ),
        ],
        address="1 Smelter Rd, Boyne Island QLD 4680",
        annual_consumption="45,000,000 kWh / 8,200,000 MJ", account_balance="$0.00",
        last_payment_date="05/02/2026", last_payment_amount="$1,245,000.00",
        contract_end_date="31/12/2026",
    ),
    dict(
        id="acc-003", org_id="org-003", name="Mackay Sugar Mill Operations",
        account_number="LM-0046102", type="Industrial", status="Active",
        sites=[{"id": "site-acc003-1", "name": "Racecourse Mill"}],
        nmis=["3054321098"], energy_type="Electricity",
        primary_contact=_patterson, contacts=[_patterson],
        address="42 Mill Rd, Racecourse QLD 4740",
        annual_consumption="8,750,000 kWh", account_balance="-$12,400.00",
        last_payment_date="15/01/2026", last_payment_amount="$95,000.00",
        contract_end_date="30/09/2027",
    ),
    dict(
        id="acc-004", org_id="org-004", name="Brisbane Convention Centre",
        account_number="LM-0046350", type="Commercial", status="Active",
        sites=[
            {"id": "site-acc004-1", "name": "South Brisbane Convention Centre"},
            {"id": "site-acc004-2", "name": "Exhibition Hall"},
        ],
        nmis=["3067890123", "3067890124"], energy_type="Dual Fuel",
        primary_contact=_foster,
        contacts=[
            _foster,
            _contact("con-007", "Tom Richards", "CFO", "t.richards@brisbanecc.com.au", "07 3308 3001"),
        ],
        address="Merivale St, South Brisbane QLD 4101",
        annual_consumption="3,200,000 kWh / 1,450,000 MJ", account_balance="-$8,200.00",
        last_payment_date="01/02/2026", last_payment_amount="$42,000.00",
        contract_end_date="28/02/2027",
    ),
    dict(
        id="acc-005", org_id="org-005", name="Townsville Port Authority",
        account_number="LM-0046510", type="Industrial", status="Active",
        sites=[
            {"id": "site-acc005-1", "name": "South Townsville Terminal"},
            {"id": "site-acc005-2", "name": "Bulk Handling"},
            {"id": "site-acc005-3", "name": "Administration"},
        ],
        nmis=["3045678901", "3045678902", "3045678903"], energy_type="Electricity",
        primary_contact=_mitchell, contacts=[_mitchell],
        address="Benwell Rd, South Townsville QLD 4810",
        annual_consumption="6,800,000 kWh", account_balance="$0.00",
        last_payment_date="10/02/2026", last_payment_amount="$78,500.00",
        contract_end_date="30/06/2028",
    ),
]


def _mres_accounts() -> List[dict]:
    """Melbourne Recycled Energy Solutions: linked accounts sharing staff."""
    staff = [
        _contact("con-mres-001", "Emma Richardson", "Operations Manager", "e.richardson@mres.com.au", "03 8642 1001"),
        _contact("con-mres-002", "Liam O'Brien", "Site Coordinator", "l.obrien@mres.com.au", "03 8642 1002"),
        _contact("con-mres-003", "Olivia Chen", "Energy Analyst", "o.chen@mres.com.au", "03 8642 1003"),
        _contact("con-mres-004", "Noah Williams", "Account Manager", "n.williams@mres.com.au", "03 8642 1004"),
    ]
    account_numbers = [123, 287, 341, 456]
    types = ["Industrial", "Commercial", "Residential"]
    energy_types = ["Electricity", "Gas", "Dual Fuel"]
    ids = [f"acc-mres-{n:04d}" for n in account_numbers]

    accounts = []
    for i, number in enumerate(account_numbers):
        primary = dict(staff[i], is_primary=True)
        accounts.append(dict(
            id=ids[i], org_id="org-006", name=f"MRES Site {number}",
            account_number=f"VM-{number:07d}", type=types[i % len(types)], status="Active",
            sites=[{"id": f"site-mres-{number}", "name": f"Dandenong Plant {i + 1}"}],
            nmis=[f"61020{number:05d}"], energy_type=energy_types[i % len(energy_types)],
            primary_contact=primary,
            contacts=[primary] + [c for j, c in enumerate(staff) if j != i],
            address=f"{10 + i} Recycling Way, Dandenong South VIC 3175",
            annual_consumption=f"{(i + 1) * 1_250_000:,} kWh", account_balance="$0.00",
            last_payment_date="03/02/2026", last_payment_amount=f"${(i + 1) * 12_000:,}.00",
            contract_end_date="31/03/2028",
            linked_account_ids=[other for other in ids if other != ids[i]],
        ))
    return accounts


ACCOUNTS: List[Account] = [Account.model_validate(a) for a in _ACCOUNT_DATA + _mres_accounts()]


def get_org_by_id(org_id: str) -> Optional[Org]:
    return next((o for o in ORGS if o.id == org_id), None)


def get_account_by_id(account_id: str) -> Optional[Account]:
    return next((a for a in ACCOUNTS if a.id == account_id), None)


def get_accounts_by_org_id(org_id: str) -> List[Account]:
    return [a for a in ACCOUNTS if a.org_id == org_id]


def get_all_contacts_with_account() -> List[ContactWithAccount]:
    return [
        ContactWithAccount(contact=contact, account=account)
        for account in ACCOUNTS
        for contact in account.contacts
    ]


def get_contact_with_account(contact_id: str) -> Optional[ContactWithAccount]:
    """First account listing the contact (contacts may be shared)."""
    for account in ACCOUNTS:
        for contact in account.contacts:
            if contact.id == contact_id:
                return ContactWithAccount(contact=contact, account=account)
    return None

