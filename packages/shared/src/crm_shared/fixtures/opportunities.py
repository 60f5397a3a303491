"""Sales pipeline opportunities used in mock mode."""

from typing import Dict, List, Optional

from crm_shared.schemas.customer import Opportunity, PipelineColumn, PipelineStage

_OPPORTUNITY_DATA = [
    dict(
        id="opp-001", name="Bowen Basin - Site Expansion Supply",
        account_id="acc-001", account_name="Bowen Basin Mining Corp",
        stage="Proposal", value=2_400_000, probability=60, owner="Priya Sharma",
        expected_close_date="31/03/2026", created_date="12/11/2025", updated_date="06/02/2026",
        description="Additional supply for the Peak Downs expansion from FY27.",
        competition="Origin Energy", energy_type="Electricity",
        annual_volume="4,000,000 kWh", contract_term="36 months",
        docu_sign_status="Not Started",
        linked_quotes=[dict(
            id="q-001", name="Peak Downs 36m fixed", value=2_400_000, status="Sent",
            created_date="20/01/2026", expiry_date="20/03/2026",
        )],
    ),
    dict(
        id="opp-002", name="Gladstone Aluminium - Gas Renewal",
        account_id="acc-002", account_name="Gladstone Aluminium Smelter",
        stage="Negotiation", value=5_100_000, probability=75, owner="Daniel Cooper",
        expected_close_date="30/04/2026", created_date="02/10/2025", updated_date="09/02/2026",
        description="Renewal of the gas component of the dual fuel contract.",
        competition="AGL", energy_type="Gas",
        annual_volume="8,200,000 MJ", contract_term="24 months",
        docu_sign_status="Sent",
    ),
    dict(
        id="opp-003", name="Mackay Sugar - Rate Review",
        account_id="acc-003", account_name="Mackay Sugar Mill Operations",
        stage="Discovery", value=650_000, probability=20, owner="John Smith",
        expected_close_date="30/09/2026", created_date="05/02/2026", updated_date="05/02/2026",
        description="Early renewal conversation ahead of the 2027 contract end.",
        competition="Unknown", energy_type="Electricity",
        annual_volume="8,750,000 kWh", contract_term="24 months",
        docu_sign_status="Not Started",
    ),
    dict(
        id="opp-004", name="Brisbane Convention Centre - Green Tariff",
        account_id="acc-004", account_name="Brisbane Convention Centre",
        stage="Qualification", value=420_000, probability=35, owner="Priya Sharma",
        expected_close_date="30/06/2026", created_date="14/01/2026", updated_date="03/02/2026",
        description="GreenPower uplift for the exhibition hall.",
        competition="Red Energy", energy_type="Dual Fuel",
        annual_volume="3,200,000 kWh", contract_term="12 months",
        docu_sign_status="Not Started",
    ),
    dict(
        id="opp-005", name="Townsville Port - Terminal Electrification",
        account_id="acc-005", account_name="Townsville Port Authority",
        stage="Closed Won", value=1_800_000, probability=100, owner="Daniel Cooper",
        expected_close_date="15/01/2026", created_date="01/08/2025", updated_date="15/01/2026",
        description="Shore power supply for the South Townsville terminal.",
        competition="Ergon", energy_type="Electricity",
        annual_volume="2,600,000 kWh", contract_term="60 months",
        docu_sign_status="Completed",
    ),
    dict(
        id="opp-006", name="MRES - Consolidated Billing",
        account_id="acc-mres-0123", account_name="MRES Site 123",
        stage="Closed Lost", value=300_000, probability=0, owner="John Smith",
        expected_close_date="20/12/2025", created_date="10/09/2025", updated_date="20/12/2025",
        description="Consolidated billing across MRES sites.",
        competition="Simply Energy", energy_type="Dual Fuel",
        annual_volume="5,000,000 kWh", contract_term="24 months",
        docu_sign_status="Viewed",
    ),
]

OPPORTUNITIES: List[Opportunity] = [Opportunity.model_validate(o) for o in _OPPORTUNITY_DATA]


def get_opportunity_by_id(opportunity_id: str) -> Optional[Opportunity]:
    return next((o for o in OPPORTUNITIES if o.id == opportunity_id), None)


def pipeline_columns(opportunities: Optional[List[Opportunity]] = None) -> List[PipelineColumn]:
    """Group opportunities into one column per stage, in stage order."""
    opportunities = OPPORTUNITIES if opportunities is None else opportunities
    by_stage: Dict[PipelineStage, List[Opportunity]] = {stage: [] for stage in PipelineStage}
    for opportunity in opportunities:
        by_stage[opportunity.stage].append(opportunity)
    return [
        PipelineColumn(
            stage=stage,
            total_value=sum(o.value for o in items),
            weighted_value=sum(o.value * o.probability / 100 for o in items),
            opportunities=items,
        )
        for stage, items in by_stage.items()
    ]
