"""Tests for the fixture-backed customer and pipeline endpoints."""

import pytest


def test_customer_endpoints_work_without_database(unconfigured_client):
    response = unconfigured_client.get("/api/orgs")
    assert response.status_code == 200
    assert [o["id"] for o in response.json()][:2] == ["org-001", "org-002"]


def test_org_detail_includes_accounts(unconfigured_client):
    org = unconfigured_client.get("/api/orgs/org-006").json()
    assert org["type"] == "Parent Company"
    assert {a["id"] for a in org["accounts"]} == {
        "acc-mres-0123",
        "acc-mres-0287",
        "acc-mres-0341",
        "acc-mres-0456",
    }


def test_accounts_filtered_by_org(unconfigured_client):
    accounts = unconfigured_client.get("/api/accounts", params={"orgId": "org-001"}).json()
    assert [a["id"] for a in accounts] == ["acc-001"]
    assert accounts[0]["primaryContact"]["name"] == "James Whitfield"
    assert "linkedAccountIds" not in accounts[0]


def test_linked_accounts_reference_each_other(unconfigured_client):
    account = unconfigured_client.get("/api/accounts/acc-mres-0123").json()
    assert account["linkedAccountIds"] == ["acc-mres-0287", "acc-mres-0341", "acc-mres-0456"]


def test_contact_lookup_returns_owning_account(unconfigured_client):
    found = unconfigured_client.get("/api/contacts/con-002").json()
    assert found["contact"]["name"] == "Sarah Chen"
    assert found["account"]["id"] == "acc-001"


def test_contacts_list_pairs_every_contact(unconfigured_client):
    pairs = unconfigured_client.get("/api/contacts").json()
    assert all(p["contact"]["id"] and p["account"]["id"] for p in pairs)
    assert any(p["contact"]["id"] == "con-mres-001" for p in pairs)


def test_opportunities_filtered_by_stage(unconfigured_client):
    response = unconfigured_client.get("/api/opportunities", params={"stage": "Negotiation"})
    assert [o["id"] for o in response.json()] == ["opp-002"]


def test_opportunities_rejects_unknown_stage(unconfigured_client):
    response = unconfigured_client.get("/api/opportunities", params={"stage": "Won"})
    assert response.status_code == 422


def test_pipeline_has_a_column_per_stage(unconfigured_client):
    columns = unconfigured_client.get("/api/pipeline").json()
    assert [c["stage"] for c in columns] == [
        "Discovery",
        "Qualification",
        "Proposal",
        "Negotiation",
        "Closed Won",
        "Closed Lost",
    ]
    negotiation = columns[3]
    assert negotiation["totalValue"] == 5_100_000
    assert negotiation["weightedValue"] == pytest.approx(3_825_000)


def test_case_type_catalog(unconfigured_client):
    catalog = unconfigured_client.get("/api/case-types").json()
    assert "Billing & Invoicing" in catalog["groups"]
    assert catalog["groupToType"]["Credit & Collections"] == "Dunning"
    assert catalog["groupToReason"]["Metering & Data Issues"] == "Meter Issue"
    assert "Other" in catalog["reasons"]
    for group, types in catalog["groups"].items():
        for case_type in types:
            assert case_type in catalog["typeToGroup"]


@pytest.mark.parametrize(
    "path",
    [
        "/api/orgs/org-999",
        "/api/accounts/acc-999",
        "/api/contacts/con-999",
        "/api/opportunities/opp-999",
    ],
)
def test_unknown_ids_return_null_404(unconfigured_client, path):
    response = unconfigured_client.get(path)
    assert response.status_code == 404
    assert response.json() is None
