"""Fixtures for the API tests."""

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app


@pytest.fixture
def client(monkeypatch):
    """Client for an app in persisted mode, backed by in-memory SQLite.

    The engine is created inside the app lifespan so every request runs on
    the same event loop as the connection.
    """
    monkeypatch.setattr(settings, "DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(settings, "REDIS_URL", None)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_client(monkeypatch):
    """Client for an app in mock mode (no DATABASE_URL)."""
    monkeypatch.setattr(settings, "DATABASE_URL", None)
    monkeypatch.setattr(settings, "REDIS_URL", None)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def case_payload():
    """Factory for a valid create body; keyword arguments override fields."""

    def make(**overrides):
        body = {
            "caseNumber": "CS-TEST-001",
            "accountId": "acc-001",
            "accountName": "Acme Manufacturing",
            "type": "Complaint",
            "subType": "Billing Dispute",
            "status": "New",
            "priority": "High",
            "slaStatus": "On Track",
            "slaDeadline": "2026-02-01T09:00:00Z",
            "slaTimeRemaining": "2d 4h",
            "owner": "Sarah Mitchell",
            "team": "Complaints",
            "createdDate": "2026-01-28T10:00:00Z",
            "updatedDate": "2026-01-28T10:00:00Z",
            "description": "Customer disputes the January invoice.",
            "resolution": "",
            "communications": [],
            "activities": [],
            "attachments": [],
            "relatedCases": [],
        }
        body.update(overrides)
        return body

    return make
