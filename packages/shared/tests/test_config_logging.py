"""Tests for settings, database URL handling and logging setup."""

import json
import logging

import pytest

from crm_shared.config import Settings, normalize_database_url
from crm_shared.utils.logging import JSONFormatter, setup_logging


@pytest.mark.parametrize(
    "url,expected",
    [
        ("file:./dev.db", "sqlite+aiosqlite:///./dev.db"),
        ("sqlite:///crm.db", "sqlite+aiosqlite:///crm.db"),
        ("postgres://u:p@db/crm", "postgresql+asyncpg://u:p@db/crm"),
        ("postgresql://u:p@db/crm", "postgresql+asyncpg://u:p@db/crm"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_settings_mock_mode_without_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.use_database is False
    assert settings.DENSITY_STORAGE_KEY == "tally-density-preference"


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "file:./dev.db")
    assert Settings(_env_file=None).use_database is True


def test_setup_logging_is_idempotent():
    logger = setup_logging("crm-test", level=logging.DEBUG)
    setup_logging("crm-test", level=logging.DEBUG)
    installed = [h for h in logger.handlers if getattr(h, "_crm_handler", False)]
    assert len(installed) == 1
    assert logger.level == logging.DEBUG


def test_json_formatter_outputs_record_fields():
    record = logging.LogRecord("crm", logging.WARNING, __file__, 10, "[db] %s", ("slow",), None)
    data = json.loads(JSONFormatter().format(record))
    assert data["level"] == "WARNING"
    assert data["message"] == "[db] slow"
    assert data["logger"] == "crm"
