"""Tests for the demo data seed command."""

import pytest
import pytest_asyncio
from sqlalchemy.future import select

from app import seed
from crm_shared import database
from crm_shared.config import Settings
from crm_shared.fixtures import DEMO_CASES
from crm_shared.mapping import case_row_to_item
from crm_shared.models import Case


@pytest_asyncio.fixture
async def memory_db():
    database.configure_engine("sqlite+aiosqlite:///:memory:")
    await database.init_db()
    yield database.async_session
    await database.dispose_engine()


@pytest.mark.asyncio
async def test_seed_inserts_demo_cases_once(memory_db):
    assert await seed.seed(memory_db, DEMO_CASES) == len(DEMO_CASES)
    assert await seed.seed(memory_db, DEMO_CASES) == 0

    async with memory_db() as db:
        rows = (await db.execute(select(Case))).scalars().all()
    assert sorted(r.case_number for r in rows) == sorted(c.case_number for c in DEMO_CASES)

    stored = next(case_row_to_item(r) for r in rows if r.case_number == "CS-2026-001847")
    assert stored.communications[0].from_ == "j.whitfield@bowenbasin.com.au"
    assert stored.related_cases == ["CS-2026-001790"]


@pytest.mark.asyncio
async def test_seed_main_without_database(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(seed, "Settings", lambda: Settings(_env_file=None))
    assert await seed.main() == 1


@pytest.mark.asyncio
async def test_seed_leaves_existing_case_untouched(memory_db):
    edited = DEMO_CASES[0].model_copy(update={"owner": "Someone Else"})
    assert await seed.seed(memory_db, [edited]) == 1

    assert await seed.seed(memory_db, DEMO_CASES) == len(DEMO_CASES) - 1

    async with memory_db() as db:
        stmt = select(Case).where(Case.case_number == edited.case_number)
        row = (await db.execute(stmt)).scalar_one()
    assert row.owner == "Someone Else"
