#!/usr/bin/env python3
"""
Seed the cases table with demo data.

Each case is upserted on its case number with an empty update, so existing
rows are left untouched and the command can be re-run safely.

Usage:
    python -m app.seed
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv
from sqlalchemy.dialects import postgresql, sqlite
from uuid import uuid4

from crm_shared import database
from crm_shared.config import Settings
from crm_shared.fixtures import DEMO_CASES
from crm_shared.mapping import case_item_to_row
from crm_shared.models import Case

logger = logging.getLogger(__name__)

# dialect name -> INSERT construct supporting ON CONFLICT
_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def seed(session_factory, cases) -> int:
    """Upsert ``cases`` keyed on case number; returns how many were inserted."""
    created = 0
    async with session_factory() as db:
        insert = _INSERTS[db.get_bind().dialect.name]
        for case_create in cases:
            stmt = (
                insert(Case)
                .values(id=str(uuid4()), **case_item_to_row(case_create))
                .on_conflict_do_nothing(index_elements=[Case.case_number])
            )
            result = await db.execute(stmt)
            if result.rowcount:
                created += 1
            else:
                logger.info(f"[seed] {case_create.case_number} already present, skipping")
        await db.commit()
    return created


async def main() -> int:
    settings = Settings()
    if not settings.use_database:
        logger.error("DATABASE_URL is not set; nothing to seed")
        return 1

    database.configure_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await database.init_db()
        created = await seed(database.async_session, DEMO_CASES)
        logger.info(f"Seeded {created} cases ({len(DEMO_CASES) - created} already present)")
        return 0
    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        return 1
    finally:
        await database.dispose_engine()


if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    sys.exit(asyncio.run(main()))
