"""Async engine and session management.

The engine only exists in persisted mode. Until ``configure_engine`` has
been called every session request fails with ``StoreUnavailable``.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool
from typing import AsyncGenerator, Optional
import logging

from crm_shared.config import normalize_database_url
from crm_shared.models import Base
from crm_shared.utils.errors import StoreUnavailable

logger = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None
async_session: Optional[async_sessionmaker] = None


def configure_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine and session factory for ``url``."""
    global engine, async_session

    url = normalize_database_url(url)
    kwargs = {"echo": echo, "future": True}
    if url.startswith("sqlite") and ":memory:" in url:
        # one shared connection, otherwise every session sees an empty database
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    elif url.startswith("postgresql+asyncpg"):
        kwargs["poolclass"] = NullPool
        kwargs["connect_args"] = {"server_settings": {"application_name": "tally-crm"}}
    else:
        kwargs["poolclass"] = NullPool

    engine = create_async_engine(url, **kwargs)
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info(f"[db] Engine configured for {engine.url.render_as_string(hide_password=True)}")
    return engine


async def dispose_engine():
    """Dispose the engine and return to unconfigured (mock) mode."""
    global engine, async_session

    if engine is not None:
        await engine.dispose()
        logger.info("[db] Engine disposed")
    engine = None
    async_session = None


def is_configured() -> bool:
    return async_session is not None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database session"""
    if async_session is None:
        raise StoreUnavailable()
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Initialize database tables"""
    if engine is None:
        raise StoreUnavailable()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[db] Tables created")


__all__ = [
    "configure_engine",
    "dispose_engine",
    "is_configured",
    "get_db",
    "init_db",
]
