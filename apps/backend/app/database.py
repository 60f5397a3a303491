"""Database module - re-exports from shared package."""

from crm_shared.database import configure_engine, dispose_engine, get_db, init_db, is_configured

__all__ = ["configure_engine", "dispose_engine", "get_db", "init_db", "is_configured"]
