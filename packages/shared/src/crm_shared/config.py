"""Unified configuration for the CRM backend and its tooling."""

from pydantic_settings import BaseSettings
from typing import Optional
import logging


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The backend and the seed command both read this configuration so that
    persisted mode and mock mode are selected the same way everywhere.
    """

    # ===== DATABASE =====
    DATABASE_URL: Optional[str] = None
    """Relational store connection string. Unset means mock mode."""

    DATABASE_ECHO: bool = False
    """Enable SQLAlchemy echo for SQL debugging."""

    # ===== REDIS =====
    REDIS_URL: Optional[str] = None
    """Redis connection string for persisted UI preferences (optional)."""

    # ===== PREFERENCES =====
    DENSITY_STORAGE_KEY: str = "tally-density-preference"
    """Storage key holding the pinned density mode."""

    THEME_STORAGE_KEY: str = "theme-mode"
    """Storage key holding the theme mode."""

    # ===== LOGGING =====
    LOG_LEVEL: str = logging.getLevelName(logging.INFO)
    """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""

    LOG_JSON: bool = False
    """Emit log records as JSON lines."""

    # ===== APPLICATION =====
    ENV: str = "development"
    """Environment: development, staging, production."""

    DEBUG: bool = False
    """Enable debug mode."""

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def use_database(self) -> bool:
        """True when a database connection string is configured."""
        return bool(self.DATABASE_URL)


def normalize_database_url(url: str) -> str:
    """Map plain driver URLs onto the async drivers used by the engine.

    ``file:./dev.db`` style SQLite paths are accepted as well.
    """
    if url.startswith("file:"):
        return "sqlite+aiosqlite:///" + url[len("file:"):]
    if url.startswith("sqlite://"):
        return "sqlite+aiosqlite://" + url[len("sqlite://"):]
    if url.startswith("postgres://"):
        return "postgresql+asyncpg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+asyncpg://" + url[len("postgresql://"):]
    return url


# Singleton instance
settings = Settings()

__all__ = ["Settings", "settings", "normalize_database_url"]
