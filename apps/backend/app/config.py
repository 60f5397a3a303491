"""Backend-specific configuration extending shared settings."""

from crm_shared import Settings as SharedSettings
from typing import List


class Settings(SharedSettings):
    """Backend application settings extending shared configuration.

    This class extends the shared Settings to add backend-specific
    configuration while maintaining consistency for shared settings.
    """

    # ===== API SETTINGS =====
    API_TITLE: str = "Tally CRM API"
    """Title shown in the OpenAPI docs."""

    API_HOST: str = "localhost"
    """API host address."""

    API_PORT: int = 8000
    """API port number."""

    # ===== CORS =====
    CORS_ORIGINS: List[str] = ["*"]
    """Origins allowed to call the API from a browser."""

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Singleton instance
settings = Settings()
