"""
Centralized configuration for the Taskboard backend.

All settings are loaded from environment variables with sensible defaults.
Auth settings are namespaced (JWT_*, BCRYPT_*).
"""

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Used only outside production when JWT_SECRET is unset.
DEVELOPMENT_JWT_SECRET = "taskboard-development-secret-change-me"

SEVEN_DAYS = 7 * 24 * 60 * 60


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Taskboard API"
    app_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Auth
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = SEVEN_DAYS
    bcrypt_rounds: int = 10

    # Record store (empty path keeps records in memory)
    database_path: str = "taskboard.db.json"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")


def resolve_jwt_secret(settings: Settings) -> str:
    """
    Return the signing secret, failing closed in production.

    Raises:
        ConfigurationError: If no secret is configured in production.
    """
    if settings.jwt_secret:
        return settings.jwt_secret

    if settings.is_production:
        raise ConfigurationError(
            "JWT_SECRET must be set when ENVIRONMENT is production",
            code="MISSING_JWT_SECRET",
        )

    logger.warning(
        "JWT_SECRET is not set; using the development signing key. "
        "Tokens issued now are forgeable by anyone who has the source."
    )
    return DEVELOPMENT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
