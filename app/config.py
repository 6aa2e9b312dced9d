# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DATABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default, so the app starts with no
    configuration at all and stores tasks in ./tasks.db.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------

    DATABASE_URL: str = Field(
        default="sqlite:///./tasks.db",
        description="SQLAlchemy database URL for the tasks table"
    )

    # Connection pool policy. Each request holds one connection for its
    # whole duration, so DB_POOL_SIZE + DB_MAX_OVERFLOW bounds the number of
    # requests touching the database at the same time.

    DB_POOL_SIZE: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Connections kept open in the pool"
    )

    DB_MAX_OVERFLOW: int = Field(
        default=10,
        ge=0,
        le=100,
        description="Extra connections allowed above DB_POOL_SIZE under load"
    )

    DB_POOL_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        le=600,
        description="Seconds a request waits for a free connection before failing"
    )

    DB_POOL_PRE_PING: bool = Field(
        default=True,
        description="Test connections for liveness on checkout"
    )

    DB_ECHO: bool = Field(
        default=False,
        description="Log every SQL statement (very verbose)"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Login
    # -------------------------------------------------------------------------
    # The demo login hands out one of two fixed bearer tokens. Any token
    # containing "admin" is treated as an administrator by the guards.

    ADMIN_PASSWORD: str = Field(
        default="admin",
        min_length=1,
        description="Password that yields the administrator token"
    )

    ADMIN_TOKEN: str = Field(
        default="admin",
        min_length=1,
        description="Token returned for the administrator password"
    )

    GUEST_TOKEN: str = Field(
        default="hugo",
        min_length=1,
        description="Token returned for any other password"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
