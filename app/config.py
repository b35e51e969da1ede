# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.database_url)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Database credentials live here and nowhere else - never hardcode them.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Database Connection
    # -------------------------------------------------------------------------
    # Either set DATABASE_URL, or the individual DB_* parts below

    DATABASE_URL: str | None = Field(
        default=None,
        description="Full SQLAlchemy database URL (overrides the DB_* parts)"
    )

    DB_DRIVER: str = Field(
        default="postgresql+psycopg",
        description="SQLAlchemy dialect+driver name"
    )

    DB_HOST: str = Field(default="localhost")

    DB_PORT: int = Field(default=5432, ge=1, le=65535)

    DB_USER: str = Field(default="postgres")

    DB_PASSWORD: str = Field(
        default="",
        description="Database password (set via environment or secrets store)"
    )

    DB_NAME: str = Field(default="todos")

    DB_SSLMODE: str = Field(
        default="disable",
        description="libpq sslmode for PostgreSQL connections"
    )

    # -------------------------------------------------------------------------
    # Connection Pool & Timeouts
    # -------------------------------------------------------------------------

    DB_POOL_SIZE: int = Field(default=5, ge=1, le=100)

    DB_MAX_OVERFLOW: int = Field(default=10, ge=0, le=100)

    DB_POOL_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for a pooled connection"
    )

    DB_CONNECT_TIMEOUT: int = Field(
        default=5,
        ge=1,
        description="Seconds to wait when opening a new connection"
    )

    DB_STATEMENT_TIMEOUT_MS: int = Field(
        default=5000,
        ge=0,
        description="Server-side statement timeout in ms (PostgreSQL only, 0 disables)"
    )

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    PERSON_TABLE: str = Field(
        default="person",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Table holding person records"
    )

    CREDENTIAL_TABLE: str = Field(
        default="role",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Table holding username/password pairs"
    )

    # -------------------------------------------------------------------------
    # Behaviour Flags
    # -------------------------------------------------------------------------

    MISSING_PERSON_IS_NOT_FOUND: bool = Field(
        default=True,
        description="Return 404 for update/delete of an unknown id (false = silent success)"
    )

    LOGIN_RETURNS_PERSON_LIST: bool = Field(
        default=True,
        description="Successful login returns every person (false = only the username)"
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
        default=3000,
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
    # TLS
    # -------------------------------------------------------------------------
    # Certificate and key are provisioned out of band

    TLS_CERT_FILE: str | None = Field(default=None, description="Path to server.crt")

    TLS_KEY_FILE: str | None = Field(default=None, description="Path to server.key")

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def database_url(self) -> URL:
        """
        Build the SQLAlchemy URL.

        URL.create escapes the password, so special characters are safe.
        """
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query={"sslmode": self.DB_SSLMODE} if self.DB_SSLMODE else {},
        )

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def tls_enabled(self) -> bool:
        """TLS is on only when both the certificate and the key are configured."""
        return bool(self.TLS_CERT_FILE and self.TLS_KEY_FILE)

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
    not on every access. This is the recommended pattern for
    pydantic-settings.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
