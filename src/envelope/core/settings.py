"""Application settings and configuration.

This module defines all configuration options for the Envelope backend.
Settings are loaded from environment variables (or an ``.env`` file) once at
process start and handed to :func:`envelope.main.create_app` explicitly.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Startup configuration loaded from environment variables."""

    # Application metadata
    app_name: str = Field(default="Envelope", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./envelope.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # HTTP server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    # Addresses trusted to set X-Forwarded-For (reverse proxies).
    forwarded_allow_ips: str = Field(default="*", alias="FORWARDED_ALLOW_IPS")

    # Rate limiting for submission routes: 15 requests per 60 minutes per client.
    submit_rate_limit: str = Field(default="15/hour", alias="SUBMIT_RATE_LIMIT")
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    rate_limit_storage_uri: str = Field(default="memory://", alias="RATE_LIMIT_STORAGE_URI")

    # Fetch window sizing
    fetch_default_count: int = Field(default=10, ge=1, alias="FETCH_DEFAULT_COUNT")
    fetch_max_count: int = Field(default=100, ge=1, alias="FETCH_MAX_COUNT")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    return Settings()
