"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or an optional .env file.

Files that USE this module:
- banguat.app (builds transport, clock and logging from settings)
- banguat.adapters.providers.soap (endpoint, namespace, timeout, TLS verification)

Files that this module USES:
- banguat.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from banguat.shared.validators import (
    validate_endpoint_url,  # Validate absolute http(s) URLs
    validate_timezone,  # Validate IANA time zone names
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Provider ---
    endpoint: str = Field(
        default="https://www.banguat.gob.gt/variables/ws/TipoCambio.asmx",
        alias="BANGUAT_ENDPOINT",
    )
    namespace: str = Field(
        default="http://www.banguat.gob.gt/variables/ws/",
        alias="BANGUAT_NAMESPACE",
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    verify_ssl: bool = Field(default=True, alias="BANGUAT_VERIFY_SSL")

    # --- Clock ---
    # Rates are published per Guatemala-local day
    timezone: str = Field(default="America/Guatemala", alias="BANGUAT_TIMEZONE")

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="BANGUAT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("endpoint", "namespace")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate provider URLs."""
        if not validate_endpoint_url(v):
            raise ValueError(f"Invalid URL: {v!r}")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_tz(cls, v: str) -> str:
        """Validate time zone name."""
        if not validate_timezone(v):
            raise ValueError(f"Unknown time zone: {v!r}")
        return v


# Global settings instance
settings = Settings()
