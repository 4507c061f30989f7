"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() to share one instance across the process.

Usage:
    from backend.settings import get_settings, Settings

    settings = get_settings()
    print(settings.workouts_path)

    # Test settings without reading .env
    settings = Settings(environment="test", data_dir=tmp_path, _env_file=None)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------
    data_dir: Path = Field(
        default=Path("~/.fitness"),
        description="Private directory holding the persisted workouts document",
    )
    workouts_file_name: str = Field(
        default="workouts.json",
        description="File name of the persisted workouts document",
    )

    # -------------------------------------------------------------------------
    # Observability
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @field_validator("workouts_file_name")
    @classmethod
    def validate_workouts_file_name(cls, v: str) -> str:
        """The document must live directly inside data_dir."""
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"Invalid workouts file name '{v}'")
        return v

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def data_path(self) -> Path:
        """Data directory with ~ expanded."""
        return self.data_dir.expanduser()

    @property
    def workouts_path(self) -> Path:
        """Full path of the persisted workouts document."""
        return self.data_path / self.workouts_file_name


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
