"""
Configuration management for SQLForge.

This module provides environment-based configuration using Pydantic BaseSettings.
The builder itself is pure computation, so the only knobs are the default
dialect and how rendered statements are logged.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def resolve_env_file(override: Optional[str]) -> Optional[str]:
    """
    Path of the .env file to read, or None to read the environment only.

    The package is usually installed into site-packages, where no project
    .env lives, so a file is only read when SQLFORGE_ENV_FILE names one.
    Relative paths resolve against the working directory.
    """
    if not override:
        return None
    return str(Path(override).expanduser().resolve())


SETTINGS_ENV_FILE = resolve_env_file(os.getenv("SQLFORGE_ENV_FILE"))

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the SQLFORGE_ prefix. For example,
    SQLFORGE_DIALECT=sqlite switches the default builder to the SQLite
    placeholder style.

    LOG_LEVEL is read without prefix so it can be shared with the host
    application.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    dialect: Literal["postgres", "sqlite"] = Field(
        default="postgres",
        description="Dialect used by statements that were not created through a Builder",
    )

    # Logging configuration
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(default="logs", description="Directory for log files")
    log_sql: bool = Field(
        default=True,
        description="Emit a debug event for every rendered statement",
    )
    log_values: bool = Field(
        default=False,
        description="Include bound parameter values in rendered-statement events",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        """Uppercase the level name and reject names logging does not know."""
        text = str(value).strip().upper()
        if text not in LOG_LEVEL_NAMES:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVEL_NAMES)}, got: {value!r}"
            )
        return text

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for the stdlib handlers."""
        return getattr(logging, self.LOG_LEVEL, logging.INFO)

    model_config = SettingsConfigDict(
        env_prefix="SQLFORGE_",
        env_file=SETTINGS_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache so settings are loaded once and reused across the
    application lifecycle. Tests call ``get_settings.cache_clear()`` after
    changing the environment.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
