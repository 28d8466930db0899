"""
Configuration management for date range validation.

This module provides environment-based configuration using Pydantic BaseSettings,
so hosts can set default boundaries, the malformed-date short-circuit scope and
logging behaviour without code changes.

Environment variables are loaded with the DRV_ prefix, e.g. DRV_LOG_LEVEL or
DRV_LAST_ALLOWED_DATE=today.
"""

import logging
import os
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Literal, Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from date_range_validation.utils.dates import TODAY

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("DRV_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

BoundarySetting = Union[date, Literal["today"], None]


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Boundaries configured here are only defaults: a machine constructed with
    explicit boundaries ignores them.

    Fields:
    - log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - log_json: Render structured logs as JSON (False renders console output)
    - first_allowed_date: Default earliest selectable day (YYYY-MM-DD)
    - last_allowed_date: Default latest selectable day (YYYY-MM-DD or "today")
    - format_scope: "field" or "pair", how far a malformed date short-circuits
    """

    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(
        default=True, description="Render structured logs as JSON lines"
    )

    first_allowed_date: BoundarySetting = Field(
        default=None, description="Default first allowed day (None = no bound)"
    )
    last_allowed_date: BoundarySetting = Field(
        default=None,
        description="Default last allowed day; 'today' resolves at construction",
    )

    format_scope: Literal["field", "pair"] = Field(
        default="field",
        description="Skip rules reading a malformed field, or every rule of the pair",
    )

    model_config = SettingsConfigDict(
        env_prefix="DRV_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level_name = v.strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level: {v}")
        return level_name

    @field_validator("first_allowed_date", "last_allowed_date", mode="before")
    @classmethod
    def normalize_boundary(cls, v: object) -> object:
        """Treat blank strings as unset and accept 'today' case-insensitively."""
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return None
            if stripped.lower() == TODAY:
                return TODAY
            return stripped
        return v

    @model_validator(mode="after")
    def validate_boundary_order(self) -> "Settings":
        """Reject configured defaults where the first day falls after the last."""
        first = self.first_allowed_date
        last = self.last_allowed_date
        if first is None or last is None:
            return self
        last_day = date.today() if last == TODAY else last
        first_day = date.today() if first == TODAY else first
        if first_day > last_day:
            raise ValueError(
                f"first_allowed_date {first_day.isoformat()} is after "
                f"last_allowed_date {last_day.isoformat()}"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
