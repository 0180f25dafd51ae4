"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables
  - Fall back to a .env file
  - Validate types and constraints at startup

Only AppSettings is a BaseSettings instance. Sub-settings are plain BaseModel
classes populated via env_nested_delimiter="__", so READER__ACCOUNT_ID maps
to reader.account_id, READER__TRANSACTIONAL to reader.transactional, etc.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class ReaderDemoSettings(BaseModel):
    """
    Parameters of the balance pipeline run by the Reader demo.

    The pipeline reads the account, sets it to `initial_balance`, reads it
    again, multiplies it by `multiplier` and reads it a final time.
    """

    account_id: int = Field(default=1, ge=0, description="Account the pipeline operates on")
    initial_balance: float = Field(default=6.0, description="Balance written by the first update")
    multiplier: float = Field(default=7.0, description="Factor applied by the second update")
    transactional: bool = Field(
        default=False,
        description="Bracket every run in begin/commit/rollback",
    )

    @field_validator("initial_balance", "multiplier")
    @classmethod
    def validate_finite(cls, value: float) -> float:
        """Reject NaN and infinities, which cannot be formatted as an amount."""
        if not math.isfinite(value):
            raise ValueError(f"Must be a finite number, got {value!r}")
        return value


class AppSettings(BaseSettings):
    """
    Root application settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    reader: ReaderDemoSettings = Field(default_factory=lambda: ReaderDemoSettings())
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any standard logging level name, case-insensitively."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level
