"""
Configuration: typed, validated settings loaded from environment/.env.

Uses pydantic-settings so that a host application can tune the library's
logging without code changes:

    REMOTE_DATA_LOG_LEVEL=DEBUG
    REMOTE_DATA_LOG_FORMAT=json

Invalid values fail at construction, not when the first log line is written.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RemoteDataSettings(BaseSettings):
    """
    Settings for the remote_data package.

    Load order (highest priority first):
      1. Environment variables (REMOTE_DATA_ prefix)
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_DATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Minimum level of emitted log events")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="console: human-readable lines, json: one JSON object per line",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only names the logging module knows (case-insensitive)."""
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
