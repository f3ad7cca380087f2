"""
Configuration management for content_type_hub.

Environment-based settings using Pydantic BaseSettings. Values are read from
environment variables with the CTH_ prefix (LOG_LEVEL is read without prefix)
and, optionally, from a .env file at the project root or the path named by
CTH_ENV_FILE.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("CTH_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the CTH_ prefix. For example,
    CTH_BASELINE_CONTENT_TYPE overrides the baseline_content_type setting.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    log_format: Literal["json", "console"] = Field(
        default="json", description="Structured log renderer"
    )
    log_to_file: bool = Field(default=False, description="Also write logs to a file")
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    baseline_content_type: str = Field(
        default="post",
        description="Builtin content type whose supports seed every custom type",
    )
    content_types_config: str = Field(
        default="./config/content_types.yml",
        description="Path to the content type provider entries",
    )
    checkbox_markup: str = Field(
        default='<input type="checkbox" />',
        description="Markup injected for the list-table selection column",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @field_validator("baseline_content_type")
    @classmethod
    def validate_baseline(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Baseline content type cannot be empty")
        return v.strip()

    model_config = SettingsConfigDict(
        env_prefix="CTH_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
