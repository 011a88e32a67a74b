"""Application environment for Shelfsite.

Supports environment variable overrides with the pattern
``SHELFSITE_<FIELD>`` (e.g., ``SHELFSITE_SETTINGS_PATH``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SETTINGS_PATH = Path("~/.config/shelfsite/settings.json")


class AppEnvironment(BaseSettings):
    """Where the settings document lives and how chatty logging is."""

    settings_path: Path = Field(
        default=DEFAULT_SETTINGS_PATH,
        description="JSON document holding the active site path",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the CLI",
    )

    model_config = SettingsConfigDict(
        env_prefix="SHELFSITE_",
        extra="ignore",
    )

    @field_validator("settings_path")
    @classmethod
    def expand_settings_path(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()
