"""Custom exceptions for configuration handling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shelfsite.exceptions import ShelfsiteError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(ShelfsiteError):
    """Base exception for all configuration-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when a site has no config document."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Site configuration not found at '{path}'")


class ConfigLoadError(ConfigError):
    """Raised when a config or settings document cannot be parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")
