"""Persistence of the process-wide settings document (the active site).

The document is ``{"libraryPath": string | null}``. It is read once at startup
and written only when a site is activated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from shelfsite.config.exceptions import ConfigLoadError
from shelfsite.config.model import AppSettings
from shelfsite.storage.protocols import StorageProvider

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    """Load and save :class:`AppSettings`."""

    def load(self) -> AppSettings:
        """Return the persisted settings, or defaults if none were saved."""

    def save(self, settings: AppSettings) -> None:
        """Persist ``settings``."""


class JsonSettingsStore:
    """Durable settings store: a JSON document written through a StorageProvider."""

    def __init__(self, storage: StorageProvider, path: Path) -> None:
        self.storage = storage
        self.path = path

    def load(self) -> AppSettings:
        if not self.storage.file_exists(self.path):
            logger.debug("No settings document at %s, using defaults", self.path)
            return AppSettings()
        raw = self.storage.read_file(self.path)
        try:
            return AppSettings.model_validate_json(raw)
        except ValidationError as e:
            raise ConfigLoadError(self.path, str(e)) from e

    def save(self, settings: AppSettings) -> None:
        self.storage.write_file(self.path, settings.to_json().encode("utf-8"))
        logger.info("Saved settings to %s", self.path)


class InMemorySettingsStore:
    """Settings held in memory only."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings.model_copy() if settings else AppSettings()
        self.save_count = 0

    def load(self) -> AppSettings:
        return self._settings.model_copy()

    def save(self, settings: AppSettings) -> None:
        self._settings = settings.model_copy()
        self.save_count += 1
