"""Readiness checks for a candidate site folder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from shelfsite.constants import BOOKS_DIRNAME, CONFIG_FILENAME, TEMPLATE_FILES

if TYPE_CHECKING:
    from pathlib import Path

    from shelfsite.storage.protocols import StorageProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SiteValidation:
    """Outcome of inspecting a folder.

    ``is_valid`` always equals ``has_template_files``. ``has_config`` and
    ``has_books`` only carry meaning for a valid folder.
    """

    is_valid: bool
    has_template_files: bool
    has_config: bool
    has_books: bool
    missing_files: tuple[str, ...] = ()

    @property
    def is_ready(self) -> bool:
        return self.is_valid and self.has_config and self.has_books

    @property
    def needs_initialization(self) -> bool:
        return self.is_valid and not (self.has_config and self.has_books)

    def summary(self) -> str:
        if not self.is_valid:
            return "missing template files: " + ", ".join(self.missing_files)
        if not self.is_ready:
            return "missing data: " + ", ".join(self.missing_data())
        return "ready"

    def missing_data(self) -> list[str]:
        """Data entries an initialization would create."""
        missing = []
        if not self.has_config:
            missing.append(CONFIG_FILENAME)
        if not self.has_books:
            missing.append(f"{BOOKS_DIRNAME}/")
        return missing

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "hasTemplateFiles": self.has_template_files,
            "hasConfig": self.has_config,
            "hasBooks": self.has_books,
            "missingFiles": list(self.missing_files),
        }


def find_missing_template_files(storage: StorageProvider, site_root: Path) -> tuple[str, ...]:
    """Return every required template file absent from ``site_root``, in declared order."""
    return tuple(name for name in TEMPLATE_FILES if not storage.file_exists(site_root / name))


class SiteReadinessValidator:
    """Classify a folder as a ready site, a site needing data, or not a site."""

    def __init__(self, storage: StorageProvider) -> None:
        self.storage = storage

    def validate(self, path: Path) -> SiteValidation:
        """Inspect ``path`` without modifying anything.

        Storage failures propagate; an incomplete site is never an error.
        """
        missing = find_missing_template_files(self.storage, path)
        has_template_files = not missing
        validation = SiteValidation(
            is_valid=has_template_files,
            has_template_files=has_template_files,
            has_config=self.storage.file_exists(path / CONFIG_FILENAME),
            has_books=self.storage.is_directory(path / BOOKS_DIRNAME),
            missing_files=missing,
        )
        logger.debug("Validated %s: %s", path, validation.summary())
        return validation
