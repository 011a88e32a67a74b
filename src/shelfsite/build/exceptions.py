"""Exceptions raised by the content build pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from shelfsite.exceptions import ShelfsiteError

if TYPE_CHECKING:
    from pathlib import Path


class BuildError(ShelfsiteError):
    """Base exception for fatal build errors."""


class TemplateFilesMissingError(BuildError):
    """Raised when required template files are absent from the site root."""

    def __init__(self, site_root: Path, missing_files: Sequence[str]) -> None:
        self.site_root = site_root
        self.missing_files = tuple(missing_files)
        super().__init__(f"Missing template files in '{site_root}': {', '.join(self.missing_files)}")


class BuildDestinationError(BuildError):
    """Raised when the bundle directory cannot be cleared or created, or would overlap site data."""

    def __init__(self, bundle_root: Path, reason: str) -> None:
        self.bundle_root = bundle_root
        self.reason = reason
        super().__init__(f"Cannot use bundle directory '{bundle_root}': {reason}")

