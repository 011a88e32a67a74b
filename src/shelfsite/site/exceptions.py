"""Exceptions for site validation, initialization and activation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shelfsite.exceptions import ShelfsiteError

if TYPE_CHECKING:
    from pathlib import Path

    from shelfsite.site.validation import SiteValidation


class ProvisioningError(ShelfsiteError):
    """Base exception for provisioning errors."""


class SiteNotReadyError(ProvisioningError):
    """Raised when activating a site whose template files, config or books are missing."""

    def __init__(self, site_root: Path, validation: SiteValidation) -> None:
        self.site_root = site_root
        self.validation = validation
        super().__init__(f"Site at '{site_root}' is not ready to activate ({validation.summary()}).")


class PartialInitializationError(ProvisioningError):
    """Raised when scaffolding stops part way; existing files are left untouched."""

    def __init__(self, site_root: Path, reason: str) -> None:
        self.site_root = site_root
        self.reason = reason
        super().__init__(f"Failed to initialize site data at '{site_root}': {reason}")
