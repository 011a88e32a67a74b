"""Site data scaffolding and activation.

Initialization only fills gaps: an existing ``config.json`` or ``books/``
folder is never touched, so calling :meth:`SiteProvisioner.initialize` again
after a failure completes whatever is still missing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shelfsite.config.model import AppSettings, SiteConfig
from shelfsite.config.store import ConfigStore
from shelfsite.constants import BOOKS_DIRNAME, CONFIG_FILENAME
from shelfsite.site.exceptions import PartialInitializationError, SiteNotReadyError
from shelfsite.site.validation import SiteReadinessValidator
from shelfsite.storage.exceptions import StorageError

if TYPE_CHECKING:
    from pathlib import Path

    from shelfsite.settings.store import SettingsStore
    from shelfsite.storage.protocols import StorageProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InitializationResult:
    """Outcome of :meth:`SiteProvisioner.initialize`."""

    success: bool
    created: tuple[str, ...] = ()
    error: str | None = None

    def raise_for_failure(self, site_root: Path) -> None:
        if not self.success:
            raise PartialInitializationError(site_root, self.error or "unknown error")


class SiteProvisioner:
    """Scaffold missing site data and commit a site as the active one."""

    def __init__(self, storage: StorageProvider, settings_store: SettingsStore) -> None:
        self.storage = storage
        self.settings_store = settings_store
        self.validator = SiteReadinessValidator(storage)
        self.config_store = ConfigStore(storage)

    def initialize(self, path: Path) -> InitializationResult:
        """Create ``config.json`` and ``books/`` when absent.

        Returns a failed result instead of raising when storage errors occur;
        anything created before the failure stays in place.
        """
        created: list[str] = []
        try:
            validation = self.validator.validate(path)
            if not validation.has_template_files:
                return InitializationResult(
                    success=False,
                    error="Not a site folder, missing template files: " + ", ".join(validation.missing_files),
                )

            if not validation.has_config:
                self.config_store.save(path, SiteConfig.scaffold())
                created.append(CONFIG_FILENAME)
                logger.info("Created %s in %s", CONFIG_FILENAME, path)

            if not validation.has_books:
                self.storage.make_directory(path / BOOKS_DIRNAME)
                created.append(f"{BOOKS_DIRNAME}/")
                logger.info("Created %s/ in %s", BOOKS_DIRNAME, path)
        except StorageError as e:
            logger.warning("Initialization of %s stopped: %s", path, e)
            return InitializationResult(success=False, created=tuple(created), error=str(e))

        if not created:
            logger.info("Site data already present at %s", path)
        return InitializationResult(success=True, created=tuple(created))

    def activate(self, path: Path) -> AppSettings:
        """Make ``path`` the active site.

        Raises:
            SiteNotReadyError: Unless template files, config and books are all present.

        """
        validation = self.validator.validate(path)
        if not validation.is_ready:
            raise SiteNotReadyError(path, validation)

        settings = AppSettings(library_path=path)
        self.settings_store.save(settings)
        logger.info("Active site set to %s", path)
        return settings
