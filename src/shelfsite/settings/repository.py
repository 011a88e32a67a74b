"""The settings repository contract and its two implementations.

Every caller (the setup workflow, the CLI) depends only on
:class:`SettingsRepository`. :class:`StorageSettingsRepository` persists to a
JSON document; :class:`InMemorySettingsRepository` keeps everything in memory
for tests. Both run validation and initialization through the same
validator and provisioner, so their semantics cannot drift apart.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from shelfsite.settings.store import InMemorySettingsStore, JsonSettingsStore, SettingsStore
from shelfsite.site.provisioning import InitializationResult, SiteProvisioner
from shelfsite.site.validation import SiteReadinessValidator, SiteValidation
from shelfsite.storage.local import FolderPicker, LocalStorageProvider
from shelfsite.storage.memory import InMemoryStorageProvider

if TYPE_CHECKING:
    from pathlib import Path

    from shelfsite.config.model import AppSettings
    from shelfsite.config.settings import AppEnvironment
    from shelfsite.storage.protocols import StorageProvider

logger = logging.getLogger(__name__)


@runtime_checkable
class SettingsRepository(Protocol):
    """Active-site settings plus the operations needed to pick and prepare a site."""

    def get(self) -> AppSettings:
        """Return the current settings."""

    def save(self, settings: AppSettings) -> None:
        """Persist ``settings``; a non-null ``library_path`` activates that site.

        Raises:
            SiteNotReadyError: If the site is not ready to activate.

        """

    def select_site_path(self) -> Path | None:
        """Prompt for a folder; ``None`` means the operator cancelled."""

    def validate_site_path(self, path: Path) -> SiteValidation:
        """Classify ``path`` without changing it."""

    def initialize_site_data(self, path: Path) -> InitializationResult:
        """Fill in missing site data at ``path``."""


class StorageSettingsRepository:
    """SettingsRepository over any StorageProvider and SettingsStore."""

    def __init__(self, storage: StorageProvider, settings_store: SettingsStore) -> None:
        self.storage = storage
        self.settings_store = settings_store
        self.validator = SiteReadinessValidator(storage)
        self.provisioner = SiteProvisioner(storage, settings_store)

    def get(self) -> AppSettings:
        return self.settings_store.load()

    def save(self, settings: AppSettings) -> None:
        if settings.library_path is None:
            self.settings_store.save(settings)
            logger.info("Cleared active site")
            return
        self.provisioner.activate(settings.library_path)

    def select_site_path(self) -> Path | None:
        return self.storage.pick_folder()

    def validate_site_path(self, path: Path) -> SiteValidation:
        return self.validator.validate(path)

    def initialize_site_data(self, path: Path) -> InitializationResult:
        return self.provisioner.initialize(path)


class InMemorySettingsRepository(StorageSettingsRepository):
    """Test double with scripted folder selections and preset settings."""

    def __init__(
        self,
        storage: InMemoryStorageProvider | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self.memory = storage or InMemoryStorageProvider()
        super().__init__(self.memory, InMemorySettingsStore(settings))

    def set_selected_path(self, path: Path | None) -> None:
        self.memory.queue_selection(path)

    def set_settings(self, settings: AppSettings) -> None:
        """Replace the stored settings directly, bypassing activation checks."""
        self.settings_store.save(settings)


def create_local_repository(
    environment: AppEnvironment, folder_picker: FolderPicker | None = None
) -> StorageSettingsRepository:
    """Build the durable repository used by the CLI."""
    storage = LocalStorageProvider(folder_picker=folder_picker)
    return StorageSettingsRepository(storage, JsonSettingsStore(storage, environment.settings_path))
