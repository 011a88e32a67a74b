"""Active-site settings: the settings store and the settings repository."""

from shelfsite.settings.repository import (
    InMemorySettingsRepository,
    SettingsRepository,
    StorageSettingsRepository,
    create_local_repository,
)
from shelfsite.settings.store import InMemorySettingsStore, JsonSettingsStore, SettingsStore

__all__ = [
    "InMemorySettingsRepository",
    "InMemorySettingsStore",
    "JsonSettingsStore",
    "SettingsRepository",
    "SettingsStore",
    "StorageSettingsRepository",
    "create_local_repository",
]
