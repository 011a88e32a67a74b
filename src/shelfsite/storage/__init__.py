"""Storage providers: the contract plus durable and in-memory implementations."""

from shelfsite.storage.exceptions import (
    DirectoryNotFoundError,
    StorageError,
    StorageReadError,
    StorageUnavailableError,
    StorageWriteError,
)
from shelfsite.storage.local import LocalStorageProvider
from shelfsite.storage.memory import InMemoryStorageProvider
from shelfsite.storage.protocols import StorageProvider

__all__ = [
    "DirectoryNotFoundError",
    "InMemoryStorageProvider",
    "LocalStorageProvider",
    "StorageError",
    "StorageProvider",
    "StorageReadError",
    "StorageUnavailableError",
    "StorageWriteError",
]
