"""Exceptions raised by storage providers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shelfsite.exceptions import ShelfsiteError

if TYPE_CHECKING:
    from pathlib import Path


class StorageError(ShelfsiteError):
    """Base exception for storage failures."""


class StorageUnavailableError(StorageError):
    """Raised when the folder picker or the file backend cannot be reached."""


class StorageReadError(StorageError):
    """Raised when a file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class StorageWriteError(StorageError):
    """Raised when a file or directory cannot be written, copied or removed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class DirectoryNotFoundError(StorageError):
    """Raised when listing a directory that does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory not found: '{path}'")
