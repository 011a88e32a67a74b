"""Storage contract shared by the durable and in-memory providers.

Callers (validator, provisioner, stores, build pipeline) depend only on
:class:`StorageProvider`. Both implementations must behave identically,
including write atomicity: a failed ``write_file`` never leaves a partially
written document behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageProvider(Protocol):
    """File and folder operations used by Shelfsite."""

    def pick_folder(self) -> Path | None:
        """Ask the operator for a folder.

        Returns ``None`` when the operator cancels. Cancelling is a valid
        outcome, not a failure.

        Raises:
            StorageUnavailableError: If no picker can be reached.

        """

    def file_exists(self, path: Path) -> bool:
        """Return True if ``path`` exists (file or directory)."""

    def is_directory(self, path: Path) -> bool:
        """Return True if ``path`` exists and is a directory."""

    def read_file(self, path: Path) -> bytes:
        """Return the bytes stored at ``path``."""

    def write_file(self, path: Path, data: bytes) -> None:
        """Write ``data`` to ``path`` atomically, creating parent folders."""

    def copy_file(self, src: Path, dest: Path) -> None:
        """Copy ``src`` to ``dest`` byte for byte, creating parent folders."""

    def make_directory(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""

    def list_directory(self, path: Path) -> list[str]:
        """Return the sorted entry names directly under ``path``.

        Raises:
            DirectoryNotFoundError: If ``path`` is not an existing directory.

        """

    def remove_directory_recursive(self, path: Path) -> None:
        """Remove ``path`` and everything below it. Absent paths are ignored."""
