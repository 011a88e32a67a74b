"""Filesystem-backed storage provider.

Folder selection is delegated to an injected ``folder_picker`` callable so
the same provider serves a terminal prompt, a desktop dialog or a test.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path

from shelfsite.storage.exceptions import (
    DirectoryNotFoundError,
    StorageReadError,
    StorageUnavailableError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)

FolderPicker = Callable[[], "str | Path | None"]


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write bytes to a file atomically.

    Writes to a temporary file in the same directory, then atomically renames it.
    Readers never see partial content and a failure leaves the previous file intact.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file must live on the same filesystem for os.replace to be atomic
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(temp_path, path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


class LocalStorageProvider:
    """StorageProvider over the local filesystem."""

    def __init__(self, folder_picker: FolderPicker | None = None) -> None:
        self._folder_picker = folder_picker

    def pick_folder(self) -> Path | None:
        if self._folder_picker is None:
            msg = "No folder picker is configured for this storage provider"
            raise StorageUnavailableError(msg)
        try:
            selection = self._folder_picker()
        except OSError as e:
            msg = f"Folder picker failed: {e}"
            raise StorageUnavailableError(msg) from e
        if selection is None or not str(selection).strip():
            logger.debug("Folder selection cancelled")
            return None
        return Path(str(selection).strip()).expanduser().resolve()

    def file_exists(self, path: Path) -> bool:
        return path.exists()

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def read_file(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageReadError(path, str(e)) from e

    def write_file(self, path: Path, data: bytes) -> None:
        try:
            atomic_write_bytes(path, data)
        except OSError as e:
            raise StorageWriteError(path, str(e)) from e
        logger.debug("Wrote %s (%d bytes)", path, len(data))

    def copy_file(self, src: Path, dest: Path) -> None:
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dest)
        except OSError as e:
            raise StorageWriteError(dest, str(e)) from e

    def make_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageWriteError(path, str(e)) from e

    def list_directory(self, path: Path) -> list[str]:
        if not path.is_dir():
            raise DirectoryNotFoundError(path)
        try:
            return sorted(entry.name for entry in path.iterdir())
        except OSError as e:
            raise StorageReadError(path, str(e)) from e

    def remove_directory_recursive(self, path: Path) -> None:
        if not path.exists():
            return
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise StorageWriteError(path, str(e)) from e
