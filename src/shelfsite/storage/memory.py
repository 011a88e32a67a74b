"""In-memory storage provider.

Satisfies :class:`~shelfsite.storage.protocols.StorageProvider` without any
filesystem operations, which makes it the test double for every component
that touches storage. Files live in a dictionary keyed by path; writes
replace the whole value at once, so a failed write never leaves a half
document behind.

Example Usage:
    storage = InMemoryStorageProvider()
    storage.add_files(Path("/site"), ["index.html", "styles-minimalist.css", "app.js"])
    storage.queue_selection(Path("/site"))

    validation = SiteReadinessValidator(storage).validate(Path("/site"))
    assert validation.is_valid
"""

from __future__ import annotations

from collections import deque
from pathlib import Path

from shelfsite.storage.exceptions import (
    DirectoryNotFoundError,
    StorageReadError,
    StorageUnavailableError,
    StorageWriteError,
)


class InMemoryStorageProvider:
    """StorageProvider backed by dictionaries (no durability)."""

    def __init__(self) -> None:
        self._files: dict[Path, bytes] = {}
        self._dirs: set[Path] = set()
        self._selections: deque[Path | None] = deque()
        self._failing_writes: set[Path] = set()
        self.available = True
        self.writes: list[Path] = []

    # ------------------------------------------------------------------
    # Test hooks
    # ------------------------------------------------------------------

    def queue_selection(self, path: Path | None) -> None:
        """Script the next ``pick_folder`` result (``None`` simulates cancel)."""
        self._selections.append(path)

    def fail_writes_to(self, path: Path) -> None:
        """Make every subsequent write or mkdir of ``path`` fail."""
        self._failing_writes.add(path)

    def clear_failures(self) -> None:
        self._failing_writes.clear()

    def add_file(self, path: Path, data: bytes | str = b"") -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._add_parents(path)
        self._files[path] = data

    def add_files(self, root: Path, names: list[str] | tuple[str, ...], data: bytes | str = b"") -> None:
        for name in names:
            self.add_file(root / name, data)

    def remove_file(self, path: Path) -> None:
        self._files.pop(path, None)

    # ------------------------------------------------------------------
    # StorageProvider
    # ------------------------------------------------------------------

    def pick_folder(self) -> Path | None:
        self._check_available()
        if not self._selections:
            return None
        return self._selections.popleft()

    def file_exists(self, path: Path) -> bool:
        self._check_available()
        return path in self._files or path in self._dirs

    def is_directory(self, path: Path) -> bool:
        self._check_available()
        return path in self._dirs

    def read_file(self, path: Path) -> bytes:
        self._check_available()
        try:
            return self._files[path]
        except KeyError:
            raise StorageReadError(path, "no such file") from None

    def write_file(self, path: Path, data: bytes) -> None:
        self._check_available()
        self._check_writable(path)
        if path in self._dirs:
            raise StorageWriteError(path, "is a directory")
        self._add_parents(path)
        self._files[path] = bytes(data)
        self.writes.append(path)

    def copy_file(self, src: Path, dest: Path) -> None:
        data = self.read_file(src)
        self.write_file(dest, data)

    def make_directory(self, path: Path) -> None:
        self._check_available()
        self._check_writable(path)
        if path in self._files:
            raise StorageWriteError(path, "is a file")
        self._dirs.add(path)
        self._add_parents(path)

    def list_directory(self, path: Path) -> list[str]:
        self._check_available()
        if path not in self._dirs:
            raise DirectoryNotFoundError(path)
        names = {p.name for p in self._files if p.parent == path}
        names.update(d.name for d in self._dirs if d.parent == path and d != path)
        return sorted(names)

    def remove_directory_recursive(self, path: Path) -> None:
        self._check_available()
        self._check_writable(path)
        self._files = {p: data for p, data in self._files.items() if not p.is_relative_to(path)}
        self._dirs = {d for d in self._dirs if not d.is_relative_to(path)}

    # ------------------------------------------------------------------

    def _add_parents(self, path: Path) -> None:
        for parent in path.parents:
            self._dirs.add(parent)

    def _check_available(self) -> None:
        if not self.available:
            msg = "In-memory storage marked unavailable"
            raise StorageUnavailableError(msg)

    def _check_writable(self, path: Path) -> None:
        if path in self._failing_writes:
            raise StorageWriteError(path, "simulated write failure")
