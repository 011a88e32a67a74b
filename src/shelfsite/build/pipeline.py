"""Content build pipeline: aggregate shelf folders into a deployable bundle.

Bundle layout::

    <bundle>/index.html, styles-minimalist.css, app.js   (template files)
    <bundle>/config.json                                 (if present)
    <bundle>/books/<shelf folder>/<book>.json            (book records, copied verbatim)
    <bundle>/books/index.json                            (manifest)

Every run clears the bundle first, so there are no stale entries and no
incremental state. Callers must not run two builds against one bundle at once.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shelfsite.build.exceptions import BuildDestinationError, TemplateFilesMissingError
from shelfsite.config.exceptions import ConfigNotFoundError
from shelfsite.config.model import DEFAULT_SHELVES
from shelfsite.constants import (
    BOOK_RECORD_SUFFIX,
    BOOKS_DIRNAME,
    BUNDLE_DIRNAME,
    MANIFEST_FILENAME,
    MANIFEST_INDENT,
    OPTIONAL_STATIC_FILES,
    TEMPLATE_FILES,
    DataSource,
)
from shelfsite.site.validation import find_missing_template_files
from shelfsite.storage.exceptions import DirectoryNotFoundError, StorageError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from shelfsite.config.model import Shelf
    from shelfsite.config.store import ConfigStore
    from shelfsite.storage.protocols import StorageProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShelfSummary:
    folder: str
    count: int
    found: bool


@dataclass(frozen=True, slots=True)
class BuildResult:
    """What a build produced."""

    manifest: tuple[str, ...]
    shelves: tuple[ShelfSummary, ...]
    warnings: tuple[str, ...]
    source_root: Path
    bundle_root: Path

    @property
    def manifest_path(self) -> Path:
        return self.bundle_root / BOOKS_DIRNAME / MANIFEST_FILENAME


def serialize_manifest(entries: Sequence[str]) -> bytes:
    """Render the manifest as an indented JSON array with a trailing newline."""
    return (json.dumps(list(entries), indent=MANIFEST_INDENT, ensure_ascii=False) + "\n").encode("utf-8")


def shelves_for_site(config_store: ConfigStore, site_root: Path) -> tuple[Shelf, ...]:
    """Shelves declared in the site's config, or the default set if it has none."""
    try:
        return tuple(config_store.load(site_root).shelves)
    except ConfigNotFoundError:
        logger.warning("No config found in %s, building default shelves", site_root)
        return DEFAULT_SHELVES


class ContentBuildPipeline:
    """Build the deployable bundle for one site."""

    def __init__(
        self,
        storage: StorageProvider,
        site_root: Path,
        source_root: Path,
        bundle_root: Path,
    ) -> None:
        self.storage = storage
        self.site_root = site_root
        self.source_root = source_root
        self.bundle_root = bundle_root

    @classmethod
    def for_site(
        cls,
        storage: StorageProvider,
        site_root: Path,
        source: DataSource = DataSource.REAL,
        bundle_root: Path | None = None,
    ) -> ContentBuildPipeline:
        """Pipeline reading ``books/`` (or ``books-sample/``) and writing ``dist/``."""
        return cls(
            storage,
            site_root=site_root,
            source_root=site_root / source.dirname,
            bundle_root=bundle_root or site_root / BUNDLE_DIRNAME,
        )

    def build(self, shelves: Sequence[Shelf]) -> BuildResult:
        """Regenerate the bundle from ``shelves`` in declaration order.

        Raises:
            TemplateFilesMissingError: If any required template file is absent.
            BuildDestinationError: If the bundle directory overlaps the site or its book
                records, or cannot be cleared or created.

        """
        missing = find_missing_template_files(self.storage, self.site_root)
        if missing:
            raise TemplateFilesMissingError(self.site_root, missing)

        self._check_bundle_root()

        self._reset_bundle()
        warnings: list[str] = []

        for name in TEMPLATE_FILES:
            self.storage.copy_file(self.site_root / name, self.bundle_root / name)
        logger.info("Copied template files: %s", ", ".join(TEMPLATE_FILES))

        for name in OPTIONAL_STATIC_FILES:
            src = self.site_root / name
            if self.storage.file_exists(src):
                self.storage.copy_file(src, self.bundle_root / name)
            else:
                warnings.append(self._warn(f"Static file not found: {name}"))

        books_root = self.bundle_root / BOOKS_DIRNAME

        manifest: list[str] = []
        summaries: list[ShelfSummary] = []
        for shelf in shelves:
            entries = self._collect_shelf(shelf.folder)
            if entries is None:
                warnings.append(self._warn(f"Folder not found: {shelf.folder}"))
                summaries.append(ShelfSummary(folder=shelf.folder, count=0, found=False))
                continue

            for entry in entries:
                self.storage.copy_file(self.source_root / entry, books_root / entry)
            manifest.extend(entries)
            summaries.append(ShelfSummary(folder=shelf.folder, count=len(entries), found=True))

        self.storage.write_file(books_root / MANIFEST_FILENAME, serialize_manifest(manifest))
        logger.info("Generated %s with %d books from %s", MANIFEST_FILENAME, len(manifest), self.source_root)

        return BuildResult(
            manifest=tuple(manifest),
            shelves=tuple(summaries),
            warnings=tuple(warnings),
            source_root=self.source_root,
            bundle_root=self.bundle_root,
        )

    def _check_bundle_root(self) -> None:
        """Refuse a bundle directory whose removal would delete site data."""
        bundle = self.bundle_root.resolve()
        site = self.site_root.resolve()
        if site.is_relative_to(bundle):
            raise BuildDestinationError(self.bundle_root, f"it contains the site folder {self.site_root}")
        book_trees = {self.source_root, *(self.site_root / source.dirname for source in DataSource)}
        for tree in sorted(book_trees):
            resolved = tree.resolve()
            if bundle.is_relative_to(resolved) or resolved.is_relative_to(bundle):
                raise BuildDestinationError(self.bundle_root, f"it overlaps the book records in {tree}")

    def _reset_bundle(self) -> None:
        try:
            self.storage.remove_directory_recursive(self.bundle_root)
            self.storage.make_directory(self.bundle_root)
            self.storage.make_directory(self.bundle_root / BOOKS_DIRNAME)
        except StorageError as e:
            raise BuildDestinationError(self.bundle_root, str(e)) from e

    def _collect_shelf(self, folder: str) -> list[str] | None:
        """Manifest entries for one shelf, or None if its folder is missing."""
        folder_path = self.source_root / folder
        try:
            names = self.storage.list_directory(folder_path)
        except DirectoryNotFoundError:
            return None

        records = [
            name
            for name in names
            if name.endswith(BOOK_RECORD_SUFFIX) and not self.storage.is_directory(folder_path / name)
        ]
        # Ordinal, case-sensitive order.
        return [f"{folder}/{name}" for name in sorted(records)]

    def _warn(self, message: str) -> str:
        logger.warning(message)
        return message
