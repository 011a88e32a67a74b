"""Central location for constants shared across the application.

``TEMPLATE_FILES`` is consumed by both the readiness validator and the build
pipeline, so a folder that validates is always a folder that builds.
"""

from enum import Enum

# Required template assets, in the order they are reported when missing.
TEMPLATE_FILES: tuple[str, ...] = (
    "index.html",
    "styles-minimalist.css",
    "app.js",
)

# Static files copied into the bundle when present; absence only warns.
OPTIONAL_STATIC_FILES: tuple[str, ...] = ("config.json",)

CONFIG_FILENAME = "config.json"
BOOKS_DIRNAME = "books"
SAMPLE_BOOKS_DIRNAME = "books-sample"
BUNDLE_DIRNAME = "dist"
MANIFEST_FILENAME = "index.json"
BOOK_RECORD_SUFFIX = ".json"

MANIFEST_INDENT = 4
CONFIG_INDENT = 2


class DataSource(str, Enum):
    """Which book tree a build reads from."""

    REAL = "real"
    SAMPLE = "sample"

    @property
    def dirname(self) -> str:
        return SAMPLE_BOOKS_DIRNAME if self is DataSource.SAMPLE else BOOKS_DIRNAME
