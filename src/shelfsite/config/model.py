"""Pydantic models for the site config and application settings documents.

Both documents are exchanged with the site's JavaScript front end, so fields
are serialized in camelCase (``siteTitle``, ``libraryPath``) while Python
code uses snake_case.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Shelf(_CamelModel):
    """A named, ordered category of book records stored in one folder."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    label: str
    folder: str = Field(min_length=1, description="Folder name under the books root")

    @field_validator("folder")
    @classmethod
    def single_folder_name(cls, v: str) -> str:
        """A folder is one plain name directly under the books root."""
        if v in {".", ".."} or "/" in v or "\\" in v:
            msg = f"shelf folder must be a single folder name, got {v!r}"
            raise ValueError(msg)
        return v


DEFAULT_SHELVES: tuple[Shelf, ...] = (
    Shelf(id="top-5-reads", label="Top 5 Reads", folder="top-5-reads"),
    Shelf(id="good-reads", label="Good Reads", folder="good-reads"),
    Shelf(id="current-and-future-reads", label="Current & Future Reads", folder="current-and-future-reads"),
)


class SiteConfig(_CamelModel):
    """Site metadata stored in ``config.json`` at the site root."""

    model_config = ConfigDict(validate_assignment=True)

    site_title: str = ""
    site_subtitle: str = ""
    footer_text: str = ""
    shelves: list[Shelf] = Field(default_factory=list)

    @classmethod
    def scaffold(cls) -> SiteConfig:
        """Minimal config written when initializing a site: empty text, default shelves."""
        return cls(shelves=list(DEFAULT_SHELVES))

    def to_json(self, indent: int) -> str:
        return self.model_dump_json(by_alias=True, indent=indent) + "\n"


class AppSettings(_CamelModel):
    """Process-wide settings: the single active site."""

    library_path: Path | None = None

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2) + "\n"
