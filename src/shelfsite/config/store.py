"""Persistence of the site config document (``config.json``)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from shelfsite.config.exceptions import ConfigLoadError, ConfigNotFoundError
from shelfsite.config.model import SiteConfig
from shelfsite.constants import CONFIG_FILENAME, CONFIG_INDENT

if TYPE_CHECKING:
    from pathlib import Path

    from shelfsite.storage.protocols import StorageProvider

logger = logging.getLogger(__name__)


class ConfigStore:
    """Load and save the config document owned by a site."""

    def __init__(self, storage: StorageProvider) -> None:
        self.storage = storage

    @staticmethod
    def path_for(site_root: Path) -> Path:
        return site_root / CONFIG_FILENAME

    def exists(self, site_root: Path) -> bool:
        return self.storage.file_exists(self.path_for(site_root))

    def load(self, site_root: Path) -> SiteConfig:
        """Load and validate ``config.json``.

        Raises:
            ConfigNotFoundError: If the site has no config document.
            ConfigLoadError: If the document is not valid JSON or fails validation.

        """
        config_path = self.path_for(site_root)
        if not self.storage.file_exists(config_path):
            raise ConfigNotFoundError(config_path)

        raw = self.storage.read_file(config_path)
        try:
            return SiteConfig.model_validate_json(raw)
        except ValidationError as e:
            for error in e.errors():
                loc = " -> ".join(str(part) for part in error["loc"])
                logger.warning("  %s: %s", loc, error["msg"])
            raise ConfigLoadError(config_path, f"{e.error_count()} validation error(s)") from e

    def save(self, site_root: Path, config: SiteConfig) -> Path:
        config_path = self.path_for(site_root)
        self.storage.write_file(config_path, config.to_json(CONFIG_INDENT).encode("utf-8"))
        logger.debug("Saved config to %s", config_path)
        return config_path

    def update_metadata(
        self,
        site_root: Path,
        *,
        site_title: str | None = None,
        site_subtitle: str | None = None,
        footer_text: str | None = None,
    ) -> SiteConfig:
        """Update the text fields of the site config, leaving shelves untouched.

        Values are trimmed; ``None`` keeps the current value.
        """
        config = self.load(site_root)
        updates = {
            "site_title": site_title,
            "site_subtitle": site_subtitle,
            "footer_text": footer_text,
        }
        changed = {key: value.strip() for key, value in updates.items() if value is not None}
        updated = config.model_copy(update=changed)
        self.save(site_root, updated)
        logger.info("Updated site metadata at %s", site_root)
        return updated
