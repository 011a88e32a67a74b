"""Configuration: document models, the config store and the app environment."""

from shelfsite.config.model import DEFAULT_SHELVES, AppSettings, Shelf, SiteConfig
from shelfsite.config.settings import AppEnvironment
from shelfsite.config.store import ConfigStore

__all__ = [
    "DEFAULT_SHELVES",
    "AppEnvironment",
    "AppSettings",
    "ConfigStore",
    "Shelf",
    "SiteConfig",
]
