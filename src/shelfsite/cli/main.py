"""Main Typer application for Shelfsite."""

from shelfsite.cli._app import app
from shelfsite.cli.commands import build, config, site  # noqa: F401  (registers commands)

__all__ = ["app"]
