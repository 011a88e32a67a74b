"""CLI application bootstrap utilities."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from shelfsite.config.settings import AppEnvironment

app = typer.Typer(
    name="shelfsite",
    help="Provision and build a curated book-recommendation microsite",
    add_completion=False,
)

config_app = typer.Typer(
    name="config",
    help="Show or edit the active site's metadata",
)
app.add_typer(config_app)

console = Console()
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    ],
)
logger = logging.getLogger(__name__)


@app.callback()
def _initialize_cli() -> None:
    """Apply the configured log level."""
    logging.getLogger().setLevel(AppEnvironment().log_level)


__all__ = ["app", "config_app", "console", "logger"]
