"""A module for Shelfsite's command-line interface."""

from shelfsite.cli.main import app

__all__ = ["app", "main"]


def main() -> None:
    """Entry point for the CLI."""
    app()
