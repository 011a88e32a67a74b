"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from shelfsite.cli._app import console
from shelfsite.config.settings import AppEnvironment
from shelfsite.settings.repository import SettingsRepository, StorageSettingsRepository, create_local_repository
from shelfsite.site.validation import SiteValidation


def prompt_for_folder() -> str | None:
    """Terminal folder picker; an empty answer cancels."""
    answer = typer.prompt("Site folder (leave empty to cancel)", default="", show_default=False)
    return answer.strip() or None


def open_repository() -> StorageSettingsRepository:
    return create_local_repository(AppEnvironment(), folder_picker=prompt_for_folder)


def active_site_root(repository: SettingsRepository, site: Path | None = None) -> Path:
    """Resolve the site to operate on: ``--site`` first, then the active site."""
    if site is not None:
        return site.expanduser().resolve()
    library_path = repository.get().library_path
    if library_path is None:
        console.print("[yellow]No active site.[/yellow] Run [cyan]shelfsite setup[/cyan] or pass --site.")
        raise typer.Exit(1)
    return library_path


def render_validation(path: Path, validation: SiteValidation) -> Table:
    table = Table(title=str(path), show_header=True, header_style="bold")
    table.add_column("Check")
    table.add_column("Status")

    def mark(ok: bool) -> str:
        return "[green]✓[/green]" if ok else "[red]✗[/red]"

    table.add_row("Template files", mark(validation.has_template_files))
    if validation.is_valid:
        table.add_row("config.json", mark(validation.has_config))
        table.add_row("books/", mark(validation.has_books))
    for name in validation.missing_files:
        table.add_row(f"  missing: {name}", "[red]✗[/red]")
    return table
