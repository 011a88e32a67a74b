"""Site metadata commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from shelfsite.cli._app import config_app, console
from shelfsite.cli.commands.helpers import active_site_root, open_repository
from shelfsite.cli.errorhandler import handle_cli_errors
from shelfsite.config.store import ConfigStore

SiteOption = Annotated[Path | None, typer.Option("--site", help="Site folder (defaults to the active site)")]


@config_app.command("show")
def show(site: SiteOption = None, *, debug: Annotated[bool, typer.Option("--debug")] = False) -> None:
    """Print the site's title, subtitle, footer and shelves."""
    with handle_cli_errors(debug=debug):
        repository = open_repository()
        site_root = active_site_root(repository, site)
        config = ConfigStore(repository.storage).load(site_root)

        console.print(f"[bold]Title:[/bold] {config.site_title or '[dim](empty)[/dim]'}")
        console.print(f"[bold]Subtitle:[/bold] {config.site_subtitle or '[dim](empty)[/dim]'}")
        console.print(f"[bold]Footer:[/bold] {config.footer_text or '[dim](empty)[/dim]'}")

        table = Table(title="Shelves", show_header=True, header_style="bold")
        table.add_column("ID")
        table.add_column("Label")
        table.add_column("Folder")
        for shelf in config.shelves:
            table.add_row(shelf.id, shelf.label, shelf.folder)
        console.print(table)


@config_app.command("set")
def set_metadata(
    title: Annotated[str | None, typer.Option("--title", help="Site title")] = None,
    subtitle: Annotated[str | None, typer.Option("--subtitle", help="Site subtitle")] = None,
    footer: Annotated[str | None, typer.Option("--footer", help="Footer text")] = None,
    site: SiteOption = None,
    *,
    debug: Annotated[bool, typer.Option("--debug")] = False,
) -> None:
    """Update the site's title, subtitle or footer text."""
    with handle_cli_errors(debug=debug):
        if title is None and subtitle is None and footer is None:
            console.print("[yellow]Nothing to update.[/yellow] Pass --title, --subtitle or --footer.")
            raise typer.Exit(1)
        repository = open_repository()
        site_root = active_site_root(repository, site)
        ConfigStore(repository.storage).update_metadata(
            site_root, site_title=title, site_subtitle=subtitle, footer_text=footer
        )
        console.print("[green]✅ Configuration saved.[/green]")
