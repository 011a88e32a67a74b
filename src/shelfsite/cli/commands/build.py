"""Bundle build command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from shelfsite.build.pipeline import ContentBuildPipeline, shelves_for_site
from shelfsite.cli._app import app, console
from shelfsite.cli.commands.helpers import active_site_root, open_repository
from shelfsite.cli.errorhandler import handle_cli_errors
from shelfsite.config.store import ConfigStore
from shelfsite.constants import DataSource


@app.command()
def build(
    *,
    sample: Annotated[bool, typer.Option("--sample", help="Build from books-sample/ instead of books/")] = False,
    site: Annotated[Path | None, typer.Option("--site", help="Site folder (defaults to the active site)")] = None,
    output: Annotated[Path | None, typer.Option("--output", help="Bundle directory (defaults to <site>/dist)")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks")] = False,
) -> None:
    """Regenerate the deployable bundle and its books manifest."""
    with handle_cli_errors(debug=debug):
        repository = open_repository()
        site_root = active_site_root(repository, site)
        source = DataSource.SAMPLE if sample else DataSource.REAL
        storage = repository.storage

        pipeline = ContentBuildPipeline.for_site(
            storage,
            site_root,
            source=source,
            bundle_root=output.expanduser().resolve() if output else None,
        )
        result = pipeline.build(shelves_for_site(ConfigStore(storage), site_root))

        for warning in result.warnings:
            console.print(f"[yellow]Warning:[/yellow] {warning}")

        table = Table(title=f"Found {len(result.manifest)} books ({source.value} data)", header_style="bold")
        table.add_column("Shelf")
        table.add_column("Books", justify="right")
        for summary in result.shelves:
            count = str(summary.count) if summary.found else "[yellow]missing[/yellow]"
            table.add_row(summary.folder, count)
        console.print(table)
        console.print(f"Source: {result.source_root}")
        console.print(f"[green]✅ Generated {result.manifest_path}[/green]")
        console.print(f"Serve with: [cyan]cd {result.bundle_root} && python -m http.server 8080[/cyan]")
