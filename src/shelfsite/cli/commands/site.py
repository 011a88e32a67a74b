"""Site selection and initialization commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.panel import Panel

from shelfsite.cli._app import app, console
from shelfsite.cli.commands.helpers import active_site_root, open_repository, render_validation
from shelfsite.cli.errorhandler import handle_cli_errors
from shelfsite.config.model import AppSettings
from shelfsite.workflow.setup import SetupSnapshot, SetupState, SetupWorkflow

DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks")]


def _show_invalid(snapshot: SetupSnapshot) -> None:
    lines = [
        "[bold red]Not a valid site folder[/bold red]\n",
        f"📁 {snapshot.pending_path}\n",
        "The folder is missing required template files:",
    ]
    if snapshot.validation is not None:
        lines.extend(f"• {name}" for name in snapshot.validation.missing_files)
    console.print(Panel("\n".join(lines), title="Invalid Site", border_style="red"))


def _show_needs_initialization(snapshot: SetupSnapshot) -> None:
    lines = [
        "[bold yellow]This site has its template files but is missing data.[/bold yellow]\n",
        f"📁 {snapshot.pending_path}\n",
        "[bold]Will create:[/bold]",
    ]
    if snapshot.validation is not None:
        lines.extend(f"• {name}" for name in snapshot.validation.missing_data())
    if snapshot.error:
        lines.append(f"\n[red]{snapshot.error}[/red]")
    console.print(Panel("\n".join(lines), title="Initialize Site Data?", border_style="yellow"))


def _run_setup(workflow: SetupWorkflow, snapshot: SetupSnapshot) -> SetupSnapshot:
    while snapshot.state is not SetupState.ACTIVE:
        if snapshot.state is SetupState.WELCOME:
            if snapshot.cancelled:
                console.print("No folder selected. Active site unchanged.")
                raise typer.Exit(0)
            if snapshot.error:
                console.print(f"[bold red]Error:[/bold red] {snapshot.error}")
            if not typer.confirm("Select a folder?", default=True):
                raise typer.Exit(1)
            snapshot = workflow.select_folder()
        elif snapshot.state is SetupState.INVALID:
            _show_invalid(snapshot)
            if not typer.confirm("Choose a different folder?", default=True):
                raise typer.Exit(1)
            workflow.choose_different()
            snapshot = workflow.select_folder()
        elif snapshot.state is SetupState.NEEDS_INITIALIZATION:
            _show_needs_initialization(snapshot)
            if typer.confirm("Initialize site data?", default=True):
                snapshot = workflow.initialize()
            elif typer.confirm("Choose a different folder?", default=True):
                workflow.choose_different()
                snapshot = workflow.select_folder()
            else:
                raise typer.Exit(1)
        else:
            msg = f"Setup stopped in transient state {snapshot.state.value}"
            raise RuntimeError(msg)
    return snapshot


@app.command()
def setup(
    path: Annotated[
        Path | None,
        typer.Argument(help="Site folder to use; prompts for one when omitted"),
    ] = None,
    *,
    debug: DebugOption = False,
) -> None:
    """Select a site folder, initialize its data if needed, and make it active."""
    with handle_cli_errors(debug=debug):
        workflow = SetupWorkflow(open_repository())
        snapshot = workflow.submit_path(path.expanduser().resolve()) if path else workflow.select_folder()
        snapshot = _run_setup(workflow, snapshot)
        console.print(
            Panel(
                f"[bold green]✅ Site ready![/bold green]\n\n"
                f"📁 Active site: {snapshot.active_path}\n\n"
                "[bold]Next steps:[/bold]\n"
                "• Edit metadata: [cyan]shelfsite config set --title 'My Books'[/cyan]\n"
                "• Build the bundle: [cyan]shelfsite build[/cyan]",
                title="🛠️ Setup Complete",
                border_style="green",
            )
        )


@app.command()
def status(*, debug: DebugOption = False) -> None:
    """Show the active site and whether it is ready."""
    with handle_cli_errors(debug=debug):
        repository = open_repository()
        site_root = active_site_root(repository)
        console.print(render_validation(site_root, repository.validate_site_path(site_root)))


@app.command()
def validate(
    path: Annotated[Path, typer.Argument(help="Folder to inspect")],
    *,
    debug: DebugOption = False,
) -> None:
    """Check whether a folder is a site; exits 1 when template files are missing."""
    with handle_cli_errors(debug=debug):
        site_root = path.expanduser().resolve()
        validation = open_repository().validate_site_path(site_root)
        console.print(render_validation(site_root, validation))
        if not validation.is_valid:
            raise typer.Exit(1)


@app.command()
def init(
    path: Annotated[Path, typer.Argument(help="Site folder with template files")],
    *,
    debug: DebugOption = False,
) -> None:
    """Create missing config.json and books/ without prompting, then activate the site."""
    with handle_cli_errors(debug=debug):
        site_root = path.expanduser().resolve()
        repository = open_repository()
        result = repository.initialize_site_data(site_root)
        result.raise_for_failure(site_root)
        repository.save(AppSettings(library_path=site_root))
        if result.created:
            console.print(f"[green]Created:[/green] {', '.join(result.created)}")
        else:
            console.print("Site data already present.")
        console.print(f"📁 Active site: {site_root}")
