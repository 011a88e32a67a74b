"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer

from shelfsite.build.exceptions import BuildDestinationError, TemplateFilesMissingError
from shelfsite.cli._app import console
from shelfsite.config.exceptions import ConfigError, ConfigNotFoundError
from shelfsite.exceptions import ShelfsiteError
from shelfsite.site.exceptions import ProvisioningError
from shelfsite.storage.exceptions import StorageError, StorageUnavailableError


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise Shelfsite errors and print full tracebacks.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit, typer.Abort):
        raise
    except TemplateFilesMissingError as e:
        if debug:
            raise
        console.print(f"[bold red]🧩 Missing Template Files:[/bold red] {e.site_root}")
        for name in e.missing_files:
            console.print(f"  - {name}")
        raise typer.Exit(1) from e
    except BuildDestinationError as e:
        if debug:
            raise
        console.print(f"[bold red]📦 Bundle Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except StorageUnavailableError as e:
        if debug:
            raise
        console.print(f"[bold red]🔌 Storage Unavailable:[/bold red] {e}")
        console.print("Please check the folder and try again.")
        raise typer.Exit(1) from e
    except StorageError as e:
        if debug:
            raise
        console.print(f"[bold red]💾 Storage Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ConfigNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Configuration Missing:[/bold red] {e}")
        console.print("Run [cyan]shelfsite setup[/cyan] to initialize the site data.")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ProvisioningError as e:
        if debug:
            raise
        console.print(f"[bold red]🏗️ Site Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ShelfsiteError as e:
        if debug:
            raise
        console.print(f"[bold red]🚨 Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]💥 An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
