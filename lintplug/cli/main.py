"""Command-line interface for lintplug."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from lintplug import __version__
from lintplug.errors import InitError, WorkspaceError
from lintplug.orchestrator import PluginInitializer
from lintplug.utils import setup_logging, get_logger
from lintplug.workspace import resolve_working_dirs

EXIT_OK = 0
EXIT_ERROR = 1

app = typer.Typer(
    name="lintplug",
    help="Pluggable static analysis: plugin provisioning",
    rich_markup_mode=None,
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


@app.command()
def init(
    chdir: Optional[str] = typer.Option(None, "--chdir", help="Switch to a different working directory before running"),
    recursive: bool = typer.Option(False, "--recursive", help="Run in every directory below --chdir that holds a config file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Config file name or path, resolved in each working directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """
    Install the plugins declared in the configuration.

    Example:
        lintplug init
        lintplug init --recursive --chdir ./modules
    """
    if verbose:
        setup_logging(log_level="DEBUG")
    else:
        setup_logging()

    try:
        working_dirs = resolve_working_dirs(
            chdir, recursive, config_name=Path(config).name if config else None
        )
    except WorkspaceError as e:
        err_console.print(f"[bold red]Error:[/bold red] Failed to find workspaces; {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR)

    initializer = PluginInitializer(console, recursive=recursive, config_path=config)

    try:
        initializer.run(working_dirs)
    except InitError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        logger.debug(f"init failed in {e.directory}: {e.cause!r}")
        raise typer.Exit(EXIT_ERROR)

    raise typer.Exit(EXIT_OK)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]lintplug[/bold] v{__version__}")
    console.print("Plugin provisioning for pluggable static analysis")


if __name__ == "__main__":
    app()
