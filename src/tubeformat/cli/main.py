"""
Main CLI entry point for tubeformat.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.panel import Panel

from tubeformat import __version__
from tubeformat.cli.constants import (
    EXIT_SUCCESS,
    EXIT_USER_ERROR,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
)
from tubeformat.cli.errors import display_tubeformat_error
from tubeformat.cli.format_commands import formats_app
from tubeformat.config.settings import get_settings
from tubeformat.models.result import Err
from tubeformat.services.video_id import get_video_id, watch_url

console = Console()

app = typer.Typer(
    name="tubeformat",
    help="Streaming format extraction and selection toolkit",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Add subcommands
app.add_typer(formats_app, name="formats", help="Format inspection and selection commands")


def configure_logging(level: str | int) -> None:
    """
    Attach a stderr handler to the ``tubeformat`` logger.

    Parameters
    ----------
    level : str | int
        Logging level name or number.
    """
    package_logger = logging.getLogger("tubeformat")
    package_logger.setLevel(level)

    # Replace the handler from an earlier call; its stream may be gone.
    for existing in list(package_logger.handlers):
        if getattr(existing, "_tubeformat_cli", False):
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.setLevel(level)
    handler._tubeformat_cli = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]tubeformat[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.command("video-id")
def video_id(
    value: str = typer.Argument(..., help="Video URL or bare 11-character ID"),
    url: bool = typer.Option(False, "--url", help="Print the watch URL instead of the ID"),
) -> None:
    """Resolve a link or ID to the canonical video ID."""
    result = get_video_id(value)
    if isinstance(result, Err):
        display_tubeformat_error(result.error)
        raise typer.Exit(code=EXIT_USER_ERROR)

    console.print(watch_url(result.value) if url else result.value)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Enable DEBUG logging on stderr"
    ),
) -> None:
    """
    tubeformat - Streaming format extraction and selection toolkit.

    Works on saved watch pages and player responses: resolves video IDs,
    lists the advertised formats by quality and picks the best match.
    """
    if version:
        console.print(f"tubeformat v{__version__}")
        raise typer.Exit(code=EXIT_SUCCESS)

    configure_logging("DEBUG" if verbose else get_settings().log_level)

    if ctx.invoked_subcommand is None:
        console.print(
            "[yellow]Use 'tubeformat --help' for available commands[/yellow]"
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
