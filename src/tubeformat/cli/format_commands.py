"""
Format CLI commands.

Commands
--------
list
    Show the ranked formats of a saved watch page or player response.
choose
    Pick one format by quality tier, itag list and/or filter.
extract
    Print the JSON literal assigned to a script variable in a page.

Examples
--------
List formats of a saved page::

    $ tubeformat formats list watch.html

Best audio-only stream::

    $ tubeformat formats choose watch.html --quality highestaudio --filter audioonly

First available of several itags::

    $ tubeformat formats choose player.json -q 299 -q 137 -q 22
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tubeformat.cli.constants import EXIT_SYSTEM_ERROR, EXIT_USER_ERROR, URL_DISPLAY_LENGTH
from tubeformat.cli.errors import ErrorCategory, display_error_panel, display_tubeformat_error
from tubeformat.config.settings import get_settings
from tubeformat.formats.selection import filter_formats
from tubeformat.models.format import VideoFormat
from tubeformat.models.result import Err
from tubeformat.models.selection import FormatFilter, SelectionRequest
from tubeformat.parsers.json_extractor import PLAYER_RESPONSE_VARIABLE, find_embedded_json
from tubeformat.services.format_service import FormatService

logger = logging.getLogger(__name__)
console = Console()

formats_app = typer.Typer(
    name="formats",
    help="Inspect and select stream formats",
    no_args_is_help=True,
)

VALID_FILTERS = [f.value for f in FormatFilter]


def validate_filter(value: Optional[str]) -> Optional[str]:
    """
    Validate the --filter option.

    Raises
    ------
    typer.BadParameter
        If the value is not a known filter name.
    """
    if value is None:
        return None
    normalized = value.lower()
    if normalized not in VALID_FILTERS:
        raise typer.BadParameter(
            f"Invalid filter '{value}'. Choose from: {', '.join(VALID_FILTERS)}"
        )
    return normalized


def _build_service() -> FormatService:
    return FormatService(policy=get_settings().ranking_policy())


def _read_input(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        display_error_panel(ErrorCategory.NOT_FOUND, f"Cannot read {path}: {e}")
        raise typer.Exit(EXIT_SYSTEM_ERROR)


def _load_formats(path: Path, service: FormatService) -> list[VideoFormat]:
    """Load ranked formats from a page (HTML) or a player response (JSON) file."""
    text = _read_input(path)

    if text.lstrip().startswith("{"):
        try:
            player_response = json.loads(text)
        except json.JSONDecodeError as e:
            display_error_panel(
                ErrorCategory.VALIDATION,
                "Invalid player response JSON",
                expected="a JSON object",
                got=f"{path.name}: {e}",
            )
            raise typer.Exit(EXIT_USER_ERROR)
        formats = service.formats_from_player_response(player_response)
        logger.debug("Loaded %d formats from player response %s", len(formats), path)
        return formats

    result = service.formats_from_page(text)
    if isinstance(result, Err):
        display_tubeformat_error(result.error)
        raise typer.Exit(EXIT_USER_ERROR)
    return result.value


def _shorten(url: str) -> str:
    if len(url) <= URL_DISPLAY_LENGTH:
        return url
    return url[: URL_DISPLAY_LENGTH - 3] + "..."


def _delivery_flags(fmt: VideoFormat) -> str:
    flags = []
    if fmt.is_live:
        flags.append("live")
    if fmt.is_hls:
        flags.append("hls")
    if fmt.is_dash_mpd:
        flags.append("dash")
    return ",".join(flags)


def _formats_table(formats: list[VideoFormat]) -> Table:
    table = Table(title=f"Formats ({len(formats)})", show_lines=False)
    table.add_column("itag", justify="right", style="cyan")
    table.add_column("container")
    table.add_column("quality")
    table.add_column("bitrate", justify="right")
    table.add_column("audio kbps", justify="right")
    table.add_column("codecs", style="magenta")
    table.add_column("delivery")

    for fmt in formats:
        table.add_row(
            str(fmt.itag),
            fmt.container or "",
            fmt.quality_label or "",
            str(fmt.bitrate) if fmt.bitrate else "",
            str(fmt.audio_bitrate) if fmt.audio_bitrate else "",
            escape(fmt.codecs),
            _delivery_flags(fmt),
        )
    return table


@formats_app.command("list")
def list_formats(
    source: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Saved watch page or player response JSON"
    ),
    filter_name: Optional[str] = typer.Option(
        None, "--filter", "-f", callback=validate_filter, help="Only show matching formats"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of a table"),
) -> None:
    """List formats from highest to lowest quality."""
    formats = _load_formats(source, _build_service())
    if filter_name:
        formats = filter_formats(formats, filter_name)

    if as_json:
        console.print_json(
            json.dumps([fmt.model_dump(mode="json", by_alias=True) for fmt in formats])
        )
        return

    if not formats:
        console.print("[yellow]No formats found[/yellow]")
        return
    console.print(_formats_table(formats))


@formats_app.command("choose")
def choose(
    source: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Saved watch page or player response JSON"
    ),
    quality: Optional[list[str]] = typer.Option(
        None,
        "--quality",
        "-q",
        help="Quality tier (highest, lowest, highestaudio, ...) or itag; repeat for fallbacks",
    ),
    filter_name: Optional[str] = typer.Option(
        None, "--filter", "-f", callback=validate_filter, help="Restrict candidates first"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Choose the single format that best matches the options."""
    settings = get_settings()
    service = _build_service()
    formats = _load_formats(source, service)

    if not quality:
        requested: str | list[str] = settings.default_quality
    elif len(quality) == 1:
        requested = quality[0]
    else:
        requested = quality

    request = SelectionRequest(
        quality=requested, filter=filter_name or settings.default_filter
    )
    result = service.choose(formats, request)
    if isinstance(result, Err):
        display_tubeformat_error(result.error)
        raise typer.Exit(EXIT_USER_ERROR)

    chosen = result.value
    if as_json:
        console.print_json(chosen.model_dump_json(by_alias=True))
        return

    console.print(f"[bold green]{escape(chosen.describe())}[/bold green]")
    if chosen.url:
        console.print(_shorten(chosen.url), soft_wrap=True)


@formats_app.command("extract")
def extract(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved page source"),
    variable: str = typer.Option(
        PLAYER_RESPONSE_VARIABLE, "--var", help="Script variable holding the literal"
    ),
) -> None:
    """Print the JSON literal assigned to a script variable."""
    result = find_embedded_json(_read_input(source), variable)
    if isinstance(result, Err):
        display_tubeformat_error(result.error)
        raise typer.Exit(EXIT_USER_ERROR)
    console.print_json(json.dumps(result.value))
