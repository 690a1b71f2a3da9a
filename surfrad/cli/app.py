from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from surfrad.cli.render import render_stations, render_summary
from surfrad.logging_config import configure_logging
from surfrad.models.schemas import ParseStatus, ParseSummary
from surfrad.services.reader import build_default_reader
from surfrad.settings import Settings, get_settings


@dataclass
class CLIState:
    settings: Settings
    debug: bool


app = typer.Typer(
    help="Inspect SURFRAD station data files.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    debug: Optional[bool] = typer.Option(
        None,
        "--debug/--no-debug",
        help="Trace parsing at DEBUG level (defaults to SURFRAD_DEBUG env or off).",
    ),
) -> None:
    """Entry point for the CLI."""
    settings = get_settings()
    enabled = settings.debug if debug is None else debug
    configure_logging("DEBUG" if enabled else settings.log_level)
    ctx.obj = CLIState(settings=settings, debug=enabled)


@app.command("inspect")
def inspect_command(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Path to a station data file."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
    max_errors: int = typer.Option(
        20, "--max-errors", min=0, help="Maximum number of issues to list in text output."
    ),
) -> None:
    """Parse a station file and report what was read and what went wrong."""
    state = _get_state(ctx)
    reader = build_default_reader(state.debug)
    with file.open("r", encoding=state.settings.encoding) as handle:
        station, errors = reader.read(handle)

    summary = ParseSummary.from_result(station, errors)
    if as_json:
        typer.echo(summary.model_dump_json(indent=2))
    else:
        render_summary(summary, max_errors=max_errors)

    if summary.status is ParseStatus.failed:
        raise typer.Exit(code=1)


@app.command("stations")
def stations_command() -> None:
    """List the known station codes and names."""
    render_stations()
