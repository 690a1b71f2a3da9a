from __future__ import annotations

from typing import Any, Iterable

import typer

from surfrad.models.schemas import ParseStatus, ParseSummary
from surfrad.models.stations import registered_stations

_STATUS_COLORS = {
    ParseStatus.parsed: typer.colors.GREEN,
    ParseStatus.partial: typer.colors.YELLOW,
    ParseStatus.failed: typer.colors.RED,
}


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_summary(summary: ParseSummary, max_errors: int = 20) -> None:
    echo_heading("Station")
    echo_key_values(
        [
            ("name", summary.station_name),
            ("code", summary.station_code.value if summary.station_code else "unknown"),
            ("latitude", summary.latitude),
            ("longitude", summary.longitude),
            ("elevation", summary.elevation),
            ("version", summary.version),
        ]
    )

    typer.echo()
    echo_heading("Entries")
    echo_key_values(
        [
            ("entry_count", summary.entry_count),
            ("first_timestamp", summary.first_timestamp),
            ("last_timestamp", summary.last_timestamp),
        ]
    )
    typer.secho(f"status: {summary.status.value}", fg=_STATUS_COLORS[summary.status])

    typer.echo()
    echo_heading("Errors")
    if not summary.issues:
        typer.echo("No errors recorded.")
        return

    for issue in summary.issues[:max_errors]:
        where = f"line {issue.line_number}" if issue.line_number is not None else "stream"
        typer.echo(f"  - {where} [{issue.kind.value}]: {issue.reason}")
    hidden = len(summary.issues) - max_errors
    if hidden > 0:
        typer.echo(f"  ... {hidden} more")


def render_stations() -> None:
    echo_heading("Stations")
    for code, name in registered_stations():
        typer.echo(f"  - {code.value}: {name.value}")
