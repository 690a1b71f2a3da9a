"""Pydantic schemas for the parse report shown by the CLI."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from surfrad.errors import ErrorKind, SurfradError
from surfrad.models.records import Station
from surfrad.models.stations import StationCode


class ParseStatus(str, Enum):
    """Overall outcome of reading one station file."""

    parsed = "parsed"
    partial = "partial"
    failed = "failed"


class ParseIssue(BaseModel):
    """A single problem recorded while reading a file."""

    line_number: Optional[int] = Field(default=None, ge=1)
    kind: ErrorKind
    reason: str

    @classmethod
    def from_error(cls, error: SurfradError) -> "ParseIssue":
        return cls(line_number=error.line_number, kind=error.kind, reason=error.reason)


class ParseSummary(BaseModel):
    """Station metadata and outcome of a parse, without the entries themselves."""

    station_name: str
    station_code: Optional[StationCode] = None
    latitude: float
    longitude: float
    elevation: int
    version: int
    entry_count: int = Field(..., ge=0)
    first_timestamp: Optional[datetime] = Field(
        default=None, description="Timestamp of the first entry in file order."
    )
    last_timestamp: Optional[datetime] = Field(
        default=None, description="Timestamp of the last entry in file order."
    )
    status: ParseStatus
    issues: List[ParseIssue] = Field(default_factory=list)

    @classmethod
    def from_result(cls, station: Station, errors: Sequence[SurfradError]) -> "ParseSummary":
        if not errors:
            status = ParseStatus.parsed
        elif len(station) == 0:
            status = ParseStatus.failed
        else:
            status = ParseStatus.partial

        first = station.entries[0].timestamp if station.entries else None
        last = station.entries[-1].timestamp if station.entries else None

        return cls(
            station_name=station.name,
            station_code=station.code,
            latitude=station.location.latitude,
            longitude=station.location.longitude,
            elevation=station.location.elevation,
            version=station.version,
            entry_count=len(station),
            first_timestamp=first,
            last_timestamp=last,
            status=status,
            issues=[ParseIssue.from_error(error) for error in errors],
        )
