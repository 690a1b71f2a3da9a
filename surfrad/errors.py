"""Error types recorded while reading a station file."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Categories of problems a parse can report."""

    structural = "structural"
    field_parse = "field_parse"
    line_too_short = "line_too_short"
    incomplete_record = "incomplete_record"
    unknown_station = "unknown_station"


class SurfradError(Exception):
    """Base class for every problem found in a station file."""

    kind: ErrorKind = ErrorKind.field_parse

    def __init__(self, reason: str, line_number: Optional[int] = None) -> None:
        self.reason = reason
        self.line_number = line_number
        super().__init__(reason)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.reason
        return f"line {self.line_number}: {self.reason}"


class StructuralError(SurfradError):
    """The header is unusable; nothing past it can be read."""

    kind = ErrorKind.structural


class FieldParseError(SurfradError):
    """A single numeric subfield failed to convert."""

    kind = ErrorKind.field_parse


class IncompleteTimestampError(FieldParseError):
    """Fewer than the seven timestamp tokens are present."""


class LineTooShortError(SurfradError):
    kind = ErrorKind.line_too_short


class IncompleteRecordError(SurfradError):
    """A record was decoded but its trailing measurements were missing."""

    kind = ErrorKind.incomplete_record


class UnknownStationError(SurfradError):
    kind = ErrorKind.unknown_station
