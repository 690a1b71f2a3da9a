"""Reading of whole SURFRAD station files from a text stream."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, List, Optional, Sequence, TextIO, Tuple, TypeVar

from surfrad.errors import (
    FieldParseError,
    LineTooShortError,
    StructuralError,
    SurfradError,
    UnknownStationError,
)
from surfrad.models.records import Entry, Location, Station
from surfrad.models.stations import valid_name
from surfrad.services.decoder import decode_line
from surfrad.settings import DEFAULT_MAX_LINE_TOKENS, MIN_LINE_TOKEN_LIMIT, get_settings

_logger = logging.getLogger(__name__)

_T = TypeVar("_T", int, float)

MIN_HEADER_FIELDS = 3
VERSION_HEADER_FIELDS = 6
MIN_DATA_TOKENS = 29

# Line numbers are physical, 1-based: name, header, then data.
_NAME_LINE = 1
_HEADER_LINE = 2


class _Header:
    """Mutable scratch state for the header while it is being read."""

    __slots__ = ("latitude", "longitude", "elevation", "version")

    def __init__(self) -> None:
        self.latitude = 0.0
        self.longitude = 0.0
        self.elevation = 0
        self.version = 0

    def location(self) -> Location:
        return Location(
            latitude=self.latitude, longitude=self.longitude, elevation=self.elevation
        )


class StationReader:
    """Parses a station file, salvaging every data line it can.

    Problems with individual fields or lines are collected and returned with
    the station rather than raised; only an unusable header stops the read.
    """

    def __init__(
        self,
        debug: bool = False,
        max_line_tokens: int = DEFAULT_MAX_LINE_TOKENS,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if max_line_tokens < MIN_LINE_TOKEN_LIMIT:
            raise ValueError(
                f"max_line_tokens must be at least {MIN_LINE_TOKEN_LIMIT}, got {max_line_tokens}"
            )
        self.debug = debug
        self.max_line_tokens = max_line_tokens
        self.logger = logger or _logger

    def read(self, stream: TextIO) -> Tuple[Station, List[SurfradError]]:
        errors: List[SurfradError] = []

        first = stream.readline()
        if not first:
            self._record(errors, StructuralError("empty stream: missing station name"))
            return Station(name="", location=Location()), errors

        name = first.strip()
        if not valid_name(name):
            self._record(
                errors,
                UnknownStationError(
                    f"invalid or unknown station name: {name!r}", line_number=_NAME_LINE
                ),
            )

        second = stream.readline()
        if not second:
            self._record(errors, StructuralError("missing header line", line_number=_HEADER_LINE))
            return Station(name=name, location=Location()), errors

        header = _Header()
        if not self._parse_header(second.split(), header, errors):
            return Station(name=name, location=header.location(), version=header.version), errors

        self._trace(
            "Station %s at latitude %.2f, longitude %.2f, elevation %d, version %d",
            name,
            header.latitude,
            header.longitude,
            header.elevation,
            header.version,
            extra={"station_name": name},
        )

        entries: List[Entry] = []
        for line_number, line in enumerate(stream, start=_HEADER_LINE + 1):
            fields = self._tokenize(line)
            if len(fields) < MIN_DATA_TOKENS:
                self._record(
                    errors,
                    LineTooShortError(
                        f"line too short: {len(fields)} of {MIN_DATA_TOKENS} required fields",
                        line_number=line_number,
                    ),
                    token_count=len(fields),
                )
                continue

            try:
                entry, warning = decode_line(fields, line_number=line_number)
            except FieldParseError as exc:
                self._trace("Rejected line: %s", line.rstrip("\n"))
                self._record(errors, exc)
                continue

            if warning is not None:
                self._record(errors, warning)

            entries.append(entry)
            self._trace("Parsed entry %s", entry, extra={"line_number": line_number})

        self._trace(
            "Processed %d entries",
            len(entries),
            extra={"entry_count": len(entries), "error_count": len(errors)},
        )

        station = Station(
            name=name,
            location=header.location(),
            version=header.version,
            entries=tuple(entries),
        )
        return station, errors

    def _parse_header(
        self, fields: Sequence[str], header: _Header, errors: List[SurfradError]
    ) -> bool:
        """Populate ``header``; return False when the parse cannot continue."""
        if len(fields) >= 1:
            header.latitude = self._header_value(fields[0], float, "latitude", errors)
        if len(fields) >= 2:
            header.longitude = self._header_value(fields[1], float, "longitude", errors)

        if len(fields) < MIN_HEADER_FIELDS:
            self._record(
                errors,
                StructuralError(f"invalid header length: {list(fields)}", line_number=_HEADER_LINE),
            )
            return False

        header.elevation = self._header_value(fields[2], int, "elevation", errors)

        # Fields 3 and 4 are present in the files but carry no meaning here.
        if len(fields) >= VERSION_HEADER_FIELDS:
            header.version = self._header_value(fields[5], int, "version", errors)
        return True

    def _header_value(
        self,
        token: str,
        convert: Callable[[str], _T],
        label: str,
        errors: List[SurfradError],
    ) -> _T:
        try:
            return convert(token)
        except ValueError:
            self._record(
                errors,
                FieldParseError(f"error parsing {label}: {token!r}", line_number=_HEADER_LINE),
            )
            return convert("0")

    def _tokenize(self, line: str) -> List[str]:
        return line.split(maxsplit=self.max_line_tokens)[: self.max_line_tokens]

    def _record(
        self,
        errors: List[SurfradError],
        error: SurfradError,
        token_count: Optional[int] = None,
    ) -> None:
        errors.append(error)
        self._trace(
            "Recorded %s error: %s",
            error.kind.value,
            error.reason,
            extra={
                "line_number": error.line_number,
                "kind": error.kind.value,
                "reason": error.reason,
                "token_count": token_count,
            },
        )

    def _trace(self, msg: str, *args, extra: Optional[dict] = None) -> None:
        if self.debug:
            self.logger.debug(msg, *args, extra=extra)


def read_station(
    stream: TextIO,
    *,
    debug: bool = False,
    max_line_tokens: int = DEFAULT_MAX_LINE_TOKENS,
    logger: Optional[logging.Logger] = None,
) -> Tuple[Station, List[SurfradError]]:
    """Read one station file from ``stream``.

    Returns the station together with every error met along the way, in the
    order they occurred. An empty list means the file parsed cleanly.
    """
    reader = StationReader(debug=debug, max_line_tokens=max_line_tokens, logger=logger)
    return reader.read(stream)


@lru_cache
def build_default_reader(debug: Optional[bool] = None) -> StationReader:
    """Factory that wires the reader from environment settings."""
    settings = get_settings()
    return StationReader(
        debug=settings.debug if debug is None else debug,
        max_line_tokens=settings.max_line_tokens,
    )
