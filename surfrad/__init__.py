"""Reader for SURFRAD station data files."""

from surfrad.errors import (
    FieldParseError,
    IncompleteRecordError,
    IncompleteTimestampError,
    LineTooShortError,
    StructuralError,
    SurfradError,
    UnknownStationError,
)
from surfrad.models.records import Entry, Location, RawTimestamp, Station
from surfrad.services.reader import StationReader, read_station

__all__ = [
    "Entry",
    "FieldParseError",
    "IncompleteRecordError",
    "IncompleteTimestampError",
    "LineTooShortError",
    "Location",
    "RawTimestamp",
    "Station",
    "StationReader",
    "StructuralError",
    "SurfradError",
    "UnknownStationError",
    "read_station",
]
