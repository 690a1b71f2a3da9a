"""Decoding of a single whitespace-split SURFRAD data line."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Sequence, Tuple

from surfrad.errors import FieldParseError, IncompleteRecordError, IncompleteTimestampError
from surfrad.models.records import Entry, RawTimestamp
from surfrad.services.normalizer import normalize_entry

TIMESTAMP_TOKENS = 7
COMPLETE_RECORD_TOKENS = 47

# Token position of each measurement. The odd positions 9..47 between them
# carry QC flags, which are not read.
MEASUREMENT_POSITIONS: Tuple[Tuple[int, str], ...] = (
    (7, "solar_zenith_angle"),
    (8, "downwelling_solar"),
    (10, "upwelling_solar"),
    (12, "direct_normal_solar"),
    (14, "downwelling_diffuse_solar"),
    (16, "downwelling_ir"),
    (18, "downwelling_ir_case_temp"),
    (20, "downwelling_ir_dome_temp"),
    (22, "upwelling_ir"),
    (24, "upwelling_ir_case_temp"),
    (26, "upwelling_ir_dome_temp"),
    (28, "global_uvb"),
    (30, "photosynthetically_active_radiation"),
    (32, "net_solar"),
    (34, "net_ir"),
    (36, "total_net_radiation"),
    (38, "temperature_c"),
    (40, "relative_humidity"),
    (42, "wind_speed"),
    (44, "wind_direction"),
    (46, "barometric_pressure"),
)

_TIMESTAMP_COMPONENTS = ("year", "julian_day", "month", "day", "hour", "minute")


def parse_float(token: str) -> float:
    """Lenient float conversion: anything unparseable reads as zero."""
    try:
        return float(token)
    except ValueError:
        return 0.0


def calendar_timestamp(year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    """Build a UTC timestamp, rolling out-of-range components forward.

    Day 30 of February becomes 1 March and hour 24 becomes midnight of the
    next day. Only a year outside what :class:`datetime` supports raises.
    """
    year_carry, month_index = divmod(month - 1, 12)
    start = datetime(year + year_carry, month_index + 1, 1, tzinfo=timezone.utc)
    return start + timedelta(days=day - 1, hours=hour, minutes=minute)


def parse_timestamp(
    fields: Sequence[str], line_number: Optional[int] = None
) -> Tuple[RawTimestamp, datetime]:
    if len(fields) < TIMESTAMP_TOKENS:
        raise IncompleteTimestampError(
            f"incomplete timestamp: {list(fields)}", line_number=line_number
        )

    components: Dict[str, int] = {}
    for position, name in enumerate(_TIMESTAMP_COMPONENTS):
        token = fields[position]
        try:
            components[name] = int(token)
        except ValueError as exc:
            raise FieldParseError(
                f"error parsing {name}: invalid integer {token!r}",
                line_number=line_number,
            ) from exc

    raw = RawTimestamp(decimal_time=parse_float(fields[6]), **components)

    # Julian day and decimal time are kept for reference only.
    try:
        timestamp = calendar_timestamp(raw.year, raw.month, raw.day, raw.hour, raw.minute)
    except (ValueError, OverflowError) as exc:
        raise FieldParseError(
            f"timestamp out of range {raw.year}-{raw.month}-{raw.day} "
            f"{raw.hour}:{raw.minute}: {exc}",
            line_number=line_number,
        ) from exc

    return raw, timestamp


def decode_line(
    fields: Sequence[str], line_number: Optional[int] = None
) -> Tuple[Entry, Optional[IncompleteRecordError]]:
    """Decode one tokenized data line into a normalized :class:`Entry`.

    Raises :class:`FieldParseError` when the timestamp cannot be built. A
    line shorter than a complete record still decodes; its missing trailing
    measurements are zero and an :class:`IncompleteRecordError` is returned
    alongside the entry so the caller can decide whether to keep it.
    """
    raw, timestamp = parse_timestamp(fields, line_number=line_number)

    measurements: Dict[str, float] = {}
    token_count = len(fields)
    for position, name in MEASUREMENT_POSITIONS:
        if position < token_count:
            measurements[name] = parse_float(fields[position])

    entry = normalize_entry(Entry(raw_timestamp=raw, timestamp=timestamp, **measurements))

    warning: Optional[IncompleteRecordError] = None
    if token_count < COMPLETE_RECORD_TOKENS:
        warning = IncompleteRecordError(
            f"incomplete record: {list(fields)}", line_number=line_number
        )
    return entry, warning
