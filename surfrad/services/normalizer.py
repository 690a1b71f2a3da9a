"""Replacement of "missing data" sentinels with zero values."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from surfrad.models.records import Entry, RawTimestamp

FLOAT_SENTINEL = -9999.9
INT_SENTINEL = -9999

# The zero instant; a timestamp equal to it is treated as absent.
ZERO_TIMESTAMP = datetime(1, 1, 1, tzinfo=timezone.utc)

SentinelRule = Tuple[str, Any, Any]

SENTINEL_RULES: Tuple[SentinelRule, ...] = tuple(
    (field, FLOAT_SENTINEL, 0.0)
    for field in (
        "solar_zenith_angle",
        "downwelling_solar",
        "upwelling_solar",
        "direct_normal_solar",
        "downwelling_diffuse_solar",
        "downwelling_ir",
        "downwelling_ir_case_temp",
        "downwelling_ir_dome_temp",
        "upwelling_ir",
        "upwelling_ir_case_temp",
        "upwelling_ir_dome_temp",
        "global_uvb",
        "photosynthetically_active_radiation",
        "net_solar",
        "net_ir",
        "total_net_radiation",
        "temperature_c",
        "relative_humidity",
        "wind_speed",
        "wind_direction",
        "barometric_pressure",
    )
)

RAW_SENTINEL_RULES: Tuple[SentinelRule, ...] = (
    ("year", INT_SENTINEL, 0),
    ("julian_day", INT_SENTINEL, 0),
    ("month", INT_SENTINEL, 0),
    ("day", INT_SENTINEL, 0),
    ("hour", INT_SENTINEL, 0),
    ("minute", INT_SENTINEL, 0),
    ("decimal_time", FLOAT_SENTINEL, 0.0),
)


def _apply_rules(record: Any, rules: Tuple[SentinelRule, ...]) -> Dict[str, Any]:
    changes: Dict[str, Any] = {}
    for field, sentinel, zero in rules:
        if getattr(record, field) == sentinel:
            changes[field] = zero
    return changes


def normalize_raw_timestamp(raw: RawTimestamp) -> RawTimestamp:
    changes = _apply_rules(raw, RAW_SENTINEL_RULES)
    return replace(raw, **changes) if changes else raw


def normalize_entry(entry: Entry) -> Entry:
    """Return ``entry`` with every sentinel value replaced by its zero.

    A measurement that was never recorded becomes indistinguishable from a
    genuine zero reading. Applying this twice gives the same result as once.
    """
    changes = _apply_rules(entry, SENTINEL_RULES)

    raw = normalize_raw_timestamp(entry.raw_timestamp)
    if raw is not entry.raw_timestamp:
        changes["raw_timestamp"] = raw

    if entry.timestamp is not None and entry.timestamp == ZERO_TIMESTAMP:
        changes["timestamp"] = None

    if not changes:
        return entry
    return replace(entry, **changes)
