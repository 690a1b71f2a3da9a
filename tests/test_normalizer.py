"""Unit tests for sentinel normalization."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from surfrad.models.records import Entry, RawTimestamp
from surfrad.services.normalizer import (
    FLOAT_SENTINEL,
    INT_SENTINEL,
    SENTINEL_RULES,
    ZERO_TIMESTAMP,
    normalize_entry,
)


def _entry(**overrides) -> Entry:
    raw = RawTimestamp(
        year=2024, julian_day=48, month=2, day=17, hour=23, minute=59, decimal_time=23.983
    )
    base = Entry(
        raw_timestamp=raw,
        timestamp=datetime(2024, 2, 17, 23, 59, tzinfo=timezone.utc),
        solar_zenith_angle=74.37,
        downwelling_solar=136.8,
        temperature_c=15.1,
    )
    return replace(base, **overrides)


def test_rules_cover_every_measurement() -> None:
    assert len(SENTINEL_RULES) == 21
    assert all(sentinel == FLOAT_SENTINEL and zero == 0.0 for _, sentinel, zero in SENTINEL_RULES)


def test_float_sentinels_become_zero() -> None:
    entry = _entry(downwelling_solar=FLOAT_SENTINEL, barometric_pressure=FLOAT_SENTINEL)

    normalized = normalize_entry(entry)

    assert normalized.downwelling_solar == 0.0
    assert normalized.barometric_pressure == 0.0
    assert normalized.solar_zenith_angle == 74.37
    assert normalized.temperature_c == 15.1


def test_near_sentinel_values_are_kept() -> None:
    entry = _entry(downwelling_solar=-9999.0, upwelling_solar=-9999.99)

    normalized = normalize_entry(entry)

    assert normalized.downwelling_solar == -9999.0
    assert normalized.upwelling_solar == -9999.99


def test_raw_timestamp_sentinels_become_zero() -> None:
    raw = RawTimestamp(
        year=2024,
        julian_day=INT_SENTINEL,
        month=2,
        day=17,
        hour=23,
        minute=59,
        decimal_time=FLOAT_SENTINEL,
    )

    normalized = normalize_entry(_entry(raw_timestamp=raw))

    assert normalized.raw_timestamp.julian_day == 0
    assert normalized.raw_timestamp.decimal_time == 0.0
    assert normalized.raw_timestamp.year == 2024


def test_zero_instant_is_treated_as_absent() -> None:
    normalized = normalize_entry(_entry(timestamp=ZERO_TIMESTAMP))

    assert normalized.timestamp is None


def test_epoch_timestamp_stays_present() -> None:
    epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)

    normalized = normalize_entry(_entry(timestamp=epoch))

    assert normalized.timestamp == epoch


def test_clean_entry_is_returned_unchanged() -> None:
    entry = _entry()

    assert normalize_entry(entry) is entry


def test_normalizing_twice_matches_normalizing_once() -> None:
    entry = _entry(
        timestamp=ZERO_TIMESTAMP,
        net_ir=FLOAT_SENTINEL,
        wind_speed=FLOAT_SENTINEL,
    )

    once = normalize_entry(entry)
    twice = normalize_entry(once)

    assert twice == once
    assert twice is once
