"""Unit tests for the station registry."""

from __future__ import annotations

import pytest

from surfrad.models.stations import (
    StationCode,
    StationName,
    code_for_name,
    name_for_code,
    registered_stations,
    valid_code,
    valid_name,
)


def test_every_code_round_trips_through_its_name() -> None:
    for code in StationCode:
        name = name_for_code(code)
        assert name is not None
        assert code_for_name(name) is code


def test_every_name_round_trips_through_its_code() -> None:
    for name in StationName:
        code = code_for_name(name.value)
        assert code is not None
        assert name_for_code(code.value) is name


def test_registry_pairs_are_fixed() -> None:
    pairs = {code.value: name.value for code, name in registered_stations()}

    assert pairs == {
        "bon": "Bondville",
        "fpk": "Fort Peck",
        "gwn": "Goodwin Creek",
        "tbl": "Table Mountain",
        "dra": "Desert Rock",
        "psu": "Penn State",
        "sxf": "Sioux Falls",
    }


@pytest.mark.parametrize("code", ["xyz", "BON", "bo", " bon", ""])
def test_unknown_codes_are_rejected(code: str) -> None:
    assert valid_code(code) is False
    assert name_for_code(code) is None


@pytest.mark.parametrize("name", ["Nowhere, Narnia", "bondville", "BONDVILLE", "Fort Peck ", ""])
def test_unknown_names_are_rejected(name: str) -> None:
    assert valid_name(name) is False
    assert code_for_name(name) is None


def test_plain_strings_and_enum_members_are_equivalent() -> None:
    assert valid_code("gwn") and valid_code(StationCode.gwn)
    assert valid_name("Desert Rock") and valid_name(StationName.desert_rock)
    assert name_for_code("dra") is StationName.desert_rock
    assert code_for_name("Sioux Falls") is StationCode.sxf
