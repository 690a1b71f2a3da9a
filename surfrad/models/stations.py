"""Registry of SURFRAD stations and their three-letter codes."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple, Union


class StationCode(str, Enum):
    bon = "bon"
    fpk = "fpk"
    gwn = "gwn"
    tbl = "tbl"
    dra = "dra"
    psu = "psu"
    sxf = "sxf"


class StationName(str, Enum):
    bondville = "Bondville"
    fort_peck = "Fort Peck"
    goodwin_creek = "Goodwin Creek"
    table_mountain = "Table Mountain"
    desert_rock = "Desert Rock"
    penn_state = "Penn State"
    sioux_falls = "Sioux Falls"


# Bondville IL, Fort Peck MT, Goodwin Creek MS, Table Mountain CO,
# Desert Rock NV, Penn State PA, Sioux Falls SD.
_REGISTRY: Tuple[Tuple[StationCode, StationName], ...] = (
    (StationCode.bon, StationName.bondville),
    (StationCode.fpk, StationName.fort_peck),
    (StationCode.gwn, StationName.goodwin_creek),
    (StationCode.tbl, StationName.table_mountain),
    (StationCode.dra, StationName.desert_rock),
    (StationCode.psu, StationName.penn_state),
    (StationCode.sxf, StationName.sioux_falls),
)

# Keyed by plain strings so lookups stay exact and case-sensitive.
_CODE_TO_NAME: Dict[str, StationName] = {code.value: name for code, name in _REGISTRY}
_NAME_TO_CODE: Dict[str, StationCode] = {name.value: code for code, name in _REGISTRY}


def _key(value: Union[str, Enum]) -> str:
    return value.value if isinstance(value, Enum) else value


def valid_code(code: str) -> bool:
    return _key(code) in _CODE_TO_NAME


def valid_name(name: str) -> bool:
    return _key(name) in _NAME_TO_CODE


def name_for_code(code: str) -> Optional[StationName]:
    """Return the canonical name for ``code``, or ``None`` when unknown."""
    return _CODE_TO_NAME.get(_key(code))


def code_for_name(name: str) -> Optional[StationCode]:
    """Return the station code for ``name``, or ``None`` when unknown."""
    return _NAME_TO_CODE.get(_key(name))


def registered_stations() -> Tuple[Tuple[StationCode, StationName], ...]:
    return _REGISTRY
