"""Domain models produced by the station reader."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from surfrad.models.stations import StationCode, StationName, code_for_name, valid_name


@dataclass(frozen=True, slots=True)
class RawTimestamp:
    """Timestamp components exactly as they appear on a data line."""

    year: int
    julian_day: int
    month: int
    day: int
    hour: int
    minute: int
    # hour.decimalminutes, e.g. 23.5 is 23:30
    decimal_time: float


@dataclass(frozen=True, slots=True)
class Entry:
    """One data record: a timestamp plus the published measurements.

    Radiation terms are in W m^-2 (UVB in mW m^-2), instrument case and dome
    temperatures in kelvin, air temperature in degrees Celsius, wind speed in
    m/s, wind direction in degrees clockwise from north and pressure in mb.
    """

    raw_timestamp: RawTimestamp
    timestamp: Optional[datetime]

    solar_zenith_angle: float = 0.0
    downwelling_solar: float = 0.0
    upwelling_solar: float = 0.0
    direct_normal_solar: float = 0.0
    downwelling_diffuse_solar: float = 0.0
    downwelling_ir: float = 0.0
    downwelling_ir_case_temp: float = 0.0
    downwelling_ir_dome_temp: float = 0.0
    upwelling_ir: float = 0.0
    upwelling_ir_case_temp: float = 0.0
    upwelling_ir_dome_temp: float = 0.0
    global_uvb: float = 0.0
    photosynthetically_active_radiation: float = 0.0
    net_solar: float = 0.0
    net_ir: float = 0.0
    total_net_radiation: float = 0.0

    temperature_c: float = 0.0
    relative_humidity: float = 0.0
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    barometric_pressure: float = 0.0


@dataclass(frozen=True, slots=True)
class Location:
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: int = 0


@dataclass(frozen=True, slots=True)
class Station:
    """A parsed station file. Entries keep file order."""

    name: str
    location: Location
    version: int = 0
    entries: Tuple[Entry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def station_name(self) -> Optional[StationName]:
        if not valid_name(self.name):
            return None
        return StationName(self.name)

    @property
    def code(self) -> Optional[StationCode]:
        return code_for_name(self.name)
