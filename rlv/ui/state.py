from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from rlv.station import StationProfile

__all__ = [
    "LoadedData",
    "Controls",
]

@dataclass
class LoadedData:
    stations: Dict[str, StationProfile]
    source: str

@dataclass
class Controls:
    station_code: str
    current_level: Optional[float]  # None -> half the station offset
