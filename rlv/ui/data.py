from __future__ import annotations
import os
from .state import LoadedData
from rlv.data import load_stations
from rlv.paths import default_stations_path


def load_all(stations_path: str | os.PathLike | None = None) -> LoadedData:
    path = stations_path if stations_path is not None else default_stations_path()
    return LoadedData(stations=load_stations(path), source=str(path))

__all__ = ["load_all"]
