from __future__ import annotations

import json
import logging
import math
import os
from typing import Dict, List, Tuple

import pandas as pd

from .station import StationProfile

logger = logging.getLogger(__name__)

_X_COLUMNS = ("x", "distance_m")
_Y_COLUMNS = ("y", "elevation_m")


def validate_station(station: StationProfile) -> None:
    """Raise ValueError on the first broken geometry/threshold invariant."""
    if len(station.x) == 0:
        raise ValueError(f"Station {station.code}: empty cross-section.")
    if len(station.x) != len(station.y):
        raise ValueError(
            f"Station {station.code}: x/y length mismatch ({len(station.x)} != {len(station.y)})."
        )
    values = list(station.x) + list(station.y) + [station.red, station.orange, station.yellow, station.offset]
    if any(math.isnan(v) for v in values):
        raise ValueError(f"Station {station.code}: NaN in geometry or thresholds.")
    if not 0 <= station.red <= station.orange <= station.yellow <= station.offset:
        raise ValueError(
            f"Station {station.code}: thresholds must satisfy 0 <= red <= orange <= yellow <= offset "
            f"(got red={station.red}, orange={station.orange}, yellow={station.yellow}, offset={station.offset})."
        )


def load_stations(path: str | os.PathLike) -> Dict[str, StationProfile]:
    """Load station records from a JSON file keyed by station code.

    Accepts a top-level list of records or ``{"stations": [...]}``.
    Invalid records are logged and skipped. A missing, unreadable or
    malformed file -> empty dict.
    """
    if not os.path.exists(path):
        logger.info("Stations file %s not found", path)
        return {}
    try:
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Skipping stations file %s: %s", path, exc)
        return {}
    records = payload.get("stations", []) if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        logger.warning("Skipping stations file %s: expected a list of records, got %s", path, type(records).__name__)
        return {}

    stations: Dict[str, StationProfile] = {}
    for i, record in enumerate(records):
        try:
            station = StationProfile.from_record(record)
            validate_station(station)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping station record #%d in %s: %s", i, path, exc)
            continue
        if station.code in stations:
            logger.warning("Duplicate station code %s in %s; keeping last", station.code, path)
        stations[station.code] = station
    logger.info("Loaded %d stations from %s", len(stations), path)
    return stations


def _pick_column(df: pd.DataFrame, candidates: Tuple[str, ...]) -> str:
    for col in candidates:
        if col in df.columns:
            return col
    raise ValueError(f"Profile CSV lacks any of the columns {list(candidates)}.")


def load_profile_csv(path: str | os.PathLike) -> Tuple[List[float], List[float]]:
    """Read cross-section samples (x in m, y in m), sorted by x."""
    df = pd.read_csv(path)
    x_col = _pick_column(df, _X_COLUMNS)
    y_col = _pick_column(df, _Y_COLUMNS)
    c = df[[x_col, y_col]].apply(pd.to_numeric, errors="coerce").dropna().sort_values(x_col)
    if c.empty:
        raise ValueError(f"Empty cross-section in {path}.")
    return c[x_col].tolist(), c[y_col].tolist()


__all__ = [
    "validate_station",
    "load_stations",
    "load_profile_csv",
]
