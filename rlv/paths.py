"""Path utilities and environment overrides.

 - project_root(): repo root (directory containing this file's parent)
 - default_stations_path(): station file used by the app and the export CLI

Environment variable overrides:
  RLV_STATIONS_FILE  explicit path to the stations JSON file
  RLV_DATA_ROOT      directory holding stations.json
"""

from __future__ import annotations

import os
from pathlib import Path

STATIONS_FILENAME = "stations.json"


def project_root() -> Path:
    # Assume this file is at <root>/rlv/paths.py
    return Path(__file__).resolve().parent.parent


def data_root() -> Path:
    env = os.environ.get("RLV_DATA_ROOT")
    if env:
        return Path(env).expanduser()
    return project_root() / "data"


def default_stations_path() -> Path:
    env = os.environ.get("RLV_STATIONS_FILE")
    if env:
        return Path(env).expanduser()
    return data_root() / STATIONS_FILENAME


__all__ = [
    "project_root",
    "data_root",
    "default_stations_path",
]
