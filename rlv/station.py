from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence

import pandas as pd

__all__ = [
    "StationProfile",
    "ThresholdSegments",
    "LevelProfile",
]

# Upstream feed keys -> field names
_RECORD_KEYS = {
    "codigo": "code",
    "ubicacion": "location",
    "umbral_amarillo": "yellow",
    "umbral_naranja": "orange",
    "umbral_rojo": "red",
}


def _samples(data: Mapping[str, Any], key: str) -> List[float]:
    values = data[key]
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise TypeError(f"{key!r} must be a sequence of numbers, got {type(values).__name__}")
    return [float(v) for v in values]


@dataclass(frozen=True)
class StationProfile:
    """Cross-section geometry and alert thresholds of one gauging station.

    ``x`` is distance across the channel (m), ``y`` bed elevation (m).
    Thresholds and ``offset`` are levels in cm.
    """

    code: str
    location: str
    x: List[float]
    y: List[float]
    yellow: float
    orange: float
    red: float
    offset: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "StationProfile":
        """Build from a station record, accepting feed keys or field names."""
        data = {_RECORD_KEYS.get(k, k): v for k, v in record.items()}
        return cls(
            code=str(data["code"]),
            location=str(data.get("location", "")),
            x=_samples(data, "x"),
            y=_samples(data, "y"),
            yellow=float(data["yellow"]),
            orange=float(data["orange"]),
            red=float(data["red"]),
            offset=float(data["offset"]),
        )


@dataclass(frozen=True)
class ThresholdSegments:
    safe: float
    yellow_band: float
    orange_band: float
    red_band: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.safe, self.yellow_band, self.orange_band, self.red_band)

    @property
    def total(self) -> float:
        return sum(self.as_tuple())


@dataclass(frozen=True)
class LevelProfile:
    points: pd.DataFrame  # columns: x (m), y (cm), level (cm)
    level: float
    y_interval: float
    y_max: float
    x_min: float
    x_max: float
    segments: ThresholdSegments
