"""Station geometry -> plotted profile dataset.

Everything here is a pure function of its inputs. Malformed geometry is not
rejected: an empty ``x`` yields NaN axis bounds and a short ``y`` yields NaN
elevations, so bad input shows up on the chart instead of raising.
Validation belongs to the loader (``rlv.data.validate_station``).
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from .station import LevelProfile, StationProfile, ThresholdSegments

CM_PER_M = 100.0
Y_TICKS = 5


def effective_level(station: StationProfile, current_level: Optional[float] = None) -> float:
    """Current level in cm, defaulting to half the offset (rounded half-up)."""
    if current_level is not None:
        return float(current_level)
    return float(math.floor(station.offset * 0.5 + 0.5))


def profile_points(station: StationProfile, level: float) -> pd.DataFrame:
    """One row per ``x`` sample: x (m), bed elevation y (cm), constant level."""
    x = pd.Series(station.x, dtype=float)
    y = pd.Series(station.y, dtype=float).reindex(x.index) * CM_PER_M
    return pd.DataFrame({"x": x, "y": y, "level": float(level)}, index=x.index)


def threshold_segments(station: StationProfile) -> ThresholdSegments:
    return ThresholdSegments(
        safe=station.offset - station.yellow,
        yellow_band=station.yellow - station.orange,
        orange_band=station.orange - station.red,
        red_band=station.red,
    )


def axis_bounds(station: StationProfile) -> Tuple[float, float, float]:
    """Return (x_min, x_max, y_interval).

    x_max is the last sample, not the largest one; x_min keeps zero in view.
    """
    xs = np.asarray(station.x, dtype=float)
    if xs.size == 0:
        x_min = x_max = float("nan")
    else:
        x_min = float(min(0.0, xs.min()))
        x_max = float(xs[-1])
    return x_min, x_max, station.offset / Y_TICKS


def build_level_profile(station: StationProfile, current_level: Optional[float] = None) -> LevelProfile:
    level = effective_level(station, current_level)
    x_min, x_max, y_interval = axis_bounds(station)
    return LevelProfile(
        points=profile_points(station, level),
        level=level,
        y_interval=y_interval,
        y_max=station.offset,
        x_min=x_min,
        x_max=x_max,
        segments=threshold_segments(station),
    )


__all__ = [
    "CM_PER_M",
    "effective_level",
    "profile_points",
    "threshold_segments",
    "axis_bounds",
    "build_level_profile",
]
