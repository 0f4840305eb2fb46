import math
from dataclasses import replace

import pytest

from rlv.profile import axis_bounds, build_level_profile, effective_level, profile_points, threshold_segments


def test_scenario_points_and_segments(station):
    prof = build_level_profile(station, 250)
    assert prof.points.to_dict("records") == [
        {"x": 0.0, "y": 0.0, "level": 250.0},
        {"x": 1.0, "y": 50.0, "level": 250.0},
        {"x": 2.0, "y": 0.0, "level": 250.0},
    ]
    assert prof.segments.as_tuple() == (100.0, 100.0, 100.0, 200.0)
    assert prof.y_interval == 100.0
    assert prof.y_max == 500.0
    assert prof.x_max == 2.0


def test_segments_sum_to_offset(station):
    for yellow, orange, red in [(400, 300, 200), (500, 500, 0), (0, 0, 0), (350.5, 120.25, 7.75)]:
        s = threshold_segments(replace(station, yellow=yellow, orange=orange, red=red))
        assert s.total == pytest.approx(station.offset)
        assert min(s.as_tuple()) >= 0


def test_default_level_is_half_offset(station):
    assert effective_level(station) == 250.0
    assert build_level_profile(station).level == 250.0
    # half-up rounding on odd offsets
    assert effective_level(replace(station, offset=5)) == 3.0
    assert effective_level(replace(station, offset=301)) == 151.0


def test_zero_level_is_not_default(station):
    assert effective_level(station, 0) == 0.0


def test_point_count_matches_samples(station):
    s = replace(station, x=[0, 2, 4, 6, 8], y=[3, 1, 0, 1, 3])
    pts = profile_points(s, 120)
    assert len(pts) == len(s.x) == len(s.y)
    assert (pts["level"] == 120).all()
    assert list(pts.columns) == ["x", "y", "level"]


def test_x_max_is_last_sample(station):
    s = replace(station, x=[-1.0, 5.0, 3.0], y=[1.0, 0.0, 1.0])
    x_min, x_max, _ = axis_bounds(s)
    assert x_max == 3.0
    assert x_min == -1.0


def test_x_min_keeps_zero(station):
    s = replace(station, x=[2.0, 4.0], y=[1.0, 1.0])
    assert axis_bounds(s)[0] == 0.0


def test_empty_profile_propagates_nan(station):
    prof = build_level_profile(replace(station, x=[], y=[]))
    assert prof.points.empty
    assert math.isnan(prof.x_max)
    assert math.isnan(prof.x_min)


def test_short_y_yields_nan_elevations(station):
    pts = profile_points(replace(station, y=[0.2]), 100)
    assert len(pts) == 3
    assert pts["y"].iloc[0] == pytest.approx(20.0)
    assert pts["y"].iloc[1:].isna().all()


def test_inputs_not_mutated(station):
    before = (list(station.x), list(station.y))
    build_level_profile(station, 10)
    assert (station.x, station.y) == before


def test_extra_y_samples_ignored(station):
    pts = profile_points(replace(station, x=[0.0, 1.0], y=[0.0, 1.0, 2.0]), 100)
    assert len(pts) == 2
    assert list(pts["y"]) == [0.0, 100.0]
