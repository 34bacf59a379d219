"""Mini README: Tests for path statistics and validation helpers.

Confirms geodesic distances, duration maths, altitude summaries, the
altitude profile ordering and both validation checks, including the empty
and single-waypoint edge cases.
"""

from __future__ import annotations

import pytest

from dronepath.route_planning import (
    altitude_profile,
    altitude_range,
    coordinates_to_waypoints,
    flight_duration,
    set_waypoint_altitude,
    summarise_path,
    total_distance,
    validate_boundary,
    validate_max_altitude,
)

BOUNDARY = [(0.0, 0.0), (0.01, 0.0), (0.01, 0.01), (0.0, 0.01), (0.0, 0.0)]


def _meridian_path():
    waypoints = coordinates_to_waypoints([(0.005, 0.0), (0.005, 0.005), (0.005, 0.005), (0.005, 0.01)], altitude=50.0)
    waypoints = set_waypoint_altitude(waypoints, waypoints[1].id, 100.0)
    return set_waypoint_altitude(waypoints, waypoints[3].id, 150.0)


def test_empty_and_single_paths_are_tolerated() -> None:
    single = coordinates_to_waypoints([(0.0, 0.0)], altitude=30.0)

    for waypoints in ([], single):
        assert total_distance(waypoints) == 0.0
        assert flight_duration(waypoints, 10.0) == 0.0
        assert validate_boundary(waypoints, BOUNDARY) == []
    assert altitude_range([]).min == 0.0
    assert altitude_range([]).average == 0.0
    assert altitude_profile([]) == []
    assert altitude_profile(single)[0].distance == 0.0


def test_total_distance_and_duration() -> None:
    waypoints = _meridian_path()

    distance = total_distance(waypoints)
    assert distance == pytest.approx(1105.74, rel=1e-3)
    assert flight_duration(waypoints, 10.0) == pytest.approx(distance / 10.0)
    with pytest.raises(ValueError):
        flight_duration(waypoints, 0.0)


def test_altitude_range_summarises_altitudes() -> None:
    summary = altitude_range(_meridian_path())

    assert summary.min == 50.0
    assert summary.max == 150.0
    assert summary.average == pytest.approx(87.5)


def test_altitude_profile_is_cumulative_and_monotonic() -> None:
    waypoints = _meridian_path()
    profile = altitude_profile(waypoints)

    assert [point.waypoint_id for point in profile] == [waypoint.id for waypoint in waypoints]
    assert [point.altitude for point in profile] == [50.0, 100.0, 50.0, 150.0]
    distances = [point.distance for point in profile]
    assert distances[0] == 0.0
    assert all(later >= earlier for earlier, later in zip(distances, distances[1:]))
    assert distances[2] == distances[1]
    assert distances[-1] == pytest.approx(total_distance(waypoints))
    assert profile[3].label == "WP4"


def test_validate_boundary_flags_outside_points() -> None:
    waypoints = coordinates_to_waypoints(
        [(0.005, 0.005), (0.02, 0.005), (0.0, 0.005), (-0.001, -0.001)], altitude=50.0
    )

    outside = validate_boundary(waypoints, BOUNDARY)
    assert outside == [waypoints[1].id, waypoints[3].id]


def test_validate_max_altitude_uses_limit() -> None:
    waypoints = _meridian_path()

    assert validate_max_altitude(waypoints) == []
    assert validate_max_altitude(waypoints, max_altitude=99.0) == [waypoints[1].id, waypoints[3].id]


def test_summarise_path_rounds_values() -> None:
    summary = summarise_path(_meridian_path(), speed=10.0)

    assert summary["distance_m"] == 1106
    assert summary["duration_s"] == 111
    assert summary["duration_minutes"] == pytest.approx(1.8)
    assert summary["waypoint_count"] == 4
    assert summary["line_count"] == 2
    assert summary["altitude_range"] == {"min": 50, "max": 150, "average": 88}

    empty = summarise_path([], speed=10.0)
    assert empty["distance_m"] == 0
    assert empty["waypoint_count"] == 0
