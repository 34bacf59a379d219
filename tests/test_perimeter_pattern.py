"""Mini README: Tests for the perimeter generator.

Checks ring-order tracing, that the closing vertex is never repeated, and
the inward inset buffer.
"""

from __future__ import annotations

import pytest

from dronepath.route_planning import (
    PerimeterSettings,
    WaypointType,
    generate_perimeter_path,
    validate_boundary,
)

SQUARE = [(0.0, 0.0), (0.009, 0.0), (0.009, 0.009), (0.0, 0.009), (0.0, 0.0)]


def test_traces_ring_without_closing_vertex() -> None:
    waypoints = generate_perimeter_path(SQUARE, PerimeterSettings(altitude=70))

    assert [waypoint.position[:2] for waypoint in waypoints] == SQUARE[:-1]
    assert [waypoint.type for waypoint in waypoints] == [
        WaypointType.START,
        WaypointType.WAYPOINT,
        WaypointType.WAYPOINT,
        WaypointType.END,
    ]
    assert all(waypoint.altitude == 70 for waypoint in waypoints)
    assert waypoints[-1].position != waypoints[0].position


def test_unclosed_ring_keeps_every_vertex() -> None:
    ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    waypoints = generate_perimeter_path(ring)

    assert len(waypoints) == 4
    assert waypoints[0].altitude == 120


def test_inset_moves_path_inside_boundary() -> None:
    """A 100 m inset keeps every vertex roughly 100 m inside the square."""

    waypoints = generate_perimeter_path(SQUARE, PerimeterSettings(inset=100))

    assert len(waypoints) >= 4
    assert waypoints[0].position[:2] != waypoints[-1].position[:2]
    assert validate_boundary(waypoints, SQUARE) == []
    assert all(waypoint.position[:2] not in SQUARE for waypoint in waypoints)
    west_edge = min(waypoint.longitude for waypoint in waypoints)
    assert west_edge == pytest.approx(100 / 111319.49, rel=1e-2)


def test_inset_collapsing_polygon_yields_empty_path() -> None:
    assert generate_perimeter_path(SQUARE, PerimeterSettings(inset=5000)) == []


def test_short_ring_yields_empty_path() -> None:
    assert generate_perimeter_path([(0.0, 0.0), (1.0, 0.0), (0.0, 0.0)]) == []


def test_negative_inset_is_rejected() -> None:
    with pytest.raises(ValueError):
        PerimeterSettings(inset=-5)
