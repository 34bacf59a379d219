"""Mini README: Tests for the stateful flight path session.

Covers pattern switching, generator wiring, selection bookkeeping, change
notifications and the derived statistics/validation views.
"""

from __future__ import annotations

import pytest

from dronepath import FlightPathSession
from dronepath.route_planning import FlightPathType, WaypointType

SQUARE = [(0.0, 0.0), (0.009, 0.0), (0.009, 0.009), (0.0, 0.009), (0.0, 0.0)]
CENTERLINE = [(0.0, 0.0), (0.0, 0.01)]


def test_new_session_is_empty_with_default_settings() -> None:
    session = FlightPathSession()

    assert session.pattern_type is FlightPathType.NONE
    assert session.waypoints == []
    assert session.corridor_buffer is None
    assert session.grid_settings.spacing == 30
    assert session.corridor_settings.width == 50


def test_switching_type_discards_path_and_selection() -> None:
    session = FlightPathSession()
    session.generate_corridor(CENTERLINE)
    session.select_waypoint(session.waypoints[1].id)
    session.start_editing()

    assert session.pattern_type is FlightPathType.CORRIDOR
    assert session.corridor_buffer is not None

    session.set_flight_path_type("grid")
    assert session.pattern_type is FlightPathType.GRID
    assert session.waypoints == []
    assert session.corridor_buffer is None
    assert session.selected_waypoint_id is None
    assert session.is_editing is False


def test_settings_survive_pattern_switches() -> None:
    session = FlightPathSession(SQUARE)
    session.update_grid_settings(spacing=100, altitude=90)
    session.update_corridor_settings(width=20)

    session.set_flight_path_type(FlightPathType.CORRIDOR)
    session.set_flight_path_type(FlightPathType.GRID)
    waypoints = session.generate_grid()

    assert session.grid_settings.spacing == 100
    assert session.corridor_settings.width == 20
    assert len(waypoints) == 18
    assert all(waypoint.altitude == 90 for waypoint in waypoints)


def test_invalid_settings_update_raises_and_keeps_previous() -> None:
    session = FlightPathSession()

    with pytest.raises(ValueError):
        session.update_grid_settings(spacing=-1)
    with pytest.raises(ValueError):
        session.update_corridor_settings(width=0)
    assert session.grid_settings.spacing == 30
    assert session.corridor_settings.width == 50


def test_generate_without_boundary_leaves_state() -> None:
    session = FlightPathSession()

    assert session.generate_grid() == []
    assert session.generate_perimeter() == []
    assert session.pattern_type is FlightPathType.NONE


def test_perimeter_uses_grid_altitude() -> None:
    session = FlightPathSession(SQUARE)
    session.update_grid_settings(altitude=45)

    waypoints = session.generate_perimeter()
    assert session.pattern_type is FlightPathType.PERIMETER
    assert len(waypoints) == 4
    assert {waypoint.altitude for waypoint in waypoints} == {45}


def test_deleting_selected_waypoint_clears_selection() -> None:
    session = FlightPathSession()
    session.load_manual_path([(0.0, 0.0), (0.001, 0.0), (0.002, 0.0)], altitude=40)
    first, second, third = session.waypoints

    session.select_waypoint(third.id)
    session.delete_waypoint(first.id)
    assert session.selected_waypoint_id == third.id
    assert session.selected_waypoint.order == 1

    session.delete_waypoint(third.id)
    assert session.selected_waypoint_id is None
    assert session.selected_waypoint is None
    assert [waypoint.id for waypoint in session.waypoints] == [second.id]
    assert session.waypoints[0].type is WaypointType.START


def test_editing_operations_notify_listener() -> None:
    events = []
    session = FlightPathSession(on_change=events.append)
    session.load_manual_path([(0.0, 0.0), (0.001, 0.0)], altitude=40)
    start, end = session.waypoints

    session.add_waypoint(0, 0.0005, 0.0005, 55.0)
    session.update_waypoint_position(start.id, 0.0, 0.0001)
    session.set_waypoint_altitude(end.id, 80.0)
    session.reorder_waypoints(2, 0)

    assert len(events) == 5
    assert session.pattern_type is FlightPathType.WAYPOINT
    assert session.waypoints[0].id == end.id
    assert session.waypoints[0].altitude == 80.0
    assert session.waypoints[1].position == (0.0, 0.0001, 40.0)
    assert [waypoint.order for waypoint in session.waypoints] == [0, 1, 2]


def test_corridor_notification_includes_buffer() -> None:
    events = []
    session = FlightPathSession(on_change=events.append)
    session.generate_corridor(CENTERLINE)

    assert events[-1]["type"] == "corridor"
    assert events[-1]["corridor_buffer"] is session.corridor_buffer


def test_statistics_and_validation_views() -> None:
    session = FlightPathSession(SQUARE)
    session.update_grid_settings(spacing=100, altitude=500)
    session.generate_grid()

    stats = session.statistics()
    assert stats["waypoint_count"] == 18
    assert stats["line_count"] == 9
    assert stats["distance_m"] > 9 * 1000
    assert stats["altitude_range"]["max"] == 500

    report = session.validate()
    assert report["outside_waypoints"] == []
    assert len(report["exceeding_waypoints"]) == 18
    assert report["valid"] is False
    assert session.validate(max_altitude=600)["valid"] is True

    profile = session.altitude_profile()
    assert len(profile) == 18


def test_geojson_export_includes_corridor_buffer() -> None:
    session = FlightPathSession()
    session.generate_corridor(CENTERLINE)
    collection = session.to_geojson()

    kinds = [feature["properties"]["type"] for feature in collection["features"]]
    assert kinds[0] == "flightPath"
    assert kinds[-1] == "corridorBuffer"
    assert collection["features"][-1]["geometry"]["type"] == "Polygon"


def test_clear_resets_session() -> None:
    session = FlightPathSession(SQUARE)
    session.update_grid_settings(spacing=100)
    session.generate_grid()
    session.toggle_editing()

    session.clear()
    assert session.pattern_type is FlightPathType.NONE
    assert session.waypoints == []
    assert session.grid_settings.spacing == 30
    assert session.is_editing is False
    assert session.boundary is not None
    assert session.to_geojson() == {"type": "FeatureCollection", "features": []}
