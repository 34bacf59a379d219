"""Mini README: Tests for GeoJSON import and export helpers.

These tests confirm polygon and line payloads are validated before they
reach the generators, and that waypoint exports carry the expected
features.
"""

from __future__ import annotations

import json

import pytest

from dronepath.route_planning import coordinates_to_waypoints
from dronepath.utils.geojson import (
    boundary_from_geojson,
    centerline_from_geojson,
    geometry_to_geojson,
    waypoints_to_3d_geojson,
    waypoints_to_line_string,
)

POLYGON = {
    "type": "Polygon",
    "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]],
}


def test_boundary_from_geojson_accepts_feature_and_geometry() -> None:
    feature = {"type": "Feature", "geometry": POLYGON, "properties": {}}

    assert boundary_from_geojson(json.dumps(POLYGON)) == POLYGON["coordinates"][0]
    assert boundary_from_geojson(feature) == POLYGON["coordinates"][0]


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "{}",
        json.dumps({"type": "Polygon", "coordinates": []}),
        json.dumps({"type": "LineString", "coordinates": [[0, 0], [1, 1]]}),
        json.dumps({"type": "Polygon", "coordinates": [[["a", "b"]]]}),
        "[]",
    ],
)
def test_boundary_from_geojson_rejects_invalid_payloads(payload: str) -> None:
    with pytest.raises(ValueError):
        boundary_from_geojson(payload)


def test_centerline_from_geojson_reads_coordinates() -> None:
    line = {"type": "LineString", "coordinates": [[0, 0], [0, 0.01, 12.0]]}

    assert centerline_from_geojson(line) == [[0.0, 0.0], [0.0, 0.01]]
    with pytest.raises(ValueError):
        centerline_from_geojson(POLYGON)


def test_waypoint_exports() -> None:
    waypoints = coordinates_to_waypoints([(0.0, 0.0), (0.001, 0.0), (0.002, 0.0)], altitude=30.0)

    line = waypoints_to_line_string(waypoints)
    assert line["coordinates"][1] == [0.001, 0.0, 30.0]
    assert waypoints_to_line_string(waypoints[:1]) is None

    collection = waypoints_to_3d_geojson(waypoints)
    assert len(collection["features"]) == 2 + 2 * len(waypoints)
    markers = [f for f in collection["features"] if f["properties"]["type"] == "waypointMarker"]
    assert [marker["properties"]["label"] for marker in markers] == ["WP1", "WP2", "WP3"]
    assert markers[0]["properties"]["waypointType"] == "start"
    assert waypoints_to_3d_geojson([]) is None


def test_geometry_to_geojson_handles_missing_geometry() -> None:
    assert geometry_to_geojson(None) is None
