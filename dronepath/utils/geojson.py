"""Mini README: GeoJSON helper utilities for Dronepath.

Structure:
    * boundary_from_geojson - validate a Polygon payload and return its outer ring.
    * centerline_from_geojson - validate a LineString payload and return its coordinates.
    * waypoints_to_line_string - flight line as a GeoJSON LineString.
    * waypoints_to_3d_geojson - path, ground shadow, altitude poles and markers.
    * geometry_to_geojson - serialise shapely geometries such as corridor buffers.

Parsing helpers accept either a JSON string or an already decoded mapping,
wrapped in a Feature or bare, and raise ``ValueError`` with a readable
message on anything else.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from shapely.geometry import mapping
from shapely.geometry.base import BaseGeometry

from ..route_planning.waypoints import Waypoint, sort_by_order

Payload = Union[str, Mapping[str, Any]]


def _geometry(payload: Payload, expected_type: str) -> Mapping[str, Any]:
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as error:
            raise ValueError("GeoJSON payload is invalid JSON") from error
    if not isinstance(payload, Mapping):
        raise ValueError("GeoJSON payload must be an object")

    if payload.get("type") == "Feature":
        geometry = payload.get("geometry") or {}
    else:
        geometry = payload

    if geometry.get("type") != expected_type:
        raise ValueError(f"Only {expected_type} GeoJSON payloads are supported")
    if not geometry.get("coordinates"):
        raise ValueError(f"{expected_type} coordinates are required")
    return geometry


def _pairs(points: Sequence[Sequence[Any]]) -> List[List[float]]:
    try:
        return [[float(point[0]), float(point[1])] for point in points]
    except (TypeError, ValueError, IndexError) as error:
        raise ValueError("Coordinates must be [longitude, latitude] pairs") from error


def boundary_from_geojson(payload: Payload) -> List[List[float]]:
    """Return the outer ring of a Polygon payload as [lon, lat] pairs."""

    geometry = _geometry(payload, "Polygon")
    return _pairs(geometry["coordinates"][0])


def centerline_from_geojson(payload: Payload) -> List[List[float]]:
    """Return the coordinates of a LineString payload as [lon, lat] pairs."""

    geometry = _geometry(payload, "LineString")
    return _pairs(geometry["coordinates"])


def geometry_to_geojson(geometry: Optional[BaseGeometry]) -> Optional[Dict[str, Any]]:
    """Return a GeoJSON geometry mapping, or ``None`` for a missing geometry."""

    if geometry is None:
        return None
    return json.loads(json.dumps(mapping(geometry)))


def waypoints_to_line_string(waypoints: Sequence[Waypoint]) -> Optional[Dict[str, Any]]:
    """Return the flight line as a 3D LineString (``None`` below two waypoints)."""

    if len(waypoints) < 2:
        return None
    return {
        "type": "LineString",
        "coordinates": [list(waypoint.position) for waypoint in sort_by_order(waypoints)],
    }


def waypoints_to_3d_geojson(waypoints: Sequence[Waypoint]) -> Optional[Dict[str, Any]]:
    """Build the FeatureCollection used for 3D previews (``None`` when empty)."""

    if not waypoints:
        return None
    ordered = sort_by_order(waypoints)
    features: List[Dict[str, Any]] = [
        {
            "type": "Feature",
            "properties": {"type": "flightPath"},
            "geometry": {
                "type": "LineString",
                "coordinates": [list(waypoint.position) for waypoint in ordered],
            },
        },
        {
            "type": "Feature",
            "properties": {"type": "groundShadow"},
            "geometry": {
                "type": "LineString",
                "coordinates": [[waypoint.longitude, waypoint.latitude, 0.0] for waypoint in ordered],
            },
        },
    ]
    for waypoint in ordered:
        features.append(
            {
                "type": "Feature",
                "properties": {
                    "type": "altitudePole",
                    "waypointId": waypoint.id,
                    "order": waypoint.order,
                    "altitude": waypoint.altitude,
                },
                "geometry": {
                    "type": "LineString",
                    "coordinates": [
                        [waypoint.longitude, waypoint.latitude, 0.0],
                        list(waypoint.position),
                    ],
                },
            }
        )
    for waypoint in ordered:
        features.append(
            {
                "type": "Feature",
                "properties": {
                    "type": "waypointMarker",
                    "waypointId": waypoint.id,
                    "order": waypoint.order,
                    "label": waypoint.label,
                    "altitude": waypoint.altitude,
                    "waypointType": waypoint.type.value,
                },
                "geometry": {"type": "Point", "coordinates": list(waypoint.position)},
            }
        )
    return {"type": "FeatureCollection", "features": features}
