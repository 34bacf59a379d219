"""Mini README: Utility helpers for Dronepath.

Currently exports the GeoJSON import/export helpers used by the session and
the command-line planner.
"""

from .geojson import (
    boundary_from_geojson,
    centerline_from_geojson,
    geometry_to_geojson,
    waypoints_to_3d_geojson,
    waypoints_to_line_string,
)

__all__ = [
    "boundary_from_geojson",
    "centerline_from_geojson",
    "geometry_to_geojson",
    "waypoints_to_3d_geojson",
    "waypoints_to_line_string",
]
