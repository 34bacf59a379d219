"""Mini README: Geodesic measurements on the WGS84 ellipsoid.

Structure:
    * segment_length - metres between two (lon, lat) points.
    * bearing - compass bearing in [0, 360) from one point toward another.
    * line_length - total length of a polyline in metres.
    * along - point located a given arc length along a polyline.

All helpers share a single ``pyproj.Geod`` instance. Coordinates are
(longitude, latitude) in decimal degrees; any trailing altitude component is
ignored.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from pyproj import Geod

GEOD = Geod(ellps="WGS84")

# flat conversion for tolerances and grid spacing, not for measurement
METRES_PER_DEGREE = 111_000.0

Coordinate = Sequence[float]


def segment_length(start: Coordinate, end: Coordinate) -> float:
    """Return the geodesic distance in metres between two points."""

    _, _, distance = GEOD.inv(start[0], start[1], end[0], end[1])
    return float(distance)


def bearing(start: Coordinate, end: Coordinate) -> float:
    """Return the forward azimuth from ``start`` to ``end`` in [0, 360)."""

    azimuth, _, _ = GEOD.inv(start[0], start[1], end[0], end[1])
    return float(azimuth) % 360.0


def segment_lengths(coordinates: Sequence[Coordinate]) -> List[float]:
    """Return the length of each consecutive segment of a polyline."""

    return [
        segment_length(coordinates[index - 1], coordinates[index])
        for index in range(1, len(coordinates))
    ]


def line_length(coordinates: Sequence[Coordinate]) -> float:
    """Return the total polyline length in metres (0 for fewer than 2 points)."""

    return sum(segment_lengths(coordinates))


def along(coordinates: Sequence[Coordinate], distance: float) -> Tuple[float, float]:
    """Return the point ``distance`` metres along the polyline.

    Distances at or below zero give the first vertex; distances at or beyond
    the line length give the exact final vertex rather than a recomputed one.
    """

    if not coordinates:
        raise ValueError("At least one coordinate is required")
    if distance <= 0:
        return (float(coordinates[0][0]), float(coordinates[0][1]))

    travelled = 0.0
    for index, length in enumerate(segment_lengths(coordinates)):
        if length > 0 and travelled + length > distance:
            start = coordinates[index]
            end = coordinates[index + 1]
            azimuth, _, _ = GEOD.inv(start[0], start[1], end[0], end[1])
            lon, lat, _ = GEOD.fwd(start[0], start[1], azimuth, distance - travelled)
            return (float(lon), float(lat))
        travelled += length

    last = coordinates[-1]
    return (float(last[0]), float(last[1]))
