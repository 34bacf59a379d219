"""Mini README: Geometry capability used by the path generators.

``geodesy`` covers ellipsoidal distances, bearings and along-line sampling;
``shapes`` covers polygon intersection, buffering and containment. Swapping
the geometry backend only touches this package.
"""

from .geodesy import METRES_PER_DEGREE, along, bearing, line_length, segment_length
from .shapes import (
    buffer_line,
    buffer_polygon,
    line_intersections,
    points_within,
    polygon_from_ring,
    ring_coordinates,
)

__all__ = [
    "METRES_PER_DEGREE",
    "along",
    "bearing",
    "buffer_line",
    "buffer_polygon",
    "line_intersections",
    "line_length",
    "points_within",
    "polygon_from_ring",
    "ring_coordinates",
    "segment_length",
]
