"""Mini README: Perimeter survey generator.

Traces the boundary ring vertex by vertex, optionally after shrinking the
polygon inward so the aircraft stays clear of the fence line. The closing
vertex of the ring is never emitted; the path ends on the last distinct
vertex.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..geometry import buffer_polygon, polygon_from_ring, ring_coordinates
from ..logging_utils import get_logger
from .settings import PerimeterSettings
from .waypoints import Waypoint, create_waypoint, endpoint_type

LOGGER = get_logger(__name__)


def generate_perimeter_path(
    boundary: Sequence[Sequence[float]],
    settings: Optional[PerimeterSettings] = None,
) -> List[Waypoint]:
    """Return waypoints tracing ``boundary`` in ring order."""

    settings = settings or PerimeterSettings()
    if len(boundary) < 4:
        LOGGER.warning("Perimeter generation skipped: boundary has %s points", len(boundary))
        return []

    ring: List[Tuple[float, float]] = [(float(point[0]), float(point[1])) for point in boundary]
    if settings.inset > 0:
        shrunk = buffer_polygon(polygon_from_ring(ring), -settings.inset)
        if shrunk is None:
            LOGGER.warning("Inset of %s m collapses the boundary; no perimeter generated", settings.inset)
            return []
        ring = ring_coordinates(shrunk)

    if ring[0] == ring[-1]:
        ring = ring[:-1]

    count = len(ring)
    LOGGER.info("Generating perimeter with %s vertices (inset=%s m)", count, settings.inset)
    return [
        create_waypoint(
            longitude,
            latitude,
            settings.altitude,
            index,
            waypoint_type=endpoint_type(index, count),
        )
        for index, (longitude, latitude) in enumerate(ring)
    ]
