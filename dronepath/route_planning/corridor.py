"""Mini README: Corridor path generator for linear features.

Structure:
    * CorridorResult - sampled waypoints, buffered corridor and path length.
    * generate_corridor_path - sample a centerline at fixed arc-length steps.

Used for roads, pipelines and waterways. The corridor buffer is computed
from the input centerline, not the sampled waypoints, and describes the
operating area rather than the flight line.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from shapely.geometry import Polygon

from ..geometry import along, bearing, buffer_line, line_length
from ..logging_utils import get_logger
from .settings import CorridorSettings
from .waypoints import Waypoint, WaypointType, create_waypoint

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class CorridorResult:
    """Output of a corridor generation."""

    waypoints: List[Waypoint] = field(default_factory=list)
    corridor_buffer: Optional[Polygon] = None
    path_length: float = 0.0


def generate_corridor_path(
    centerline: Sequence[Sequence[float]],
    settings: Optional[CorridorSettings] = None,
) -> CorridorResult:
    """Sample ``centerline`` every ``waypoint_spacing`` metres and buffer it."""

    settings = settings or CorridorSettings()
    if len(centerline) < 2:
        LOGGER.warning("Corridor generation skipped: centerline has %s points", len(centerline))
        return CorridorResult()

    coordinates = [(float(point[0]), float(point[1])) for point in centerline]
    path_length = line_length(coordinates)
    sample_count = int(math.floor(path_length / settings.waypoint_spacing)) + 1
    LOGGER.info(
        "Generating corridor over %.1f m with %s samples (spacing=%s m width=%s m)",
        path_length,
        sample_count,
        settings.waypoint_spacing,
        settings.width,
    )

    points = [
        along(coordinates, index * settings.waypoint_spacing) for index in range(sample_count)
    ]
    # the last sample and an appended terminal carry no heading
    headings: List[Optional[float]] = [
        bearing(point, points[index + 1]) for index, point in enumerate(points[:-1])
    ]
    headings.append(None)

    terminal = coordinates[-1]
    if points[-1] != terminal:
        points.append(terminal)
        headings.append(None)

    last_index = len(points) - 1
    waypoints: List[Waypoint] = []
    for index, (point, heading) in enumerate(zip(points, headings)):
        if index == 0:
            waypoint_type = WaypointType.START
        elif index == last_index:
            waypoint_type = WaypointType.END
        else:
            waypoint_type = WaypointType.WAYPOINT
        waypoints.append(
            create_waypoint(
                point[0],
                point[1],
                settings.altitude,
                index,
                waypoint_type=waypoint_type,
                heading=heading,
            )
        )

    corridor_buffer = buffer_line(coordinates, settings.width)
    return CorridorResult(
        waypoints=waypoints,
        corridor_buffer=corridor_buffer,
        path_length=path_length,
    )
