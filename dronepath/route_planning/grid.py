"""Mini README: Serpentine (boustrophedon) grid coverage generator.

Structure:
    * generate_grid_pattern - fill a boundary polygon with parallel passes.
    * sweep_lines - candidate line family for a rotation angle and spacing.

Candidate lines run along ``angle`` (degrees counter-clockwise from east)
and are offset from the polygon centroid in ``spacing`` steps. Spacing is
converted to degrees with a flat 111 km per degree factor, so east-west
spacing widens slightly away from the equator.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..configuration import get_settings
from ..geometry import METRES_PER_DEGREE, line_intersections, polygon_from_ring
from ..logging_utils import get_logger
from .settings import GridSettings
from .waypoints import Waypoint, WaypointType, create_waypoint

LOGGER = get_logger(__name__)

EXTENSION_FACTOR = 1.5


def sweep_lines(
    centre: Tuple[float, float],
    angle: float,
    spacing_deg: float,
    half_length: float,
    half_count: int,
) -> np.ndarray:
    """Return ``(2 * half_count + 1, 2, 2)`` line endpoints ordered by offset."""

    angle_rad = math.radians(angle)
    along_x, along_y = math.cos(angle_rad), math.sin(angle_rad)
    # unit normal, i.e. the direction at angle + 90 degrees
    normal_x, normal_y = -along_y, along_x
    offsets = np.arange(-half_count, half_count + 1, dtype=float) * spacing_deg
    mid_x = centre[0] + offsets * normal_x
    mid_y = centre[1] + offsets * normal_y
    starts = np.column_stack((mid_x - half_length * along_x, mid_y - half_length * along_y))
    ends = np.column_stack((mid_x + half_length * along_x, mid_y + half_length * along_y))
    return np.stack((starts, ends), axis=1)


def generate_grid_pattern(
    boundary: Sequence[Sequence[float]],
    settings: Optional[GridSettings] = None,
) -> List[Waypoint]:
    """Create a serpentine coverage path inside ``boundary``.

    Returns an empty list when the ring has fewer than four points, encloses
    no area, or no sweep line crosses it. Raises ``ValueError`` when the
    spacing is so fine that the candidate line count exceeds the configured
    ``max_grid_lines``.
    """

    settings = settings or GridSettings()
    if len(boundary) < 4:
        LOGGER.warning("Grid generation skipped: boundary has %s points", len(boundary))
        return []

    polygon = polygon_from_ring(boundary)
    if polygon.area == 0:
        LOGGER.warning("Grid generation skipped: boundary encloses no area")
        return []
    if not polygon.is_valid:
        LOGGER.warning("Boundary is not a simple polygon; grid may be incomplete")

    min_x, min_y, max_x, max_y = polygon.bounds
    diagonal = math.hypot(max_x - min_x, max_y - min_y)
    centroid = polygon.centroid
    spacing_deg = settings.spacing / METRES_PER_DEGREE
    half_length = diagonal * EXTENSION_FACTOR
    half_count = math.ceil(half_length / spacing_deg)

    candidate_count = 2 * half_count + 1
    limit = get_settings().max_grid_lines
    if candidate_count > limit:
        raise ValueError(
            f"Spacing of {settings.spacing} m needs {candidate_count} sweep lines;"
            f" the limit is {limit}"
        )

    LOGGER.info(
        "Generating grid with spacing=%s m angle=%s over %s candidate lines",
        settings.spacing,
        settings.angle,
        candidate_count,
    )
    lines = sweep_lines((centroid.x, centroid.y), settings.angle, spacing_deg, half_length, half_count)

    segments: List[Tuple[np.ndarray, np.ndarray]] = []
    for hits in line_intersections(lines, polygon):
        if len(hits) < 2:
            continue
        # x first, y breaks ties on vertical passes
        ranked = np.lexsort((hits[:, 1], hits[:, 0]))
        segments.append((hits[ranked[0]], hits[ranked[-1]]))

    if not segments:
        LOGGER.warning("Grid generation produced no passes across the boundary")
        return []

    waypoints: List[Waypoint] = []
    last_line = len(segments) - 1
    for line_index, (entry, exit_point) in enumerate(segments):
        if line_index % 2 == 1:
            entry, exit_point = exit_point, entry
        waypoints.append(
            create_waypoint(
                entry[0],
                entry[1],
                settings.altitude,
                len(waypoints),
                waypoint_type=WaypointType.START if line_index == 0 else WaypointType.TURN,
            )
        )
        waypoints.append(
            create_waypoint(
                exit_point[0],
                exit_point[1],
                settings.altitude,
                len(waypoints),
                waypoint_type=WaypointType.END if line_index == last_line else WaypointType.WAYPOINT,
            )
        )

    LOGGER.info("Grid generated %s passes and %s waypoints", len(segments), len(waypoints))
    return waypoints
