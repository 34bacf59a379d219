"""Mini README: Path statistics and validation.

Structure:
    * AltitudeRange / ProfilePoint - small result records.
    * total_distance, flight_duration - geodesic length and time estimates.
    * altitude_range, altitude_profile - altitude summaries for charts.
    * validate_boundary, validate_max_altitude - ids of offending waypoints.
    * summarise_path - rounded statistics for dashboards and the CLI.

All functions are pure and accept empty or single-waypoint lists.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..configuration import get_settings
from ..geometry import METRES_PER_DEGREE, points_within, polygon_from_ring, segment_length
from ..logging_utils import get_logger
from .waypoints import Waypoint, sort_by_order

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class AltitudeRange:
    """Minimum, maximum and mean altitude of a path."""

    min: float = 0.0
    max: float = 0.0
    average: float = 0.0


@dataclass(slots=True)
class ProfilePoint:
    """One entry of an altitude profile chart."""

    distance: float
    altitude: float
    waypoint_id: str
    label: str
    order: int


def _leg_lengths(ordered: Sequence[Waypoint]) -> List[float]:
    return [
        segment_length(ordered[index - 1].position, ordered[index].position)
        for index in range(1, len(ordered))
    ]


def total_distance(waypoints: Sequence[Waypoint]) -> float:
    """Return the horizontal path length in metres."""

    return float(sum(_leg_lengths(sort_by_order(waypoints))))


def flight_duration(waypoints: Sequence[Waypoint], speed: float) -> float:
    """Return the flight time in seconds at ``speed`` m/s."""

    if speed <= 0:
        raise ValueError("Speed must be positive")
    return total_distance(waypoints) / speed


def altitude_range(waypoints: Sequence[Waypoint]) -> AltitudeRange:
    """Return min/max/average altitude, all zero for an empty path."""

    if not waypoints:
        return AltitudeRange()
    altitudes = np.array([waypoint.altitude for waypoint in waypoints], dtype=float)
    return AltitudeRange(
        min=float(altitudes.min()),
        max=float(altitudes.max()),
        average=float(altitudes.mean()),
    )


def altitude_profile(waypoints: Sequence[Waypoint]) -> List[ProfilePoint]:
    """Return cumulative distance against altitude, one entry per waypoint."""

    ordered = sort_by_order(waypoints)
    cumulative = [0.0]
    for length in _leg_lengths(ordered):
        cumulative.append(cumulative[-1] + length)
    return [
        ProfilePoint(
            distance=distance,
            altitude=waypoint.altitude,
            waypoint_id=waypoint.id,
            label=waypoint.label,
            order=waypoint.order,
        )
        for distance, waypoint in zip(cumulative, ordered)
    ]


def validate_boundary(
    waypoints: Sequence[Waypoint],
    boundary: Sequence[Sequence[float]],
) -> List[str]:
    """Return ids of waypoints lying outside ``boundary`` (in path order).

    Points on the boundary, or within ``boundary_tolerance_m`` of it, count
    as inside. A ring with fewer than four points cannot be checked and
    yields an empty list.
    """

    if not waypoints or len(boundary) < 4:
        return []
    ordered = sort_by_order(waypoints)
    polygon = polygon_from_ring(boundary)
    tolerance_deg = get_settings().boundary_tolerance_m / METRES_PER_DEGREE
    inside = points_within(polygon, [waypoint.position for waypoint in ordered], tolerance_deg)
    outside = [waypoint.id for waypoint, is_inside in zip(ordered, inside) if not is_inside]
    if outside:
        LOGGER.info("%s waypoints lie outside the flight boundary", len(outside))
    return outside


def validate_max_altitude(
    waypoints: Sequence[Waypoint], max_altitude: Optional[float] = None
) -> List[str]:
    """Return ids of waypoints above ``max_altitude`` (configured default)."""

    limit = get_settings().max_altitude if max_altitude is None else max_altitude
    return [
        waypoint.id for waypoint in sort_by_order(waypoints) if waypoint.altitude > limit
    ]


def summarise_path(waypoints: Sequence[Waypoint], speed: float) -> Dict[str, Any]:
    """Aggregate rounded statistics for display."""

    altitudes = altitude_range(waypoints)
    summary: Dict[str, Any] = {
        "distance_m": 0,
        "duration_s": 0,
        "duration_minutes": 0.0,
        "waypoint_count": len(waypoints),
        "line_count": 0,
        "altitude_range": {
            "min": round(altitudes.min),
            "max": round(altitudes.max),
            "average": round(altitudes.average),
        },
    }
    if len(waypoints) < 2:
        return summary

    distance = total_distance(waypoints)
    duration = flight_duration(waypoints, speed)
    summary.update(
        {
            "distance_m": round(distance),
            "duration_s": round(duration),
            "duration_minutes": round(duration / 60.0, 1),
            "line_count": math.ceil(len(waypoints) / 2),
        }
    )
    return summary
