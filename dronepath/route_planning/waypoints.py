"""Mini README: Waypoint model shared by generators, mutations and analytics.

Structure:
    * WaypointType - start/end/turn/waypoint/hover/photo roles.
    * Waypoint - immutable dataclass capturing position, order and metadata.
    * create_waypoint - factory assigning identifiers and timestamps.
    * coordinates_to_waypoints - wrap a manual coordinate list as a path.
    * resequence - renumber a list 0..n-1 and re-derive endpoint types.

Waypoint lists are plain Python lists kept sorted by ``order`` with ``order``
equal to the list index. Waypoints are frozen; every change produces a new
instance through ``dataclasses.replace``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Position = Tuple[float, float, float]


class WaypointType(str, Enum):
    """Role of a waypoint within a path."""

    START = "start"
    END = "end"
    TURN = "turn"
    WAYPOINT = "waypoint"
    HOVER = "hover"
    PHOTO = "photo"


_ENDPOINT_TYPES = {WaypointType.START, WaypointType.END}


def _new_waypoint_id() -> str:
    return f"wp_{uuid.uuid4().hex[:12]}"


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(slots=True, frozen=True)
class Waypoint:
    """Single navigation point of a flight path."""

    id: str
    position: Position
    order: int
    type: WaypointType = WaypointType.WAYPOINT
    heading: Optional[float] = None
    speed: Optional[float] = None
    hover_time: Optional[float] = None
    actions: Tuple[Any, ...] = ()
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def label(self) -> str:
        """Display label derived from the order."""

        return f"WP{self.order + 1}"

    @property
    def longitude(self) -> float:
        return self.position[0]

    @property
    def latitude(self) -> float:
        return self.position[1]

    @property
    def altitude(self) -> float:
        return self.position[2]

    def as_dict(self) -> Dict[str, Any]:
        """Export the waypoint with JSON serialisable values."""

        return {
            "id": self.id,
            "coordinates": list(self.position),
            "order": self.order,
            "label": self.label,
            "type": self.type.value,
            "heading": self.heading,
            "speed": self.speed,
            "hover_time": self.hover_time,
            "actions": list(self.actions),
            "created_at": self.created_at.isoformat(),
        }


def create_waypoint(
    longitude: float,
    latitude: float,
    altitude: float,
    order: int,
    *,
    waypoint_type: WaypointType = WaypointType.WAYPOINT,
    heading: Optional[float] = None,
    speed: Optional[float] = None,
    hover_time: Optional[float] = None,
    actions: Iterable[Any] = (),
    waypoint_id: Optional[str] = None,
) -> Waypoint:
    """Create a waypoint with a fresh identifier and creation timestamp."""

    return Waypoint(
        id=waypoint_id or _new_waypoint_id(),
        position=(float(longitude), float(latitude), float(altitude)),
        order=order,
        type=waypoint_type,
        heading=heading,
        speed=speed,
        hover_time=hover_time,
        actions=tuple(actions),
    )


def endpoint_type(index: int, count: int) -> WaypointType:
    """Return the positional type for ``index`` in a list of ``count``."""

    if index == 0:
        return WaypointType.START
    if index == count - 1:
        return WaypointType.END
    return WaypointType.WAYPOINT


def coordinates_to_waypoints(
    coordinates: Sequence[Sequence[float]], altitude: float
) -> List[Waypoint]:
    """Wrap (lon, lat) coordinates as a manual path at a fixed altitude."""

    count = len(coordinates)
    waypoints = [
        create_waypoint(
            coordinate[0],
            coordinate[1],
            altitude,
            index,
            waypoint_type=endpoint_type(index, count),
        )
        for index, coordinate in enumerate(coordinates)
    ]
    LOGGER.debug("Converted %s coordinates into waypoints", count)
    return waypoints


def sort_by_order(waypoints: Iterable[Waypoint]) -> List[Waypoint]:
    """Return the waypoints as a new list sorted by ``order``."""

    return sorted(waypoints, key=lambda waypoint: waypoint.order)


def resequence(waypoints: Sequence[Waypoint]) -> List[Waypoint]:
    """Renumber ``waypoints`` by list position and re-derive endpoint types.

    The first element becomes ``start`` and the last ``end``. Interior
    elements that still carry an endpoint type fall back to ``waypoint``;
    turn, hover and photo roles are kept. A single waypoint is ``start``.
    """

    count = len(waypoints)
    result: List[Waypoint] = []
    for index, waypoint in enumerate(waypoints):
        waypoint_type = waypoint.type
        if index == 0:
            waypoint_type = WaypointType.START
        elif index == count - 1:
            waypoint_type = WaypointType.END
        elif waypoint_type in _ENDPOINT_TYPES:
            waypoint_type = WaypointType.WAYPOINT
        if waypoint.order != index or waypoint.type is not waypoint_type:
            waypoint = replace(waypoint, order=index, type=waypoint_type)
        result.append(waypoint)
    return result
