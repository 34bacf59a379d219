"""Mini README: Waypoint editing operations.

Structure:
    * insert_waypoint - splice a new waypoint after a given order.
    * remove_waypoint - drop a waypoint and renumber the rest.
    * move_waypoint - change the horizontal position (and optionally altitude).
    * set_waypoint_altitude - change only the altitude.
    * reorder_waypoints - move one waypoint to a new position in the sequence.

Every function returns a new list that is sorted, order-contiguous and has
``start``/``end`` on its endpoints. Inputs are never modified. Unknown
waypoint ids are ignored because they usually come from a repeated UI action
(double-click delete) rather than a programming error.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from ..logging_utils import get_logger
from .waypoints import Waypoint, create_waypoint, resequence, sort_by_order

LOGGER = get_logger(__name__)


def _index_of(waypoints: Sequence[Waypoint], waypoint_id: str) -> Optional[int]:
    for index, waypoint in enumerate(waypoints):
        if waypoint.id == waypoint_id:
            return index
    return None


def insert_waypoint(
    waypoints: Sequence[Waypoint],
    after_order: int,
    position: Sequence[float],
) -> List[Waypoint]:
    """Insert a new waypoint at ``(lon, lat, alt)`` directly after ``after_order``.

    ``after_order`` equal to the last order appends; ``-1`` prepends. Values
    outside that range are clamped.
    """

    ordered = sort_by_order(waypoints)
    index = min(max(after_order + 1, 0), len(ordered))
    longitude, latitude, altitude = position
    new_waypoint = create_waypoint(longitude, latitude, altitude, index)
    ordered.insert(index, new_waypoint)
    LOGGER.debug("Inserted waypoint %s at order %s", new_waypoint.id, index)
    return resequence(ordered)


def remove_waypoint(waypoints: Sequence[Waypoint], waypoint_id: str) -> List[Waypoint]:
    """Remove the waypoint with ``waypoint_id`` and renumber the remainder."""

    ordered = sort_by_order(waypoints)
    index = _index_of(ordered, waypoint_id)
    if index is None:
        LOGGER.debug("Remove ignored; waypoint %s not found", waypoint_id)
        return ordered
    del ordered[index]
    LOGGER.debug("Removed waypoint %s (was order %s)", waypoint_id, index)
    return resequence(ordered)


def move_waypoint(
    waypoints: Sequence[Waypoint],
    waypoint_id: str,
    position: Sequence[float],
    altitude: Optional[float] = None,
) -> List[Waypoint]:
    """Move a waypoint to ``(lon, lat)``, keeping its altitude unless given."""

    ordered = sort_by_order(waypoints)
    index = _index_of(ordered, waypoint_id)
    if index is None:
        LOGGER.debug("Move ignored; waypoint %s not found", waypoint_id)
        return ordered
    current = ordered[index]
    new_altitude = current.altitude if altitude is None else float(altitude)
    ordered[index] = replace(
        current, position=(float(position[0]), float(position[1]), new_altitude)
    )
    return ordered


def set_waypoint_altitude(
    waypoints: Sequence[Waypoint], waypoint_id: str, altitude: float
) -> List[Waypoint]:
    """Replace only the altitude of one waypoint."""

    ordered = sort_by_order(waypoints)
    index = _index_of(ordered, waypoint_id)
    if index is None:
        LOGGER.debug("Altitude update ignored; waypoint %s not found", waypoint_id)
        return ordered
    current = ordered[index]
    ordered[index] = replace(
        current, position=(current.longitude, current.latitude, float(altitude))
    )
    return ordered


def reorder_waypoints(
    waypoints: Sequence[Waypoint], from_order: int, to_order: int
) -> List[Waypoint]:
    """Move the waypoint at ``from_order`` so it ends up at ``to_order``.

    Uses list splice semantics: the element is removed and re-inserted, the
    elements in between shift by one. ``to_order`` beyond the end appends.
    """

    ordered = sort_by_order(waypoints)
    if not 0 <= from_order < len(ordered):
        LOGGER.debug("Reorder ignored; order %s out of range", from_order)
        return ordered
    moved = ordered.pop(from_order)
    ordered.insert(max(to_order, 0), moved)
    LOGGER.debug("Reordered waypoint %s from %s to %s", moved.id, from_order, to_order)
    return resequence(ordered)
