"""Mini README: Core package initializer for the Dronepath engine.

Dronepath turns survey intent (a boundary polygon, a centerline or a list
of manual waypoints) into an ordered, altitude-aware waypoint sequence. The
top level re-exports the session and logging helpers; generators and
analytics live in ``dronepath.route_planning``.
"""

from .logging_utils import get_logger
from .session import FlightPathSession

__all__ = ["FlightPathSession", "get_logger"]
