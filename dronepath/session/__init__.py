"""Mini README: Flight path session package for Dronepath.

The `manager` module holds ``FlightPathSession``, the stateful layer an
editor or script drives while the route planning functions stay pure.
"""

from .manager import FlightPathSession

__all__ = ["FlightPathSession"]
