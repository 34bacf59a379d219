"""Mini README: Route planning subsystem for drone mission design.

Exports the waypoint model, the grid/corridor/perimeter generators, the
waypoint editing operations and the path analytics. Everything here is a
pure function or an immutable record; stateful editing lives in
``dronepath.session``.
"""

from .analytics import (
    AltitudeRange,
    ProfilePoint,
    altitude_profile,
    altitude_range,
    flight_duration,
    summarise_path,
    total_distance,
    validate_boundary,
    validate_max_altitude,
)
from .corridor import CorridorResult, generate_corridor_path
from .grid import generate_grid_pattern
from .mutation import (
    insert_waypoint,
    move_waypoint,
    remove_waypoint,
    reorder_waypoints,
    set_waypoint_altitude,
)
from .perimeter import generate_perimeter_path
from .settings import CorridorSettings, FlightPathType, GridSettings, PerimeterSettings
from .waypoints import (
    Waypoint,
    WaypointType,
    coordinates_to_waypoints,
    create_waypoint,
    resequence,
    sort_by_order,
)

__all__ = [
    "AltitudeRange",
    "CorridorResult",
    "CorridorSettings",
    "FlightPathType",
    "GridSettings",
    "PerimeterSettings",
    "ProfilePoint",
    "Waypoint",
    "WaypointType",
    "altitude_profile",
    "altitude_range",
    "coordinates_to_waypoints",
    "create_waypoint",
    "flight_duration",
    "generate_corridor_path",
    "generate_grid_pattern",
    "generate_perimeter_path",
    "insert_waypoint",
    "move_waypoint",
    "remove_waypoint",
    "reorder_waypoints",
    "resequence",
    "set_waypoint_altitude",
    "sort_by_order",
    "summarise_path",
    "total_distance",
    "validate_boundary",
    "validate_max_altitude",
]
