"""Mini README: Mutable flight path session for editors and scripts.

Structure:
    * FlightPathSession - holds the active pattern type, generator settings,
      the current waypoint list, the corridor buffer and the UI selection.

The session is the only stateful component. It delegates every geometric
operation to the pure generator, mutation and analytics functions and
replaces its waypoint list wholesale with their results. An optional
``on_change`` callback is invoked with a small payload whenever the
waypoint list changes so an editor can re-render or persist. The session is
not thread-safe; serialise access from the caller.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from shapely.geometry import Polygon

from ..configuration import get_settings
from ..logging_utils import get_logger
from ..route_planning import (
    CorridorSettings,
    FlightPathType,
    GridSettings,
    PerimeterSettings,
    ProfilePoint,
    Waypoint,
    altitude_profile,
    coordinates_to_waypoints,
    generate_corridor_path,
    generate_grid_pattern,
    generate_perimeter_path,
    insert_waypoint,
    move_waypoint,
    remove_waypoint,
    reorder_waypoints,
    set_waypoint_altitude,
    sort_by_order,
    summarise_path,
    validate_boundary,
    validate_max_altitude,
)
from ..utils.geojson import geometry_to_geojson, waypoints_to_3d_geojson

LOGGER = get_logger(__name__)

ChangeListener = Callable[[Dict[str, Any]], None]


class FlightPathSession:
    """Own the working flight path and mediate generator/mutation calls."""

    def __init__(
        self,
        boundary: Optional[Sequence[Sequence[float]]] = None,
        *,
        on_change: Optional[ChangeListener] = None,
    ) -> None:
        self.boundary: Optional[List[Sequence[float]]] = list(boundary) if boundary else None
        self.on_change = on_change
        self.pattern_type = FlightPathType.NONE
        self.waypoints: List[Waypoint] = []
        self.grid_settings = GridSettings()
        self.corridor_settings = CorridorSettings()
        self.corridor_buffer: Optional[Polygon] = None
        self.selected_waypoint_id: Optional[str] = None
        self.is_editing = False
        LOGGER.debug("Initialised FlightPathSession (boundary=%s)", self.boundary is not None)

    def _notify(self, payload: Dict[str, Any]) -> None:
        if self.on_change is not None:
            self.on_change(payload)

    def _replace_waypoints(self, waypoints: List[Waypoint]) -> None:
        self.waypoints = waypoints
        self._notify({"waypoints": waypoints})

    # ------------------------------------------------------------------
    # Pattern and settings control
    # ------------------------------------------------------------------

    def set_flight_path_type(self, pattern_type: FlightPathType | str) -> None:
        """Switch pattern type, discarding the current path and selection."""

        if not isinstance(pattern_type, FlightPathType):
            pattern_type = FlightPathType.from_str(pattern_type)
        LOGGER.info("Switching flight path type %s -> %s", self.pattern_type.value, pattern_type.value)
        self.pattern_type = pattern_type
        self.waypoints = []
        self.corridor_buffer = None
        self.is_editing = False
        self.selected_waypoint_id = None

    def update_grid_settings(self, **updates: Any) -> GridSettings:
        """Merge ``updates`` into the grid settings; invalid values raise."""

        self.grid_settings = self.grid_settings.with_updates(**updates)
        LOGGER.debug("Grid settings updated: %s", updates)
        return self.grid_settings

    def update_corridor_settings(self, **updates: Any) -> CorridorSettings:
        """Merge ``updates`` into the corridor settings; invalid values raise."""

        self.corridor_settings = self.corridor_settings.with_updates(**updates)
        LOGGER.debug("Corridor settings updated: %s", updates)
        return self.corridor_settings

    # ------------------------------------------------------------------
    # Waypoint editing
    # ------------------------------------------------------------------

    def set_waypoints(self, waypoints: Sequence[Waypoint]) -> None:
        """Replace the waypoint list with a caller-supplied, ordered list."""

        self._replace_waypoints(sort_by_order(waypoints))

    def load_manual_path(
        self, coordinates: Sequence[Sequence[float]], altitude: Optional[float] = None
    ) -> List[Waypoint]:
        """Start a manual waypoint path from (lon, lat) coordinates."""

        altitude = get_settings().default_altitude if altitude is None else altitude
        self.pattern_type = FlightPathType.WAYPOINT
        self.corridor_buffer = None
        self.selected_waypoint_id = None
        self._replace_waypoints(coordinates_to_waypoints(coordinates, altitude))
        return self.waypoints

    def add_waypoint(self, after_order: int, longitude: float, latitude: float, altitude: float) -> None:
        self._replace_waypoints(
            insert_waypoint(self.waypoints, after_order, (longitude, latitude, altitude))
        )

    def delete_waypoint(self, waypoint_id: str) -> None:
        """Remove a waypoint, clearing the selection if it pointed at it."""

        if self.selected_waypoint_id == waypoint_id:
            self.selected_waypoint_id = None
        self._replace_waypoints(remove_waypoint(self.waypoints, waypoint_id))

    def update_waypoint_position(
        self,
        waypoint_id: str,
        longitude: float,
        latitude: float,
        altitude: Optional[float] = None,
    ) -> None:
        self._replace_waypoints(
            move_waypoint(self.waypoints, waypoint_id, (longitude, latitude), altitude)
        )

    def set_waypoint_altitude(self, waypoint_id: str, altitude: float) -> None:
        self._replace_waypoints(set_waypoint_altitude(self.waypoints, waypoint_id, altitude))

    def reorder_waypoints(self, from_order: int, to_order: int) -> None:
        self._replace_waypoints(reorder_waypoints(self.waypoints, from_order, to_order))

    # ------------------------------------------------------------------
    # Selection and editing mode
    # ------------------------------------------------------------------

    def select_waypoint(self, waypoint_id: Optional[str]) -> None:
        self.selected_waypoint_id = waypoint_id

    def clear_selection(self) -> None:
        self.selected_waypoint_id = None

    def start_editing(self) -> None:
        self.is_editing = True

    def stop_editing(self) -> None:
        self.is_editing = False
        self.selected_waypoint_id = None

    def toggle_editing(self) -> None:
        self.is_editing = not self.is_editing

    @property
    def selected_waypoint(self) -> Optional[Waypoint]:
        """Return the selected waypoint, or ``None`` if it no longer exists."""

        if self.selected_waypoint_id is None:
            return None
        for waypoint in self.waypoints:
            if waypoint.id == self.selected_waypoint_id:
                return waypoint
        return None

    # ------------------------------------------------------------------
    # Pattern generation
    # ------------------------------------------------------------------

    def generate_grid(self, boundary: Optional[Sequence[Sequence[float]]] = None) -> List[Waypoint]:
        """Fill the boundary with a serpentine grid using the grid settings."""

        boundary = boundary if boundary is not None else self.boundary
        if not boundary:
            LOGGER.warning("No flight boundary available for grid generation")
            return self.waypoints
        waypoints = generate_grid_pattern(boundary, self.grid_settings)
        self.pattern_type = FlightPathType.GRID
        self.waypoints = waypoints
        self.corridor_buffer = None
        self._notify({"type": FlightPathType.GRID.value, "waypoints": waypoints})
        return waypoints

    def generate_corridor(self, centerline: Optional[Sequence[Sequence[float]]]) -> List[Waypoint]:
        """Sample a centerline using the corridor settings and keep its buffer."""

        if not centerline:
            LOGGER.warning("No center line provided for corridor generation")
            return self.waypoints
        result = generate_corridor_path(centerline, self.corridor_settings)
        self.pattern_type = FlightPathType.CORRIDOR
        self.waypoints = result.waypoints
        self.corridor_buffer = result.corridor_buffer
        self._notify(
            {
                "type": FlightPathType.CORRIDOR.value,
                "waypoints": result.waypoints,
                "corridor_buffer": result.corridor_buffer,
            }
        )
        return result.waypoints

    def generate_perimeter(
        self,
        boundary: Optional[Sequence[Sequence[float]]] = None,
        *,
        inset: float = 0.0,
    ) -> List[Waypoint]:
        """Trace the boundary at the grid altitude, optionally inset."""

        boundary = boundary if boundary is not None else self.boundary
        if not boundary:
            LOGGER.warning("No flight boundary available for perimeter generation")
            return self.waypoints
        settings = PerimeterSettings(inset=inset, altitude=self.grid_settings.altitude)
        waypoints = generate_perimeter_path(boundary, settings)
        self.pattern_type = FlightPathType.PERIMETER
        self.waypoints = waypoints
        self.corridor_buffer = None
        self._notify({"type": FlightPathType.PERIMETER.value, "waypoints": waypoints})
        return waypoints

    def clear(self) -> None:
        """Reset the session to its defaults, keeping the stored boundary."""

        self.pattern_type = FlightPathType.NONE
        self.waypoints = []
        self.grid_settings = GridSettings()
        self.corridor_settings = CorridorSettings()
        self.corridor_buffer = None
        self.selected_waypoint_id = None
        self.is_editing = False
        self._notify({"type": None, "waypoints": []})

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def cruise_speed(self) -> float:
        if self.pattern_type is FlightPathType.CORRIDOR:
            return self.corridor_settings.speed
        return self.grid_settings.speed

    def statistics(self) -> Dict[str, Any]:
        """Return rounded distance, duration and altitude statistics."""

        return summarise_path(self.waypoints, self.cruise_speed)

    def altitude_profile(self) -> List[ProfilePoint]:
        return altitude_profile(self.waypoints)

    def validate(self, max_altitude: Optional[float] = None) -> Dict[str, Any]:
        """Check the path against the stored boundary and the altitude ceiling."""

        outside = validate_boundary(self.waypoints, self.boundary) if self.boundary else []
        too_high = validate_max_altitude(self.waypoints, max_altitude)
        return {
            "valid": not outside and not too_high,
            "outside_waypoints": outside,
            "exceeding_waypoints": too_high,
        }

    def to_geojson(self) -> Dict[str, Any]:
        """Export the path (and corridor buffer, if any) for map overlays."""

        collection = waypoints_to_3d_geojson(self.waypoints) or {
            "type": "FeatureCollection",
            "features": [],
        }
        if self.corridor_buffer is not None:
            collection["features"].append(
                {
                    "type": "Feature",
                    "properties": {"type": "corridorBuffer"},
                    "geometry": geometry_to_geojson(self.corridor_buffer),
                }
            )
        return collection
