"""Mini README: Pattern types and generator settings.

Structure:
    * FlightPathType - which generator (or manual process) owns the path.
    * GridSettings - parameters for serpentine area coverage.
    * CorridorSettings - parameters for centerline-following paths.
    * PerimeterSettings - parameters for boundary tracing.

Settings are Pydantic models so invalid values (zero spacing, negative
width) fail loudly at construction instead of producing degenerate paths.
Use ``with_updates`` to derive a new, re-validated copy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, TypeVar

from pydantic import BaseModel, Field, validator

SettingsT = TypeVar("SettingsT", bound="PatternSettings")


class FlightPathType(str, Enum):
    """Enumerate the supported path patterns."""

    NONE = "none"
    GRID = "grid"
    WAYPOINT = "waypoint"
    CORRIDOR = "corridor"
    PERIMETER = "perimeter"

    @classmethod
    def from_str(cls, value: str) -> "FlightPathType":
        """Coerce arbitrary casing into a valid pattern type."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported flight path type: {value}") from error


class PatternSettings(BaseModel):
    """Common behaviour for generator settings."""

    def with_updates(self: SettingsT, **updates: Any) -> SettingsT:
        """Return a validated copy with ``updates`` applied."""

        values: Dict[str, Any] = self.model_dump()
        values.update(updates)
        return type(self)(**values)


class GridSettings(PatternSettings):
    """Serpentine grid parameters."""

    spacing: float = Field(30.0, gt=0, description="Metres between flight lines.")
    angle: float = Field(0.0, description="Grid rotation in degrees.")
    overlap: float = Field(
        70.0, ge=0, le=100, description="Camera overlap percentage (informational)."
    )
    altitude: float = Field(120.0, description="Flight altitude in metres AGL.")
    speed: float = Field(10.0, gt=0, description="Cruise speed in m/s.")
    turn_radius: float = Field(15.0, ge=0, description="Turn radius in metres.")

    @validator("angle")
    def _normalise_angle(cls, value: float) -> float:
        return float(value) % 360.0


class CorridorSettings(PatternSettings):
    """Centerline corridor parameters."""

    width: float = Field(50.0, gt=0, description="Buffer half-width in metres.")
    altitude: float = Field(80.0, description="Flight altitude in metres AGL.")
    waypoint_spacing: float = Field(
        100.0, gt=0, description="Metres between waypoints along the path."
    )
    speed: float = Field(8.0, gt=0, description="Cruise speed in m/s.")


class PerimeterSettings(PatternSettings):
    """Boundary tracing parameters."""

    inset: float = Field(0.0, ge=0, description="Metres to shrink the boundary by.")
    altitude: float = Field(120.0, description="Flight altitude in metres AGL.")
