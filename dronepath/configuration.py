"""Mini README: Centralised configuration for the Dronepath engine.

Structure:
    * DronepathSettings - Pydantic settings model for engine-wide defaults.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``DRONEPATH_*`` environment variables or a local
    ``.env`` file. Generators fall back to these defaults when callers omit
    altitude, speed or validation limits. The object is cached so validation
    runs once per process; call ``get_settings.cache_clear()`` after changing
    the environment in tests.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class DronepathSettings(BaseSettings):
    """Runtime configuration for path generation and validation."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied the first time a logger is requested.",
    )
    default_altitude: float = Field(
        120.0,
        description="Altitude (metres AGL) used when a generator is given none.",
        gt=0,
    )
    default_speed: float = Field(
        10.0,
        description="Cruise speed (m/s) used for duration estimates.",
        gt=0,
    )
    max_altitude: float = Field(
        400.0,
        description="Altitude ceiling used by altitude-limit validation.",
        gt=0,
    )
    boundary_tolerance_m: float = Field(
        0.05,
        description=(
            "Distance outside the boundary that still counts as inside. Grid"
            " endpoints sit exactly on the boundary and need a small margin."
        ),
        ge=0,
    )
    max_grid_lines: int = Field(
        20000,
        description="Upper bound on candidate sweep lines for one grid generation.",
        ge=1,
    )

    class Config:
        env_prefix = "DRONEPATH_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_log_level(cls, value: str) -> str:
        """Accept any casing but reject unknown level names."""

        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {value}")
        return level


@lru_cache()
def get_settings() -> DronepathSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DronepathSettings()
