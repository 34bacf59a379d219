"""Mini README: Application-wide logging helpers for Dronepath.

Structure:
    * get_logger - factory returning module loggers with baseline config.
    * configure_root_logger - one-time root logger setup, level taken from
      ``DronepathSettings.log_level`` unless explicitly provided.

Usage:
    Every module creates ``LOGGER = get_logger(__name__)`` so generator
    diagnostics (degenerate polygons, empty sweeps, unknown waypoint ids)
    surface with the module name attached. Configuration is applied exactly
    once so repeated imports do not stack handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .configuration import get_settings

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    if level is None:
        level = get_settings().log_level.upper()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
