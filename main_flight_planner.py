"""Mini README: Entry point CLI for generating flight paths from GeoJSON.

This script exposes a Typer CLI with one command per pattern (grid,
corridor, perimeter). Each command reads a GeoJSON file, runs the matching
generator through a ``FlightPathSession``, prints a JSON summary of the
resulting path and optionally writes the 3D preview FeatureCollection.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import typer

from dronepath.configuration import get_settings
from dronepath.logging_utils import configure_root_logger
from dronepath.session import FlightPathSession
from dronepath.utils.geojson import boundary_from_geojson, centerline_from_geojson

cli = typer.Typer(help="Generate drone survey flight paths from GeoJSON inputs.")


def _read_payload(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as error:
        raise typer.BadParameter(f"Cannot read {path}: {error}") from error


def _parse(parser: Callable[[str], List[List[float]]], path: Path) -> List[List[float]]:
    try:
        return parser(_read_payload(path))
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error


def _report(session: FlightPathSession, output: Optional[Path]) -> None:
    """Echo statistics and validation results, then write the preview file."""

    payload: Dict[str, Any] = {
        "type": session.pattern_type.value,
        "statistics": session.statistics(),
        "validation": session.validate(),
    }
    if output is not None:
        output.write_text(json.dumps(session.to_geojson(), indent=2), encoding="utf-8")
        payload["output"] = str(output)
    typer.echo(json.dumps(payload, indent=2))


@cli.command()
def grid(
    boundary_file: Path = typer.Argument(..., help="GeoJSON Polygon describing the survey area."),
    spacing: float = typer.Option(30.0, help="Metres between flight lines."),
    angle: float = typer.Option(0.0, help="Grid rotation in degrees."),
    altitude: Optional[float] = typer.Option(None, help="Altitude in metres AGL."),
    speed: Optional[float] = typer.Option(None, help="Cruise speed in m/s."),
    output: Optional[Path] = typer.Option(None, help="Write the 3D GeoJSON preview here."),
) -> None:
    """Fill the boundary with a serpentine grid."""

    configure_root_logger()
    settings = get_settings()
    session = FlightPathSession(_parse(boundary_from_geojson, boundary_file))
    try:
        session.update_grid_settings(
            spacing=spacing,
            angle=angle,
            altitude=altitude if altitude is not None else settings.default_altitude,
            speed=speed if speed is not None else settings.default_speed,
        )
        session.generate_grid()
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    _report(session, output)


@cli.command()
def corridor(
    centerline_file: Path = typer.Argument(..., help="GeoJSON LineString to follow."),
    width: float = typer.Option(50.0, help="Corridor half-width in metres."),
    waypoint_spacing: float = typer.Option(100.0, help="Metres between waypoints."),
    altitude: float = typer.Option(80.0, help="Altitude in metres AGL."),
    speed: float = typer.Option(8.0, help="Cruise speed in m/s."),
    output: Optional[Path] = typer.Option(None, help="Write the 3D GeoJSON preview here."),
) -> None:
    """Follow a centerline and buffer the corridor around it."""

    configure_root_logger()
    centerline = _parse(centerline_from_geojson, centerline_file)
    session = FlightPathSession()
    try:
        session.update_corridor_settings(
            width=width,
            waypoint_spacing=waypoint_spacing,
            altitude=altitude,
            speed=speed,
        )
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    session.generate_corridor(centerline)
    _report(session, output)


@cli.command()
def perimeter(
    boundary_file: Path = typer.Argument(..., help="GeoJSON Polygon to trace."),
    inset: float = typer.Option(0.0, help="Metres to stay inside the boundary."),
    altitude: Optional[float] = typer.Option(None, help="Altitude in metres AGL."),
    output: Optional[Path] = typer.Option(None, help="Write the 3D GeoJSON preview here."),
) -> None:
    """Trace the boundary edge, optionally inset."""

    configure_root_logger()
    session = FlightPathSession(_parse(boundary_from_geojson, boundary_file))
    try:
        if altitude is not None:
            session.update_grid_settings(altitude=altitude)
        session.generate_perimeter(inset=inset)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    _report(session, output)


if __name__ == "__main__":
    cli()
