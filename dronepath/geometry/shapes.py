"""Mini README: Planar geometry primitives backed by shapely.

Structure:
    * polygon_from_ring - build a shapely polygon from a (lon, lat) ring.
    * line_intersections - intersect many sweep lines with a polygon boundary.
    * buffer_line / buffer_polygon - metre-based buffering through a local
      azimuthal equidistant projection (pyproj).
    * points_within - vectorised point-in-polygon test with a tolerance.
    * ring_coordinates - exterior ring of a polygon as (lon, lat) tuples.

Generators only talk to geometry through these helpers, so the engine's
contract stays "intersect(line, polygon) -> points" and
"buffer(geometry, distance) -> polygon" regardless of backend.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np
import shapely
from pyproj import CRS, Transformer
from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

WGS84 = CRS.from_epsg(4326)


def polygon_from_ring(ring: Sequence[Sequence[float]]) -> Polygon:
    """Return a polygon from a ring of (lon, lat[, alt]) coordinates."""

    return Polygon([(float(point[0]), float(point[1])) for point in ring])


def ring_coordinates(polygon: Polygon) -> List[Tuple[float, float]]:
    """Return the closed exterior ring of ``polygon`` as (lon, lat) tuples."""

    return [(float(x), float(y)) for x, y in polygon.exterior.coords]


def line_intersections(lines: np.ndarray, polygon: Polygon) -> List[np.ndarray]:
    """Intersect each two-point line with the polygon boundary.

    ``lines`` has shape ``(n, 2, 2)``. The result holds one ``(k, 2)`` array
    of intersection coordinates per line; lines that miss the polygon get an
    empty array. Edges running collinear with a line contribute their
    overlapping segment's vertices.
    """

    if len(lines) == 0:
        return []
    geometries = shapely.linestrings(lines)
    hits = shapely.intersection(geometries, polygon.boundary)
    return [shapely.get_coordinates(hit) for hit in hits]


def _local_transformers(geometry: BaseGeometry) -> Tuple[Transformer, Transformer]:
    """Return forward/inverse transformers for a metric projection around ``geometry``."""

    anchor = geometry.centroid
    if anchor.is_empty:
        # zero-length lines have no centroid
        lon, lat = shapely.get_coordinates(geometry)[0]
    else:
        lon, lat = anchor.x, anchor.y
    local = CRS.from_proj4(
        f"+proj=aeqd +lat_0={lat} +lon_0={lon} +datum=WGS84 +units=m +no_defs"
    )
    forward = Transformer.from_crs(WGS84, local, always_xy=True)
    inverse = Transformer.from_crs(local, WGS84, always_xy=True)
    return forward, inverse


def _buffer_metres(geometry: BaseGeometry, distance_m: float) -> BaseGeometry:
    forward, inverse = _local_transformers(geometry)
    projected = shapely.transform(geometry, forward.transform, interleaved=False)
    buffered = projected.buffer(distance_m, quad_segs=8)
    if buffered.is_empty:
        return buffered
    return shapely.transform(buffered, inverse.transform, interleaved=False)


def buffer_line(coordinates: Sequence[Sequence[float]], distance_m: float) -> Polygon:
    """Return the polygon covering every point within ``distance_m`` of the line."""

    if distance_m <= 0:
        raise ValueError("Buffer distance must be positive")
    line = LineString([(float(point[0]), float(point[1])) for point in coordinates])
    return _largest_part(_buffer_metres(line, distance_m))


def buffer_polygon(polygon: Polygon, distance_m: float) -> Optional[Polygon]:
    """Grow (positive) or shrink (negative) a polygon by ``distance_m`` metres.

    Returns ``None`` when shrinking collapses the polygon entirely. If a
    shrink splits the polygon, only the largest remaining part is returned.
    """

    buffered = _buffer_metres(polygon, distance_m)
    if buffered.is_empty:
        LOGGER.debug("Buffer of %.2f m collapsed polygon", distance_m)
        return None
    return _largest_part(buffered)


def _largest_part(geometry: BaseGeometry) -> Polygon:
    if isinstance(geometry, MultiPolygon):
        LOGGER.debug("Buffer produced %s parts; keeping the largest", len(geometry.geoms))
        return max(geometry.geoms, key=lambda part: part.area)
    return geometry


def points_within(
    polygon: Polygon,
    points: Sequence[Sequence[float]],
    tolerance_deg: float = 0.0,
) -> np.ndarray:
    """Return a boolean array flagging points inside or on ``polygon``."""

    if len(points) == 0:
        return np.zeros(0, dtype=bool)
    coordinates = np.asarray([(point[0], point[1]) for point in points], dtype=float)
    candidates = shapely.points(coordinates)
    if tolerance_deg > 0:
        return np.asarray(shapely.dwithin(polygon, candidates, tolerance_deg), dtype=bool)
    return np.asarray(shapely.covers(polygon, candidates), dtype=bool)
