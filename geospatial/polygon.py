"""
Planar Polygon Geometry for Permit Footprints.

Polygons here are rings of geographic vertices treated as flat Cartesian
points, longitude as x and latitude as y. The ring is implicitly closed
(the last vertex connects back to the first) and vertex order defines the
winding.

Limitation
----------
This is a PLANAR approximation, not a spherical or geodesic centroid. It
is accurate for footprints spanning a few kilometers, which is the size of
a permit area, and becomes invalid for polygons spanning more than a few
tens of kilometers: meridian convergence and the degree-length change
with latitude then shift the result noticeably.
"""

from typing import Sequence
import numpy as np

from common.errors import InvalidInputError
from common.logging_config import get_logger
from common.types import GeographicCoordinate, PolygonPoint

logger = get_logger(__name__)

# Shoelace sums below this (degrees²) are treated as a degenerate ring.
_ZERO_AREA_EPSILON = 1e-18


def _coordinates(polygon: Sequence[PolygonPoint]):
    x = np.array([p.longitude for p in polygon], dtype=np.float64)
    y = np.array([p.latitude for p in polygon], dtype=np.float64)
    return x, y


def _local_coordinates(polygon: Sequence[PolygonPoint]):
    """Vertices relative to the first one.

    Area and centroid are translation-equivariant; working near the origin
    keeps the cross products from cancelling catastrophically at |lng| ~ 70.
    """
    x, y = _coordinates(polygon)
    return x - x[0], y - y[0], float(x[0]), float(y[0])


def signed_area(polygon: Sequence[PolygonPoint]) -> float:
    """Shoelace signed area in square degrees.

    Positive for counter-clockwise rings (in lng/lat axes), negative for
    clockwise rings, zero for fewer than three vertices.
    """
    if len(polygon) < 3:
        return 0.0
    x, y, _, _ = _local_coordinates(polygon)
    cross = x * np.roll(y, -1) - np.roll(x, -1) * y
    return float(0.5 * np.sum(cross))


def vertex_mean_center(polygon: Sequence[PolygonPoint]) -> GeographicCoordinate:
    """Arithmetic mean of the vertices.

    Cheaper than the centroid and defined for any non-empty ring; suitable
    for centering a map view, but biased toward densely sampled edges.

    Raises
    ------
    InvalidInputError
        If ``polygon`` is empty.
    """
    if len(polygon) == 0:
        raise InvalidInputError("Polygon must have at least one point")
    x, y = _coordinates(polygon)
    return GeographicCoordinate(latitude=float(np.mean(y)), longitude=float(np.mean(x)))


def planar_centroid(polygon: Sequence[PolygonPoint]) -> GeographicCoordinate:
    """Area-weighted centroid of a small polygon, planar approximation.

    For each edge (i, j = i + 1 mod n) with a_i = x_i y_j - x_j y_i:

        A  = ½ Σ a_i
        Cx = Σ (x_i + x_j) a_i / (6A)
        Cy = Σ (y_i + y_j) a_i / (6A)

    Parameters
    ----------
    polygon : sequence of PolygonPoint
        Ordered ring, not repeated at the end.

    Returns
    -------
    GeographicCoordinate
        The centroid. A single-point polygon returns that point unchanged.
        A ring with zero area (two points, or collinear vertices) has no
        area-weighted centroid; its vertex mean is returned and a warning
        is logged.

    Raises
    ------
    InvalidInputError
        If ``polygon`` is empty.

    Notes
    -----
    Invalid for polygons spanning more than a few tens of kilometers; see
    the module docstring.
    """
    if len(polygon) == 0:
        raise InvalidInputError("Polygon must have at least one point")

    if len(polygon) == 1:
        return polygon[0]

    x, y, x0, y0 = _local_coordinates(polygon)
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)

    cross = x * y_next - x_next * y
    area = 0.5 * np.sum(cross)

    if abs(area) < _ZERO_AREA_EPSILON:
        logger.warning(
            f"Polygon with {len(polygon)} vertices has zero area; "
            "using the vertex mean instead of the centroid"
        )
        return vertex_mean_center(polygon)

    centroid_lng = x0 + np.sum((x + x_next) * cross) / (6 * area)
    centroid_lat = y0 + np.sum((y + y_next) * cross) / (6 * area)

    return GeographicCoordinate(latitude=float(centroid_lat), longitude=float(centroid_lng))


# Name used by the map and export layers
polygon_centroid = planar_centroid
