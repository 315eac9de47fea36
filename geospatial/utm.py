"""
Closed-Form UTM <-> Geographic Conversion.

This module converts between UTM projected coordinates and WGS84 geographic
coordinates with the classic Transverse Mercator power series. There is no
iteration: every conversion is a fixed sequence of arithmetic, so each call
is bounded, deterministic and safe to run from any thread.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Transverse Mercator on the WGS84 ellipsoid, k0 = 0.9996

Zone Resolution
---------------
Permits from the operating area print zones as "19Q", "19N" or "20N",
mixing UTM hemisphere letters with MGRS latitude bands. Zone strings are
resolved in this order:

1. "19Q", "19N", "20Q", "20N": that zone, northern hemisphere.
2. Any ``<digits><N|S>`` substring: generic UTM designator.
3. Anything else: the operating area's default zone. The substitution is
   logged and flagged on the returned ``ZoneDesignation``; pass
   ``strict=True`` to get an ``InvalidInputError`` instead.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual, pp. 57-64.
- DMA TM 8358.2 (1989). The Universal Grids: UTM and UPS.
"""

import re
from typing import Optional, Tuple

import numpy as np

from common.constants import GeodeticConstants, OperatingArea, DOMINICAN_REPUBLIC
from common.errors import InvalidInputError
from common.logging_config import get_logger
from common.types import GeographicCoordinate, UTMConversion, UTMCoordinate, ZoneDesignation
from geospatial.coordinate_models import (
    WGS84Ellipsoid,
    EllipsoidParameters,
    central_meridian_deg,
    footpoint_latitude,
    meridional_arc,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
    zone_number_for_longitude,
)

logger = get_logger(__name__)

_OPERATING_ZONE_PATTERN = re.compile(r"^(19|20)[QN]$")
_GENERIC_ZONE_PATTERN = re.compile(r"(\d+)([NS])", re.IGNORECASE)

K0 = GeodeticConstants.UTM_SCALE_FACTOR.value
FALSE_EASTING = GeodeticConstants.UTM_FALSE_EASTING.value
FALSE_NORTHING_SOUTH = GeodeticConstants.UTM_FALSE_NORTHING_SOUTH.value


def resolve_zone(
    zone: Optional[str],
    operating_area: OperatingArea = DOMINICAN_REPUBLIC,
    strict: bool = False
) -> ZoneDesignation:
    """Resolve a zone string to a zone number and hemisphere.

    Parameters
    ----------
    zone : str or None
        Zone designator as extracted from a document.
    operating_area : OperatingArea
        Supplies the default zone used when ``zone`` cannot be parsed.
    strict : bool
        If True, raise instead of substituting the default zone.

    Returns
    -------
    ZoneDesignation
        ``is_fallback`` is True when the default zone was substituted.

    Raises
    ------
    InvalidInputError
        Only in strict mode, when ``zone`` cannot be parsed.
    """
    source = zone if isinstance(zone, str) else ""
    normalized = source.strip().upper()

    match = _OPERATING_ZONE_PATTERN.match(normalized)
    if match:
        return ZoneDesignation(int(match.group(1)), True, False, source)

    match = _GENERIC_ZONE_PATTERN.search(normalized)
    if match:
        zone_number = int(match.group(1))
        if 1 <= zone_number <= GeodeticConstants.UTM_ZONE_COUNT:
            return ZoneDesignation(zone_number, match.group(2) == "N", False, source)

    if strict:
        raise InvalidInputError(f"Unrecognized UTM zone designator: {zone!r}")

    logger.warning(
        f"Unrecognized UTM zone {zone!r}; assuming {operating_area.default_zone} "
        f"({operating_area.name} default)"
    )
    return ZoneDesignation(
        operating_area.default_zone_number,
        operating_area.default_northern,
        True,
        source
    )


def utm_to_geographic_rad(
    easting: float,
    northing: float,
    zone_number: int,
    is_northern: bool,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> Tuple[float, float]:
    """Inverse Transverse Mercator for a known zone.

    Parameters
    ----------
    easting, northing : float
        UTM coordinates in meters, false origin included.
    zone_number : int
        UTM zone number.
    is_northern : bool
        Hemisphere; the southern false northing is removed when False.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    Tuple[float, float]
        (lat_rad, lon_rad)

    Notes
    -----
    With φ1 the footpoint latitude, T1 = tan²φ1, C1 = e'² cos²φ1 and
    D = x / (ν1 k0):

    φ = φ1 - (ν1 tanφ1 / ρ1) [D²/2 - (5 + 3T1 + 10C1 - 4C1² - 9e'²) D⁴/24
        + (61 + 90T1 + 298C1 + 45T1² - 252e'² - 3C1²) D⁶/720]

    λ = λ0 + [D - (1 + 2T1 + C1) D³/6
        + (5 - 2C1 + 28T1 - 3C1² + 8e'² + 24T1²) D⁵/120] / cosφ1
    """
    x = easting - FALSE_EASTING
    y = northing if is_northern else northing - FALSE_NORTHING_SOUTH

    ep2 = GeodeticConstants.EARTH_SECOND_ECCENTRICITY_SQUARED.value
    lon_origin_rad = np.radians(central_meridian_deg(zone_number))

    phi1 = footpoint_latitude(y / K0, ellipsoid)
    rho1 = radius_of_curvature_meridian(phi1, ellipsoid)
    nu1 = radius_of_curvature_prime_vertical(phi1, ellipsoid)

    tan_phi1 = np.tan(phi1)
    cos_phi1 = np.cos(phi1)
    T1 = tan_phi1 * tan_phi1
    C1 = ep2 * cos_phi1 * cos_phi1
    D = x / (nu1 * K0)

    lat_rad = phi1 - (nu1 * tan_phi1 / rho1) * (
        D**2 / 2
        - (5 + 3 * T1 + 10 * C1 - 4 * C1**2 - 9 * ep2) * D**4 / 24
        + (61 + 90 * T1 + 298 * C1 + 45 * T1**2 - 252 * ep2 - 3 * C1**2) * D**6 / 720
    )

    lon_rad = lon_origin_rad + (
        D
        - (1 + 2 * T1 + C1) * D**3 / 6
        + (5 - 2 * C1 + 28 * T1 - 3 * C1**2 + 8 * ep2 + 24 * T1**2) * D**5 / 120
    ) / cos_phi1

    return float(lat_rad), float(lon_rad)


def convert_utm(
    utm: UTMCoordinate,
    operating_area: OperatingArea = DOMINICAN_REPUBLIC,
    strict: bool = False
) -> UTMConversion:
    """Convert a UTM coordinate and report how its zone was resolved.

    Use this instead of :func:`utm_to_geographic` when the caller needs to
    know whether the default zone had to be substituted.
    """
    zone = resolve_zone(utm.zone, operating_area, strict)
    lat_rad, lon_rad = utm_to_geographic_rad(
        utm.easting, utm.northing, zone.zone_number, zone.is_northern
    )
    geographic = GeographicCoordinate(
        latitude=float(np.degrees(lat_rad)),
        longitude=float(np.degrees(lon_rad))
    )
    logger.debug(
        f"UTM ({utm.easting}, {utm.northing}, {utm.zone}) -> "
        f"({geographic.latitude:.6f}, {geographic.longitude:.6f})"
    )
    return UTMConversion(geographic=geographic, zone=zone)


def utm_to_geographic(
    utm: UTMCoordinate,
    operating_area: OperatingArea = DOMINICAN_REPUBLIC,
    strict: bool = False
) -> GeographicCoordinate:
    """Convert a UTM coordinate to WGS84 latitude/longitude in degrees.

    Total over real inputs: an unparseable zone resolves to the operating
    area's default zone (logged) unless ``strict`` is set. No range checks
    are made; see ``validation.coordinate_checks``.

    Examples
    --------
    >>> p = utm_to_geographic(UTMCoordinate(561063, 2066147, "19Q"))
    >>> round(p.latitude, 4), round(p.longitude, 4)
    (18.6857, -68.4209)
    """
    return convert_utm(utm, operating_area, strict).geographic


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def geographic_to_utm_rad(
    lat_rad: float,
    lon_rad: float,
    zone_number: int,
    is_northern: bool,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> Tuple[float, float]:
    """Forward Transverse Mercator for a known zone, unrounded.

    Returns
    -------
    Tuple[float, float]
        (easting, northing) in meters, false origin included.

    Notes
    -----
    With ν the prime-vertical radius, T = tan²φ, C = e'² cos²φ,
    A = cosφ (λ - λ0) and M the meridional arc:

    E = k0 ν [A + (1 - T + C) A³/6 + (5 - 18T + T² + 72C - 58e'²) A⁵/120] + 500000

    N = k0 {M + ν tanφ [A²/2 + (5 - T + 9C + 4C²) A⁴/24
        + (61 - 58T + T² + 600C - 330e'²) A⁶/720]}
    """
    lon_origin_rad = np.radians(central_meridian_deg(zone_number))

    ep2 = ellipsoid.ep2
    N = radius_of_curvature_prime_vertical(lat_rad, ellipsoid)
    tan_lat = np.tan(lat_rad)
    cos_lat = np.cos(lat_rad)
    T = tan_lat * tan_lat
    C = ep2 * cos_lat * cos_lat
    A = cos_lat * (lon_rad - lon_origin_rad)
    M = meridional_arc(lat_rad, ellipsoid)

    easting = K0 * N * (
        A
        + (1 - T + C) * A**3 / 6
        + (5 - 18 * T + T**2 + 72 * C - 58 * ep2) * A**5 / 120
    ) + FALSE_EASTING

    northing = K0 * (M + N * tan_lat * (
        A**2 / 2
        + (5 - T + 9 * C + 4 * C**2) * A**4 / 24
        + (61 - 58 * T + T**2 + 600 * C - 330 * ep2) * A**6 / 720
    ))

    if not is_northern:
        northing += FALSE_NORTHING_SOUTH

    return float(easting), float(northing)


def geographic_to_utm(
    coord: GeographicCoordinate,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> UTMCoordinate:
    """Convert a WGS84 position to UTM.

    The zone is derived from the longitude and the hemisphere from the sign
    of the latitude (the equator counts as north). Easting and northing are
    rounded to whole meters, halves rounding up. No range checks are made.

    Parameters
    ----------
    coord : GeographicCoordinate
        Position in decimal degrees.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    UTMCoordinate
        Zone formatted as ``<number><N|S>``.

    Examples
    --------
    >>> geographic_to_utm(GeographicCoordinate(18.5, -70.0))
    UTMCoordinate(easting=394435.0, northing=2045797.0, zone='19N')
    """
    zone_number = zone_number_for_longitude(coord.longitude)
    is_northern = coord.latitude >= 0

    easting, northing = geographic_to_utm_rad(
        np.radians(coord.latitude),
        np.radians(coord.longitude),
        zone_number,
        is_northern,
        ellipsoid
    )

    return UTMCoordinate(
        easting=float(_round_half_up(easting)),
        northing=float(_round_half_up(northing)),
        zone=f"{zone_number}{'N' if is_northern else 'S'}"
    )
