"""
UTM Projection Adapters and Accuracy Audit.

This module puts the closed-form series engine and an exact reference
implementation behind one interface, so the accuracy of the series can be
measured anywhere in a zone instead of being taken on trust.

Implementation
--------------
- ``SeriesUTMProjection`` delegates to ``geospatial.utm``.
- ``PyprojUTMProjection`` wraps `pyproj` (PROJ's exact Transverse Mercator
  via the EPSG 326zz / 327zz definitions).

Both adapters work in radians on the geodetic side and meters on the
projected side, with the UTM false origin included.

References
----------
- Karney, C.F.F. (2011). Transverse Mercator with an accuracy of a few
  nanometers. Journal of Geodesy, 85(8), 475-485.
"""

from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np

from pyproj import CRS, Transformer

from common.constants import OperatingArea, DOMINICAN_REPUBLIC
from common.types import UTMCoordinate
from geospatial.coordinate_models import central_meridian_deg
from geospatial.utm import resolve_zone, geographic_to_utm_rad, utm_to_geographic_rad
from geospatial.distance_calculations import geodesic_distance_rad


def utm_epsg_code(zone_number: int, is_northern: bool) -> int:
    """EPSG code of the WGS84 / UTM zone (326zz north, 327zz south)."""
    if not 1 <= zone_number <= 60:
        raise ValueError(f"zone_number must be in [1, 60], got {zone_number}")
    return (32600 if is_northern else 32700) + zone_number


class ProjectionAdapter(ABC):
    """Abstract base class for UTM projection adapters."""

    def __init__(self, zone_number: int, is_northern: bool = True):
        self._zone_number = zone_number
        self._is_northern = is_northern

    @property
    def zone_number(self) -> int:
        return self._zone_number

    @property
    def is_northern(self) -> bool:
        return self._is_northern

    @property
    def central_meridian_deg(self) -> float:
        return central_meridian_deg(self._zone_number)

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection."""
        pass

    @abstractmethod
    def to_projected(
        self,
        lat_rad: float,
        lon_rad: float
    ) -> Tuple[float, float]:
        """Transform geodetic coordinates to projected coordinates.

        Parameters
        ----------
        lat_rad, lon_rad : float
            Geodetic coordinates in radians.

        Returns
        -------
        Tuple[float, float]
            (easting, northing) in meters.
        """
        pass

    @abstractmethod
    def to_geodetic(
        self,
        easting: float,
        northing: float
    ) -> Tuple[float, float]:
        """Transform projected coordinates to geodetic.

        Returns
        -------
        Tuple[float, float]
            (lat_rad, lon_rad) geodetic coordinates in radians.
        """
        pass


class SeriesUTMProjection(ProjectionAdapter):
    """Closed-form Transverse Mercator series for a fixed zone.

    Unlike ``geospatial.utm.geographic_to_utm`` the forward direction does
    not pick the zone from the longitude and does not round, which makes
    the adapter usable for sub-meter comparisons.
    """

    @property
    def name(self) -> str:
        return f"UTM series (zone {self._zone_number}{'N' if self._is_northern else 'S'})"

    def to_projected(self, lat_rad: float, lon_rad: float) -> Tuple[float, float]:
        return geographic_to_utm_rad(lat_rad, lon_rad, self._zone_number, self._is_northern)

    def to_geodetic(self, easting: float, northing: float) -> Tuple[float, float]:
        return utm_to_geographic_rad(easting, northing, self._zone_number, self._is_northern)


class PyprojUTMProjection(ProjectionAdapter):
    """Exact UTM via pyproj, used as the accuracy reference."""

    def __init__(self, zone_number: int, is_northern: bool = True):
        super().__init__(zone_number, is_northern)
        self._epsg = utm_epsg_code(zone_number, is_northern)
        self._crs_geo = CRS.from_epsg(4326)  # WGS84
        self._crs_proj = CRS.from_epsg(self._epsg)
        self._to_proj = Transformer.from_crs(self._crs_geo, self._crs_proj, always_xy=True)
        self._to_geo = Transformer.from_crs(self._crs_proj, self._crs_geo, always_xy=True)

    @property
    def name(self) -> str:
        return f"WGS 84 / UTM (EPSG:{self._epsg})"

    @property
    def epsg(self) -> int:
        return self._epsg

    def to_projected(self, lat_rad: float, lon_rad: float) -> Tuple[float, float]:
        x, y = self._to_proj.transform(np.degrees(lon_rad), np.degrees(lat_rad))
        return float(x), float(y)

    def to_geodetic(self, easting: float, northing: float) -> Tuple[float, float]:
        lon_deg, lat_deg = self._to_geo.transform(easting, northing)
        return float(np.radians(lat_deg)), float(np.radians(lon_deg))


def series_error(
    utm: UTMCoordinate,
    operating_area: OperatingArea = DOMINICAN_REPUBLIC
) -> float:
    """Disagreement between the series and exact inverse projections.

    Parameters
    ----------
    utm : UTMCoordinate
        Point to audit. The zone is resolved as in ``utm_to_geographic``.
    operating_area : OperatingArea
        Supplies the fallback zone.

    Returns
    -------
    float
        Ellipsoidal distance in meters between the two inverse results.
    """
    zone = resolve_zone(utm.zone, operating_area)
    series = SeriesUTMProjection(zone.zone_number, zone.is_northern)
    reference = PyprojUTMProjection(zone.zone_number, zone.is_northern)

    lat_s, lon_s = series.to_geodetic(utm.easting, utm.northing)
    lat_r, lon_r = reference.to_geodetic(utm.easting, utm.northing)
    return geodesic_distance_rad(lat_s, lon_s, lat_r, lon_r)
