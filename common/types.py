"""
Coordinate Value Types for the Coordinate Engine.

This module defines the immutable dataclasses exchanged between the engine
and its collaborators: the upstream document-extraction pipeline, which
delivers raw and possibly incomplete numbers, and the downstream map/export
layer, which consumes geographic positions and zone strings verbatim.

Design Rationale
----------------
1. Construction never validates ranges. Transforming and validating are
   separate operations; see ``validation.coordinate_checks``.
2. Extraction output is untrusted. The ``from_mapping`` constructors return
   ``None`` instead of raising when a field is missing or non-numeric, and
   the caller decides on a fallback.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple
import math


def _coerce_float(value: Any) -> Optional[float]:
    """Convert an extracted value to a finite float, or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _first_present(data: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class UTMCoordinate:
    """A projected UTM position.

    Attributes
    ----------
    easting : float
        Easting in METERS, including the 500,000 m false easting.
    northing : float
        Northing in METERS, including the 10,000,000 m false northing in
        the southern hemisphere.
    zone : str
        Zone designator, e.g. "19Q", "19N" or "20N": a zone number (1-60)
        followed by a hemisphere or latitude-band letter.

    Notes
    -----
    An easting/northing pair has no meaning without its zone.

    Examples
    --------
    >>> UTMCoordinate.from_mapping({"x": 561063, "y": 2066147, "zone": "19Q"})
    UTMCoordinate(easting=561063.0, northing=2066147.0, zone='19Q')
    """
    easting: float
    northing: float
    zone: str

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> Optional['UTMCoordinate']:
        """Build a coordinate from an extraction record.

        Accepts ``x``/``y``/``zone`` or ``easting``/``northing``/``zone``.

        Returns
        -------
        UTMCoordinate or None
            ``None`` when any of the three fields is absent or unusable.
        """
        if not data:
            return None
        easting = _coerce_float(_first_present(data, ("x", "easting")))
        northing = _coerce_float(_first_present(data, ("y", "northing")))
        zone = data.get("zone")
        if easting is None or northing is None:
            return None
        if not isinstance(zone, str) or not zone.strip():
            return None
        return cls(easting=easting, northing=northing, zone=zone.strip())

    def to_dict(self) -> dict:
        """Serialize with the field names used by the map/export layer."""
        return {"x": self.easting, "y": self.northing, "zone": self.zone}


@dataclass(frozen=True)
class GeographicCoordinate:
    """A WGS84 geographic position in DECIMAL DEGREES.

    Attributes
    ----------
    latitude : float
        Geodetic latitude, positive north. Valid range [-90, 90].
    longitude : float
        Geodetic longitude, positive east. Valid range [-180, 180].
    """
    latitude: float
    longitude: float

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> Optional['GeographicCoordinate']:
        """Build a coordinate from ``lat``/``lng`` (or ``latitude``/``longitude``).

        Returns ``None`` when either field is absent or unusable.
        """
        if not data:
            return None
        latitude = _coerce_float(_first_present(data, ("lat", "latitude")))
        longitude = _coerce_float(_first_present(data, ("lng", "lon", "longitude")))
        if latitude is None or longitude is None:
            return None
        return cls(latitude=latitude, longitude=longitude)

    def to_radians(self) -> Tuple[float, float]:
        """Return ``(lat_rad, lon_rad)``."""
        return math.radians(self.latitude), math.radians(self.longitude)

    def to_dict(self) -> dict:
        return {"lat": self.latitude, "lng": self.longitude}


# A polygon vertex is a plain geographic position.
PolygonPoint = GeographicCoordinate

# Ordered ring of vertices; the last vertex connects back to the first.
Polygon = Sequence[PolygonPoint]


@dataclass(frozen=True)
class ZoneDesignation:
    """A resolved UTM zone.

    Attributes
    ----------
    zone_number : int
        Zone number in [1, 60].
    is_northern : bool
        True for the northern hemisphere.
    is_fallback : bool
        True when the zone string could not be parsed and the operating
        area's default zone was substituted.
    source : str
        The zone string as received.
    """
    zone_number: int
    is_northern: bool
    is_fallback: bool = False
    source: str = ""

    @property
    def label(self) -> str:
        """Zone formatted as ``<number><N|S>``."""
        return f"{self.zone_number}{'N' if self.is_northern else 'S'}"


@dataclass(frozen=True)
class UTMConversion:
    """Result of a UTM to geographic conversion with its resolved zone."""
    geographic: GeographicCoordinate
    zone: ZoneDesignation

    @property
    def used_fallback_zone(self) -> bool:
        return self.zone.is_fallback
