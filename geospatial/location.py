"""
Resolution of Extracted Permit Locations.

The extraction pipeline reads coordinates out of scanned permits and may
return any subset of: a UTM triple, a latitude/longitude pair and a polygon
center, each possibly ``null``. This module fills the gaps from what is
present, without ever raising on missing data:

1. No geographic position but a UTM triple: convert UTM to geographic.
2. No polygon center but a geographic position: use that position.

Whatever cannot be derived stays ``None`` and the caller decides what to
show.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from common.constants import OperatingArea, DOMINICAN_REPUBLIC
from common.logging_config import get_logger
from common.types import GeographicCoordinate, UTMCoordinate, ZoneDesignation
from geospatial.utm import convert_utm

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExtractedLocation:
    """Location fields as delivered by the extraction pipeline.

    Attributes
    ----------
    utm : UTMCoordinate, optional
    geographic : GeographicCoordinate, optional
    polygon_center : GeographicCoordinate, optional
    """
    utm: Optional[UTMCoordinate] = None
    geographic: Optional[GeographicCoordinate] = None
    polygon_center: Optional[GeographicCoordinate] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'ExtractedLocation':
        """Parse an extraction record.

        Understands ``utm_coordinates`` / ``utm``,
        ``geographic_coordinates`` / ``geographic`` and ``polygon_center``.
        Absent or malformed sub-records become ``None``.
        """
        data = data or {}
        utm = data.get("utm_coordinates", data.get("utm"))
        geographic = data.get("geographic_coordinates", data.get("geographic"))
        return cls(
            utm=UTMCoordinate.from_mapping(utm if isinstance(utm, Mapping) else None),
            geographic=GeographicCoordinate.from_mapping(
                geographic if isinstance(geographic, Mapping) else None
            ),
            polygon_center=GeographicCoordinate.from_mapping(
                data.get("polygon_center") if isinstance(data.get("polygon_center"), Mapping) else None
            ),
        )


@dataclass(frozen=True)
class ResolvedLocation:
    """A location after gap filling.

    Attributes
    ----------
    utm, geographic, polygon_center
        As in ``ExtractedLocation``, with derived values filled in.
    geographic_from_utm : bool
        True when ``geographic`` was computed from ``utm``.
    zone : ZoneDesignation, optional
        How the UTM zone was resolved, when a conversion took place.
    """
    utm: Optional[UTMCoordinate]
    geographic: Optional[GeographicCoordinate]
    polygon_center: Optional[GeographicCoordinate]
    geographic_from_utm: bool = False
    zone: Optional[ZoneDesignation] = None

    @property
    def has_position(self) -> bool:
        return self.geographic is not None


def resolve_location(
    extracted: ExtractedLocation,
    operating_area: OperatingArea = DOMINICAN_REPUBLIC
) -> ResolvedLocation:
    """Fill missing geographic fields of an extracted location.

    A geographic position supplied by the extraction always wins over one
    derived from UTM.
    """
    geographic = extracted.geographic
    zone = None
    from_utm = False

    if geographic is None and extracted.utm is not None:
        conversion = convert_utm(extracted.utm, operating_area)
        geographic = conversion.geographic
        zone = conversion.zone
        from_utm = True
        logger.info(
            f"Derived geographic position ({geographic.latitude:.6f}, "
            f"{geographic.longitude:.6f}) from UTM zone {extracted.utm.zone}"
        )

    polygon_center = extracted.polygon_center
    if polygon_center is None and geographic is not None:
        polygon_center = geographic

    return ResolvedLocation(
        utm=extracted.utm,
        geographic=geographic,
        polygon_center=polygon_center,
        geographic_from_utm=from_utm,
        zone=zone,
    )


def convert_polygon_vertices(
    vertices: Iterable[Optional[Mapping[str, Any]]],
    operating_area: OperatingArea = DOMINICAN_REPUBLIC
) -> List[GeographicCoordinate]:
    """Convert extracted UTM vertex records to geographic positions.

    Records missing a field are skipped with a warning; order of the
    remaining vertices is preserved.

    Parameters
    ----------
    vertices : iterable of mapping
        Records like ``{"x": 561063, "y": 2066147, "zone": "19Q", "label": ...}``.
    operating_area : OperatingArea
        Supplies the fallback zone.

    Returns
    -------
    list of GeographicCoordinate
    """
    converted = []
    for index, record in enumerate(vertices):
        utm = UTMCoordinate.from_mapping(record)
        if utm is None:
            logger.warning(f"Skipping polygon vertex {index + 1}: incomplete UTM record {record!r}")
            continue
        converted.append(convert_utm(utm, operating_area).geographic)
    return converted
