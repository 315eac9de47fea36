"""
Geospatial Module of the Coordinate Engine.

All coordinate conversions and Earth-surface calculations of the
permit-mapping application originate from this module.

This module provides:
- WGS84 ellipsoid model and UTM zone geometry
- Closed-form UTM <-> geographic conversion
- Exact pyproj reference projection for accuracy audits
- Great-circle and geodesic distances
- Planar polygon centroid for small footprints
- Resolution of incomplete extracted locations
- Compact UTM vertex notation
"""

from geospatial.coordinate_models import (
    WGS84Ellipsoid,
    central_meridian_deg,
    zone_number_for_longitude,
)

from geospatial.utm import (
    resolve_zone,
    convert_utm,
    utm_to_geographic,
    geographic_to_utm,
)

from geospatial.distance_calculations import (
    haversine_distance,
    haversine_distance_batch,
    geodesic_distance,
    polygon_perimeter,
    distance_in,
)

from geospatial.polygon import (
    planar_centroid,
    polygon_centroid,
    vertex_mean_center,
    signed_area,
)

from geospatial.projections import (
    ProjectionAdapter,
    SeriesUTMProjection,
    PyprojUTMProjection,
    utm_epsg_code,
    series_error,
)

from geospatial.location import (
    ExtractedLocation,
    ResolvedLocation,
    resolve_location,
    convert_polygon_vertices,
)

from geospatial.parsing import parse_compact_utm, format_compact_utm

__all__ = [
    # Ellipsoid and zones
    "WGS84Ellipsoid",
    "central_meridian_deg",
    "zone_number_for_longitude",
    # Conversion
    "resolve_zone",
    "convert_utm",
    "utm_to_geographic",
    "geographic_to_utm",
    # Distances
    "haversine_distance",
    "haversine_distance_batch",
    "geodesic_distance",
    "polygon_perimeter",
    "distance_in",
    # Polygons
    "planar_centroid",
    "polygon_centroid",
    "vertex_mean_center",
    "signed_area",
    # Projections
    "ProjectionAdapter",
    "SeriesUTMProjection",
    "PyprojUTMProjection",
    "utm_epsg_code",
    "series_error",
    # Extracted locations
    "ExtractedLocation",
    "ResolvedLocation",
    "resolve_location",
    "convert_polygon_vertices",
    # Compact notation
    "parse_compact_utm",
    "format_compact_utm",
]
