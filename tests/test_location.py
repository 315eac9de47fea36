import logging

import pytest

from common.types import GeographicCoordinate, UTMCoordinate
from geospatial.location import (
    ExtractedLocation,
    convert_polygon_vertices,
    resolve_location,
)


def test_geographic_is_derived_from_utm_when_missing():
    extracted = ExtractedLocation.from_mapping({
        "utm_coordinates": {"x": 561063, "y": 2066147, "zone": "19Q"},
        "geographic_coordinates": {"lat": None, "lng": None},
        "polygon_center": {"lat": None, "lng": None},
    })
    resolved = resolve_location(extracted)
    assert resolved.geographic_from_utm
    assert resolved.geographic.latitude == pytest.approx(18.68567016, abs=1e-6)
    assert resolved.polygon_center == resolved.geographic
    assert resolved.zone.zone_number == 19
    assert not resolved.zone.is_fallback


def test_extracted_geographic_wins_over_utm():
    extracted = ExtractedLocation(
        utm=UTMCoordinate(561063, 2066147, "19Q"),
        geographic=GeographicCoordinate(18.7, -68.4),
    )
    resolved = resolve_location(extracted)
    assert not resolved.geographic_from_utm
    assert resolved.geographic == GeographicCoordinate(18.7, -68.4)
    assert resolved.zone is None


def test_extracted_polygon_center_is_kept():
    center = GeographicCoordinate(18.69, -68.42)
    resolved = resolve_location(ExtractedLocation(
        geographic=GeographicCoordinate(18.7, -68.4),
        polygon_center=center,
    ))
    assert resolved.polygon_center == center


def test_nothing_extracted_stays_empty():
    resolved = resolve_location(ExtractedLocation.from_mapping(None))
    assert resolved.geographic is None
    assert resolved.polygon_center is None
    assert not resolved.has_position


def test_partial_utm_is_ignored():
    extracted = ExtractedLocation.from_mapping({
        "utm_coordinates": {"x": 561063, "y": None, "zone": "19Q"},
    })
    assert extracted.utm is None
    assert resolve_location(extracted).geographic is None


def test_convert_polygon_vertices_skips_incomplete_records(permit_vertices, caplog):
    records = permit_vertices[:1] + [{"x": 561047, "zone": "19Q"}, None] + permit_vertices[1:]
    with caplog.at_level(logging.WARNING):
        points = convert_polygon_vertices(records)
    assert len(points) == 3
    assert "Skipping polygon vertex 2" in caplog.text
    assert "Skipping polygon vertex 3" in caplog.text
    assert points[0].latitude == pytest.approx(18.68567016, abs=1e-6)
