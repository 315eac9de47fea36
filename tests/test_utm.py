import logging

import pytest

from common.constants import OperatingArea
from common.errors import InvalidInputError
from common.types import GeographicCoordinate, UTMCoordinate
from geospatial.coordinate_models import central_meridian_deg, zone_number_for_longitude
from geospatial.distance_calculations import haversine_distance
from geospatial.utm import convert_utm, geographic_to_utm, resolve_zone, utm_to_geographic


def test_anchor_point_converts_inside_dominican_republic(anchor_utm):
    p = utm_to_geographic(anchor_utm)
    assert p.latitude == pytest.approx(18.68567016, abs=1e-6)
    assert p.longitude == pytest.approx(-68.42091495, abs=1e-6)
    assert 17.5 <= p.latitude <= 20.0
    assert -72.0 <= p.longitude <= -68.0


def test_second_permit_point():
    p = utm_to_geographic(UTMCoordinate(530478, 2042873, "19Q"))
    assert p.latitude == pytest.approx(18.47599125, abs=1e-6)
    assert p.longitude == pytest.approx(-68.71131511, abs=1e-6)


def test_false_easting_lies_on_central_meridian():
    p = utm_to_geographic(UTMCoordinate(500000, 2000000, "19N"))
    assert p.longitude == pytest.approx(-69.0, abs=1e-12)
    assert p.latitude == pytest.approx(18.08870894, abs=1e-6)


def test_band_q_and_hemisphere_n_agree():
    q = utm_to_geographic(UTMCoordinate(530478, 2042873, "19Q"))
    n = utm_to_geographic(UTMCoordinate(530478, 2042873, "19N"))
    assert q.latitude == pytest.approx(n.latitude, abs=1e-4)
    assert q.longitude == pytest.approx(n.longitude, abs=1e-4)


def test_zone_20_uses_its_own_central_meridian():
    p = utm_to_geographic(UTMCoordinate(500000, 2000000, "20N"))
    assert p.longitude == pytest.approx(-63.0, abs=1e-12)


def test_southern_hemisphere_removes_false_northing():
    p = utm_to_geographic(UTMCoordinate(444364, 9944733, "19S"))
    assert p.latitude == pytest.approx(-0.5, abs=1e-4)
    assert p.longitude == pytest.approx(-69.5, abs=1e-4)


@pytest.mark.parametrize("zone, expected", [
    ("19Q", (19, True)),
    ("19N", (19, True)),
    ("20N", (20, True)),
    ("20q", (20, True)),
    (" 19n ", (19, True)),
    ("18S", (18, False)),
    ("zona 19N", (19, True)),
    ("33n", (33, True)),
])
def test_resolve_zone_recognized_forms(zone, expected):
    designation = resolve_zone(zone)
    assert (designation.zone_number, designation.is_northern) == expected
    assert designation.is_fallback is False
    assert designation.source == zone


@pytest.mark.parametrize("zone", ["", "Q", "UTM", "99N", "0N", None])
def test_unparseable_zone_falls_back_to_operating_default(zone, caplog):
    with caplog.at_level(logging.WARNING):
        designation = resolve_zone(zone)
    assert designation.zone_number == 19
    assert designation.is_northern is True
    assert designation.is_fallback is True
    assert "Unrecognized UTM zone" in caplog.text


def test_fallback_is_reported_on_conversion(anchor_utm):
    conversion = convert_utm(UTMCoordinate(anchor_utm.easting, anchor_utm.northing, "??"))
    assert conversion.used_fallback_zone
    assert conversion.zone.label == "19N"
    assert conversion.geographic == utm_to_geographic(anchor_utm)


def test_recognized_zone_is_not_a_fallback(anchor_utm):
    assert not convert_utm(anchor_utm).used_fallback_zone


def test_strict_mode_rejects_unparseable_zone():
    with pytest.raises(InvalidInputError):
        utm_to_geographic(UTMCoordinate(500000, 2000000, "garbage"), strict=True)


def test_other_deployment_can_override_default_zone():
    area = OperatingArea(
        name="Puerto Rico",
        default_zone_number=20,
        default_northern=True,
        latitude_range_deg=(17.8, 18.6),
        longitude_range_deg=(-67.3, -65.2),
        easting_range_m=(100_000.0, 900_000.0),
        northing_range_m=(1_950_000.0, 2_070_000.0),
    )
    p = utm_to_geographic(UTMCoordinate(500000, 2000000, ""), operating_area=area)
    assert p.longitude == pytest.approx(-63.0, abs=1e-12)


def test_geographic_to_utm_rounds_to_whole_meters():
    utm = geographic_to_utm(GeographicCoordinate(18.5, -70.0))
    assert utm == UTMCoordinate(394435.0, 2045797.0, "19N")


def test_geographic_to_utm_southern_hemisphere():
    utm = geographic_to_utm(GeographicCoordinate(-33.9, 18.4))
    assert utm.zone == "34S"
    assert utm.easting == 259583.0
    assert utm.northing == 6245888.0


def test_equator_on_central_meridian_is_false_origin():
    utm = geographic_to_utm(GeographicCoordinate(0.0, -69.0))
    assert utm == UTMCoordinate(500000.0, 0.0, "19N")


def test_round_trip_within_one_meter(dominican_grid):
    for point in dominican_grid:
        back = utm_to_geographic(geographic_to_utm(point))
        assert haversine_distance(point, back) < 1.0, point


def test_round_trip_south_of_equator():
    point = GeographicCoordinate(-33.9, 18.4)
    back = utm_to_geographic(geographic_to_utm(point))
    assert haversine_distance(point, back) < 1.0


@pytest.mark.parametrize("longitude, zone", [
    (-180.0, 1),
    (-72.0, 19),
    (-69.0, 19),
    (-66.0001, 19),
    (-66.0, 20),
    (179.9, 60),
    (180.0, 60),
])
def test_zone_number_for_longitude(longitude, zone):
    assert zone_number_for_longitude(longitude) == zone


def test_central_meridians():
    assert central_meridian_deg(1) == -177.0
    assert central_meridian_deg(19) == -69.0
    assert central_meridian_deg(20) == -63.0
    assert central_meridian_deg(60) == 177.0
