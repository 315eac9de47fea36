import logging

import pytest

from common.errors import OutOfRangeError
from common.types import GeographicCoordinate as G
from common.types import UTMCoordinate as U
from validation.coordinate_checks import (
    CoordinateRangeChecker,
    is_valid_geographic,
    is_valid_utm,
    is_within_operating_area,
)


def test_geographic_boundaries():
    assert is_valid_geographic(G(90, 180))
    assert is_valid_geographic(G(-90, -180))
    assert not is_valid_geographic(G(90.0001, 0))
    assert not is_valid_geographic(G(0, -180.0001))
    assert not is_valid_geographic(G(float("nan"), 0))


def test_utm_easting_boundaries():
    assert is_valid_utm(U(160000, 0, "19N"))
    assert is_valid_utm(U(840000, 10_000_000, "19N"))
    assert not is_valid_utm(U(159999, 0, "19N"))
    assert not is_valid_utm(U(840001, 0, "19N"))


def test_utm_northing_boundaries():
    assert not is_valid_utm(U(500000, -1, "19N"))
    assert not is_valid_utm(U(500000, 10_000_001, "19S"))


@pytest.mark.parametrize("zone, valid", [
    ("19N", True),
    ("19s", True),
    ("1N", True),
    ("60S", True),
    ("0N", False),
    ("61N", False),
    ("19Q", False),
    ("119N", False),
    ("", False),
])
def test_utm_zone_designator(zone, valid):
    assert is_valid_utm(U(500000, 2000000, zone)) is valid


def test_operating_area_geographic():
    assert is_within_operating_area(G(18.6857, -68.4209))
    assert not is_within_operating_area(G(40.4, -3.7))


def test_operating_area_utm():
    assert is_within_operating_area(U(561063, 2066147, "19Q"))
    assert not is_within_operating_area(U(561063, 4066147, "19Q"))


def test_checker_reports_without_raising(caplog):
    checker = CoordinateRangeChecker()
    with caplog.at_level(logging.WARNING):
        result = checker.check_utm(U(100000, 2000000, "19Q"))
    assert not result.passed
    assert set(result.details) == {"zone", "easting"}
    assert "utm_range failed" in caplog.text


def test_checker_passes_good_coordinates():
    checker = CoordinateRangeChecker()
    results = checker.check_all(utm=U(561063, 2066147, "19N"), geographic=G(18.6857, -68.4209))
    assert len(results) == 4
    assert all(r.passed for r in results)


def test_checker_skips_missing_inputs():
    assert CoordinateRangeChecker().check_all() == []


def test_strict_checker_raises_out_of_range():
    checker = CoordinateRangeChecker(strict_mode=True, log_violations=False)
    with pytest.raises(OutOfRangeError) as excinfo:
        checker.check_geographic(G(91, 0))
    assert excinfo.value.field == "latitude"
    assert excinfo.value.value == 91


def test_strict_checker_flags_implausible_location():
    checker = CoordinateRangeChecker(strict_mode=True, log_violations=False)
    with pytest.raises(OutOfRangeError):
        checker.check_operating_area(G(40.4, -3.7))
