"""
Coordinate Range Checks.

Range checking is separate from conversion: the conversion
functions produce numerically well-defined output for any real input and
never consult these checks. Callers decide whether an out-of-range value
is rejected or merely flagged.

Check Categories
----------------
1. UTM validity (zone designator, easting and northing envelopes)
2. Geographic validity (latitude and longitude ranges)
3. Operating-area plausibility (where permit coordinates can be)
"""

from dataclasses import dataclass, field
import re
from typing import Any, Dict, List

from common.constants import OperatingArea, DOMINICAN_REPUBLIC
from common.errors import OutOfRangeError
from common.logging_config import get_logger
from common.types import GeographicCoordinate, UTMCoordinate

logger = get_logger(__name__)

_STRICT_ZONE_PATTERN = re.compile(r"^(\d{1,2})[NS]$", re.IGNORECASE)

UTM_EASTING_RANGE = (160_000.0, 840_000.0)
UTM_NORTHING_RANGE = (0.0, 10_000_000.0)
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def _within(value: float, bounds) -> bool:
    low, high = bounds
    return low <= value <= high


def _zone_is_valid(zone) -> bool:
    match = _STRICT_ZONE_PATTERN.match(zone) if isinstance(zone, str) else None
    if not match:
        return False
    return 1 <= int(match.group(1)) <= 60


def is_valid_utm(utm: UTMCoordinate) -> bool:
    """Whether a UTM coordinate is within the standard UTM envelope.

    The zone must be ``<1-2 digits><N|S>`` (case-insensitive) with a zone
    number in [1, 60]; easting in [160000, 840000]; northing in
    [0, 10000000]. Band-letter zones such as "19Q" are not valid here even
    though the conversion accepts them.
    """
    if not _zone_is_valid(utm.zone):
        return False

    if not _within(utm.easting, UTM_EASTING_RANGE):
        return False

    # Southern northings carry the false northing, so both hemispheres
    # share the same envelope.
    return _within(utm.northing, UTM_NORTHING_RANGE)


def is_valid_geographic(coord: GeographicCoordinate) -> bool:
    """Whether latitude is in [-90, 90] and longitude in [-180, 180]."""
    return _within(coord.latitude, LATITUDE_RANGE) and _within(coord.longitude, LONGITUDE_RANGE)


def is_within_operating_area(
    coord,
    operating_area: OperatingArea = DOMINICAN_REPUBLIC
) -> bool:
    """Whether a coordinate is plausible for the operating area.

    Accepts either a ``GeographicCoordinate`` (checked against the
    geographic envelope) or a ``UTMCoordinate`` (checked against the UTM
    envelope; the zone is not inspected).
    """
    if isinstance(coord, UTMCoordinate):
        return (
            _within(coord.easting, operating_area.easting_range_m)
            and _within(coord.northing, operating_area.northing_range_m)
        )
    return (
        _within(coord.latitude, operating_area.latitude_range_deg)
        and _within(coord.longitude, operating_area.longitude_range_deg)
    )


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Offending fields and values.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class CoordinateRangeChecker:
    """Runs the range checks and reports the outcome.

    Parameters
    ----------
    strict_mode : bool
        If True, raise ``OutOfRangeError`` on the first failed check.
    log_violations : bool
        Whether to log failed checks.
    operating_area : OperatingArea
        Region used by the plausibility checks.
    """

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True,
        operating_area: OperatingArea = DOMINICAN_REPUBLIC
    ):
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self.operating_area = operating_area

    def check_utm(self, utm: UTMCoordinate) -> ValidationResult:
        details = {}
        if not _zone_is_valid(utm.zone):
            details["zone"] = utm.zone
        if not _within(utm.easting, UTM_EASTING_RANGE):
            details["easting"] = utm.easting
        if not _within(utm.northing, UTM_NORTHING_RANGE):
            details["northing"] = utm.northing
        return self._report("utm_range", details)

    def check_geographic(self, coord: GeographicCoordinate) -> ValidationResult:
        details = {}
        if not _within(coord.latitude, LATITUDE_RANGE):
            details["latitude"] = coord.latitude
        if not _within(coord.longitude, LONGITUDE_RANGE):
            details["longitude"] = coord.longitude
        return self._report("geographic_range", details)

    def check_operating_area(self, coord) -> ValidationResult:
        details = {}
        if not is_within_operating_area(coord, self.operating_area):
            details["coordinate"] = coord
        return self._report(f"within_{self.operating_area.name.lower().replace(' ', '_')}", details)

    def check_all(self, utm=None, geographic=None) -> List[ValidationResult]:
        """Run every applicable check; ``None`` inputs are skipped."""
        results = []
        if utm is not None:
            results.append(self.check_utm(utm))
            results.append(self.check_operating_area(utm))
        if geographic is not None:
            results.append(self.check_geographic(geographic))
            results.append(self.check_operating_area(geographic))
        return results

    def _report(self, test_name: str, details: Dict[str, Any]) -> ValidationResult:
        passed = not details
        if passed:
            return ValidationResult(test_name, True, "within range", {})

        fields = ", ".join(f"{k}={v!r}" for k, v in details.items())
        message = f"{test_name} failed: {fields}"

        if self.log_violations:
            logger.warning(message)
        if self.strict_mode:
            first_field, first_value = next(iter(details.items()))
            raise OutOfRangeError(message, field=first_field, value=first_value)

        return ValidationResult(test_name, False, message, details)
