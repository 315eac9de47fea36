"""
Geodetic Constants and Operating-Area Configuration.

This module provides the constants used by the coordinate engine together
with their provenance. All constants are defined with SI units.

The ellipsoid values are the truncated figures used by the closed-form
UTM series (Snyder 1987). They differ from the full-precision WGS84
definition by less than 1e-11 in e², which is far below the series'
own truncation error.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from dataclasses import dataclass
from typing import Final, Tuple


@dataclass(frozen=True)
class Constant:
    """A constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of constants used by the coordinate engine.

    WGS84 Ellipsoid
    ---------------
    Semi-major axis and eccentricities of the reference ellipsoid.

    UTM Projection
    --------------
    Scale factor at the central meridian and the false origin offsets.

    Spherical Earth
    ---------------
    Radius used by the Haversine great-circle formula.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        value=0.00669438,
        uncertainty=1e-11,
        unit="dimensionless",
        source="WGS84, truncated as in Snyder (1987)",
        description="First eccentricity squared: e² = (a² - b²) / a²"
    )

    EARTH_SECOND_ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        value=0.00673949674228,
        uncertainty=1e-14,
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2 (derived)",
        description="Second eccentricity squared: e'² = e² / (1 - e²)"
    )

    # =========================================================================
    # Universal Transverse Mercator
    # =========================================================================

    UTM_SCALE_FACTOR: Final[Constant] = Constant(
        value=0.9996,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="DMA TM 8358.2",
        description="Scale factor k0 at the zone's central meridian"
    )

    UTM_FALSE_EASTING: Final[Constant] = Constant(
        value=500_000.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2",
        description="Offset added to eastings so they stay positive within a zone"
    )

    UTM_FALSE_NORTHING_SOUTH: Final[Constant] = Constant(
        value=10_000_000.0,
        uncertainty=0.0,
        unit="m",
        source="DMA TM 8358.2",
        description="Offset added to southern-hemisphere northings"
    )

    UTM_ZONE_WIDTH_DEG: Final[float] = 6.0
    UTM_ZONE_COUNT: Final[int] = 60

    # =========================================================================
    # Spherical approximation
    # =========================================================================

    HAVERSINE_EARTH_RADIUS: Final[Constant] = Constant(
        value=6_371_000.0,
        uncertainty=8.8,  # vs. the IUGG mean radius 6,371,008.8 m
        unit="m",
        source="Rounded IUGG mean radius",
        description="Sphere radius for great-circle distances"
    )


@dataclass(frozen=True)
class OperatingArea:
    """Deployment region for the coordinate engine.

    The engine resolves ambiguous UTM zone strings to ``default_zone_number``
    in the hemisphere given by ``default_northern``. The envelopes describe
    where coordinates extracted from permits are plausible; they are used
    by the operating-area checks only, never by the conversions.

    Attributes
    ----------
    name : str
        Identifier for the region.
    default_zone_number : int
        UTM zone used when a zone string cannot be parsed.
    default_northern : bool
        Hemisphere used together with ``default_zone_number``.
    latitude_range_deg, longitude_range_deg : Tuple[float, float]
        Plausible geographic envelope, inclusive.
    easting_range_m, northing_range_m : Tuple[float, float]
        Plausible UTM envelope, inclusive.
    """
    name: str
    default_zone_number: int
    default_northern: bool
    latitude_range_deg: Tuple[float, float]
    longitude_range_deg: Tuple[float, float]
    easting_range_m: Tuple[float, float]
    northing_range_m: Tuple[float, float]

    def __post_init__(self):
        if not 1 <= self.default_zone_number <= GeodeticConstants.UTM_ZONE_COUNT:
            raise ValueError(
                f"default_zone_number must be in [1, 60], got {self.default_zone_number}"
            )
        for label, (low, high) in (
            ("latitude_range_deg", self.latitude_range_deg),
            ("longitude_range_deg", self.longitude_range_deg),
            ("easting_range_m", self.easting_range_m),
            ("northing_range_m", self.northing_range_m),
        ):
            if low > high:
                raise ValueError(f"{label} is inverted: ({low}, {high})")

    @property
    def default_zone(self) -> str:
        """Default zone formatted as ``<number><N|S>``."""
        return f"{self.default_zone_number}{'N' if self.default_northern else 'S'}"


# Dominican Republic: UTM zones 19 and 20, northern hemisphere.
DOMINICAN_REPUBLIC = OperatingArea(
    name="Dominican Republic",
    default_zone_number=19,
    default_northern=True,
    latitude_range_deg=(17.0, 20.0),
    longitude_range_deg=(-72.0, -68.0),
    easting_range_m=(300_000.0, 800_000.0),
    northing_range_m=(1_900_000.0, 2_200_000.0),
)
