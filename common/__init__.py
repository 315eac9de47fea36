"""
Common infrastructure for the coordinate engine.

This package provides foundational components used across all modules:
- Geodetic constants and the operating-area configuration
- Coordinate value types
- Error taxonomy
- Unit registry
- Logging
"""

from common.constants import (
    Constant,
    GeodeticConstants,
    OperatingArea,
    DOMINICAN_REPUBLIC,
)
from common.errors import CoordinateEngineError, InvalidInputError, OutOfRangeError
from common.types import (
    UTMCoordinate,
    GeographicCoordinate,
    PolygonPoint,
    Polygon,
    ZoneDesignation,
    UTMConversion,
)
from common.units import ureg, Q_, convert_length
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GeodeticConstants",
    "OperatingArea",
    "DOMINICAN_REPUBLIC",
    "CoordinateEngineError",
    "InvalidInputError",
    "OutOfRangeError",
    "UTMCoordinate",
    "GeographicCoordinate",
    "PolygonPoint",
    "Polygon",
    "ZoneDesignation",
    "UTMConversion",
    "ureg",
    "Q_",
    "convert_length",
    "get_logger",
]
