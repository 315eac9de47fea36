"""
Validation Framework for the Coordinate Engine.

This module provides the coordinate range predicates and checker.
"""

from validation.coordinate_checks import (
    is_valid_utm,
    is_valid_geographic,
    is_within_operating_area,
    CoordinateRangeChecker,
    ValidationResult,
)

__all__ = [
    "is_valid_utm",
    "is_valid_geographic",
    "is_within_operating_area",
    "CoordinateRangeChecker",
    "ValidationResult",
]
