"""
Unit Registry for Distances Reported by the Coordinate Engine.

The engine computes in meters internally. This module uses the `pint`
library so callers can receive distances in whatever length unit their
display or export layer needs, with incompatible units rejected at
runtime.

Example Usage
-------------
>>> from common.units import Q_, convert_length
>>> convert_length(1500.0, 'km')
1.5
>>> Q_(1, 'nautical_mile').to('m').magnitude
1852.0
"""

from typing import Union
import warnings

import pint

# The registry for the whole package
ureg = pint.UnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


def convert_length(value_m: float, unit: str) -> float:
    """Convert a length in meters to ``unit``.

    Parameters
    ----------
    value_m : float
        Length in meters.
    unit : str
        Target unit understood by pint ('km', 'mi', 'ft', ...).

    Returns
    -------
    float
        The converted magnitude.

    Raises
    ------
    ValueError
        If ``unit`` is not a length unit.
    """
    quantity = Q_(value_m, "meter")
    try:
        return float(quantity.to(unit).magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(f"'{unit}' is not a length unit") from e


def ensure_quantity(value: Union[float, pint.Quantity], default_unit: str) -> pint.Quantity:
    """Ensure a value is a pint Quantity, applying default unit if necessary.

    Issues a ``UserWarning`` when a bare number is given.
    """
    if isinstance(value, pint.Quantity):
        return value
    warnings.warn(
        f"Bare number {value} provided without units. "
        f"Assuming {default_unit}. Consider using explicit units.",
        UserWarning,
        stacklevel=2
    )
    return ureg.Quantity(value, default_unit)
