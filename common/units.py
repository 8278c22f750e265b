"""
Unit Registry for Geodetic Parameters.

This module provides a centralized unit system using the `pint` library so
that angles and scale differences published in arc seconds, arc minutes or
parts per million enter the calculations through an explicit conversion
rather than hand-written factors.

Example Usage
-------------
>>> from common.units import Q_
>>> Q_(5.137, 'arcsecond').to('radian')
<Quantity(2.49046e-05, 'radian')>
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


def to_magnitude(value: Union[float, pint.Quantity], unit: str, default_unit: str) -> float:
    """Convert a bare number or a quantity to a plain float in `unit`.

    Parameters
    ----------
    value : float or pint.Quantity
        The value to convert. Bare numbers are taken to be in `default_unit`.
    unit : str
        Target unit.
    default_unit : str
        Unit assumed for bare numbers.

    Returns
    -------
    float
        Magnitude in the target unit.

    Raises
    ------
    ValueError
        If the quantity cannot be expressed in the target unit.
    """
    quantity = value if isinstance(value, pint.Quantity) else Q_(value, default_unit)
    try:
        return float(quantity.to(unit).magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(
            f"Value has incompatible units. Expected {unit}, got {quantity.units}"
        ) from e


def arcseconds_to_radians(value: Union[float, pint.Quantity]) -> float:
    """Convert an angle in arc seconds to radians."""
    return to_magnitude(value, "radian", "arcsecond")


def ppm_to_scale(value: Union[float, pint.Quantity]) -> float:
    """Convert a scale difference in parts per million to a unitless factor."""
    # micrometer per meter is exactly one part per million
    return to_magnitude(value, "dimensionless", "micrometer / meter")


def degrees_minutes_to_degrees(degrees: float, minutes: float = 0.0) -> float:
    """Combine whole degrees and arc minutes into decimal degrees."""
    return float((Q_(degrees, "degree") + Q_(minutes, "arcminute")).to("degree").magnitude)

