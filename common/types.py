"""
Type Definitions for Geodetic and Grid Coordinates.

This module defines the immutable value types exchanged between the
coordinate models, the datum transform and the map projection. Every
position carries the ellipsoid it refers to, so that no function has to
guess the datum of its input.

Design Rationale
----------------
Using frozen dataclasses instead of raw tuples provides:
1. Self-documenting code - field names describe the data
2. Values that cannot be changed after a conversion produced them
3. Runtime validation of coordinate ranges
4. Clear unit expectations in docstrings
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    n : float
        Third flattening: n = (a - b) / (a + b)
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def n(self) -> float:
        """Third flattening, the expansion parameter of the meridian arc."""
        return (self.a - self.b) / (self.a + self.b)


@dataclass(frozen=True)
class GeodeticPoint:
    """A geodetic position on a reference ellipsoid.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in RADIANS (not degrees). Range: [-π/2, π/2].
    longitude : float
        Geodetic longitude in RADIANS (not degrees). Normalized to [-π, π].
    ellipsoid : EllipsoidParameters
        The ellipsoid the latitude, longitude and height refer to.
    height : float, optional
        Height above the ellipsoid in METERS. Default is 0.

    Notes
    -----
    - Latitude is positive north, negative south.
    - Longitude is positive east, negative west.
    - For display, use the `to_degrees()` method.
    """
    latitude: float  # radians
    longitude: float  # radians
    ellipsoid: EllipsoidParameters
    height: float = 0.0  # meters above ellipsoid

    def __post_init__(self):
        """Validate coordinate ranges."""
        if not -np.pi/2 <= self.latitude <= np.pi/2:
            raise ValueError(
                f"Latitude {self.latitude} rad out of range [-π/2, π/2]. "
                f"Did you pass degrees instead of radians?"
            )
        # Normalize longitude to [-π, π]
        object.__setattr__(
            self, "longitude",
            float(np.arctan2(np.sin(self.longitude), np.cos(self.longitude)))
        )

    def to_degrees(self) -> Tuple[float, float]:
        """Convert to degrees for display.

        Returns
        -------
        Tuple[float, float]
            (latitude_degrees, longitude_degrees)
        """
        return float(np.degrees(self.latitude)), float(np.degrees(self.longitude))

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float, height_m: float = 0.0, **kwargs):
        """Create a point from degrees (convenience constructor).

        Parameters
        ----------
        lat_deg : float
            Latitude in degrees.
        lon_deg : float
            Longitude in degrees.
        height_m : float, optional
            Height above the ellipsoid in meters.
        **kwargs
            Further fields, e.g. ``ellipsoid`` for a plain GeodeticPoint.
        """
        return cls(
            latitude=float(np.radians(lat_deg)),
            longitude=float(np.radians(lon_deg)),
            height=height_m,
            **kwargs
        )


@dataclass(frozen=True)
class GeocentricPoint:
    """An Earth-centered Cartesian position.

    Attributes
    ----------
    x, y, z : float
        Geocentric coordinates in METERS.
    ellipsoid : EllipsoidParameters
        Ellipsoid of the datum the coordinates were produced on. This is
        provenance only; the Cartesian values do not depend on it.
    """
    x: float
    y: float
    z: float
    ellipsoid: EllipsoidParameters

    def as_array(self) -> np.ndarray:
        """Return the coordinates as a (3,) array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class GridPoint:
    """A planar position produced by a map projection.

    Attributes
    ----------
    easting : float
        Grid easting in METERS, false easting included.
    northing : float
        Grid northing in METERS, false northing included.
    ellipsoid : EllipsoidParameters
        Ellipsoid the projection was computed on.
    """
    easting: float
    northing: float
    ellipsoid: EllipsoidParameters
