"""
Coordinate Models for Ellipsoidal Earth Geometry.

This module defines the reference ellipsoids of the two datums involved in
BMN conversion and the conversion between geodetic (latitude, longitude,
height) and geocentric Cartesian (X, Y, Z) coordinates on either of them.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: WGS84 ellipsoid for the geographic reference system, Bessel 1841
ellipsoid for the MGI datum of the Austrian national grid.

Datum-Typed Points
------------------
`WGS84Point` and `MGIPoint` are geodetic points whose ellipsoid is fixed
by their class. Functions that cross datums accept or return exactly one of
these types, so the direction of a datum shift is visible in the signature.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Torge, W. (2001). Geodesy (3rd ed.). de Gruyter.
- Hofmann-Wellenhof, B. et al. (2008). GNSS: GPS, GLONASS, Galileo.
"""

from dataclasses import dataclass, field
from typing import Optional
import numpy as np

from common.constants import GeodeticConstants
from common.types import (
    EllipsoidParameters,
    GeodeticPoint,
    GeocentricPoint,
)


# WGS84 ellipsoid - the geographic reference system
WGS84Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.WGS84_FLATTENING.value,
    name="WGS84"
)

# Bessel 1841 ellipsoid - native ellipsoid of the MGI datum and the BMN grid
BesselEllipsoid = EllipsoidParameters(
    a=GeodeticConstants.BESSEL_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.BESSEL_FLATTENING.value,
    name="Bessel 1841"
)


@dataclass(frozen=True)
class WGS84Point(GeodeticPoint):
    """A geodetic point on the WGS84 reference datum.

    Examples
    --------
    >>> vienna = WGS84Point.from_degrees(48.2082, 16.3738)
    >>> vienna.ellipsoid.name
    'WGS84'
    """
    ellipsoid: EllipsoidParameters = field(default=WGS84Ellipsoid, init=False)


@dataclass(frozen=True)
class MGIPoint(GeodeticPoint):
    """A geodetic point on the MGI datum (Bessel 1841 ellipsoid)."""
    ellipsoid: EllipsoidParameters = field(default=BesselEllipsoid, init=False)


def make_geodetic_point(
    latitude_rad: float,
    longitude_rad: float,
    height_m: float,
    ellipsoid: EllipsoidParameters
) -> GeodeticPoint:
    """Build the most specific point type for an ellipsoid.

    Returns a `WGS84Point` or `MGIPoint` for the two known ellipsoids and a
    plain `GeodeticPoint` otherwise.
    """
    latitude_rad = float(latitude_rad)
    longitude_rad = float(longitude_rad)
    height_m = float(height_m)
    if ellipsoid == WGS84Ellipsoid:
        return WGS84Point(latitude_rad, longitude_rad, height_m)
    if ellipsoid == BesselEllipsoid:
        return MGIPoint(latitude_rad, longitude_rad, height_m)
    return GeodeticPoint(latitude_rad, longitude_rad, ellipsoid, height_m)


def radius_of_curvature_meridian(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the meridian plane.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature M in meters.

    Notes
    -----
    M = a(1 - e²) / (1 - e² sin²φ)^(3/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = (1 - ellipsoid.e2 * sin_lat**2) ** 1.5
    return ellipsoid.a * (1 - ellipsoid.e2) / denominator


def radius_of_curvature_prime_vertical(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature N in meters.

    Notes
    -----
    N = a / (1 - e² sin²φ)^(1/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = np.sqrt(1 - ellipsoid.e2 * sin_lat**2)
    return ellipsoid.a / denominator


def polar_to_cartesian(point: GeodeticPoint) -> GeocentricPoint:
    """Convert a geodetic point to geocentric Cartesian coordinates.

    The conversion uses the ellipsoid carried by the point; the result
    records that ellipsoid as its provenance.

    Parameters
    ----------
    point : GeodeticPoint
        Latitude and longitude in radians, height in meters.

    Returns
    -------
    GeocentricPoint
        (X, Y, Z) in meters.

    Notes
    -----
    The geocentric frame has:
    - Origin at the center of the ellipsoid
    - X-axis through the prime meridian (0° longitude) at equator
    - Y-axis through 90°E at equator
    - Z-axis through the North Pole
    """
    ellipsoid = point.ellipsoid

    sin_lat = np.sin(point.latitude)
    cos_lat = np.cos(point.latitude)
    sin_lon = np.sin(point.longitude)
    cos_lon = np.cos(point.longitude)

    N = radius_of_curvature_prime_vertical(point.latitude, ellipsoid)

    X = (N + point.height) * cos_lat * cos_lon
    Y = (N + point.height) * cos_lat * sin_lon
    Z = (N * (1 - ellipsoid.e2) + point.height) * sin_lat

    return GeocentricPoint(float(X), float(Y), float(Z), ellipsoid)


def cartesian_to_polar(
    point: GeocentricPoint,
    ellipsoid: Optional[EllipsoidParameters] = None,
    max_iterations: int = 10,
    tolerance: float = 1e-12
) -> GeodeticPoint:
    """Convert geocentric coordinates to geodetic latitude, longitude, height.

    Uses Bowring's iterative method for numerical stability.

    Parameters
    ----------
    point : GeocentricPoint
        Geocentric coordinates in meters.
    ellipsoid : EllipsoidParameters, optional
        Ellipsoid to express the result on. Defaults to the ellipsoid the
        geocentric point was produced on.
    max_iterations : int
        Maximum iterations for convergence.
    tolerance : float
        Convergence tolerance in radians.

    Returns
    -------
    GeodeticPoint
        A `WGS84Point` or `MGIPoint` for the known ellipsoids.

    References
    ----------
    Bowring, B.R. (1976). Transformation from spatial to geographical
    coordinates. Survey Review, 23(181), 323-327.
    """
    if ellipsoid is None:
        ellipsoid = point.ellipsoid
    X, Y, Z = point.x, point.y, point.z

    longitude_rad = np.arctan2(Y, X)

    # Distance from Z-axis
    p = np.sqrt(X**2 + Y**2)

    # Handle polar singularity
    if p < 1e-10:
        latitude_rad = np.sign(Z) * np.pi / 2
        height_m = np.abs(Z) - ellipsoid.b
        return make_geodetic_point(latitude_rad, longitude_rad, height_m, ellipsoid)

    # Initial approximation using spherical Earth
    latitude_rad = np.arctan2(Z, p * (1 - ellipsoid.e2))

    for _ in range(max_iterations):
        sin_lat = np.sin(latitude_rad)
        N = radius_of_curvature_prime_vertical(latitude_rad, ellipsoid)

        latitude_new = np.arctan2(
            Z + ellipsoid.e2 * N * sin_lat,
            p
        )

        if np.abs(latitude_new - latitude_rad) < tolerance:
            latitude_rad = latitude_new
            break

        latitude_rad = latitude_new

    sin_lat = np.sin(latitude_rad)
    cos_lat = np.cos(latitude_rad)
    N = radius_of_curvature_prime_vertical(latitude_rad, ellipsoid)

    if np.abs(cos_lat) > 1e-10:
        height_m = p / cos_lat - N
    else:
        height_m = np.abs(Z) / np.abs(sin_lat) - N * (1 - ellipsoid.e2)

    return make_geodetic_point(latitude_rad, longitude_rad, height_m, ellipsoid)
