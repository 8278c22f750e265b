"""
Transverse Mercator Projection.

This module provides the forward (geodetic -> grid) and inverse
(grid -> geodetic) Transverse Mercator projection on an arbitrary
ellipsoid, parameterized by a projection origin.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Gauss-Krüger / Transverse Mercator, truncated power series

Implementation
--------------
The meridian arc is expanded in powers of the third flattening n up to n³.
The forward projection uses the series in the longitude difference up to
the sixth power; the inverse finds the footpoint latitude by iterating the
meridian arc and then applies the series in the easting difference up to
the seventh power. Within 3° of the central meridian the projection round
trip is accurate to well below a millimeter.

Accuracy is not guaranteed far from the central meridian, where the series
diverge. Inputs are not range-checked.

References
----------
- Ordnance Survey (2018). A Guide to Coordinate Systems in Great Britain,
  Annex C (Transverse Mercator formulae).
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from typing import NamedTuple
import numpy as np

from common.logging_config import get_logger
from common.types import EllipsoidParameters, GeodeticPoint, GridPoint
from geospatial.coordinate_models import (
    make_geodetic_point,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)

logger = get_logger(__name__)

# Footpoint iteration stops once the arc residual is below 0.01 mm
FOOTPOINT_TOLERANCE_M = 1e-5
FOOTPOINT_MAX_ITERATIONS = 100


class TransverseMercatorOrigin(NamedTuple):
    """Projection origin and offsets of a Transverse Mercator grid.

    Attributes
    ----------
    origin_latitude : float
        Latitude of the true origin in degrees.
    central_meridian : float
        Longitude of the central meridian in degrees.
    scale_factor : float
        Scale factor on the central meridian.
    false_easting : float
        Easting of the true origin in meters.
    false_northing : float
        Northing of the true origin in meters.
    """
    origin_latitude: float
    central_meridian: float
    scale_factor: float
    false_easting: float
    false_northing: float


def meridian_arc(
    latitude_rad: float,
    origin_latitude_rad: float,
    ellipsoid: EllipsoidParameters,
    scale_factor: float = 1.0
) -> float:
    """Compute the scaled meridian arc length between two latitudes.

    Parameters
    ----------
    latitude_rad : float
        Latitude of the end point in radians.
    origin_latitude_rad : float
        Latitude of the start point in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid.
    scale_factor : float
        Scale factor applied to the arc.

    Returns
    -------
    float
        Arc length in meters (negative south of the origin).
    """
    n = ellipsoid.n
    n2 = n * n
    n3 = n2 * n
    d_lat = latitude_rad - origin_latitude_rad
    s_lat = latitude_rad + origin_latitude_rad

    Ma = (1 + n + 1.25 * n2 + 1.25 * n3) * d_lat
    Mb = (3 * n + 3 * n2 + 21.0 / 8 * n3) * np.sin(d_lat) * np.cos(s_lat)
    Mc = (15.0 / 8 * n2 + 15.0 / 8 * n3) * np.sin(2 * d_lat) * np.cos(2 * s_lat)
    Md = 35.0 / 24 * n3 * np.sin(3 * d_lat) * np.cos(3 * s_lat)

    return float(ellipsoid.b * scale_factor * (Ma - Mb + Mc - Md))


def direct_transverse_mercator(
    point: GeodeticPoint,
    origin_latitude: float,
    central_meridian: float,
    scale_factor: float,
    false_easting: float,
    false_northing: float
) -> GridPoint:
    """Project a geodetic point onto a Transverse Mercator grid.

    The projection is computed on the ellipsoid carried by the point; it
    changes the representation, not the datum. Height is not projected.

    Parameters
    ----------
    point : GeodeticPoint
        Latitude and longitude in radians.
    origin_latitude, central_meridian : float
        Projection origin in degrees.
    scale_factor : float
        Scale factor on the central meridian.
    false_easting, false_northing : float
        Grid offsets of the true origin in meters.

    Returns
    -------
    GridPoint
        Easting and northing in meters on the same ellipsoid.
    """
    ellipsoid = point.ellipsoid
    lat = point.latitude
    lat0 = np.radians(origin_latitude)
    d_lon = point.longitude - np.radians(central_meridian)

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    tan2 = np.tan(lat) ** 2

    nu = scale_factor * radius_of_curvature_prime_vertical(lat, ellipsoid)
    rho = scale_factor * radius_of_curvature_meridian(lat, ellipsoid)
    eta2 = nu / rho - 1

    M = meridian_arc(lat, lat0, ellipsoid, scale_factor)

    I = M + false_northing
    II = nu / 2 * sin_lat * cos_lat
    III = nu / 24 * sin_lat * cos_lat**3 * (5 - tan2 + 9 * eta2)
    IIIA = nu / 720 * sin_lat * cos_lat**5 * (61 - 58 * tan2 + tan2**2)
    IV = nu * cos_lat
    V = nu / 6 * cos_lat**3 * (nu / rho - tan2)
    VI = nu / 120 * cos_lat**5 * (5 - 18 * tan2 + tan2**2 + 14 * eta2 - 58 * tan2 * eta2)

    northing = I + II * d_lon**2 + III * d_lon**4 + IIIA * d_lon**6
    easting = false_easting + IV * d_lon + V * d_lon**3 + VI * d_lon**5

    return GridPoint(float(easting), float(northing), ellipsoid)


def inverse_transverse_mercator(
    grid_point: GridPoint,
    origin_latitude: float,
    central_meridian: float,
    scale_factor: float,
    false_easting: float,
    false_northing: float
) -> GeodeticPoint:
    """Convert Transverse Mercator grid coordinates to a geodetic point.

    Inverse of `direct_transverse_mercator` for the same origin. The result
    is expressed on the ellipsoid carried by the grid point, with zero height.

    Parameters
    ----------
    grid_point : GridPoint
        Easting and northing in meters.
    origin_latitude, central_meridian : float
        Projection origin in degrees.
    scale_factor : float
        Scale factor on the central meridian.
    false_easting, false_northing : float
        Grid offsets of the true origin in meters.

    Returns
    -------
    GeodeticPoint
        A `WGS84Point` or `MGIPoint` for the known ellipsoids.
    """
    ellipsoid = grid_point.ellipsoid
    lat0 = np.radians(origin_latitude)
    aF0 = ellipsoid.a * scale_factor
    d_north = grid_point.northing - false_northing

    # Footpoint latitude: the latitude whose meridian arc equals the northing
    lat = d_north / aF0 + lat0
    M = meridian_arc(lat, lat0, ellipsoid, scale_factor)
    for _ in range(FOOTPOINT_MAX_ITERATIONS):
        if abs(d_north - M) < FOOTPOINT_TOLERANCE_M:
            break
        lat += (d_north - M) / aF0
        M = meridian_arc(lat, lat0, ellipsoid, scale_factor)
    else:
        logger.warning(
            f"Footpoint latitude did not converge for northing {grid_point.northing:.3f}"
        )

    cos_lat = np.cos(lat)
    tan_lat = np.tan(lat)
    tan2 = tan_lat**2
    sec_lat = 1.0 / cos_lat

    nu = scale_factor * radius_of_curvature_prime_vertical(lat, ellipsoid)
    rho = scale_factor * radius_of_curvature_meridian(lat, ellipsoid)
    eta2 = nu / rho - 1

    VII = tan_lat / (2 * rho * nu)
    VIII = tan_lat / (24 * rho * nu**3) * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
    IX = tan_lat / (720 * rho * nu**5) * (61 + 90 * tan2 + 45 * tan2**2)
    X = sec_lat / nu
    XI = sec_lat / (6 * nu**3) * (nu / rho + 2 * tan2)
    XII = sec_lat / (120 * nu**5) * (5 + 28 * tan2 + 24 * tan2**2)
    XIIA = sec_lat / (5040 * nu**7) * (61 + 662 * tan2 + 1320 * tan2**2 + 720 * tan2**3)

    dE = grid_point.easting - false_easting

    latitude = lat - VII * dE**2 + VIII * dE**4 - IX * dE**6
    longitude = np.radians(central_meridian) + X * dE - XI * dE**3 + XII * dE**5 - XIIA * dE**7

    return make_geodetic_point(latitude, longitude, 0.0, ellipsoid)
