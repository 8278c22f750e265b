"""
Geospatial Module for the BMN Conversion System.

All ellipsoid, datum and projection calculations of the system originate
from this module. The BMN-specific parts (stripes, text form) live in the
`bmn` package and only compose the functions exported here.

This module provides:
- Reference ellipsoids and datum-typed geodetic points
- Geodetic <-> geocentric Cartesian conversion
- The fixed WGS84 -> MGI Helmert transform and its inverse
- Transverse Mercator projection, forward and inverse
"""

from geospatial.coordinate_models import (
    WGS84Ellipsoid,
    BesselEllipsoid,
    WGS84Point,
    MGIPoint,
    make_geodetic_point,
    polar_to_cartesian,
    cartesian_to_polar,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)

from geospatial.datum import (
    HelmertTransform,
    HELMERT_WGS84_TO_MGI,
)

from geospatial.projections import (
    TransverseMercatorOrigin,
    meridian_arc,
    direct_transverse_mercator,
    inverse_transverse_mercator,
)

__all__ = [
    # Coordinate models
    "WGS84Ellipsoid",
    "BesselEllipsoid",
    "WGS84Point",
    "MGIPoint",
    "make_geodetic_point",
    "polar_to_cartesian",
    "cartesian_to_polar",
    "radius_of_curvature_meridian",
    "radius_of_curvature_prime_vertical",
    # Datum transform
    "HelmertTransform",
    "HELMERT_WGS84_TO_MGI",
    # Projection
    "TransverseMercatorOrigin",
    "meridian_arc",
    "direct_transverse_mercator",
    "inverse_transverse_mercator",
]
