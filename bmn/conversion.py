"""
Conversion between WGS84 and the Bundesmeldenetz.

BMN -> WGS84:
    inverse Transverse Mercator on the Bessel ellipsoid, geodetic to
    geocentric, inverse WGS84 -> MGI Helmert transform, geocentric to
    geodetic on WGS84.

WGS84 -> BMN:
    geodetic to geocentric, WGS84 -> MGI Helmert transform, geocentric to
    geodetic on Bessel, stripe resolution unless a stripe is given, forward
    Transverse Mercator.

The fixed Helmert parameters limit the accuracy to a few meters.
Heights pass through the datum shift as ellipsoidal heights; no geoid
model is applied.
"""

from dataclasses import replace
from typing import Optional, Union

from bmn.exceptions import UnresolvedZone
from bmn.grid import BMNCoord
from bmn.zones import BMNMeridian, resolve_zone
from common.logging_config import get_logger
from common.types import GridPoint
from geospatial.coordinate_models import (
    BesselEllipsoid,
    WGS84Point,
    cartesian_to_polar,
    polar_to_cartesian,
)
from geospatial.datum import HELMERT_WGS84_TO_MGI
from geospatial.projections import (
    direct_transverse_mercator,
    inverse_transverse_mercator,
)

logger = get_logger(__name__)


def bmn_to_wgs84(coord: BMNCoord) -> WGS84Point:
    """Transform a BMN coordinate to a WGS84 latitude and longitude.

    Parameters
    ----------
    coord : BMNCoord
        The grid coordinate; its `rel_height` becomes the height above the
        Bessel ellipsoid before the datum shift.

    Returns
    -------
    WGS84Point
        The position on the WGS84 datum.

    Raises
    ------
    UnresolvedZone
        If the coordinate's meridian stripe is not set.
    """
    if not coord.meridian.is_resolved:
        raise UnresolvedZone("BMN coordinate has no meridian stripe", coord)

    mgi = inverse_transverse_mercator(
        GridPoint(coord.right, coord.height, coord.ellipsoid),
        *coord.meridian.projection
    )
    mgi = replace(mgi, height=coord.rel_height)

    cart = HELMERT_WGS84_TO_MGI.inverse_transform(polar_to_cartesian(mgi))
    point = cartesian_to_polar(cart)

    lat, lon = point.to_degrees()
    logger.debug(f"{coord} -> WGS84 {lat:.8f} {lon:.8f}")
    return point


def wgs84_to_bmn(
    point: WGS84Point,
    meridian: Union[BMNMeridian, str, None] = BMNMeridian.UNRESOLVED
) -> BMNCoord:
    """Transform a WGS84 latitude and longitude to a BMN coordinate.

    Parameters
    ----------
    point : WGS84Point
        The position on the WGS84 datum.
    meridian : BMNMeridian or str, optional
        The stripe to project into. When omitted or `UNRESOLVED`, the
        stripe is determined from the MGI longitude of the point.

    Returns
    -------
    BMNCoord
        The grid coordinate; `rel_height` holds the height above the
        Bessel ellipsoid.

    Raises
    ------
    TypeError
        If `point` is not on the WGS84 datum.
    UnrecognizedZoneCode
        If `meridian` is a string that is not a stripe code.
    UnresolvedZone
        If no stripe was given and the longitude lies outside all stripes.
    """
    if not isinstance(point, WGS84Point):
        raise TypeError(f"Expected a WGS84Point, got {type(point).__name__}")
    if meridian is None:
        meridian = BMNMeridian.UNRESOLVED
    elif isinstance(meridian, str):
        meridian = BMNMeridian.from_code(meridian)

    cart = HELMERT_WGS84_TO_MGI.transform(polar_to_cartesian(point))
    mgi = cartesian_to_polar(cart, BesselEllipsoid)

    if not meridian.is_resolved:
        _, lon_deg = mgi.to_degrees()
        meridian = resolve_zone(lon_deg)
        if not meridian.is_resolved:
            raise UnresolvedZone(
                f"Longitude {lon_deg:.6f} lies outside the BMN meridian stripes", point
            )

    grid = direct_transverse_mercator(mgi, *meridian.projection)
    coord = BMNCoord(
        meridian=meridian,
        right=grid.easting,
        height=grid.northing,
        rel_height=mgi.height,
    )

    logger.debug(f"WGS84 {point.to_degrees()} -> {coord}")
    return coord
