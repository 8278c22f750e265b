"""
Meridian Stripes of the Bundesmeldenetz.

The BMN divides Austria into three meridian stripes, named after their
central meridians counted east of Ferro: M28, M31 and M34. Each stripe is
a Transverse Mercator grid on the MGI datum with its own central meridian
and false easting; origin latitude, scale factor and false northing are
shared.

Zone Resolution
---------------
`resolve_zone` picks a stripe from an MGI longitude by testing closed
longitude ranges in the order M28, M31, M34. Adjacent ranges share their
boundary value, so a longitude exactly on a boundary belongs to the first
stripe tested (M28 over M31, M31 over M34).
"""

from enum import Enum
from typing import Optional, Tuple

from pyproj import CRS

from bmn.exceptions import UnrecognizedZoneCode, UnresolvedZone
from common.constants import GeodeticConstants
from common.logging_config import get_logger
from common.units import degrees_minutes_to_degrees
from geospatial.projections import TransverseMercatorOrigin

logger = get_logger(__name__)


class BMNMeridian(Enum):
    """A meridian stripe of the BMN grid.

    Each resolved member carries its display code, its central meridian in
    degrees east of Greenwich, its false easting in meters and its EPSG code.
    `UNRESOLVED` marks a coordinate whose stripe is not known yet.
    """
    UNRESOLVED = ("", None, None, None)
    M28 = ("M28", degrees_minutes_to_degrees(10, 20), 150_000.0, 31288)
    M31 = ("M31", degrees_minutes_to_degrees(13, 20), 450_000.0, 31289)
    M34 = ("M34", degrees_minutes_to_degrees(16, 20), 750_000.0, 31290)

    def __init__(
        self,
        code: str,
        central_meridian: Optional[float],
        false_easting: Optional[float],
        epsg: Optional[int]
    ):
        self.code = code
        self.central_meridian = central_meridian
        self.false_easting = false_easting
        self.epsg = epsg

    def __str__(self) -> str:
        return self.code or "unresolved"

    @property
    def is_resolved(self) -> bool:
        return self is not BMNMeridian.UNRESOLVED

    @classmethod
    def from_code(cls, code: str) -> 'BMNMeridian':
        """Look up a stripe by its code, case-insensitively.

        Raises
        ------
        UnrecognizedZoneCode
            If `code` is not M28, M31 or M34.
        """
        normalized = code.strip().upper()
        for meridian in cls:
            if meridian.is_resolved and meridian.code == normalized:
                return meridian
        raise UnrecognizedZoneCode(f"Unrecognized BMN zone code {code!r}", code)

    @property
    def projection(self) -> TransverseMercatorOrigin:
        """Transverse Mercator origin of this stripe.

        Raises
        ------
        UnresolvedZone
            For `UNRESOLVED`, which has no projection.
        """
        if not self.is_resolved:
            raise UnresolvedZone("BMN meridian stripe is not set")
        return TransverseMercatorOrigin(
            origin_latitude=GeodeticConstants.BMN_ORIGIN_LATITUDE.value,
            central_meridian=self.central_meridian,
            scale_factor=GeodeticConstants.BMN_SCALE_FACTOR.value,
            false_easting=self.false_easting,
            false_northing=GeodeticConstants.BMN_FALSE_NORTHING.value,
        )

    @property
    def proj4_string(self) -> str:
        """PROJ.4 definition of this stripe, including the WGS84 datum shift."""
        origin = self.projection
        towgs84 = ",".join(
            f"{v:g}" for v in (
                *GeodeticConstants.MGI_TO_WGS84_TRANSLATION.value,
                *GeodeticConstants.MGI_TO_WGS84_ROTATION.value,
                GeodeticConstants.MGI_TO_WGS84_SCALE.value,
            )
        )
        return (
            f"+proj=tmerc +lat_0={origin.origin_latitude:g} "
            f"+lon_0={origin.central_meridian!r} +k={origin.scale_factor:g} "
            f"+x_0={origin.false_easting:.10g} +y_0={origin.false_northing:.10g} "
            f"+ellps=bessel +towgs84={towgs84} +units=m +no_defs"
        )

    def to_crs(self) -> CRS:
        """Return this stripe as a pyproj CRS built from `proj4_string`."""
        return CRS.from_proj4(self.proj4_string)


# Stripe boundaries lie 50' past the whole degree.
_BOUNDARY_OFFSET = 0.5 / 6 * 10

# Tested in this order; the first matching range wins.
ZONE_RANGES: Tuple[Tuple[BMNMeridian, float, float], ...] = (
    (BMNMeridian.M28, 8.0 + _BOUNDARY_OFFSET, 11.0 + _BOUNDARY_OFFSET),
    (BMNMeridian.M31, 11.0 + _BOUNDARY_OFFSET, 14.0 + _BOUNDARY_OFFSET),
    (BMNMeridian.M34, 14.0 + _BOUNDARY_OFFSET, 17.0 + _BOUNDARY_OFFSET),
)


def resolve_zone(longitude_deg: float) -> BMNMeridian:
    """Pick the meridian stripe for an MGI longitude.

    Parameters
    ----------
    longitude_deg : float
        Longitude on the MGI datum in degrees east of Greenwich.

    Returns
    -------
    BMNMeridian
        The first stripe whose closed range contains the longitude, or
        `BMNMeridian.UNRESOLVED` if none does.
    """
    for meridian, west, east in ZONE_RANGES:
        if east >= longitude_deg >= west:
            logger.debug(f"Longitude {longitude_deg:.6f} resolved to {meridian}")
            return meridian

    logger.debug(f"Longitude {longitude_deg:.6f} lies outside all BMN stripes")
    return BMNMeridian.UNRESOLVED
