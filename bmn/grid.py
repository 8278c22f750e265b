"""
BMN Grid Coordinates and their Text Form.

A BMN coordinate is a right value (easting), a height value (northing) and
the meridian stripe they refer to, e.g. ``"M31 450000 350000"``. The
reference ellipsoid of BMN coordinates is always the Bessel ellipsoid.
"""

import math
import re
from dataclasses import dataclass

from bmn.exceptions import (
    MalformedCoordinateText,
    MalformedNumeral,
    UnresolvedZone,
)
from bmn.zones import BMNMeridian
from common.types import EllipsoidParameters
from geospatial.coordinate_models import BesselEllipsoid

# Numerals are formatted to the millimeter
FORMAT_DECIMALS = 3

# Plain decimal numeral with optional sign, fraction and exponent
_NUMERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:E[+-]?\d+)?", re.ASCII | re.IGNORECASE)


@dataclass(frozen=True)
class BMNCoord:
    """A coordinate of the Bundesmeldenetz.

    Attributes
    ----------
    meridian : BMNMeridian
        The meridian stripe, `UNRESOLVED` if not known.
    right : float
        Right value (easting) in meters.
    height : float
        Height value (northing) in meters.
    rel_height : float
        Height of the point in meters, carried through conversions.
    """
    meridian: BMNMeridian
    right: float
    height: float
    rel_height: float = 0.0

    @property
    def ellipsoid(self) -> EllipsoidParameters:
        return BesselEllipsoid

    def __str__(self) -> str:
        return format_bmn(self)

    @classmethod
    def parse(cls, text: str) -> 'BMNCoord':
        return parse_bmn(text)


def _format_numeral(value: float) -> str:
    text = f"{value:.{FORMAT_DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_bmn(coord: BMNCoord) -> str:
    """Render a BMN coordinate in its canonical text form.

    Each numeral is rounded to the millimeter and written without trailing
    zeros or a trailing decimal point.

    Examples
    --------
    >>> format_bmn(BMNCoord(BMNMeridian.M31, 450000.00, 350000.50))
    'M31 450000 350000.5'

    Raises
    ------
    UnresolvedZone
        If the coordinate has no meridian stripe.
    """
    if not coord.meridian.is_resolved:
        raise UnresolvedZone("Cannot format a BMN coordinate without meridian stripe", coord)
    return f"{coord.meridian.code} {_format_numeral(coord.right)} {_format_numeral(coord.height)}"


def _parse_numeral(token: str, name: str) -> float:
    if not _NUMERAL.fullmatch(token):
        raise MalformedNumeral(f"BMN {name} {token!r} is not a number", token)
    value = float(token)
    if not math.isfinite(value):
        raise MalformedNumeral(f"BMN {name} {token!r} is not a finite number", token)
    return value


def parse_bmn(text: str) -> BMNCoord:
    """Parse the text form of a BMN coordinate.

    The text is trimmed and upper-cased, then split on whitespace into
    exactly three tokens: zone code, right value, height value.

    Parameters
    ----------
    text : str
        E.g. ``"M31 450000 350000"``; the zone code is case-insensitive.

    Returns
    -------
    BMNCoord
        The coordinate on the Bessel ellipsoid.

    Raises
    ------
    MalformedCoordinateText
        If the text does not have exactly three tokens.
    UnrecognizedZoneCode
        If the zone code is not M28, M31 or M34.
    MalformedNumeral
        If the right or height value is not a finite number.
    """
    tokens = text.strip().upper().split()
    if len(tokens) != 3:
        raise MalformedCoordinateText(
            f"Expected '<zone> <right> <height>', got {len(tokens)} token(s) in {text!r}",
            text
        )

    zone, right, height = tokens
    meridian = BMNMeridian.from_code(zone)
    return BMNCoord(
        meridian=meridian,
        right=_parse_numeral(right, "right value"),
        height=_parse_numeral(height, "height value"),
    )
