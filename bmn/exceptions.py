"""
BMN Conversion Exceptions.

Every failure of the conversion engine is raised as a subclass of
`BMNError`. Each subclass carries one `ErrorKind` so a caller such as an
HTTP layer can map failures to responses without matching on messages.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """The kinds of failure a conversion can end with."""
    UNRECOGNIZED_ZONE_CODE = "unrecognized_zone_code"
    MALFORMED_NUMERAL = "malformed_numeral"
    UNRESOLVED_ZONE = "unresolved_zone"
    MALFORMED_COORDINATE_TEXT = "malformed_coordinate_text"


class BMNError(ValueError):
    """Base exception for BMN conversion errors.

    Attributes
    ----------
    kind : ErrorKind
        The kind of failure.
    value : Any
        The offending input, if any.
    """
    kind: ErrorKind

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.value = value


class UnrecognizedZoneCode(BMNError):
    """The zone code is not one of M28, M31, M34"""
    kind = ErrorKind.UNRECOGNIZED_ZONE_CODE


class MalformedNumeral(BMNError):
    """An easting or northing is not a finite decimal number"""
    kind = ErrorKind.MALFORMED_NUMERAL


class UnresolvedZone(BMNError):
    """No meridian stripe was given and none could be determined"""
    kind = ErrorKind.UNRESOLVED_ZONE


class MalformedCoordinateText(BMNError):
    """The coordinate text does not consist of exactly three tokens"""
    kind = ErrorKind.MALFORMED_COORDINATE_TEXT
