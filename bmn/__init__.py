"""
BMN Module: conversion between WGS84 and the Austrian Bundesmeldenetz.

This module provides:
- The meridian stripes M28, M31, M34 and their automatic resolution
- BMN grid coordinates and their canonical text form
- WGS84 <-> BMN conversion through the MGI datum
"""

from bmn.exceptions import (
    ErrorKind,
    BMNError,
    UnrecognizedZoneCode,
    MalformedNumeral,
    UnresolvedZone,
    MalformedCoordinateText,
)

from bmn.zones import (
    BMNMeridian,
    resolve_zone,
)

from bmn.grid import (
    BMNCoord,
    parse_bmn,
    format_bmn,
)

from bmn.conversion import (
    bmn_to_wgs84,
    wgs84_to_bmn,
)

__all__ = [
    # Errors
    "ErrorKind",
    "BMNError",
    "UnrecognizedZoneCode",
    "MalformedNumeral",
    "UnresolvedZone",
    "MalformedCoordinateText",
    # Zones
    "BMNMeridian",
    "resolve_zone",
    # Grid coordinates
    "BMNCoord",
    "parse_bmn",
    "format_bmn",
    # Conversion
    "bmn_to_wgs84",
    "wgs84_to_bmn",
]
