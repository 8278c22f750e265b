"""
Common utilities and infrastructure for the BMN Conversion System.

This package provides foundational components used across all modules:
- Geodetic constants with provenance
- Unit registry for angle and scale conversions
- Coordinate value types
- Logging and configuration
"""

from common.constants import GeodeticConstants
from common.units import ureg, Q_
from common.types import (
    EllipsoidParameters,
    GeodeticPoint,
    GeocentricPoint,
    GridPoint,
)
from common.logging_config import get_logger, set_level, set_stream
from common.config import ServiceConfig, ConfigError, load_config

__all__ = [
    "GeodeticConstants",
    "ureg",
    "Q_",
    "EllipsoidParameters",
    "GeodeticPoint",
    "GeocentricPoint",
    "GridPoint",
    "get_logger",
    "set_level",
    "set_stream",
    "ServiceConfig",
    "ConfigError",
    "load_config",
]
