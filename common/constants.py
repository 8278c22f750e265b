"""
Geodetic Constants for BMN Grid Conversion.

This module provides the reference ellipsoid parameters, the published datum
shift parameters and the fixed grid parameters of the Austrian
Bundesmeldenetz (BMN). All constants are defined with SI units (angles in the
unit stated per constant) and traceable to authoritative sources.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Bessel 1841 parameters: EPSG:7004
- MGI to WGS84 datum shift: EPSG:1618 (position vector convention)
- BMN stripes M28/M31/M34: EPSG:31288, EPSG:31289, EPSG:31290
"""

from dataclasses import dataclass
from typing import Final, Tuple, Union


@dataclass(frozen=True)
class Constant:
    """A geodetic constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant (a tuple for vector constants).
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: Union[float, Tuple[float, ...]]
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of geodetic constants used throughout the system.

    All constants are class attributes with full metadata including
    uncertainty bounds and authoritative sources.

    Reference Ellipsoids
    --------------------
    WGS84 is the ellipsoid of the geographic reference system (GPS).
    Bessel 1841 is the ellipsoid of the MGI datum on which the BMN grid
    is defined.

    Datum Shift
    -----------
    The seven published parameters of the MGI -> WGS84 Helmert
    transformation. A single fixed parameter set limits the accuracy of
    the datum shift to a few meters across Austria.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    # =========================================================================
    # Bessel 1841 Ellipsoid Parameters (MGI datum)
    # Reference: EPSG:7004
    # =========================================================================

    BESSEL_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_377_397.155,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="EPSG:7004",
        description="Semi-major axis of the Bessel 1841 ellipsoid"
    )

    BESSEL_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 299.1528128,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="EPSG:7004",
        description="Flattening of the Bessel 1841 ellipsoid"
    )

    # =========================================================================
    # MGI -> WGS84 Helmert Parameters (position vector)
    # Reference: EPSG:1618
    # =========================================================================

    MGI_TO_WGS84_TRANSLATION: Final[Constant] = Constant(
        value=(577.326, 90.129, 463.919),
        uncertainty=1.0,
        unit="m",
        source="EPSG:1618",
        description="Translation (tX, tY, tZ) from MGI to WGS84"
    )

    MGI_TO_WGS84_ROTATION: Final[Constant] = Constant(
        value=(5.137, 1.474, 5.297),
        uncertainty=0.0,
        unit="arcsecond",
        source="EPSG:1618",
        description="Rotation (rX, rY, rZ) from MGI to WGS84, position vector convention"
    )

    MGI_TO_WGS84_SCALE: Final[Constant] = Constant(
        value=2.4232,
        uncertainty=0.0,
        unit="ppm",
        source="EPSG:1618",
        description="Scale difference from MGI to WGS84"
    )

    # =========================================================================
    # Bundesmeldenetz Grid Parameters
    # Reference: EPSG:31288-31290
    # =========================================================================

    BMN_ORIGIN_LATITUDE: Final[Constant] = Constant(
        value=0.0,
        uncertainty=0.0,
        unit="degree",
        source="EPSG:31288",
        description="Latitude of the projection origin, shared by all stripes"
    )

    BMN_SCALE_FACTOR: Final[Constant] = Constant(
        value=1.0,
        uncertainty=0.0,
        unit="dimensionless",
        source="EPSG:31288",
        description="Scale factor on the central meridian, shared by all stripes"
    )

    BMN_FALSE_NORTHING: Final[Constant] = Constant(
        value=-5_000_000.0,
        uncertainty=0.0,
        unit="m",
        source="EPSG:31288",
        description="False northing, shared by all stripes"
    )
