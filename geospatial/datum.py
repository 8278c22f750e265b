"""
Datum Transformation between Geocentric Frames.

This module implements the seven-parameter Helmert similarity transform
(translation, rotation, uniform scale) between two geocentric datums and its
exact algebraic inverse.

Scientific Context
------------------
Domain: Geodesy, datum transformation
Model: Helmert transform, position vector convention, small-angle rotation

A single fixed parameter set approximates the relationship between WGS84
and MGI to a few meters over Austria. Sub-meter work needs locally fitted
parameters or a grid-based transformation; neither is provided here.

The inverse transform solves the forward linear system instead of applying
a separately published reverse parameter set, so that transforming a point
and transforming it back returns the original to floating point precision.

References
----------
- EPSG Guidance Note 7-2, section 2.4.3.1 (Helmert 7-parameter transformations)
- EPSG:1618, MGI to WGS 84 (3)
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from common.constants import GeodeticConstants
from common.types import EllipsoidParameters, GeocentricPoint
from common.units import arcseconds_to_radians, ppm_to_scale
from geospatial.coordinate_models import WGS84Ellipsoid, BesselEllipsoid


@dataclass(frozen=True)
class HelmertTransform:
    """A fixed Helmert transform from one geocentric datum to another.

    Attributes
    ----------
    translation : Tuple[float, float, float]
        (tX, tY, tZ) in meters.
    rotation : Tuple[float, float, float]
        (rX, rY, rZ) in radians, position vector convention.
    scale : float
        Scale difference as a unitless factor (ppm * 1e-6).
    source : EllipsoidParameters
        Ellipsoid of the datum the transform starts from.
    target : EllipsoidParameters
        Ellipsoid of the datum the transform leads to.
    name : str
        Identifier for the transform.

    Notes
    -----
    X' = T + (1 + s) R X, with

        R = [[  1,  -rZ,  rY],
             [ rZ,    1, -rX],
             [-rY,   rX,   1]]
    """
    translation: Tuple[float, float, float]
    rotation: Tuple[float, float, float]
    scale: float
    source: EllipsoidParameters
    target: EllipsoidParameters
    name: str

    @classmethod
    def from_published(
        cls,
        translation_m: Tuple[float, float, float],
        rotation_arcsec: Tuple[float, float, float],
        scale_ppm: float,
        source: EllipsoidParameters,
        target: EllipsoidParameters,
        name: str
    ) -> 'HelmertTransform':
        """Create a transform from parameters in their published units."""
        return cls(
            translation=tuple(float(t) for t in translation_m),
            rotation=tuple(arcseconds_to_radians(r) for r in rotation_arcsec),
            scale=ppm_to_scale(scale_ppm),
            source=source,
            target=target,
            name=name
        )

    @property
    def matrix(self) -> NDArray[np.float64]:
        """The 3x3 matrix (1 + s) R of the linear part."""
        rx, ry, rz = self.rotation
        rotation = np.array([
            [1.0, -rz, ry],
            [rz, 1.0, -rx],
            [-ry, rx, 1.0],
        ])
        return (1.0 + self.scale) * rotation

    @property
    def translation_vector(self) -> NDArray[np.float64]:
        return np.array(self.translation, dtype=np.float64)

    def transform(self, point: GeocentricPoint) -> GeocentricPoint:
        """Transform a geocentric point from the source to the target datum.

        Parameters
        ----------
        point : GeocentricPoint
            Coordinates on the source datum in meters.

        Returns
        -------
        GeocentricPoint
            Coordinates on the target datum, tagged with the target ellipsoid.
        """
        x, y, z = self.translation_vector + self.matrix @ point.as_array()
        return GeocentricPoint(float(x), float(y), float(z), self.target)

    def inverse_transform(self, point: GeocentricPoint) -> GeocentricPoint:
        """Transform a geocentric point from the target back to the source datum.

        This is the exact inverse of `transform` for the same parameters.

        Parameters
        ----------
        point : GeocentricPoint
            Coordinates on the target datum in meters.

        Returns
        -------
        GeocentricPoint
            Coordinates on the source datum, tagged with the source ellipsoid.
        """
        x, y, z = np.linalg.solve(self.matrix, point.as_array() - self.translation_vector)
        return GeocentricPoint(float(x), float(y), float(z), self.source)


def _negated(values: Tuple[float, ...]) -> Tuple[float, ...]:
    return tuple(-v for v in values)


# WGS84 -> MGI, the published MGI -> WGS84 set with all signs flipped.
HELMERT_WGS84_TO_MGI = HelmertTransform.from_published(
    translation_m=_negated(GeodeticConstants.MGI_TO_WGS84_TRANSLATION.value),
    rotation_arcsec=_negated(GeodeticConstants.MGI_TO_WGS84_ROTATION.value),
    scale_ppm=-GeodeticConstants.MGI_TO_WGS84_SCALE.value,
    source=WGS84Ellipsoid,
    target=BesselEllipsoid,
    name="WGS84 to MGI"
)
