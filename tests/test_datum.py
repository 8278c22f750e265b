"""
Tests for the WGS84 -> MGI Helmert transform.
"""
import numpy as np
import pytest

from common.types import GeocentricPoint
from geospatial.coordinate_models import (
    BesselEllipsoid,
    WGS84Ellipsoid,
    WGS84Point,
    polar_to_cartesian,
)
from geospatial.datum import HELMERT_WGS84_TO_MGI, HelmertTransform


@pytest.fixture
def vienna_cart():
    return polar_to_cartesian(WGS84Point.from_degrees(48.2082, 16.3738, 200.0))


def test_parameters_converted_from_published_units():
    tx, ty, tz = HELMERT_WGS84_TO_MGI.translation
    assert (tx, ty, tz) == (-577.326, -90.129, -463.919)
    assert HELMERT_WGS84_TO_MGI.rotation[0] == pytest.approx(-5.137 / 3600 * np.pi / 180)
    assert HELMERT_WGS84_TO_MGI.scale == pytest.approx(-2.4232e-6)


def test_transform_tags_target_ellipsoid(vienna_cart):
    mgi = HELMERT_WGS84_TO_MGI.transform(vienna_cart)
    assert mgi.ellipsoid is BesselEllipsoid
    assert HELMERT_WGS84_TO_MGI.inverse_transform(mgi).ellipsoid is WGS84Ellipsoid


def test_shift_magnitude(vienna_cart):
    mgi = HELMERT_WGS84_TO_MGI.transform(vienna_cart)
    shift = np.linalg.norm(mgi.as_array() - vienna_cart.as_array())
    assert 100.0 < shift < 2000.0


@pytest.mark.parametrize("xyz", [
    (4_100_000.0, 1_200_000.0, 4_730_000.0),
    (6_378_137.0, 0.0, 0.0),
    (0.0, 0.0, 6_356_752.0),
    (-2_700_000.0, -4_300_000.0, 3_850_000.0),
])
def test_inverse_is_exact(xyz):
    point = GeocentricPoint(*xyz, WGS84Ellipsoid)
    back = HELMERT_WGS84_TO_MGI.inverse_transform(HELMERT_WGS84_TO_MGI.transform(point))
    np.testing.assert_allclose(back.as_array(), point.as_array(), rtol=1e-12, atol=1e-6)


def test_identity_transform():
    identity = HelmertTransform.from_published(
        (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 0.0, WGS84Ellipsoid, WGS84Ellipsoid, "identity"
    )
    point = GeocentricPoint(1.0, 2.0, 3.0, WGS84Ellipsoid)
    assert identity.transform(point) == point


def test_matrix_position_vector_convention():
    rz = HelmertTransform.from_published(
        (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), 0.0, WGS84Ellipsoid, WGS84Ellipsoid, "rz"
    )
    # A positive rotation about Z moves a point on the X axis towards +Y
    moved = rz.transform(GeocentricPoint(6_378_137.0, 0.0, 0.0, WGS84Ellipsoid))
    assert moved.y > 0
