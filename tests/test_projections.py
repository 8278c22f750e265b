"""
Tests for the Transverse Mercator projection.
"""
import numpy as np
import pytest

from bmn.zones import BMNMeridian
from common.types import GridPoint
from geospatial.coordinate_models import BesselEllipsoid, MGIPoint, WGS84Point
from geospatial.projections import (
    TransverseMercatorOrigin,
    direct_transverse_mercator,
    inverse_transverse_mercator,
    meridian_arc,
)

STRIPES = [BMNMeridian.M28, BMNMeridian.M31, BMNMeridian.M34]


def test_meridian_arc_zero_at_origin():
    assert meridian_arc(0.7, 0.7, BesselEllipsoid) == 0.0


def test_meridian_arc_quarter_meridian():
    # Bessel quarter meridian, 10 000 855.76 m
    quarter = meridian_arc(np.pi / 2, 0.0, BesselEllipsoid)
    assert quarter == pytest.approx(10_000_855.76, abs=0.5)


def test_meridian_arc_scales():
    arc = meridian_arc(0.8, 0.0, BesselEllipsoid)
    assert meridian_arc(0.8, 0.0, BesselEllipsoid, 0.9996) == pytest.approx(arc * 0.9996)


@pytest.mark.parametrize("meridian", STRIPES, ids=str)
def test_central_meridian_maps_to_false_easting(meridian):
    origin = meridian.projection
    point = MGIPoint.from_degrees(47.5, origin.central_meridian)
    grid = direct_transverse_mercator(point, *origin)
    assert grid.easting == pytest.approx(origin.false_easting, abs=1e-6)
    assert grid.ellipsoid is BesselEllipsoid


def test_origin_maps_to_false_offsets():
    origin = TransverseMercatorOrigin(0.0, 13.0, 1.0, 450_000.0, -5_000_000.0)
    grid = direct_transverse_mercator(MGIPoint.from_degrees(0.0, 13.0), *origin)
    assert grid.easting == pytest.approx(450_000.0, abs=1e-6)
    assert grid.northing == pytest.approx(-5_000_000.0, abs=1e-6)


@pytest.mark.parametrize("meridian", STRIPES, ids=str)
@pytest.mark.parametrize("lat", [46.4, 47.3, 48.9])
@pytest.mark.parametrize("d_lon", [-1.5, -0.4, 0.0, 0.7, 1.5])
def test_round_trip_within_millimeters(meridian, lat, d_lon):
    origin = meridian.projection
    point = MGIPoint.from_degrees(lat, origin.central_meridian + d_lon)
    back = inverse_transverse_mercator(direct_transverse_mercator(point, *origin), *origin)
    assert isinstance(back, MGIPoint)
    # 1e-9 rad is about 6 mm on the ground
    assert back.latitude == pytest.approx(point.latitude, abs=1e-9)
    assert back.longitude == pytest.approx(point.longitude, abs=1e-9)


def test_inverse_keeps_ellipsoid():
    origin = BMNMeridian.M31.projection
    point = WGS84Point.from_degrees(47.0, 13.0)
    grid = direct_transverse_mercator(point, *origin)
    assert grid.ellipsoid.name == "WGS84"
    assert isinstance(inverse_transverse_mercator(grid, *origin), WGS84Point)


@pytest.mark.parametrize("meridian", STRIPES, ids=str)
@pytest.mark.parametrize("lat,d_lon", [(46.5, -1.2), (47.5, 0.3), (48.8, 1.4)])
def test_agrees_with_pyproj(bessel_tmerc, meridian, lat, d_lon):
    origin = meridian.projection
    lon = origin.central_meridian + d_lon
    expected_e, expected_n = bessel_tmerc(meridian).transform(lon, lat)
    grid = direct_transverse_mercator(MGIPoint.from_degrees(lat, lon), *origin)
    assert grid.easting == pytest.approx(expected_e, abs=0.01)
    assert grid.northing == pytest.approx(expected_n, abs=0.01)


def test_inverse_agrees_with_pyproj(bessel_tmerc):
    meridian = BMNMeridian.M34
    transformer = bessel_tmerc(meridian)
    lon_deg, lat_deg = transformer.transform(780_000.0, 340_000.0, direction="INVERSE")
    point = inverse_transverse_mercator(
        GridPoint(780_000.0, 340_000.0, BesselEllipsoid), *meridian.projection
    )
    lat, lon = point.to_degrees()
    assert lat == pytest.approx(lat_deg, abs=1e-7)
    assert lon == pytest.approx(lon_deg, abs=1e-7)
