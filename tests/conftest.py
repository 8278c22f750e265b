"""
Shared test fixtures for the BMN conversion test suite.
Provides sample positions across Austria and reference projections built with pyproj.
"""
import numpy as np
import pytest
from pyproj import CRS, Transformer

from bmn.zones import BMNMeridian
from geospatial.coordinate_models import WGS84Point

# (name, latitude, longitude, expected stripe)
AUSTRIAN_TOWNS = [
    ("Bregenz", 47.5031, 9.7471, BMNMeridian.M28),
    ("Innsbruck", 47.2692, 11.4041, BMNMeridian.M28),
    ("Salzburg", 47.8095, 13.0550, BMNMeridian.M31),
    ("Klagenfurt", 46.6247, 14.3053, BMNMeridian.M31),
    ("Graz", 47.0707, 15.4395, BMNMeridian.M34),
    ("Vienna", 48.2082, 16.3738, BMNMeridian.M34),
]

METERS_PER_DEGREE = 111_320.0


def horizontal_distance_m(a, b) -> float:
    """Approximate ground distance between two geodetic points in meters."""
    (lat_a, lon_a), (lat_b, lon_b) = a.to_degrees(), b.to_degrees()
    d_north = (lat_a - lat_b) * METERS_PER_DEGREE
    d_east = (lon_a - lon_b) * METERS_PER_DEGREE * np.cos(np.radians(lat_a))
    return float(np.hypot(d_north, d_east))


@pytest.fixture(params=AUSTRIAN_TOWNS, ids=[t[0] for t in AUSTRIAN_TOWNS])
def town(request):
    """A WGS84 position in Austria together with its stripe."""
    name, lat, lon, meridian = request.param
    return WGS84Point.from_degrees(lat, lon), meridian


@pytest.fixture
def bessel_tmerc():
    """Factory for pyproj transformers from Bessel geographic to a BMN stripe, without datum shift."""
    def factory(meridian: BMNMeridian) -> Transformer:
        origin = meridian.projection
        geographic = CRS.from_proj4("+proj=longlat +ellps=bessel +no_defs")
        projected = CRS.from_proj4(
            f"+proj=tmerc +lat_0=0 +lon_0={origin.central_meridian!r} +k=1 "
            f"+x_0={origin.false_easting:.10g} +y_0={origin.false_northing:.10g} "
            "+ellps=bessel +units=m +no_defs"
        )
        return Transformer.from_crs(geographic, projected, always_xy=True)
    return factory
