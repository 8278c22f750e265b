"""
Tests for parsing and formatting BMN coordinate text.
"""
import pytest

from bmn.exceptions import (
    BMNError,
    ErrorKind,
    MalformedCoordinateText,
    MalformedNumeral,
    UnrecognizedZoneCode,
    UnresolvedZone,
)
from bmn.grid import BMNCoord, format_bmn, parse_bmn
from bmn.zones import BMNMeridian
from geospatial.coordinate_models import BesselEllipsoid


class TestParse:
    def test_parse_m31(self):
        coord = parse_bmn("M31 450000 350000")
        assert coord.meridian is BMNMeridian.M31
        assert coord.right == 450000.0
        assert coord.height == 350000.0
        assert coord.ellipsoid is BesselEllipsoid

    @pytest.mark.parametrize("text, right, height", [
        ("M31 +450000.25 -35.", 450000.25, -35.0),
        ("M31 .5 3.5e5", 0.5, 350000.0),
    ])
    def test_decimal_numerals(self, text, right, height):
        coord = parse_bmn(text)
        assert coord.right == right
        assert coord.height == height

    def test_case_and_whitespace(self):
        coord = parse_bmn("  m34\t750123.25   280000 ")
        assert coord == BMNCoord(BMNMeridian.M34, 750123.25, 280000.0)

    def test_classmethod(self):
        assert BMNCoord.parse("M28 150000 250000").meridian is BMNMeridian.M28

    def test_unrecognized_zone(self):
        with pytest.raises(UnrecognizedZoneCode) as exc_info:
            parse_bmn("X31 450000 350000")
        assert exc_info.value.kind is ErrorKind.UNRECOGNIZED_ZONE_CODE
        assert exc_info.value.value == "X31"

    @pytest.mark.parametrize("text", [
        "M31 abc 350000",
        "M31 450000 35O000",
        "M31 450000 nan",
        "M31 inf 350000",
        "M31 450_000 350000",
        "M31 450000 0x10",
        "M31 450000 1e400",
    ])
    def test_malformed_numeral(self, text):
        with pytest.raises(MalformedNumeral) as exc_info:
            parse_bmn(text)
        assert exc_info.value.kind is ErrorKind.MALFORMED_NUMERAL

    @pytest.mark.parametrize("text", [
        "M31 450000",
        "M31 450000 350000 12",
        "",
        "   ",
    ])
    def test_wrong_token_count(self, text):
        with pytest.raises(MalformedCoordinateText) as exc_info:
            parse_bmn(text)
        assert exc_info.value.kind is ErrorKind.MALFORMED_COORDINATE_TEXT

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_bmn("M31 450000")
        assert issubclass(MalformedNumeral, BMNError)


class TestFormat:
    def test_strips_trailing_zeros(self):
        coord = BMNCoord(BMNMeridian.M31, 450000.00, 350000.50)
        assert format_bmn(coord) == "M31 450000 350000.5"
        assert str(coord) == "M31 450000 350000.5"

    @pytest.mark.parametrize("right,height,expected", [
        (150000.0, 250000.0, "M28 150000 250000"),
        (150000.123, 250000.1, "M28 150000.123 250000.1"),
        (150000.1234, 249999.9996, "M28 150000.123 250000"),
        (-0.0001, 0.0, "M28 0 0"),
        (-1200.5, 10.0, "M28 -1200.5 10"),
    ])
    def test_numerals(self, right, height, expected):
        assert format_bmn(BMNCoord(BMNMeridian.M28, right, height)) == expected

    def test_unresolved_cannot_be_formatted(self):
        with pytest.raises(UnresolvedZone):
            format_bmn(BMNCoord(BMNMeridian.UNRESOLVED, 450000.0, 350000.0))

    @pytest.mark.parametrize("coord", [
        BMNCoord(BMNMeridian.M28, 123456.789, 301234.5),
        BMNCoord(BMNMeridian.M31, 450000.0, 350000.0),
        BMNCoord(BMNMeridian.M34, -5000.25, 0.001),
    ])
    def test_parse_inverts_format(self, coord):
        assert parse_bmn(format_bmn(coord)) == coord
