"""Tests for pagematrix.reference module."""

import pytest

from pagematrix.exceptions import InvalidArgumentError
from pagematrix.reference import AnchorPoint, ReferencePoint


class TestParse:
    """Test the accepted reference point spellings."""

    def test_enum_passthrough(self):
        assert ReferencePoint.parse(ReferencePoint.TOP_RIGHT) is ReferencePoint.TOP_RIGHT

    @pytest.mark.parametrize("digit, expected", [
        (7, ReferencePoint.TOP_LEFT),
        (8, ReferencePoint.TOP_CENTER),
        (5, ReferencePoint.CENTER),
        (6, ReferencePoint.CENTER_RIGHT),
        (1, ReferencePoint.BOTTOM_LEFT),
        (3, ReferencePoint.BOTTOM_RIGHT),
    ])
    def test_numpad_digits(self, digit, expected):
        assert ReferencePoint.parse(digit) is expected

    def test_value(self):
        assert ReferencePoint.parse("bottomCenter") is ReferencePoint.BOTTOM_CENTER

    def test_name_case_insensitive(self):
        assert ReferencePoint.parse("top_left") is ReferencePoint.TOP_LEFT
        assert ReferencePoint.parse("CENTER_RIGHT") is ReferencePoint.CENTER_RIGHT

    def test_center_center_alias(self):
        assert ReferencePoint.parse("CENTER_CENTER") is ReferencePoint.CENTER

    def test_native_anchor(self):
        assert ReferencePoint.parse(AnchorPoint.LEFT_CENTER_ANCHOR) is ReferencePoint.CENTER_LEFT

    @pytest.mark.parametrize("value", [0, 10, True, 3.0, "middle", None])
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidArgumentError, match="Wrong reference point"):
            ReferencePoint.parse(value)


class TestGeometry:
    """Test locating reference points on a box."""

    def test_fractions(self):
        assert ReferencePoint.TOP_LEFT.fractions == (0.0, 0.0)
        assert ReferencePoint.CENTER.fractions == (0.5, 0.5)
        assert ReferencePoint.BOTTOM_RIGHT.fractions == (1.0, 1.0)

    def test_locate(self):
        assert ReferencePoint.BOTTOM_RIGHT.locate(0, 0, 100, 200) == (200, 100)
        assert ReferencePoint.CENTER.locate(10, 20, 30, 60) == (40, 20)

    def test_anchor_round_trip_for_every_point(self):
        for point in ReferencePoint:
            assert ReferencePoint.parse(point.anchor) is point
