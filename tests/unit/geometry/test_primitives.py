"""Unit tests for geometry primitives.

Tests ROI, Point, and Color Pydantic models including:
- Construction and validation
- Computed properties (width, height, center, aspect_ratio)
- Tuple conversion
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from overlaytool.geometry import ROI, Color, Point


class TestPoint:
    """Tests for the Point model."""

    def test_point_accepts_fractional_coordinates(self) -> None:
        point = Point(x=249.25, y=0.5)
        assert point.x == 249.25
        assert point.y == 0.5

    def test_point_accepts_negative_coordinates(self) -> None:
        point = Point(x=-3, y=-7)
        assert point.to_tuple() == (-3.0, -7.0)

    def test_point_from_tuple(self) -> None:
        assert Point.from_tuple((1, 2)) == Point(x=1.0, y=2.0)

    def test_point_is_frozen(self) -> None:
        point = Point(x=1, y=2)
        with pytest.raises(ValidationError):
            point.x = 3  # type: ignore[misc]


class TestColor:
    """Tests for the Color model."""

    def test_default_is_white(self) -> None:
        assert Color().to_tuple() == (1.0, 1.0, 1.0)

    def test_to_rgba_attaches_opaque_alpha(self) -> None:
        color = Color(r=0.25, g=0.5, b=0.75)
        assert color.to_rgba() == (0.25, 0.5, 0.75, 1.0)

    def test_channels_are_not_range_checked(self) -> None:
        color = Color(r=2.0, g=-1.0, b=0.0)
        assert color.r == 2.0
        assert color.g == -1.0

    def test_color_is_hashable(self) -> None:
        assert len({Color(), Color(r=1.0, g=1.0, b=1.0)}) == 1

    @pytest.mark.parametrize("channel", ["r", "g", "b"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_channel(self, channel: str, value: float) -> None:
        with pytest.raises(ValidationError, match="finite number"):
            Color(**{channel: value})


class TestROI:
    """Tests for the ROI model."""

    def test_roi_dimensions(self) -> None:
        roi = ROI(xbegin=10, xend=110, ybegin=20, yend=70)
        assert roi.width == 100
        assert roi.height == 50

    def test_roi_center_is_integer_midpoint(self) -> None:
        roi = ROI(xbegin=342, xend=683, ybegin=0, yend=3)
        assert roi.center == (512, 1)

    def test_roi_center_rounds_toward_top_left_for_negative_sums(self) -> None:
        roi = ROI(xbegin=-5, xend=0, ybegin=-3, yend=0)
        assert roi.center == (-3, -2)

    def test_roi_allows_negative_coordinates(self) -> None:
        roi = ROI(xbegin=-100, xend=700, ybegin=-100, yend=700)
        assert roi.width == 800

    def test_roi_allows_zero_extent(self) -> None:
        roi = ROI(xbegin=249, xend=249, ybegin=0, yend=500)
        assert roi.width == 0

    def test_roi_rejects_negative_width(self) -> None:
        with pytest.raises(ValidationError, match="extents must be non-negative"):
            ROI(xbegin=10, xend=9, ybegin=0, yend=10)

    def test_roi_rejects_negative_height(self) -> None:
        with pytest.raises(ValidationError, match="extents must be non-negative"):
            ROI(xbegin=0, xend=10, ybegin=10, yend=0)

    def test_roi_aspect_ratio(self) -> None:
        roi = ROI(xbegin=0, xend=1500, ybegin=0, yend=1000)
        assert roi.aspect_ratio == 1.5

    def test_roi_aspect_ratio_zero_height(self) -> None:
        roi = ROI(xbegin=0, xend=10, ybegin=5, yend=5)
        with pytest.raises(ZeroDivisionError):
            _ = roi.aspect_ratio

    def test_roi_from_size(self) -> None:
        assert ROI.from_size(800, 600).to_tuple() == (0, 800, 0, 600)

    def test_roi_tuple_order(self) -> None:
        roi = ROI(xbegin=1, xend=2, ybegin=3, yend=4)
        assert (roi.xbegin, roi.xend, roi.ybegin, roi.yend) == (1, 2, 3, 4)
        assert roi.to_tuple() == (1, 2, 3, 4)

    def test_roi_is_frozen(self) -> None:
        roi = ROI.from_size(10, 10)
        with pytest.raises(ValidationError):
            roi.xend = 20  # type: ignore[misc]
