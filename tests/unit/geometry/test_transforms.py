"""Unit tests for ROI transforms.

Tests scale_about, fit_aspect_ratio, box_outlines and dash_segments.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from overlaytool.geometry import ROI
from overlaytool.geometry.transforms import (
    box_outlines,
    dash_segments,
    fit_aspect_ratio,
    scale_about,
)


@st.composite
def rois(draw: st.DrawFn, *, min_size: int = 0) -> ROI:
    xbegin = draw(st.integers(min_value=-2000, max_value=2000))
    ybegin = draw(st.integers(min_value=-2000, max_value=2000))
    width = draw(st.integers(min_value=min_size, max_value=4000))
    height = draw(st.integers(min_value=min_size, max_value=4000))
    return ROI(xbegin=xbegin, xend=xbegin + width, ybegin=ybegin, yend=ybegin + height)


class TestScaleAbout:
    """Tests for scale_about."""

    def test_shrinks_about_own_center(self) -> None:
        roi = ROI(xbegin=0, xend=100, ybegin=0, yend=50)
        result = scale_about(roi, 0.5, 0.5)
        assert result.to_tuple() == (25, 75, 13, 38)

    def test_grows_outward(self) -> None:
        roi = ROI(xbegin=100, xend=200, ybegin=100, yend=200)
        result = scale_about(roi, 2.0, 2.0)
        assert result.to_tuple() == (50, 250, 50, 250)

    def test_growth_may_leave_canvas(self) -> None:
        roi = ROI.from_size(100, 100)
        result = scale_about(roi, 1.5, 1.5)
        assert result.to_tuple() == (-25, 125, -25, 125)

    def test_independent_axes(self) -> None:
        roi = ROI.from_size(100, 100)
        result = scale_about(roi, 0.5, 1.0)
        assert result.to_tuple() == (25, 75, 0, 100)

    def test_rounds_scaled_extents(self) -> None:
        roi = ROI(xbegin=0, xend=1024, ybegin=171, yend=853)
        result = scale_about(roi, 0.5, 0.5)
        assert result.width == 512
        assert result.height == 341
        assert result.center == roi.center

    @pytest.mark.parametrize(("sx", "sy"), [(0.0, 1.0), (1.0, 0.0), (-0.5, -0.5)])
    def test_rejects_non_positive_factors(self, sx: float, sy: float) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            scale_about(ROI.from_size(10, 10), sx, sy)

    @given(roi=rois())
    def test_unit_scale_is_identity(self, roi: ROI) -> None:
        assert scale_about(roi, 1.0, 1.0) == roi

    @given(roi=rois(), s=st.floats(min_value=0.01, max_value=4.0))
    def test_preserves_center(self, roi: ROI, s: float) -> None:
        result = scale_about(roi, s, s)
        cx, cy = roi.center
        rx, ry = result.center
        assert abs(rx - cx) <= 1
        assert abs(ry - cy) <= 1

    @given(roi=rois(), s=st.floats(min_value=0.01, max_value=4.0))
    def test_extents_are_rounded_products(self, roi: ROI, s: float) -> None:
        result = scale_about(roi, s, s)
        assert result.width == round(roi.width * s)
        assert result.height == round(roi.height * s)


class TestFitAspectRatio:
    """Tests for fit_aspect_ratio."""

    def test_matching_ratio_returns_input(self) -> None:
        roi = ROI(xbegin=0, xend=1500, ybegin=0, yend=1000)
        assert fit_aspect_ratio(roi, 1.5) is roi

    def test_square_canvas_to_three_two(self) -> None:
        result = fit_aspect_ratio(ROI.from_size(1024, 1024), 1.5)
        assert result.to_tuple() == (0, 1024, 171, 853)
        assert result.center == (512, 512)

    def test_wider_target_still_adjusts_height(self) -> None:
        result = fit_aspect_ratio(ROI.from_size(800, 600), 2.0)
        assert result.to_tuple() == (0, 800, 100, 500)

    def test_narrower_target_grows_height_beyond_roi(self) -> None:
        result = fit_aspect_ratio(ROI.from_size(800, 600), 1.0)
        assert result.to_tuple() == (0, 800, -100, 700)
        assert result.center == (400, 300)

    def test_height_is_floored(self) -> None:
        result = fit_aspect_ratio(ROI.from_size(1000, 1000), 2.39)
        assert result.height == 418  # 1000 / 2.39 = 418.41

    def test_odd_shrink_truncates_toward_zero(self) -> None:
        # 751 - 1000 = -249; the top edge moves down by 124, the bottom by 125
        result = fit_aspect_ratio(ROI.from_size(1000, 1000), 1.33)
        assert result.to_tuple() == (0, 1000, 124, 875)

    def test_odd_growth_truncates_toward_zero(self) -> None:
        # 101 - 50 = 51; the top edge moves up by 25, the bottom by 26
        result = fit_aspect_ratio(ROI(xbegin=0, xend=101, ybegin=10, yend=60), 1.0)
        assert result.to_tuple() == (0, 101, -15, 86)

    def test_truncation_to_same_height_still_recomputes(self) -> None:
        roi = ROI(xbegin=0, xend=100, ybegin=0, yend=66)
        result = fit_aspect_ratio(roi, 1.5)  # floor(66.67) == 66
        assert result == roi
        assert result is not roi

    def test_rejects_non_positive_ratio(self) -> None:
        with pytest.raises(ValueError, match="target_ratio must be positive"):
            fit_aspect_ratio(ROI.from_size(10, 10), 0.0)

    def test_rejects_zero_height(self) -> None:
        with pytest.raises(ValueError, match="zero height"):
            fit_aspect_ratio(ROI(xbegin=0, xend=10, ybegin=0, yend=0), 1.5)

    @given(roi=rois(min_size=1))
    def test_own_ratio_is_identity(self, roi: ROI) -> None:
        assert fit_aspect_ratio(roi, roi.width / roi.height) is roi

    @given(roi=rois(min_size=1), ratio=st.floats(min_value=0.1, max_value=10.0))
    def test_never_changes_horizontal_bounds(self, roi: ROI, ratio: float) -> None:
        result = fit_aspect_ratio(roi, ratio)
        assert result.xbegin == roi.xbegin
        assert result.xend == roi.xend

    @given(roi=rois(min_size=1), ratio=st.floats(min_value=0.1, max_value=10.0))
    def test_keeps_vertical_center(self, roi: ROI, ratio: float) -> None:
        result = fit_aspect_ratio(roi, ratio)
        assert abs(result.center[1] - roi.center[1]) <= 1


class TestBoxOutlines:
    """Tests for box_outlines."""

    def test_single_thickness(self) -> None:
        assert box_outlines(ROI.from_size(10, 10), 1) == [(0, 0, 9, 9)]

    def test_double_thickness_grows_both_ways(self) -> None:
        assert box_outlines(ROI.from_size(10, 10), 2) == [
            (0, 0, 9, 9),
            (1, 1, 8, 8),
            (-1, -1, 10, 10),
        ]

    def test_skips_collapsed_inner_outlines(self) -> None:
        assert box_outlines(ROI.from_size(2, 2), 2) == [(0, 0, 1, 1), (-1, -1, 2, 2)]

    def test_rejects_zero_thickness(self) -> None:
        with pytest.raises(ValueError, match="thickness"):
            box_outlines(ROI.from_size(10, 10), 0)


class TestDashSegments:
    """Tests for dash_segments."""

    def test_vertical_dashes_alternate(self) -> None:
        roi = ROI(xbegin=10, xend=10, ybegin=0, yend=20)
        assert dash_segments(roi, 5) == [(10, 0, 10, 5), (10, 10, 10, 15)]

    def test_odd_number_of_segments_ends_drawn(self) -> None:
        roi = ROI(xbegin=0, xend=0, ybegin=0, yend=25)
        assert dash_segments(roi, 5) == [
            (0, 0, 0, 5),
            (0, 10, 0, 15),
            (0, 20, 0, 25),
        ]

    def test_zero_length_line_has_no_dashes(self) -> None:
        assert dash_segments(ROI(xbegin=3, xend=3, ybegin=4, yend=4), 5) == []

    def test_rejects_non_positive_interval(self) -> None:
        with pytest.raises(ValueError, match="dot_interval"):
            dash_segments(ROI.from_size(10, 10), 0)

    @given(
        height=st.integers(min_value=1, max_value=3000),
        interval=st.integers(min_value=1, max_value=50),
    )
    def test_dashes_stay_on_the_line(self, height: int, interval: int) -> None:
        roi = ROI(xbegin=7, xend=7, ybegin=0, yend=height)
        for x0, y0, x1, y1 in dash_segments(roi, interval):
            assert x0 == x1 == 7
            assert 0 <= y0 <= y1 <= height
