"""Region-of-interest transforms for overlaytool.

These are pure functions over ROI values. They never clamp to the canvas:
a frame scaled beyond the canvas keeps its out-of-bounds coordinates and
the rasterizer clips whatever falls outside.

Rounding Conventions:
    - Centers are integer midpoints ``(begin + end) // 2``.
    - Scaled extents are rounded to the nearest integer.
    - Aspect-fitted heights are floored; half the height difference is
      truncated toward zero when re-centering.
"""

from __future__ import annotations

import math

from overlaytool.geometry.primitives import ROI

__all__ = [
    "box_outlines",
    "dash_segments",
    "fit_aspect_ratio",
    "scale_about",
]


def scale_about(roi: ROI, sx: float, sy: float) -> ROI:
    """Scale an ROI about its own center.

    Args:
        roi: Region to scale.
        sx: Horizontal scale factor.
        sy: Vertical scale factor.

    Returns:
        ROI with width ``round(width * sx)`` and height ``round(height * sy)``
        sharing the integer center of ``roi``.

    Raises:
        ValueError: If either factor is not positive.

    Example:
        >>> scale_about(ROI(xbegin=0, xend=100, ybegin=0, yend=50), 0.5, 0.5)
        ROI(xbegin=25, xend=75, ybegin=13, yend=38)
    """
    if sx <= 0 or sy <= 0:
        raise ValueError(f"Scale factors must be positive, got ({sx}, {sy})")

    cx, cy = roi.center
    swidth = round(roi.width * sx)
    sheight = round(roi.height * sy)

    xbegin = cx - swidth // 2
    ybegin = cy - sheight // 2
    return ROI(
        xbegin=xbegin,
        xend=xbegin + swidth,
        ybegin=ybegin,
        yend=ybegin + sheight,
    )


def fit_aspect_ratio(roi: ROI, target_ratio: float) -> ROI:
    """Adjust an ROI's height so that width / height matches a target ratio.

    The width and horizontal bounds are never touched; the guide shows how
    much height a frame of the given width would keep. The new height is
    ``floor(width / target_ratio)``. Half of the height difference, truncated
    toward zero, is taken off (or added to) the top edge, so an odd
    difference puts the odd pixel on the bottom edge.

    Args:
        roi: Region to fit.
        target_ratio: Desired width / height.

    Returns:
        ``roi`` itself when its ratio already equals the target, otherwise
        the recomputed region (even if its height happens to be unchanged).

    Raises:
        ValueError: If target_ratio is not positive or roi has zero height.
    """
    if target_ratio <= 0:
        raise ValueError(f"target_ratio must be positive, got {target_ratio}")
    if roi.height == 0:
        raise ValueError(f"Cannot fit aspect ratio of an ROI with zero height: {roi}")

    if roi.aspect_ratio == target_ratio:
        return roi

    aheight = math.floor(roi.width / target_ratio)
    hdiff = aheight - roi.height
    ybegin = roi.ybegin - int(hdiff / 2)
    return ROI(
        xbegin=roi.xbegin,
        xend=roi.xend,
        ybegin=ybegin,
        yend=ybegin + aheight,
    )


def box_outlines(roi: ROI, thickness: int) -> list[tuple[int, int, int, int]]:
    """Compute the concentric outlines that draw a box of a given thickness.

    For each ``t`` in ``[0, thickness)`` one outline is inset by ``t`` pixels
    and one is outset by ``t`` pixels, so the box grows both into and out of
    the region's edge pixels. At ``t == 0`` both coincide and the ring is
    emitted once.

    Args:
        roi: Region being outlined.
        thickness: Number of outline rings on each side.

    Returns:
        Inclusive ``(x0, y0, x1, y1)`` rectangles. Inset rectangles that
        would collapse past each other are skipped.

    Raises:
        ValueError: If thickness is less than 1.
    """
    if thickness < 1:
        raise ValueError(f"thickness must be >= 1, got {thickness}")

    outlines: list[tuple[int, int, int, int]] = []
    for t in range(thickness):
        inner = (roi.xbegin + t, roi.ybegin + t, roi.xend - t - 1, roi.yend - t - 1)
        outer = (roi.xbegin - t, roi.ybegin - t, roi.xend + t - 1, roi.yend + t - 1)
        if inner[2] >= inner[0] and inner[3] >= inner[1]:
            outlines.append(inner)
        if t > 0 and outer[2] >= outer[0] and outer[3] >= outer[1]:
            outlines.append(outer)
    return outlines


def dash_segments(
    roi: ROI, dot_interval: int
) -> list[tuple[int, int, int, int]]:
    """Split the line (xbegin, ybegin) -> (xend, yend) into dashes.

    The line is divided into ``round(length / dot_interval)`` equal parametric
    segments and only the even-indexed ones (0-based) are kept, producing
    alternating drawn and skipped spans.

    Args:
        roi: Span of the line.
        dot_interval: Approximate dash length in pixels.

    Returns:
        ``(x0, y0, x1, y1)`` integer endpoints of each dash.

    Raises:
        ValueError: If dot_interval is not positive.
    """
    if dot_interval <= 0:
        raise ValueError(f"dot_interval must be positive, got {dot_interval}")

    dx = roi.xend - roi.xbegin
    dy = roi.yend - roi.ybegin
    dots = round(math.hypot(dx, dy) / dot_interval)

    segments: list[tuple[int, int, int, int]] = []
    for i in range(0, dots, 2):
        start = i / dots
        end = (i + 1) / dots
        segments.append(
            (
                roi.xbegin + round(dx * start),
                roi.ybegin + round(dy * start),
                roi.xbegin + round(dx * end),
                roi.ybegin + round(dy * end),
            )
        )
    return segments
