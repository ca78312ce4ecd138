"""Center cross construction."""

from __future__ import annotations

from overlaytool.geometry.instructions import Line, line
from overlaytool.geometry.primitives import ROI, Color

DEFAULT_CROSS_FRACTION = 0.05


def cross_size(frame: ROI, fraction: float = DEFAULT_CROSS_FRACTION) -> int:
    """Return the cross arm length: a fraction of the frame's longer side, truncated."""
    return int(max(frame.width, frame.height) * fraction)


def center_cross(
    frame: ROI,
    color: Color,
    *,
    fraction: float = DEFAULT_CROSS_FRACTION,
) -> list[Line]:
    """Build the horizontal and vertical lines of the frame's center cross.

    Each line spans ``cross - 1`` pixels between its endpoints (both
    endpoints inclusive, so ``cross`` pixels are covered) and is centered on
    the frame's integer midpoint.

    Args:
        frame: The aspect-fitted, scaled frame.
        color: Line color.
        fraction: Cross size as a fraction of the frame's longer side.

    Returns:
        ``[horizontal, vertical]`` line instructions.
    """
    cx, cy = frame.center
    cross = cross_size(frame, fraction)

    xbegin = cx - cross // 2
    xend = xbegin + cross - 1
    ybegin = cy - cross // 2
    yend = ybegin + cross - 1

    return [
        line((xbegin, cy), (xend, cy), color),
        line((cx, ybegin), (cx, yend), color),
    ]
