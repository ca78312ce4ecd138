"""Symmetry grid construction.

The symmetry grid is the classical compositional analysis overlay used for
paintings and film frames: the two frame diagonals (the "baroque" diagonal
runs bottom-left to top-right), the four reciprocal diagonals that meet the
main diagonals at right angles, the rectangle split lines through their
intersections, and dashed verticals where the reciprocals meet the frame
edges.

Reciprocal Construction:
    With ``d = (width - 1, height - 1)`` the diagonal makes an angle
    ``atan(d.x / d.y)`` with the vertical, so its reciprocal makes

        angle  = pi/2 - atan(d.x / d.y)

    with the vertical. A reciprocal from a corner meets the opposite
    horizontal edge ``length = d.y * tan(angle)`` pixels across, and its
    foot on the main diagonal sits ``cross = (h * sin(angle), h * cos(angle))``
    from the corner, where ``h = d.y * cos(angle)``.

Inset Convention:
    The two full diagonals end one pixel inside the frame's exclusive end
    coordinates. By default the reciprocal diagonals, split lines and
    dashed centers run to the exclusive ends themselves; pass
    ``consistent_inset=True`` to inset those as well.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from overlaytool.geometry.instructions import DashedLine, Line, line
from overlaytool.geometry.primitives import ROI, Color

DEFAULT_DOT_INTERVAL = 5


@dataclass(frozen=True)
class ReciprocalConstruction:
    """Real-valued measurements derived from a frame's diagonal.

    Attributes:
        angle: Angle between a reciprocal diagonal and the vertical (radians).
        length: Horizontal run from a corner to where its reciprocal meets
            the opposite edge.
        hypotenuse: Distance from a corner to the foot of its reciprocal on
            the main diagonal.
        cross_x: Horizontal offset of that foot from the corner.
        cross_y: Vertical offset of that foot from the corner.
    """

    angle: float
    length: float
    hypotenuse: float
    cross_x: float
    cross_y: float

    @property
    def degrees(self) -> float:
        """Return the angle in degrees."""
        return math.degrees(self.angle)


def reciprocal_construction(frame: ROI) -> ReciprocalConstruction:
    """Compute the reciprocal-diagonal measurements for a frame.

    Args:
        frame: The aspect-fitted, scaled frame.

    Returns:
        The construction measurements.

    Raises:
        ValueError: If the frame is narrower or shorter than 2 pixels.
    """
    if frame.width < 2 or frame.height < 2:
        raise ValueError(
            f"Symmetry grid needs a frame of at least 2x2 pixels, "
            f"got {frame.width}x{frame.height}"
        )

    dx = frame.width - 1
    dy = frame.height - 1

    angle = math.pi / 2 - math.atan(dx / dy)
    length = dy * math.tan(angle)
    hypotenuse = dy * math.cos(angle)
    return ReciprocalConstruction(
        angle=angle,
        length=length,
        hypotenuse=hypotenuse,
        cross_x=hypotenuse * math.sin(angle),
        cross_y=hypotenuse * math.cos(angle),
    )


def symmetry_grid(
    frame: ROI,
    color: Color,
    *,
    dot_interval: int = DEFAULT_DOT_INTERVAL,
    consistent_inset: bool = False,
) -> list[Line | DashedLine]:
    """Build the symmetry grid instructions for a frame.

    Args:
        frame: The aspect-fitted, scaled frame.
        color: Line color.
        dot_interval: Dash length of the two center lines.
        consistent_inset: Inset every end coordinate by one pixel instead of
            only the two full diagonals.

    Returns:
        In order: baroque diagonal, main diagonal, four reciprocal
        diagonals, four rectangle split lines, two dashed center lines.

    Raises:
        ValueError: If the frame is narrower or shorter than 2 pixels.
    """
    rc = reciprocal_construction(frame)

    xb, yb = frame.xbegin, frame.ybegin
    xe = frame.xend - 1 if consistent_inset else frame.xend
    ye = frame.yend - 1 if consistent_inset else frame.yend

    instructions: list[Line | DashedLine] = [
        # baroque
        line((xb, frame.yend - 1), (frame.xend - 1, yb), color),
        line((xb, yb), (frame.xend - 1, frame.yend - 1), color),
    ]

    # reciprocals
    instructions += [
        line((xb, yb), (xb + rc.length, ye), color),
        line((xb, ye), (xb + rc.length, yb), color),
        line((xe, yb), (xe - rc.length, ye), color),
        line((xe, ye), (xe - rc.length, yb), color),
    ]

    # rectangles
    instructions += [
        line((xb + rc.cross_x, yb), (xb + rc.cross_x, ye), color),
        line((xe - rc.cross_x, yb), (xe - rc.cross_x, ye), color),
        line((xb, ye - rc.cross_y), (xe, ye - rc.cross_y), color),
        line((xb, yb + rc.cross_y), (xe, yb + rc.cross_y), color),
    ]

    # centers
    for x in (int(xb + rc.length), int(xe - rc.length)):
        instructions.append(
            DashedLine(
                roi=ROI(xbegin=x, xend=x, ybegin=yb, yend=ye),
                color=color,
                dot_interval=dot_interval,
            )
        )

    return instructions
