"""Renderer-agnostic draw instructions.

The geometry engine never touches pixels. Every constructor returns a flat
list of instructions which the rasterizer later turns into an image. The
instructions are frozen Pydantic models forming a discriminated union on the
``kind`` field, so a list of them can be dumped to and validated from JSON.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from overlaytool.geometry.primitives import ROI, Color, Point


class TextAlignX(str, Enum):
    """Horizontal text alignment relative to the anchor point."""

    left = "left"
    center = "center"
    right = "right"


class TextAlignY(str, Enum):
    """Vertical text alignment relative to the anchor point."""

    top = "top"
    center = "center"
    baseline = "baseline"
    bottom = "bottom"


class Box(BaseModel, frozen=True):
    """Rectangle outline around an ROI.

    Attributes:
        roi: Region to outline. The outline sits on the region's edge pixels.
        color: Outline color.
        thickness: Number of concentric outlines drawn inward and outward.
    """

    kind: Literal["box"] = "box"
    roi: ROI
    color: Color
    thickness: int = Field(default=1, ge=1)


class Line(BaseModel, frozen=True):
    """Straight line between two (possibly fractional) points."""

    kind: Literal["line"] = "line"
    start: Point
    end: Point
    color: Color


class DashedLine(BaseModel, frozen=True):
    """Dashed line from (roi.xbegin, roi.ybegin) to (roi.xend, roi.yend).

    Attributes:
        roi: Span of the line; a zero-width ROI yields a vertical line.
        color: Dash color.
        dot_interval: Approximate length of each dash and gap in pixels.
    """

    kind: Literal["dashed_line"] = "dashed_line"
    roi: ROI
    color: Color
    dot_interval: int = Field(default=5, gt=0)


class Text(BaseModel, frozen=True):
    """A text label anchored at a point."""

    kind: Literal["text"] = "text"
    position: Point
    text: str
    color: Color
    align_x: TextAlignX = TextAlignX.left
    align_y: TextAlignY = TextAlignY.baseline
    font_size: int = Field(default=12, gt=0)


DrawInstruction = Annotated[
    Box | Line | DashedLine | Text,
    Field(discriminator="kind"),
]

instruction_list_adapter: TypeAdapter[list[DrawInstruction]] = TypeAdapter(
    list[DrawInstruction]
)


def line(
    start: tuple[float, float],
    end: tuple[float, float],
    color: Color,
) -> Line:
    """Build a Line instruction from (x, y) tuples."""
    return Line(start=Point.from_tuple(start), end=Point.from_tuple(end), color=color)
