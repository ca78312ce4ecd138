"""Overlay orchestration for overlaytool.

This module sequences the geometry constructors for one overlay:

1. The outer region covers the whole canvas and gets a box.
2. The frame is the canvas fitted to the target aspect ratio and then scaled
   about its own center; it gets a box too.
3. Optional center cross, symmetry grid and size labels are keyed off the
   frame.

The result is a flat, ordered list of draw instructions. Nothing here
touches pixels, so every step can be tested without an imaging library.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import BaseModel, Field, PositiveInt

from overlaytool.geometry.centerpoint import DEFAULT_CROSS_FRACTION, center_cross
from overlaytool.geometry.instructions import (
    Box,
    DrawInstruction,
    Text,
    TextAlignX,
    TextAlignY,
)
from overlaytool.geometry.primitives import ROI, Color, Point
from overlaytool.geometry.symmetry import (
    DEFAULT_DOT_INTERVAL,
    reciprocal_construction,
    symmetry_grid,
)
from overlaytool.geometry.transforms import fit_aspect_ratio, scale_about

logger = logging.getLogger(__name__)


class OverlayConfig(BaseModel, frozen=True):
    """Immutable description of one overlay.

    Attributes:
        size: Canvas (width, height) in pixels.
        aspect_ratio: Target width / height of the frame.
        scale: Fraction of the aspect-fitted region the frame occupies.
        color: Color of every guide.
        centerpoint: Draw the center cross.
        symmetrygrid: Draw the symmetry grid.
        label: Draw size annotations.
        consistent_inset: Inset every symmetry grid end coordinate by one
            pixel, not just the two full diagonals.
    """

    size: tuple[PositiveInt, PositiveInt] = (1024, 1024)
    aspect_ratio: float = Field(default=1.5, gt=0, allow_inf_nan=False)
    scale: float = Field(default=0.5, gt=0, allow_inf_nan=False)
    color: Color = Field(default_factory=Color)
    centerpoint: bool = False
    symmetrygrid: bool = False
    label: bool = False
    consistent_inset: bool = False


@dataclass(frozen=True)
class OverlayStyle:
    """Configuration for overlay rendering constants.

    Attributes:
        box_thickness: Rings drawn on each side of a box edge.
        dot_interval: Dash length of the symmetry grid center lines.
        cross_fraction: Center cross size relative to the frame's longer side.
        label_margin: Label offset from its box, relative to the box width.
        font_size: Label font size.
    """

    box_thickness: int = 2
    dot_interval: int = DEFAULT_DOT_INTERVAL
    cross_fraction: float = DEFAULT_CROSS_FRACTION
    label_margin: float = 0.01
    font_size: int = 12


@dataclass(frozen=True)
class Overlay:
    """Geometry of one overlay.

    Attributes:
        canvas: ROI covering the whole canvas.
        frame: The aspect-fitted, scaled frame.
        instructions: Draw instructions in drawing order.
    """

    canvas: ROI
    frame: ROI
    instructions: list[DrawInstruction] = field(default_factory=list)


def compute_frame(config: OverlayConfig) -> ROI:
    """Return the aspect-fitted, scaled frame for a configuration."""
    canvas = ROI.from_size(*config.size)
    return scale_about(
        fit_aspect_ratio(canvas, config.aspect_ratio), config.scale, config.scale
    )


def _format_number(value: float) -> str:
    return f"{value:g}"


def size_labels(
    config: OverlayConfig,
    canvas: ROI,
    frame: ROI,
    style: OverlayStyle,
) -> list[Text]:
    """Build the canvas and frame annotations.

    The canvas label sits just inside the canvas's bottom-left corner on its
    baseline; the frame label hangs just below the frame's bottom-left corner.
    """
    canvas_offset = canvas.width * style.label_margin
    frame_offset = frame.width * style.label_margin
    width, height = config.size

    return [
        Text(
            position=Point(
                x=canvas.xbegin + canvas_offset, y=canvas.yend - canvas_offset
            ),
            text=(
                f"size: {width}, {height} "
                f"aspect ratio: {_format_number(config.aspect_ratio)}"
            ),
            color=config.color,
            align_x=TextAlignX.left,
            align_y=TextAlignY.baseline,
            font_size=style.font_size,
        ),
        Text(
            position=Point(x=frame.xbegin + frame_offset, y=frame.yend + frame_offset),
            text=(
                f"size: {frame.width}, {frame.height} "
                f"scale: {_format_number(config.scale)}"
            ),
            color=config.color,
            align_x=TextAlignX.left,
            align_y=TextAlignY.top,
            font_size=style.font_size,
        ),
    ]


def build_overlay(
    config: OverlayConfig,
    style: OverlayStyle | None = None,
) -> Overlay:
    """Compute every draw instruction for an overlay.

    Args:
        config: What to draw.
        style: Rendering constants. Uses defaults if not provided.

    Returns:
        The canvas and frame regions with the ordered instruction list.

    Raises:
        ValueError: If the symmetry grid is requested for a frame smaller
            than 2x2 pixels.

    Example:
        >>> overlay = build_overlay(OverlayConfig(size=(800, 600), scale=1.0))
        >>> [i.kind for i in overlay.instructions]
        ['box', 'box']
    """
    style = style or OverlayStyle()

    canvas = ROI.from_size(*config.size)
    frame = compute_frame(config)
    logger.debug(
        "Computed frame %s (%dx%d) for aspect ratio %g at scale %g",
        frame.to_tuple(),
        frame.width,
        frame.height,
        config.aspect_ratio,
        config.scale,
    )

    instructions: list[DrawInstruction] = [
        Box(roi=canvas, color=config.color, thickness=style.box_thickness),
        Box(roi=frame, color=config.color, thickness=style.box_thickness),
    ]

    if config.centerpoint:
        instructions.extend(
            center_cross(frame, config.color, fraction=style.cross_fraction)
        )

    if config.symmetrygrid:
        logger.debug(
            "Reciprocal angle %.3f degrees",
            reciprocal_construction(frame).degrees,
        )
        instructions.extend(
            symmetry_grid(
                frame,
                config.color,
                dot_interval=style.dot_interval,
                consistent_inset=config.consistent_inset,
            )
        )

    if config.label:
        instructions.extend(size_labels(config, canvas, frame, style))

    return Overlay(canvas=canvas, frame=frame, instructions=instructions)
