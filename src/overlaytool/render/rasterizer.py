"""Rasterization of draw instructions into an RGBA float buffer.

Instructions are drawn with Pillow's ImageDraw onto 8-bit coverage masks,
one mask per distinct color, and every covered pixel of the float buffer is
then set to that color with full opacity. Uncovered pixels stay fully
transparent. Geometry outside the canvas is clipped by Pillow.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw, ImageFont

from overlaytool.geometry.instructions import (
    Box,
    DashedLine,
    DrawInstruction,
    Line,
    Text,
    TextAlignX,
    TextAlignY,
)
from overlaytool.geometry.primitives import Color
from overlaytool.geometry.transforms import box_outlines, dash_segments

logger = logging.getLogger(__name__)

_COVERED = 255

_ANCHOR_X = {
    TextAlignX.left: "l",
    TextAlignX.center: "m",
    TextAlignX.right: "r",
}
_ANCHOR_Y = {
    TextAlignY.top: "t",
    TextAlignY.center: "m",
    TextAlignY.baseline: "s",
    TextAlignY.bottom: "d",
}

_FALLBACK_FONTS = ("DejaVuSans.ttf", "Arial.ttf")

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@dataclass(frozen=True)
class FontSpec:
    """How labels find their font.

    Attributes:
        path: Preferred TrueType font file or name.
        strict: If True, raise instead of falling back to Pillow's default.
    """

    path: str = "DejaVuSans.ttf"
    strict: bool = False


def text_anchor(align_x: TextAlignX, align_y: TextAlignY) -> str:
    """Translate text alignment into a two-letter Pillow anchor."""
    return _ANCHOR_X[align_x] + _ANCHOR_Y[align_y]


class Rasterizer:
    """Turns draw instructions into a (H, W, 4) float32 RGBA buffer."""

    def __init__(self, font: FontSpec | None = None) -> None:
        """Initialize the rasterizer.

        Args:
            font: Label font lookup. Uses defaults if not provided.
        """
        self.font = font or FontSpec()
        self._fonts: dict[int, Font] = {}

    def rasterize(
        self,
        size: tuple[int, int],
        instructions: Sequence[DrawInstruction],
    ) -> npt.NDArray[np.float32]:
        """Render instructions onto a transparent canvas.

        Args:
            size: Canvas (width, height) in pixels.
            instructions: Instructions in drawing order. When colors differ,
                later colors are painted over earlier ones.

        Returns:
            Float32 array of shape (height, width, 4).

        Raises:
            ValueError: If size contains non-positive values.
            RuntimeError: If a label needs a font, strict font checking is
                enabled and no TrueType font is found.
        """
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"size must be positive, got {size}")

        buffer = np.zeros((height, width, 4), dtype=np.float32)
        for color, group in _group_by_color(instructions).items():
            mask = Image.new("L", size, 0)
            draw = ImageDraw.Draw(mask)
            for instruction in group:
                self._draw(draw, instruction)

            covered = np.asarray(mask) > 0
            buffer[covered] = color.to_rgba()
            logger.debug(
                "Rasterized %d instructions covering %d pixels",
                len(group),
                int(covered.sum()),
            )

        return buffer

    def _draw(self, draw: ImageDraw.ImageDraw, instruction: DrawInstruction) -> None:
        if isinstance(instruction, Box):
            for outline in box_outlines(instruction.roi, instruction.thickness):
                draw.rectangle(outline, outline=_COVERED)
        elif isinstance(instruction, Line):
            draw.line(
                [instruction.start.to_tuple(), instruction.end.to_tuple()],
                fill=_COVERED,
            )
        elif isinstance(instruction, DashedLine):
            for x0, y0, x1, y1 in dash_segments(instruction.roi, instruction.dot_interval):
                draw.line([(x0, y0), (x1, y1)], fill=_COVERED)
        elif isinstance(instruction, Text):
            self._draw_text(draw, instruction)
        else:  # pragma: no cover - exhaustive over DrawInstruction
            raise TypeError(f"Unknown draw instruction: {instruction!r}")

    def _draw_text(self, draw: ImageDraw.ImageDraw, text: Text) -> None:
        font = self._get_font(text.font_size)
        # Bitmap fonts only support the default "la" anchor
        anchor = (
            text_anchor(text.align_x, text.align_y)
            if isinstance(font, ImageFont.FreeTypeFont)
            else None
        )
        draw.text(
            text.position.to_tuple(),
            text.text,
            fill=_COVERED,
            font=font,
            anchor=anchor,
        )

    def _get_font(self, size: int) -> Font:
        """Get a font for labels, with fallback to Pillow's default.

        Returns:
            Font object for drawing text.

        Raises:
            RuntimeError: If strict font checking is enabled and no TrueType
                font is found.
        """
        if size in self._fonts:
            return self._fonts[size]

        candidates = [self.font.path, *[f for f in _FALLBACK_FONTS if f != self.font.path]]
        font: Font | None = None
        for candidate in candidates:
            try:
                font = ImageFont.truetype(candidate, size)
                break
            except OSError:
                continue

        if font is None:
            if self.font.strict:
                raise RuntimeError(
                    f"No TrueType fonts available ({', '.join(candidates)}). "
                    "Strict font check is enabled. Install system fonts."
                )
            logger.warning(
                "No TrueType fonts available (%s). Using Pillow's default font.",
                ", ".join(candidates),
            )
            font = ImageFont.load_default(size=size)

        self._fonts[size] = font
        return font


def _group_by_color(
    instructions: Iterable[DrawInstruction],
) -> dict[Color, list[DrawInstruction]]:
    groups: dict[Color, list[DrawInstruction]] = {}
    for instruction in instructions:
        groups.setdefault(instruction.color, []).append(instruction)
    return groups
