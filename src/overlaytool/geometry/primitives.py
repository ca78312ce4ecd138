"""Geometry primitives for overlaytool.

This module provides immutable Pydantic models for the values the geometry
engine passes around: integer pixel regions, float points and linear colors.
All coordinates follow the convention where (0, 0) is the top-left corner of
the canvas. Regions may extend beyond the canvas (negative coordinates are
allowed); drawing outside the canvas is clipped by the rasterizer.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator


class Point(BaseModel, frozen=True):
    """A 2D point in canvas pixel coordinates.

    Coordinates are floats because the symmetry grid derives endpoints from
    trigonometric projections; the rasterizer is responsible for snapping
    them to pixels.

    Attributes:
        x: Horizontal position (pixels from left edge).
        y: Vertical position (pixels from top edge).
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])


class Color(BaseModel, frozen=True):
    """A three-channel linear float color.

    Channels are conventionally in [0, 1] but are only required to be
    finite; the writer clamps when quantising.
    """

    r: float = Field(default=1.0, allow_inf_nan=False)
    g: float = Field(default=1.0, allow_inf_nan=False)
    b: float = Field(default=1.0, allow_inf_nan=False)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def to_rgba(self) -> tuple[float, float, float, float]:
        """Return the color with an opaque alpha channel attached."""
        return (self.r, self.g, self.b, 1.0)


class ROI(BaseModel, frozen=True):
    """An axis-aligned region of interest in integer pixel coordinates.

    The region is half-open on its end coordinates:
    - Top-left: (xbegin, ybegin)
    - Bottom-right: (xend, yend) [exclusive]

    Attributes:
        xbegin: Left edge X coordinate.
        xend: Right edge X coordinate (exclusive).
        ybegin: Top edge Y coordinate.
        yend: Bottom edge Y coordinate (exclusive).
    """

    xbegin: int
    xend: int
    ybegin: int
    yend: int

    @model_validator(mode="after")
    def _validate_extents(self) -> Self:
        """Reject regions whose end lies before their begin."""
        if self.xend < self.xbegin or self.yend < self.ybegin:
            raise ValueError(
                "ROI extents must be non-negative "
                f"(x: {self.xbegin}..{self.xend}, y: {self.ybegin}..{self.yend})"
            )
        return self

    @property
    def width(self) -> int:
        """Horizontal extent in pixels."""
        return self.xend - self.xbegin

    @property
    def height(self) -> int:
        """Vertical extent in pixels."""
        return self.yend - self.ybegin

    @property
    def center(self) -> tuple[int, int]:
        """Return the integer midpoint as (x, y), rounded toward the top-left."""
        return ((self.xbegin + self.xend) // 2, (self.ybegin + self.yend) // 2)

    @property
    def aspect_ratio(self) -> float:
        """Return width / height.

        Raises:
            ZeroDivisionError: If the region has zero height.
        """
        return self.width / self.height

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (xbegin, xend, ybegin, yend) tuple."""
        return (self.xbegin, self.xend, self.ybegin, self.yend)

    @classmethod
    def from_size(cls, width: int, height: int) -> Self:
        """Create an ROI covering a full canvas of the given size."""
        return cls(xbegin=0, xend=width, ybegin=0, yend=height)
