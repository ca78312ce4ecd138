"""Geometry module for overlaytool.

This package derives composition-guide coordinates from a canvas size,
target aspect ratio and scale, and describes them as draw instructions.

Key Components:
    - Primitives: ROI, Point, Color value types
    - Transforms: scale about center, fit to aspect ratio
    - Constructors: center cross, symmetry grid
    - Overlay: orchestration into a flat instruction list

Example:
    from overlaytool.geometry import OverlayConfig, build_overlay

    config = OverlayConfig(size=(1920, 1080), aspect_ratio=2.39, scale=1.0,
                           symmetrygrid=True)
    overlay = build_overlay(config)
    for instruction in overlay.instructions:
        ...
"""

from overlaytool.geometry.centerpoint import center_cross, cross_size
from overlaytool.geometry.instructions import (
    Box,
    DashedLine,
    DrawInstruction,
    Line,
    Text,
    TextAlignX,
    TextAlignY,
    instruction_list_adapter,
)
from overlaytool.geometry.overlay import (
    Overlay,
    OverlayConfig,
    OverlayStyle,
    build_overlay,
    compute_frame,
    size_labels,
)
from overlaytool.geometry.primitives import ROI, Color, Point
from overlaytool.geometry.symmetry import (
    ReciprocalConstruction,
    reciprocal_construction,
    symmetry_grid,
)
from overlaytool.geometry.transforms import (
    box_outlines,
    dash_segments,
    fit_aspect_ratio,
    scale_about,
)

__all__ = [
    "ROI",
    "Box",
    "Color",
    "DashedLine",
    "DrawInstruction",
    "Line",
    "Overlay",
    "OverlayConfig",
    "OverlayStyle",
    "Point",
    "ReciprocalConstruction",
    "Text",
    "TextAlignX",
    "TextAlignY",
    "box_outlines",
    "build_overlay",
    "center_cross",
    "compute_frame",
    "cross_size",
    "dash_segments",
    "fit_aspect_ratio",
    "instruction_list_adapter",
    "reciprocal_construction",
    "scale_about",
    "size_labels",
    "symmetry_grid",
]
