"""Rendering module for overlaytool.

Rasterizes geometry draw instructions into an RGBA float buffer with Pillow
and numpy, and writes the result to an image file chosen by extension.
"""

from overlaytool.render.exceptions import OutputWriteError, RenderError
from overlaytool.render.rasterizer import FontSpec, Rasterizer, text_anchor
from overlaytool.render.writer import to_rgba8, write_image

__all__ = [
    "FontSpec",
    "OutputWriteError",
    "Rasterizer",
    "RenderError",
    "text_anchor",
    "to_rgba8",
    "write_image",
]
