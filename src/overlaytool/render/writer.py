"""Writing rendered overlays to disk.

The output format follows the file extension:

- ``.tif``/``.tiff`` keep the float RGBA buffer as-is (tifffile).
- ``.exr`` keeps the float RGBA buffer as-is (OpenImageIO).
- Everything else is quantised to 8 bits and handed to Pillow. Formats that
  cannot store alpha (JPEG and friends) receive RGB with the alpha dropped.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
import OpenImageIO as oiio
import tifffile
from PIL import Image

from overlaytool.render.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

TIFF_SUFFIXES = frozenset({".tif", ".tiff"})
EXR_SUFFIXES = frozenset({".exr"})

# Pillow formats without an alpha channel
_OPAQUE_FORMATS = frozenset({"JPEG", "PPM", "PCX", "EPS"})


def _require_rgba(buffer: npt.NDArray[np.float32]) -> None:
    if buffer.ndim != 3 or buffer.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) buffer, got shape {buffer.shape}")


def to_rgba8(buffer: npt.NDArray[np.float32]) -> npt.NDArray[np.uint8]:
    """Quantise a float RGBA buffer to 8 bits per channel, clamping to [0, 1]."""
    _require_rgba(buffer)
    return (np.clip(buffer, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)


def write_image(buffer: npt.NDArray[np.float32], path: Path | str) -> Path:
    """Write a float RGBA buffer to an image file.

    Args:
        buffer: (H, W, 4) float buffer in [0, 1].
        path: Destination file. Its extension selects the format.

    Returns:
        The path written.

    Raises:
        ValueError: If buffer is not an (H, W, 4) array.
        OutputWriteError: If the file cannot be encoded or written.
    """
    _require_rgba(buffer)
    path = Path(path)
    suffix = path.suffix.lower()

    try:
        if suffix in TIFF_SUFFIXES:
            _write_float_tiff(buffer, path)
        elif suffix in EXR_SUFFIXES:
            _write_exr(buffer, path)
        else:
            _write_8bit(buffer, path)
    except (OSError, ValueError, KeyError) as e:
        raise OutputWriteError(
            "Could not write output file", path, reason=str(e)
        ) from e

    height, width = buffer.shape[:2]
    logger.info("Wrote %dx%d overlay to %s", width, height, path)
    return path


def _write_float_tiff(buffer: npt.NDArray[np.float32], path: Path) -> None:
    tifffile.imwrite(
        path,
        np.ascontiguousarray(buffer, dtype=np.float32),
        photometric="rgb",
        extrasamples=["unassalpha"],
    )


def _write_exr(buffer: npt.NDArray[np.float32], path: Path) -> None:
    height, width = buffer.shape[:2]
    output = oiio.ImageOutput.create(str(path))
    if output is None:
        raise OSError(oiio.geterror() or f"no EXR writer available for {path}")

    spec = oiio.ImageSpec(width, height, 4, "float")
    try:
        if not output.open(str(path), spec):
            raise OSError(output.geterror())
        if not output.write_image(np.ascontiguousarray(buffer, dtype=np.float32)):
            raise OSError(output.geterror())
    finally:
        output.close()


def _write_8bit(buffer: npt.NDArray[np.float32], path: Path) -> None:
    image = Image.fromarray(to_rgba8(buffer))
    if Image.registered_extensions().get(path.suffix.lower()) in _OPAQUE_FORMATS:
        image = image.convert("RGB")
    image.save(path)
