"""Parsing of the CLI's numeric option values.

Numeric options are accepted as raw strings so that a malformed value can
be reported verbatim and mapped to the tool's own exit code.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TypeVar

from overlaytool.geometry.primitives import Color

T = TypeVar("T", int, float)


class ArgumentParseError(ValueError):
    """Raised when an option value cannot be parsed.

    Attributes:
        what: Human-readable name of the option value.
        raw: The offending string as given on the command line.
    """

    def __init__(self, what: str, raw: str) -> None:
        self.what = what
        self.raw = raw
        super().__init__(f"could not parse {what} from string: {raw}")


def _parse_list(raw: str, count: int, what: str, convert: Callable[[str], T]) -> list[T]:
    parts = raw.split(",")
    if len(parts) != count:
        raise ArgumentParseError(what, raw)
    try:
        return [convert(part.strip()) for part in parts]
    except ValueError:
        raise ArgumentParseError(what, raw) from None


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text}")
    return value


def parse_float(raw: str, what: str) -> float:
    """Parse a single float such as ``"1.85"``."""
    return _parse_list(raw, 1, what, _finite_float)[0]


def parse_color(raw: str) -> Color:
    """Parse ``"R,G,B"`` into a Color."""
    r, g, b = _parse_list(raw, 3, "color", _finite_float)
    return Color(r=r, g=g, b=b)


def parse_size(raw: str) -> tuple[int, int]:
    """Parse ``"W,H"`` into an integer (width, height) pair."""
    width, height = _parse_list(raw, 2, "size", int)
    return (width, height)
