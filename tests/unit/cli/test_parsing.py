"""Tests for CLI option value parsing."""

from __future__ import annotations

import pytest

from overlaytool.cli.parsing import (
    ArgumentParseError,
    parse_color,
    parse_float,
    parse_size,
)
from overlaytool.geometry import Color


class TestParseFloat:
    def test_parses(self) -> None:
        assert parse_float("1.85", "aspect ratio") == 1.85

    def test_parses_integer_text(self) -> None:
        assert parse_float("1", "scale") == 1.0

    @pytest.mark.parametrize("raw", ["", "abc", "1.5,2", "nan", "inf", "-inf"])
    def test_rejects(self, raw: str) -> None:
        with pytest.raises(ArgumentParseError) as exc_info:
            parse_float(raw, "scale")
        assert exc_info.value.raw == raw
        assert str(exc_info.value) == f"could not parse scale from string: {raw}"


class TestParseColor:
    def test_parses(self) -> None:
        assert parse_color("1.0,0.5,0") == Color(r=1.0, g=0.5, b=0.0)

    def test_tolerates_spaces(self) -> None:
        assert parse_color("1.0, 0.5, 0.25") == Color(r=1.0, g=0.5, b=0.25)

    @pytest.mark.parametrize(
        "raw", ["1,1", "1,1,1,1", "r,g,b", "nan,0,0", "1,inf,1"]
    )
    def test_rejects(self, raw: str) -> None:
        with pytest.raises(ArgumentParseError, match="could not parse color"):
            parse_color(raw)


class TestParseSize:
    def test_parses(self) -> None:
        assert parse_size("1920,1080") == (1920, 1080)

    @pytest.mark.parametrize("raw", ["1920", "1920x1080", "19.5,10", "a,b"])
    def test_rejects(self, raw: str) -> None:
        with pytest.raises(ArgumentParseError, match="could not parse size"):
            parse_size(raw)

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_size("nope")
