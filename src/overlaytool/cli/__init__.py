"""CLI module for overlaytool.

Provides the command-line interface for rendering composition-guide overlays.
"""

from __future__ import annotations

from overlaytool.cli.main import ExitCode, app, main

__all__ = ["ExitCode", "app", "main"]
