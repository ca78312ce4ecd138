#!/usr/bin/env python3
"""Generate overlays for common photo and film aspect ratios.

For each ratio the canvas is ``ratio * 1000`` pixels wide and 1000 pixels
tall, the frame fills it (scale 1) and both the symmetry grid and the
center cross are drawn.

Usage:
    python scripts/aspect_ratios.py [OUTPUT_DIR]
"""

from __future__ import annotations

import sys
from pathlib import Path

from overlaytool.cli.main import ExitCode, main

ASPECT_RATIOS = ("1.33", "1.5", "1.77", "1.85", "2.35", "2.39")
HEIGHT = 1000


def overlay_args(ratio: str, output_dir: Path) -> list[str]:
    """Build the overlaytool arguments for one aspect ratio."""
    width = int(float(ratio) * HEIGHT)
    return [
        "--aspectratio",
        ratio,
        "--outputfile",
        str(output_dir / f"overlaytool_{ratio}.png"),
        "--symmetrygrid",
        "--centerpoint",
        "--size",
        f"{width},{HEIGHT}",
        "--scale",
        "1",
        "-v",
    ]


def run(output_dir: Path) -> int:
    """Render every ratio, returning the first non-zero exit code (or 0)."""
    output_dir.mkdir(parents=True, exist_ok=True)
    status = ExitCode.SUCCESS
    for ratio in ASPECT_RATIOS:
        code = main(overlay_args(ratio, output_dir))
        if code != ExitCode.SUCCESS:
            print(f"Failed to create overlay for {ratio} (exit {code})", file=sys.stderr)
            status = status or code
            continue
        print(f"Created {output_dir / f'overlaytool_{ratio}.png'}")
    return int(status)


if __name__ == "__main__":
    sys.exit(run(Path(sys.argv[1]) if len(sys.argv) > 1 else Path(".")))
