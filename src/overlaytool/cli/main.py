"""overlaytool CLI - composition-guide overlay generator.

Command-line interface that renders an aspect-ratio frame, center cross,
symmetry grid and size labels onto a transparent canvas.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from overlaytool import __version__
from overlaytool.cli.parsing import (
    ArgumentParseError,
    parse_color,
    parse_float,
    parse_size,
)
from overlaytool.config import ConfigError, Settings, settings
from overlaytool.geometry import OverlayConfig, OverlayStyle, build_overlay
from overlaytool.render import FontSpec, OutputWriteError, Rasterizer, write_image
from overlaytool.utils.logging import (
    clear_run_context,
    configure_logging,
    get_logger,
    set_run_context,
)

BANNER = "overlaytool -- a utility for creating overlay images"

# Exit status Click uses for command-line usage errors
_USAGE_ERROR = 2

app = typer.Typer(
    name="overlaytool",
    help=BANNER,
    add_completion=False,
)


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    FAILURE = 1  # Argument, configuration or geometry error
    WRITE_FAILURE = 3  # Overlay computed but the output could not be written


# =============================================================================
# Command
# =============================================================================


@app.command()
def overlay(  # noqa: PLR0913
    ctx: typer.Context,
    outputfile: Annotated[
        Path | None,
        typer.Option(
            "--outputfile",
            metavar="OUTPUTFILE",
            help="Set output file",
            rich_help_panel="Output flags",
        ),
    ] = None,
    aspectratio: Annotated[
        str,
        typer.Option(
            "--aspectratio",
            metavar="ASPECTRATIO",
            help="Set aspectratio (default: 1.5)",
            show_default=False,
            rich_help_panel="Input flags",
        ),
    ] = "1.5",
    scale: Annotated[
        str,
        typer.Option(
            "--scale",
            metavar="SCALE",
            help="Set scale (default: 0.5)",
            show_default=False,
            rich_help_panel="Input flags",
        ),
    ] = "0.5",
    color: Annotated[
        str,
        typer.Option(
            "--color",
            metavar="COLOR",
            help="Set color (default: 1.0,1.0,1.0)",
            show_default=False,
            rich_help_panel="Input flags",
        ),
    ] = "1.0,1.0,1.0",
    size: Annotated[
        str,
        typer.Option(
            "--size",
            metavar="SIZE",
            help="Set size (default: 1024,1024)",
            show_default=False,
            rich_help_panel="Input flags",
        ),
    ] = "1024,1024",
    centerpoint: Annotated[
        bool,
        typer.Option(
            "--centerpoint",
            help="Use centerpoint for overlay",
            rich_help_panel="Input flags",
        ),
    ] = False,
    symmetrygrid: Annotated[
        bool,
        typer.Option(
            "--symmetrygrid",
            help="Use symmetry grid for overlay",
            rich_help_panel="Input flags",
        ),
    ] = False,
    label: Annotated[
        bool,
        typer.Option(
            "--label",
            help="Use label for overlay",
            rich_help_panel="Input flags",
        ),
    ] = False,
    consistentinset: Annotated[
        bool,
        typer.Option(
            "--consistentinset",
            help="Inset every symmetry grid end coordinate by one pixel",
            rich_help_panel="Input flags",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("-v", help="Verbose status messages")
    ] = False,
    debug: Annotated[bool, typer.Option("-d", help="Debug status messages")] = False,
) -> None:
    """Create an overlay image with composition guides."""
    _configure_logging(verbose=verbose, debug=debug)
    logger = get_logger(__name__)
    clear_run_context()

    try:
        config = OverlayConfig(
            size=parse_size(size),
            aspect_ratio=parse_float(aspectratio, "aspect ratio"),
            scale=parse_float(scale, "scale"),
            color=parse_color(color),
            centerpoint=centerpoint,
            symmetrygrid=symmetrygrid,
            label=label,
            consistent_inset=consistentinset,
        )
    except ArgumentParseError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(ExitCode.FAILURE) from None
    except ValidationError as e:
        typer.echo(f"error: invalid overlay options: {_summarize(e)}", err=True)
        raise typer.Exit(ExitCode.FAILURE) from None

    if outputfile is None:
        typer.echo("error: must have output file parameter", err=True)
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(ExitCode.FAILURE)

    try:
        active = settings.require_valid()
    except ConfigError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(ExitCode.FAILURE) from None

    typer.echo(BANNER)
    typer.echo(f"info: Writing overlay file: {outputfile}")
    set_run_context(output_file=str(outputfile), stage="geometry")
    logger.info(
        "Starting overlay",
        version=__version__,
        size=config.size,
        aspect_ratio=config.aspect_ratio,
        scale=config.scale,
    )

    try:
        result = build_overlay(config, style=_style_from_settings(active))
        logger.info(
            "Computed overlay geometry",
            frame=result.frame.to_tuple(),
            instructions=len(result.instructions),
        )

        set_run_context(stage="render")
        buffer = Rasterizer(
            FontSpec(path=active.FONT_PATH, strict=active.STRICT_FONT_CHECK)
        ).rasterize(config.size, result.instructions)

        set_run_context(stage="write")
        write_image(buffer, outputfile)
    except OutputWriteError as e:
        logger.error("Overlay write failed", reason=e.reason)
        typer.echo(
            f"error: could not write output file {e.path}: {e.reason}", err=True
        )
        raise typer.Exit(ExitCode.WRITE_FAILURE) from None
    except Exception as e:
        logger.exception("Overlay generation failed")
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(ExitCode.FAILURE) from None
    finally:
        clear_run_context()

    logger.info("Overlay written", path=str(outputfile))


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point.

    Click reports its own usage errors (unknown options, missing option
    values) with status 2; they are mapped to 1 like every other argument
    error.

    Args:
        argv: Arguments excluding the program name. Defaults to sys.argv.

    Returns:
        The process exit code.
    """
    command = typer.main.get_command(app)
    try:
        command.main(
            args=list(argv) if argv is not None else None,
            prog_name="overlaytool",
        )
    except SystemExit as e:
        return _exit_code(e.code)
    return ExitCode.SUCCESS


def _exit_code(code: int | str | None) -> int:
    if code is None:
        return ExitCode.SUCCESS
    if not isinstance(code, int):
        return ExitCode.FAILURE
    return ExitCode.FAILURE if code == _USAGE_ERROR else code


def _configure_logging(*, verbose: bool, debug: bool) -> None:
    """Configure logging based on the -v and -d flags."""
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = None  # settings.LOG_LEVEL

    configure_logging(level=level)


def _style_from_settings(active: Settings) -> OverlayStyle:
    return OverlayStyle(
        box_thickness=active.BOX_THICKNESS,
        dot_interval=active.DOT_INTERVAL,
        cross_fraction=active.CROSS_FRACTION,
        label_margin=active.LABEL_MARGIN,
        font_size=active.FONT_SIZE,
    )


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
