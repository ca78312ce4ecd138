"""Structured logging configuration using structlog.

Tags log events with the output file and pipeline stage of the current run
and supports configurable output formats (JSON for batch jobs, colored
console for interactive use).
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from overlaytool.config import settings

# Context variables for the current run
_output_file: ContextVar[str | None] = ContextVar("output_file", default=None)
_stage: ContextVar[str | None] = ContextVar("stage", default=None)


def set_run_context(
    output_file: str | None = None,
    stage: str | None = None,
) -> None:
    """Set run context for subsequent log events.

    Args:
        output_file: Path of the overlay being generated
        stage: Current pipeline stage ("geometry", "render", "write")
    """
    if output_file is not None:
        _output_file.set(output_file)
    if stage is not None:
        _stage.set(stage)


def clear_run_context() -> None:
    """Clear all run context variables."""
    _output_file.set(None)
    _stage.set(None)


def _add_run_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add run context to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    output_file = _output_file.get()
    stage = _stage.get()

    if output_file is not None:
        event_dict["output_file"] = output_file
    if stage is not None:
        event_dict["stage"] = stage

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_run_context,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match; geometry modules log through it
    log_level = getattr(logging, level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    logging.getLogger().setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
