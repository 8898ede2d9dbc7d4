"""Logging utilities for bumpkit.

This module provides a standalone structlog logger factory that writes
JSON-formatted or text-formatted logs to a file or to stderr. Each logger is
self-contained and does not modify global structlog configuration, so test
suites that configure structlog themselves are left alone.
"""

import atexit
import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from bumpkit.config import HarnessConfig

LogFormatType = Literal["json", "text"]

# Append-mode streams shared by every logger writing to the same file
_log_streams: dict[Path, TextIO] = {}


def _log_stream(log_file: str) -> TextIO:
    """Return the shared append-mode stream for `log_file`, opening it once."""
    path = Path(log_file).absolute()
    stream = _log_streams.get(path)
    if stream is None or stream.closed:
        path.parent.mkdir(parents=True, exist_ok=True)
        stream = path.open("a")
        _log_streams[path] = stream
    return stream


def close_log_files() -> None:
    """Close every log file opened by create_logger.

    Loggers that write to one of those files must not be used afterwards;
    a logger created later reopens the file.
    """
    while _log_streams:
        _, stream = _log_streams.popitem()
        stream.close()


atexit.register(close_log_files)


def _log_level_from_string(level: str, *, respect_env: bool = True) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, BUMPKIT_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer, INFO for unknown names.
    """
    if respect_env and getenv("BUMPKIT_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def create_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    **initial_values: object,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger.

    The log level can be overridden by the BUMPKIT_DEBUG environment
    variable, which enables DEBUG level logging regardless of `level`.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file, opened once in append mode and shared by
            every logger writing to it. Logs go to stderr when empty.
        **initial_values: Context bound to every log entry.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    if log_file:
        logger_factory = structlog.WriteLoggerFactory(file=_log_stream(log_file))
    else:
        logger_factory = structlog.PrintLoggerFactory(file=sys.stderr)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(
        _log_level_from_string(level)
    )

    logger = cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )

    if initial_values:
        return logger.bind(**initial_values)
    return logger


def logger_from_config(
    config: "HarnessConfig", **initial_values: object
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger from the logging section of a configuration.

    Args:
        config: The loaded configuration.
        **initial_values: Context bound to every log entry.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    return create_logger(
        level=config.logging.level.value,
        log_format=config.logging.format.value,
        log_file=config.logging.file,
        **initial_values,
    )
