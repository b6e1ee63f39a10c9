"""Logging helpers used by the kite CLI and application.

This module provides utilities for configuring console logging with Rich
and an in-memory "flight recorder" that buffers log records and writes them
to disk on flush. Two filters are provided: one annotates third-party log
records with a short prefix used by console formatting, the other masks
secrets (API keys, tokens) before any handler renders a record.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import httpx
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from kite.interfaces.redactor import Redactor

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "kite"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[httpx]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "httpcore.connection" -> "[httpcore]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


class RedactingFilter(logging.Filter):
    """Mask secrets in a record's rendered message.

    The message is formatted once with its arguments, sanitized with the
    given redactor, and stored back with the arguments cleared so every
    downstream handler sees only the redacted text.
    """

    def __init__(self, redactor: Redactor) -> None:
        super().__init__()
        self._redactor = redactor

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._redactor.sanitize(record.getMessage())
        record.args = None
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and supports optional color and a debug
    mode. In debug mode the handler is set to DEBUG and includes source
    file/line information; otherwise a short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    # Keep consistent with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The flight recorder buffers up to `capacity` log records and flushes
    them to the provided file handler when a record at `flush_level` or
    higher is emitted (or on close if `flush_on_close` is True).

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """

    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    memory_handler = MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )

    return memory_handler


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """Log human-friendly startup info and detailed diagnostics.

    Emits an informational one-line summary describing the application version
    and whether console logging and the flight-recorder are enabled. Additional
    DEBUG-level diagnostics are emitted for troubleshooting, including Python
    and platform versions, process id, current working directory, the httpx
    version, the active handler types, flight-recorder settings, the redaction
    mode, and any per-logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        log_path: Path to the flight-recorder output file, or None.
        flight_recorder: Whether the in-memory flight recorder is enabled.
        flight_capacity: Configured capacity of the flight recorder buffer, or None.
        force_flush_fr: Whether the flight recorder is configured to flush on close.
        logger_levels: Mapping of logger names to their configured numeric levels.
        redactor_mode: Active secret redaction mode ("lenient" or "strict").
    """

    logger.info(
        "kite %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    # Deep diagnostics
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("httpx: %s", httpx.__version__)
    logger.debug(
        "Handlers: %s",
        [type(h).__name__ for h in handlers],
    )
    logger.debug("Redaction mode: %s", redactor_mode)
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        # This should never happen because of defaults, but is here as a fallback.
        logger.debug("Per-logger overrides: <none>")  # pragma: no cover.
