"""Logging setup for one humanize-url invocation.

Library modules only ever call ``logging.getLogger(__name__)``. The CLI turns
its options into a `LoggingSettings` value and hands it to
`configure_logging`, which attaches to the root logger:

- a Rich console handler on stderr, keeping stdout for rendered URLs;
- optionally, a flight recorder: a `MemoryHandler` buffering DEBUG records
  that are written to a file once a WARNING is logged, or at exit when a
  flush is forced.

Flight-recorder lines are stamped with the subcommand that produced them, so
a ``latest.log`` left behind by ``show`` reads differently from one left by
``rewrite``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path

import yarl
from rich.console import Console
from rich.logging import RichHandler

from humanize_url import __version__
from humanize_url.config import DEFAULT_FLIGHT_RECORDER_CAPACITY

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)

PROJECT_PACKAGE = "humanize_url"
VERBOSITY_STEP = logging.INFO - logging.DEBUG

CONSOLE_FORMAT = "%(library)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "%(asctime)s %(levelname)-8s [%(command)s] %(name)s:%(lineno)d: %(message)s"
)


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Shift the WARNING default one level per ``-v`` (down) or ``-q`` (up).

    The result is clamped to the DEBUG..CRITICAL range.
    """
    level = logging.WARNING - VERBOSITY_STEP * (verbose - quiet)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True)
class LoggingSettings:
    """Logging options of a single CLI invocation.

    Attributes:
        level: Minimum level shown on the console.
        debug: Show everything on the console, with timestamps and source paths.
        color: Allow ANSI colors on the console.
        flight_recorder_path: File the flight recorder writes to. None
            disables the recorder.
        flight_recorder_capacity: Records kept in memory before a forced flush.
        force_flush: Write the buffered records at exit even without a WARNING.
        logger_levels: Minimum level per logger name, applied to every handler.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    flight_recorder_path: Path | None = None
    flight_recorder_capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)


class LibraryTagFilter(logging.Filter):
    """Tag records from other packages with their top-level package name.

    Sets ``record.library`` to e.g. ``"[yarl]"`` for a ``yarl._url`` record,
    and to ``""`` for humanize-url's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.library = "" if package == PROJECT_PACKAGE else f"[{package}]"
        return True


class CommandFilter(logging.Filter):
    """Stamp ``record.command`` with the subcommand being run."""

    def __init__(self, command: str | None) -> None:
        super().__init__()
        self.command = command or "-"

    def filter(self, record: logging.LogRecord) -> bool:
        record.command = self.command
        return True


def console_handler(settings: LoggingSettings) -> RichHandler:
    """Build the stderr console handler described by `settings`."""
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if settings.debug else settings.level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(LibraryTagFilter())
    return handler


def flight_recorder(
    path: Path,
    *,
    command: str | None = None,
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a flight recorder writing to `path`.

    Records of every level are buffered. The buffer is written out when a
    WARNING or worse arrives, when it fills up, or on close if
    `flush_on_close` is set. The file is only created on the first write.

    Args:
        path: Destination file, truncated on first write.
        command: Subcommand name stamped on every line.
        capacity: Number of records to buffer.
        flush_on_close: Write the remaining buffer when the handler closes.

    Returns:
        MemoryHandler: The buffering handler, targeting a `FileHandler`.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    handler = MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )
    handler.addFilter(CommandFilter(command))
    return handler


def configure_logging(
    settings: LoggingSettings, command: str | None = None
) -> list[logging.Handler]:
    """Replace the root logger's handlers according to `settings`.

    The root logger lets every record through and each handler applies its
    own level. Per-logger levels are set last, so they bind the console and
    the flight recorder alike.

    Args:
        settings: The invocation's logging options.
        command: Name of the subcommand about to run, if any.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.flight_recorder_path is not None:
        handlers.append(
            flight_recorder(
                settings.flight_recorder_path,
                command=command,
                capacity=settings.flight_recorder_capacity,
                flush_on_close=settings.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)

    logger.info(
        "humanize-url %s running %s: console=%s, flight-recorder=%s",
        __version__,
        command or "-",
        logging.getLevelName(handlers[0].level),
        settings.flight_recorder_path or "off",
    )
    logger.debug("yarl %s on Python %s", yarl.__version__, sys.version.split()[0])
    if settings.logger_levels:
        logger.debug(
            "Logger levels: %s",
            {n: logging.getLevelName(lvl) for n, lvl in settings.logger_levels.items()},
        )
    return handlers
