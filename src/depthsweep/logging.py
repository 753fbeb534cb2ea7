"""Logging setup for the DEPTHSWEEP CLI.

Records go to two sinks. The console is a Rich handler on stderr whose level
follows ``-v``/``-q``. The "flight recorder" keeps recent records at DEBUG
in memory and dumps them to a file once a WARNING (or worse) is logged, so a
failed sweep leaves its per-call gas trail on disk while a passing sweep
leaves nothing behind.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "depthsweep"

BASE_LEVEL = logging.WARNING

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

_CONSOLE_FORMAT = "%(prefix)s %(message)s"
_DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSetup:
    """Logging options of one CLI invocation.

    Attributes:
        console_level: Minimum level shown on the console.
        debug: Developer mode; console at DEBUG with source locations.
        color: Allow ANSI colors on the console.
        log_path: Flight-recorder file, or None to disable the recorder.
        recorder_capacity: Records kept in memory by the flight recorder.
        flush_on_exit: Dump the flight recorder on exit even without a WARNING.
        logger_levels: Per-logger minimum levels (``name -> level``).
    """

    console_level: int = BASE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    recorder_capacity: int = 2000
    flush_on_exit: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        """True when records are also buffered for the log file."""
        return self.log_path is not None


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map repeated ``-v``/``-q`` flags to a level, one step of 10 per flag.

    The result is clamped to DEBUG..CRITICAL around the WARNING default.
    """
    level = BASE_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[package]"`` for loggers outside DEPTHSWEEP.

    Project records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def build_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    In debug mode the handler passes everything down to DEBUG and shows the
    source file and line of each record; otherwise third-party records are
    marked with a short prefix.
    """
    # mirrors click-extra's --color / --no-color
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(_DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def build_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a MemoryHandler that dumps its buffer to ``path``.

    The buffer is written out when a record at ``flush_level`` or above
    arrives, when it holds ``capacity`` records, and on close if
    ``flush_on_close`` is set. The file is truncated per run and only created
    on the first write.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(setup: LoggingSetup) -> list[logging.Handler]:
    """Install the console and flight-recorder handlers on the root logger.

    The root logger passes every record through; each handler applies its own
    level. Per-logger levels from ``setup.logger_levels`` are applied last,
    so they restrict both sinks.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [
        build_console_handler(setup.console_level, setup.debug, setup.color)
    ]
    if setup.log_path is not None:
        handlers.append(
            build_flight_recorder(
                setup.log_path,
                capacity=setup.recorder_capacity,
                flush_on_close=setup.flush_on_exit,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in setup.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "unknown"


def log_startup(
    logger: Logger,
    setup: LoggingSetup,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO banner, then environment details at DEBUG.

    The DEBUG lines end up in the flight recorder, which makes a dumped log
    file self-describing: interpreter, platform, process, library versions
    and the logging configuration itself.
    """
    logger.info(
        "DEPTHSWEEP %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(setup.console_level),
        "ON" if setup.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for dist in ("click", "click-extra", "rich"):
        logger.debug("%s: %s", dist.title(), _distribution_version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if setup.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            setup.log_path,
            setup.recorder_capacity,
            setup.flush_on_exit,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in setup.logger_levels.items()}
        or "<none>",
    )
