"""Logging setup for the SDKUTILS command-line interface.

Library modules only log through ``logging.getLogger(__name__)`` and never
touch handlers. The CLI calls `configure_logging` once per invocation, which
installs a Rich console handler on stderr and, optionally, a flight recorder:
an in-memory buffer of DEBUG records written to a file only when a WARNING
shows up (or on exit, when forced).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "sdkutils"

FLIGHT_RECORDER_CAPACITY = 2000

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

logger = logging.getLogger(__name__)


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag records from other libraries with ``[libname]``.

    Sets ``record.prefix`` on every record (empty for project loggers) so the
    console format can rely on it. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the handler drops to DEBUG and shows timestamps, logger
    names and clickable source paths instead of library prefixes.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = FLIGHT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory buffer that dumps to ``path`` once ``flush_level`` is hit.

    The file is opened lazily, so nothing is created unless a flush happens.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s")
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flush_on_close: bool = False,
    logger_levels: Mapping[str, int] | None = None,
) -> list[logging.Handler]:
    """Route the root logger to the console and, if ``log_path``, a recorder.

    Args:
        level: Console threshold.
        debug_mode: Verbose console layout, forces DEBUG.
        color: Allow ANSI colors on the console.
        log_path: Flight-recorder file; ``None`` disables the recorder.
        flush_on_close: Write the recorder buffer on exit even without a
            WARNING.
        logger_levels: Per-logger minimum levels, applied after the root.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(config_flight_recorder(log_path, flush_on_close=flush_on_close))

    # root passes everything; each handler applies its own threshold
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)

    logger.debug(
        "Logging ready: console=%s, flight-recorder=%s",
        logging.getLevelName(handlers[0].level),
        log_path if log_path is not None else "OFF",
    )
    return handlers
