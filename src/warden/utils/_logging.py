"""Structured logging for controller operations.

Every lifecycle command appends JSON lines to the controller log. Loggers
are built with `structlog.wrap_logger` and never touch structlog's global
configuration, so library code and tests can create as many as they need.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import EventDict, FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

_LEVELS = logging.getLevelNamesMapping()


def _level_named(name: str | None) -> int | None:
    if not name:
        return None
    return _LEVELS.get(name.strip().upper())


def _resolve_level(requested: str | None = None) -> int:
    """Pick the effective level for a controller logger.

    WARDEN_DEBUG forces debug. Otherwise the requested level applies, then
    WARDEN_LOG_LEVEL, then info. Unknown names are skipped.
    """
    if os.environ.get("WARDEN_DEBUG"):
        return logging.DEBUG
    for candidate in (requested, os.environ.get("WARDEN_LOG_LEVEL")):
        level = _level_named(candidate)
        if level is not None:
            return level
    return logging.INFO


def _render_chain(log_format: LogFormatType) -> list["Processor"]:  # noqa: UP037
    chain: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "text":
        chain.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        chain += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return chain


def _stream_logger(
    stream: TextIO, level: int, log_format: LogFormatType
) -> "FilteringBoundLogger":  # noqa: UP037
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLogger(stream),
            processors=_render_chain(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


@contextmanager
def open_file_logger(
    log_file: Path,
    *,
    level: int = logging.INFO,
    log_format: LogFormatType = "json",
) -> Iterator["FilteringBoundLogger"]:  # noqa: UP037
    """Open a logger that appends rendered events to a file.

    The parent directory is created if needed. The file is closed when the
    context exits.

    Args:
        log_file: File that receives one line per event.
        level: Minimum level that is written.
        log_format: "json" for JSON lines, "text" for key=value lines.

    Yields:
        A filtering bound logger.

    Raises:
        OSError: If the directory or the file cannot be opened.
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with log_file.open("a", encoding="utf-8") as stream:
        yield _stream_logger(stream, level, log_format)


def _drop_event(
    _logger: object, _method_name: str, _event_dict: "EventDict"  # noqa: UP037
) -> "EventDict":  # noqa: UP037
    raise structlog.DropEvent


def create_null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Return a logger that drops every event."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[_drop_event],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )


@contextmanager
def controller_logger(
    log_file: Path,
    *,
    level: str | None = None,
    log_format: LogFormatType = "json",
    command: str = "",
) -> Iterator["FilteringBoundLogger"]:  # noqa: UP037
    """Open the logger used by one lifecycle command.

    Args:
        log_file: Controller log, normally `<log dir>/warden.log`.
        level: Requested level name such as "debug". WARDEN_DEBUG still wins.
        log_format: "json" or "text".
        command: Lifecycle command name, bound to every event when given.

    Yields:
        A filtering bound logger writing to log_file.

    Raises:
        OSError: If the log cannot be opened.
    """
    with open_file_logger(
        log_file, level=_resolve_level(level), log_format=log_format
    ) as logger:
        yield logger.bind(command=command) if command else logger
