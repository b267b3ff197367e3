"""Structlog-based logging setup with contextual enrichment."""

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Iterator
from typing import TextIO

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, unbind_contextvars
from structlog.stdlib import get_logger

__all__ = [
    "bind_log_context",
    "clear_log_context",
    "configure_logging",
    "get_logger",
    "log_context",
]

_TIME_STAMPER = structlog.processors.TimeStamper(fmt="iso", key="timestamp")


def _shared_processors(json_output: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _TIME_STAMPER,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
    return processors


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib records through one handler.

    JSON rendering is meant for deployed environments, console rendering for
    local development. Calling this again replaces the previous handler.
    """

    shared = _shared_processors(json_output)
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())


def bind_log_context(**kwargs: object) -> None:
    """Bind values to every log event emitted in the current context."""

    bind_contextvars(**{k: v for k, v in kwargs.items() if v is not None})


def clear_log_context() -> None:
    clear_contextvars()


@contextlib.contextmanager
def log_context(**kwargs: object) -> Iterator[None]:
    """Temporarily bind logging metadata."""

    bind_log_context(**kwargs)
    try:
        yield
    finally:
        unbind_contextvars(*kwargs.keys())
