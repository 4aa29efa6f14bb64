"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

# Loggers that are too chatty below WARNING when the root level is DEBUG
QUIET_LOGGERS: tuple[str, ...] = ("asyncio",)


def setup_logging(
    level: str = "INFO",
    *,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog over the stdlib root logger.

    Output is JSON unless the level is DEBUG, in which case the coloured
    console renderer is used. ``json_output`` forces either renderer.
    Records go to ``stream``, stdout by default.
    """

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output is None:
        json_output = level.upper() != "DEBUG"

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger for a module."""
    return structlog.get_logger(name)
