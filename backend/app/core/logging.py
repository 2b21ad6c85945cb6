from __future__ import annotations

import logging
from typing import Any

import structlog
import structlog.tracebacks


def configure_logging(debug: bool = False) -> None:
    """Configure structured logging for the application."""

    level = logging.DEBUG if debug else logging.INFO
    timestamper = structlog.processors.TimeStamper(fmt="iso")

    logging.basicConfig(format="%(message)s", level=level)

    # Tracebacks are rendered by ConsoleRenderer itself in debug mode
    renderers: list[Any] = (
        [structlog.dev.ConsoleRenderer()]
        if debug
        else [
            structlog.processors.ExceptionRenderer(
                structlog.tracebacks.ExceptionDictTransformer(show_locals=False)
            ),
            structlog.processors.JSONRenderer(),
        ]
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            timestamper,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(*args: Any, **kwargs: Any) -> structlog.BoundLogger:
    return structlog.get_logger(*args, **kwargs)
