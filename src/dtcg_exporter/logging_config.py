"""Structured logging for the exporter, built on structlog.

Events go to the ``dtcg_exporter`` stdlib logger and from there to stderr,
so token JSON printed by the CLI stays alone on stdout. ``collection`` and
``mode`` are bound per converted file (see LogContext) and show up on every
event logged while that file is built.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

from dtcg_exporter.config import Settings, get_settings

PACKAGE_LOGGER = "dtcg_exporter"


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def get_console_processors() -> list[Processor]:
    """Processors for human-readable output (development)."""
    return [
        *_shared_processors(),
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def get_json_processors() -> list[Processor]:
    """Processors for one JSON object per event (production, log files)."""
    return [
        *_shared_processors(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(sort_keys=True),
    ]


def configure_logging(
    settings: Settings | None = None, level: str | None = None
) -> None:
    """Configure structlog and the package logger.

    ``level`` overrides ``settings.log_level`` (the CLI's ``--verbose``).
    Safe to call more than once: handlers are replaced, not stacked.
    """
    if settings is None:
        settings = get_settings()

    log_level = getattr(logging, level or settings.log_level.value)
    json_output = settings.log_format == "json" or settings.log_file is not None

    structlog.configure(
        processors=get_json_processors() if json_output else get_console_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if settings.log_file:
        package_logger.addHandler(_file_handler(settings.log_file, log_level))
    else:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(log_level)
        stream_handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(stream_handler)

    # uvicorn access lines duplicate the request_completed event
    logging.getLogger("uvicorn.access").setLevel(max(log_level, logging.WARNING))


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Example:
        logger = get_logger(__name__)
        logger.warning("unknown_variable_reference", variable_id="VariableID:1:2")
    """
    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables for all subsequent log calls in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Bind context for the duration of a ``with`` block.

    Example:
        with LogContext(collection=collection.name, mode=mode.name):
            tree = build_tree(...)
    """

    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs

    def __enter__(self) -> "LogContext":
        bind_context(**self.kwargs)
        return self

    def __exit__(self, *args: Any) -> None:
        unbind_context(*self.kwargs.keys())
