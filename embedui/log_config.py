"""Logging setup for the embedui host.

structlog renders every record, including the ones emitted by uvicorn
through stdlib logging, so the UI middleware, the request logger and the
server's access log end up in one stream with one format.
"""

from __future__ import annotations

import logging
import logging.config
import sys
from typing import Any, TextIO

import structlog

from embedui.settings import settings

LOG_FORMATS = ("console", "json")

# Positional args of a uvicorn.access record, in order.
_ACCESS_FIELDS = ("client_addr", "method", "path", "http_version", "status_code")
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def uvicorn_access_fields(
    logger: logging.Logger | None, name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Lift the request fields out of uvicorn.access records."""
    record = event_dict.get("_record")
    if record is None or record.name != "uvicorn.access":
        return event_dict
    if isinstance(record.args, tuple) and len(record.args) >= len(_ACCESS_FIELDS):
        event_dict.update(zip(_ACCESS_FIELDS, record.args))
    return event_dict


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    raise ValueError(f"Unknown log format {fmt!r}; expected one of {LOG_FORMATS}")


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    level: str | None = None, fmt: str | None = None, stream: TextIO | None = None
) -> None:
    """Install the structlog pipeline and route uvicorn through it.

    Args:
        level: Log level name. Defaults to EMBEDUI_LOG_LEVEL; unknown names
            fall back to INFO.
        fmt: ``console`` or ``json``. Defaults to EMBEDUI_LOG_FORMAT.
        stream: Where records are written. Defaults to stdout.

    Raises:
        ValueError: ``fmt`` is not a known format.
    """
    log_level = _level(level or settings.log_level())
    renderer = _renderer((fmt or settings.log_format()).lower())

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=[*pre_chain, uvicorn_access_fields],
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"structlog": {"()": lambda: formatter}},
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "formatter": "structlog",
                    "stream": stream or sys.stdout,
                }
            },
            "root": {"handlers": ["stream"], "level": log_level},
            "loggers": {
                name: {"handlers": ["stream"], "level": log_level, "propagate": False}
                for name in _SERVER_LOGGERS
            },
        }
    )
