"""Startup helpers for logging connection URLs."""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


def ui_url(host: str, port: int, route_prefix: str) -> str:
    if host in ("0.0.0.0", "::", ""):
        host = "localhost"
    return f"http://{host}:{port}/{route_prefix}/index"


def log_ui_urls(host: str, port: int, route_prefix: str) -> None:
    """Log the URL the embedded UI answers on."""
    logger.info("UI available", url=ui_url(host, port, route_prefix))
