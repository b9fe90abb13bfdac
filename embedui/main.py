"""FastAPI host application that mounts the embedded UI."""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles

from embedui.api import router as api_router
from embedui.config import UIConfig
from embedui.http import (
    http_exception_handler,
    request_logging_middleware,
    unhandled_exception_handler,
)
from embedui.log_config import configure_logging
from embedui.middleware import embedded_ui
from embedui.resources import ResourceSet
from embedui.settings import settings
from embedui.startup import log_ui_urls

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_ui_urls(settings.host(), settings.port(), app.state.ui_config.route_prefix)
    yield


def create_app(
    config: UIConfig | None = None,
    resources: ResourceSet | None = None,
    static_dir: str | None = None,
) -> FastAPI:
    """Build the host app.

    Args:
        config: UI configuration; read from EMBEDUI_* settings when omitted.
        resources: Bundle to serve; loaded from ``config.resource_package``
            when omitted.
        static_dir: On-disk directory served after the embedded UI and the
            API routes. Defaults to EMBEDUI_STATIC_DIR; empty disables it.
    """
    if config is None:
        config = UIConfig.from_settings()
    if resources is None:
        resources = ResourceSet.from_package(
            config.resource_package, subdirectory=config.resource_root
        )
    if static_dir is None:
        static_dir = settings.static_dir()

    app = FastAPI(lifespan=lifespan)
    app.state.ui_config = config
    app.state.ui_resources = resources

    # Middleware added last runs first: request logging wraps the UI.
    embedded_ui(app, config, resources)
    app.middleware("http")(request_logging_middleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router)
    if static_dir:
        logger.info("Serving static files downstream of the UI", directory=static_dir)
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    return app


app = create_app()


def run() -> None:
    """Entry point for the embedui console script."""
    uvicorn.run(
        "embedui.main:app",
        host=settings.host(),
        port=settings.port(),
        reload=settings.reload(),
    )


if __name__ == "__main__":
    run()
