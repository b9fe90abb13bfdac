"""Starlette middleware that serves the embedded single-page UI.

Usage::

    from embedui.middleware import EmbeddedUIMiddleware
    from embedui.resources import ResourceSet

    app.add_middleware(
        EmbeddedUIMiddleware,
        resources=ResourceSet.from_package("myapp", subdirectory="ui"),
        route_prefix="custom/ui",
    )

Requests the UI does not own reach the wrapped application untouched, so
application routes and on-disk ``StaticFiles`` mounts keep working.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from embedui.config import OnMissing, UIConfig
from embedui.http import error_response
from embedui.resources import ResourceIndex, ResourceSet
from embedui.responder import respond
from embedui.router import Redirect, Router, ServeAsset, ServeEntry

logger = structlog.get_logger(__name__)


class EmbeddedUIMiddleware(BaseHTTPMiddleware):
    """Serve a bundled SPA under a route prefix, delegating everything else."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        resources: ResourceSet,
        route_prefix: str = "custom/ui",
        entry_document: str = "index.html",
        on_missing: OnMissing = "not_found",
    ) -> None:
        super().__init__(app)
        if on_missing not in ("not_found", "delegate"):
            raise ValueError(f"on_missing must be 'not_found' or 'delegate', got {on_missing!r}")
        self.index = ResourceIndex(resources, route_prefix)
        self.router = Router(route_prefix, self.index)
        self.entry_document = entry_document.strip("/")
        self.on_missing = on_missing
        logger.info(
            "Embedded UI mounted",
            route_prefix=route_prefix,
            resources=len(resources),
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        outcome = self.router.classify(request.method, path, str(request.url))

        if isinstance(outcome, Redirect):
            logger.debug("Redirecting to UI entry", location=outcome.location)
            return RedirectResponse(outcome.location, status_code=301)

        if isinstance(outcome, ServeAsset):
            return await respond(outcome.resource)

        if isinstance(outcome, ServeEntry):
            resource = self.index.resolve(outcome.path) or self.index.resolve(
                self.entry_document
            )
            if resource is not None:
                return await respond(resource)
            return await self._missing(request, call_next)

        if request.method == "GET" and self.router.in_namespace(path):
            return await self._missing(request, call_next)
        return await call_next(request)

    async def _missing(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if self.on_missing == "delegate":
            logger.debug("No embedded resource, delegating", path=path)
            return await call_next(request)
        logger.warning("No embedded resource for UI path", path=path)
        return error_response(
            "NOT_FOUND",
            "No embedded UI resource matches this path",
            404,
            details={"path": path},
        )


def embedded_ui(app: FastAPI, config: UIConfig, resources: ResourceSet | None = None) -> None:
    """Install the embedded UI on ``app`` from a ``UIConfig``.

    When ``resources`` is omitted the bundle is loaded from
    ``config.resource_package``.
    """
    if resources is None:
        resources = ResourceSet.from_package(
            config.resource_package, subdirectory=config.resource_root
        )
    app.add_middleware(
        EmbeddedUIMiddleware,
        resources=resources,
        route_prefix=config.route_prefix,
        entry_document=config.entry_document,
        on_missing=config.on_missing,
    )
