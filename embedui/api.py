"""Host application API routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from embedui import __version__
from embedui.models import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check endpoint."""
    config = request.app.state.ui_config
    return HealthResponse(
        ok=True,
        version=__version__,
        route_prefix=config.route_prefix,
        resources=len(request.app.state.ui_resources),
    )
