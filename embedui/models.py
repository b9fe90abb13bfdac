"""Pydantic models shared by the HTTP layer."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Structured error payload for API responses."""
    code: str
    message: str
    details: dict | None


class ErrorResponse(BaseModel):
    """Envelope for API error responses."""
    error: ErrorDetail


class HealthResponse(BaseModel):
    ok: bool
    version: str
    route_prefix: str
    resources: int
