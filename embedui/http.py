"""HTTP middleware, error envelopes and exception handlers for the host app."""

from __future__ import annotations

import re
import time
import uuid

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from embedui.models import ErrorDetail, ErrorResponse

logger = structlog.get_logger(__name__)

_CODE_MAP = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    500: "INTERNAL_ERROR",
}


def error_response(
    code: str, message: str, status_code: int, details: dict | None = None
) -> JSONResponse:
    """Build a JSON response carrying the structured error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=ErrorDetail(code=code, message=message, details=details)
        ).model_dump(),
    )


REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,128}")


def request_id_for(request: Request) -> str:
    """Reuse a well-formed incoming request id, or mint a new one."""
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    if _REQUEST_ID_PATTERN.fullmatch(incoming):
        return incoming
    return uuid.uuid4().hex


async def request_logging_middleware(request: Request, call_next):
    """Log one line per request with its id bound into the log context.

    The id is echoed back in the ``X-Request-ID`` response header so a
    browser request can be matched to its log lines.
    """
    request_id = request_id_for(request)
    structlog.contextvars.bind_contextvars(
        request_id=request_id, method=request.method, path=request.url.path
    )
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request failed", elapsed_ms=_elapsed_ms(started))
        raise
    else:
        response.headers[REQUEST_ID_HEADER] = request_id
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "Request handled",
            status_code=response.status_code,
            elapsed_ms=_elapsed_ms(started),
        )
        return response
    finally:
        structlog.contextvars.clear_contextvars()


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        return JSONResponse(status_code=exc.status_code, content=exc.detail)
    code = _CODE_MAP.get(exc.status_code, "INTERNAL_ERROR")
    return error_response(code, str(exc.detail), exc.status_code)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response("INTERNAL_ERROR", "Internal server error", 500)
