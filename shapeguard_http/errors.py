from __future__ import annotations

from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from shapeguard import GuardRejectedError
from shapeguard_http.models import ErrorResponse


class MalformedJSONError(ValueError):
    """Raised when a request or response body cannot be decoded as JSON."""


async def guard_rejected_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, GuardRejectedError):
        return await unhandled_exception_handler(request, exc)
    payload = ErrorResponse(
        error=str(exc),
        code="INVALID_REQUEST",
        details={"guard": exc.guard_name, "type": exc.value_type},
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=422, content=payload.model_dump(mode="json"))


async def malformed_json_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, MalformedJSONError):
        return await unhandled_exception_handler(request, exc)
    payload = ErrorResponse(
        error=str(exc),
        code="MALFORMED_JSON",
        details=None,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=400, content=payload.model_dump(mode="json"))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    payload = ErrorResponse(
        error="Internal server error",
        code="INTERNAL_ERROR",
        details={"type": type(exc).__name__},
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))
