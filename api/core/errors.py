"""
Failure taxonomy and the single place HTTP error statuses are chosen.

Every failure raised by a route, a service or the repository layer ends up
in `classify()`, which maps it to one `FailureKind`. The kind alone decides
the status code and the `{"msg": ...}` body, so all error responses share
one shape regardless of which route produced them.

Unmatched routes (unknown path, or known path with an unknown method) are
reported exactly like a missing resource.
"""

from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


_RESPONSES: dict[FailureKind, tuple[int, str]] = {
    FailureKind.INVALID_INPUT: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    FailureKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    FailureKind.UNEXPECTED: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"),
}

_ROUTE_MISS_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


class ApiError(Exception):
    """Base for failures a handler raises on purpose."""

    kind: FailureKind = FailureKind.UNEXPECTED

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.kind.value)
        # Logged only; never part of the response body.
        self.detail = detail


class InvalidInput(ApiError):
    kind = FailureKind.INVALID_INPUT


class NotFound(ApiError):
    kind = FailureKind.NOT_FOUND


def classify(exc: BaseException) -> FailureKind:
    if isinstance(exc, ApiError):
        return exc.kind
    if isinstance(exc, RequestValidationError):
        return FailureKind.INVALID_INPUT
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code in _ROUTE_MISS_STATUSES:
            return FailureKind.NOT_FOUND
        if 400 <= exc.status_code < 500:
            return FailureKind.INVALID_INPUT
    return FailureKind.UNEXPECTED


def status_for(kind: FailureKind) -> int:
    return _RESPONSES[kind][0]


def error_body(kind: FailureKind) -> dict[str, str]:
    return {"msg": _RESPONSES[kind][1]}


def error_response(kind: FailureKind) -> JSONResponse:
    return JSONResponse(status_code=status_for(kind), content=error_body(kind))


def _log_failure(request: Request, exc: BaseException, kind: FailureKind) -> None:
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status": status_for(kind),
        "failure_kind": kind.value,
    }
    if kind is FailureKind.UNEXPECTED:
        logger.error(
            "request_failed method=%s path=%s error=%r",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
            extra=extra,
        )
    else:
        logger.warning(
            "request_rejected method=%s path=%s kind=%s detail=%s",
            request.method,
            request.url.path,
            kind.value,
            exc,
            extra=extra,
        )


async def handle_failure(request: Request, exc: Exception) -> JSONResponse:
    kind = classify(exc)
    _log_failure(request, exc, kind)
    return error_response(kind)


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns any exception no handler claimed into the classified 500 response.

    Runs inside CORSMiddleware so error responses still carry CORS headers,
    and the exception stops here instead of reaching the server's own logger.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await handle_failure(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """
    Route every failure type through `handle_failure`.

    Call before adding CORSMiddleware: middleware added later wraps this one.
    """
    app.add_exception_handler(ApiError, handle_failure)
    app.add_exception_handler(RequestValidationError, handle_failure)
    app.add_exception_handler(StarletteHTTPException, handle_failure)
    app.add_middleware(UnexpectedErrorMiddleware)
