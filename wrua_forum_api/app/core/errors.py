"""
Error taxonomy and the FastAPI exception handlers that render it.

Services and endpoints raise the ``ForumError`` subclasses below; the
handlers registered by ``register_exception_handlers`` turn them into
``{"error": "<message>"}`` responses with the matching status code.
Request validation failures detected by FastAPI are reported as 400
with a readable summary of pydantic's error list.  Anything else is
logged with its traceback and answered with a generic 500.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ForumError(Exception):
    """Base error for all user-facing API exceptions."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ForumError):
    """Raised when a payload violates its schema."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ForumError):
    """Raised when credentials or the bearer token are missing or wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ForumError):
    """Raised when a presented token is malformed, expired or badly signed."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ForumError):
    """Raised when an id or slug has no matching row."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ForumError):
    """Raised when a write hits a known unique key."""

    status_code = status.HTTP_409_CONFLICT


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Join pydantic error entries into one human-readable sentence.

    ``body`` and ``query`` prefixes are dropped from the locations so
    that the message names the field the caller actually sent, e.g.
    ``Validation error: Field required at "email"``.
    """
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        msg = err.get("msg", "Invalid value")
        if loc:
            parts.append(f'{msg} at "{".".join(loc)}"')
        else:
            parts.append(msg)
    return "Validation error: " + "; ".join(parts)


def _error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def forum_error_response(exc: ForumError) -> JSONResponse:
    """Render a ``ForumError`` outside of the exception handlers, e.g. from middleware."""
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return _error_response(exc.status_code, exc.message, headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""

    @app.exception_handler(ForumError)
    async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
        return forum_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, format_validation_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
