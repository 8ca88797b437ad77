"""
Centralized error handlers for FastAPI.

Maps library domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share the ``{"error": <code>, "message": <text>}`` shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from library_api.domain.library.errors import (
    ConflictError,
    LibraryDomainError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_409 = 409
HTTP_429 = 429
HTTP_500 = 500

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(
    status_code: int,
    error: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message},
        headers=headers,
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten Pydantic errors into one readable line."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Validation failed"


def register_error_handlers(app: FastAPI, realm: str = "library-app") -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        realm: Realm advertised in the ``WWW-Authenticate`` header of 401s.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle invalid input rejected by a service or handler."""
        logger.warning("Validation failed: %s", exc.message)
        return _error_response(HTTP_400, "validation_error", exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request bodies that do not match the expected schema."""
        message = _describe_validation_errors(exc)
        logger.warning("Request validation failed: %s", message)
        return _error_response(HTTP_400, "validation_error", message)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(
        _request: Request, exc: UnauthorizedError
    ) -> JSONResponse:
        """Handle failed credential or bearer token checks."""
        logger.warning("Unauthorized: %s", exc.message)
        return _error_response(
            HTTP_401,
            "unauthorized",
            exc.message,
            headers={"WWW-Authenticate": f'Bearer realm="{realm}"'},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(
        _request: Request, exc: NotFoundError
    ) -> JSONResponse:
        """Handle lookups of unknown ids."""
        logger.info("Not found: %s", exc.message)
        return _error_response(HTTP_404, "not_found", exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(
        _request: Request, exc: ConflictError
    ) -> JSONResponse:
        """Handle uniqueness and referential constraint violations."""
        logger.warning("Conflict: %s", exc.message)
        return _error_response(HTTP_409, "conflict", exc.message)

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(
        _request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        """Handle clients exceeding the configured rate limit."""
        logger.warning("Rate limit exceeded: %s", exc.detail)
        return _error_response(
            HTTP_429, "rate_limited", f"Rate limit exceeded: {exc.detail}"
        )

    @app.exception_handler(LibraryDomainError)
    async def handle_library_domain(
        _request: Request, exc: LibraryDomainError
    ) -> JSONResponse:
        """Catch-all for unclassified library domain errors."""
        logger.error("Unhandled library domain error: %s", exc.message)
        return _error_response(HTTP_500, "internal_error", INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "internal_error", INTERNAL_ERROR_MESSAGE)
