"""Error Handlers — global exception handlers for the User Records API.

Invariants:
    - UserApiError → envelope with success=False, message, error block
    - RequestValidationError → 400 "Invalid JSON format" (body unparsable or not an object)
    - Starlette 400 (body parse failure) → 400 "Invalid JSON format"
    - Starlette 404/405 → 404 "Route not found"
    - Exception (catch-all) → 500, never leaks internal details unless configured

Design Decisions:
    - Four-layer handler: domain (UserApiError), payload (RequestValidationError),
      routing (HTTPException), catch-all (Exception)
    - Extracted from main.py: keeps the app factory short
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.errors import (
    ErrorContext, ErrorSeverity, InternalServerError, MalformedPayloadError,
    RouteNotFoundError, UserApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(exc: UserApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_user_api_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Handle all User Records API errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.INFO
        )
        logger.log(
            level,
            f"UserApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "user_id": exc.context.user_id,
            },
        )
        return _error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register malformed payload handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body could not be decoded into candidate fields."""
        logger.warning(
            f"Malformed payload on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return _error_response(
            MalformedPayloadError(ErrorContext(path=request.url.path)),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes/methods → not-found; body parse failures → malformed."""
        if exc.status_code == status.HTTP_400_BAD_REQUEST:
            logger.warning(
                f"Unparsable body on {request.url.path}: {exc.detail}",
                extra={"path": request.url.path, "method": request.method},
            )
            return _error_response(
                MalformedPayloadError(ErrorContext(path=request.url.path)),
            )
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            logger.info(
                f"Route not found: {request.method} {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return _error_response(
                RouteNotFoundError(ErrorContext(path=request.url.path)),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        settings = request.app.state.settings
        detail = str(exc) if settings.expose_error_details else None
        return _error_response(
            InternalServerError(detail, ErrorContext(path=request.url.path)),
        )
