"""Error Handlers: failure responses and global exception handlers for the Roster API.

Invariants:
    - legacy mode: every failure → 500 with text body "Error!" (no detail, no code)
    - typed mode: RosterError → its http_status + JSON envelope;
      RequestValidationError → 400 with field details; anything else → 500 envelope
    - Catch-all never leaks internal details in either mode

Design Decisions:
    - build_failure_response shared by route handlers and global handlers,
      so the error mode is honored no matter where a failure is caught
    - Error mode read from app.state.settings: tests build apps in either mode
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.exceptions import RequestValidationError

from app.config import Settings
from app.core.domain_types import ErrorMode
from app.core.errors import RosterError, ErrorSeverity

logger = logging.getLogger(__name__)

LEGACY_FAILURE_BODY = "Error!"


def build_failure_response(exc: Exception, error_mode: ErrorMode) -> Response:
    """Turn any exception into the client-facing failure response."""
    if error_mode == ErrorMode.LEGACY:
        return PlainTextResponse(
            LEGACY_FAILURE_BODY,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    if isinstance(exc, RosterError):
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )
    if isinstance(exc, RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def error_mode_of(request: Request) -> ErrorMode:
    settings: Settings = request.app.state.settings
    return settings.error_mode


def log_failure(request: Request, exc: Exception) -> None:
    """Log a failure with its error code, keeping tracebacks for unexpected ones."""
    if isinstance(exc, RosterError):
        logger.error(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "event_id": exc.context.event_id,
                "attendee_id": exc.context.attendee_id,
            },
        )
    else:
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path},
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_roster_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_roster_error_handler(app: FastAPI) -> None:
    """Register Roster domain/infrastructure error handler."""

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError):
        """Handle Roster errors that escaped a route handler."""
        log_failure(request, exc)
        return build_failure_response(exc, error_mode_of(request))


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request bodies FastAPI could not decode."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return build_failure_response(exc, error_mode_of(request))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        log_failure(request, exc)
        return build_failure_response(exc, error_mode_of(request))


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }


def handler_failure(request: Request, exc: Exception) -> Response:
    """Failure branch of every route handler: log, then respond per error mode."""
    log_failure(request, exc)
    return build_failure_response(exc, error_mode_of(request))
