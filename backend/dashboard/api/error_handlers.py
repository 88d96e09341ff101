"""Error Handlers — global exception handlers for the dashboard API.

Invariants:
    - DashboardError → structured JSON with error code, message, severity
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (DashboardError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from dashboard.core.errors import DashboardError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(DashboardError, dashboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def dashboard_error_handler(request: Request, exc: DashboardError):
    """Handle all dashboard domain/infrastructure errors."""
    logger.error(
        f"DashboardError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
):
    """Handle Pydantic request validation errors."""
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_build_validation_error_response(exc),
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True, extra={"path": request.url.path},
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


def _build_validation_error_response(exc: RequestValidationError) -> dict:
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
