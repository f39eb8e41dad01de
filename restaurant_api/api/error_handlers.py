"""Error Handlers — global exception handlers for the restaurant API.

Invariants:
    - RestaurantError → its http_status with {"status": "error", "message": ...}
    - RequestValidationError → 400 naming the malformed identifier
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (RestaurantError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from restaurant_api.core.errors import RestaurantError

logger = logging.getLogger(__name__)

# Path parameter name → wording used in the 400 message
_PARAM_LABELS = {"table_id": "table ID", "item_id": "item ID"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_restaurant_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_restaurant_error_handler(app: FastAPI) -> None:
    """Register restaurant domain/store error handler."""

    @app.exception_handler(RestaurantError)
    async def restaurant_error_handler(request: Request, exc: RestaurantError):
        """Handle all restaurant domain/store errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        message = f"RestaurantError: {exc.message}"
        detail = exc.detail_for_log
        if detail and detail not in exc.message:
            message += f" ({detail})"
        logger.log(
            level, message,
            extra={**exc.log_extra(), **_request_extra(request)},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed path identifiers."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra=_request_extra(request),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra=_request_extra(request),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": "An unexpected error occurred",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 envelope from the first failing field."""
    errors = exc.errors()
    field = str(errors[0]["loc"][-1]) if errors and errors[0]["loc"] else "request"
    label = _PARAM_LABELS.get(field, field)
    return {
        "status": "error",
        "message": f"Invalid {label}. Must be a valid positive integer.",
    }


def _request_extra(request: Request) -> dict:
    """Request fields surfaced by the JSON log formatter."""
    return {"path": request.url.path, "method": request.method}
