"""Error Handlers — global exception handlers for the StreamPay API.

Invariants:
    - StreamPayError → structured JSON with error code, message, severity
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (StreamPayError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from streampay.core.errors import StreamPayError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_streampay_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_streampay_error_handler(app: FastAPI) -> None:
    """Register StreamPay domain error handler."""

    @app.exception_handler(StreamPayError)
    async def streampay_error_handler(request: Request, exc: StreamPayError):
        """Handle all StreamPay domain errors."""
        logger.warning(
            f"StreamPayError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "stream_id": exc.context.stream_id,
            },
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
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={
                "error_code": "VALIDATION_ERROR",
                "path": request.url.path,
                "stream_id": _stream_id_from_body(exc.body),
            },
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


def _stream_id_from_body(body: object) -> int | None:
    """streamId of a single-stream request body, when it is a usable int."""
    if isinstance(body, dict):
        stream_id = body.get("streamId", body.get("stream_id"))
        if isinstance(stream_id, int) and not isinstance(stream_id, bool):
            return stream_id
    return None


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "context": {"stream_id": _stream_id_from_body(exc.body)},
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
