"""Error Handlers — global exception handlers for the Dogs API.

Invariants:
    - KennelError → structured JSON with error code, message, severity
    - RequestValidationError → field-level error details (400); under /dogs the
      body is {"errors": [...]}, the same shape the dog routes reject with
    - Exception (catch-all) → never leaks internal details (500)

Design Decisions:
    - Three-layer handler: domain (KennelError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py so tests can mount the handlers on a bare app
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.dog_validation import BODY_NOT_JSON_MESSAGE, BODY_NOT_OBJECT_MESSAGE
from app.core.errors import KennelError, ErrorSeverity

logger = logging.getLogger(__name__)

DOGS_PATH_PREFIX = "/dogs"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_kennel_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_kennel_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(KennelError)
    async def kennel_error_handler(request: Request, exc: KennelError):
        """Handle all Dogs API domain/infrastructure errors."""
        logger.error(
            f"KennelError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
                "dog_id": exc.context.dog_id,
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
        """Handle malformed or non-object request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        if request.url.path.startswith(DOGS_PATH_PREFIX):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"errors": _dog_body_errors(exc)},
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
            extra={"path": request.url.path, "method": request.method},
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


def _dog_body_errors(exc: RequestValidationError) -> list[str]:
    """Flatten validation errors into the dog routes' human-readable strings."""
    errors: list[str] = []
    for e in exc.errors():
        if e["type"] == "json_invalid":
            message = BODY_NOT_JSON_MESSAGE
        elif e["type"] == "dict_type":
            message = BODY_NOT_OBJECT_MESSAGE
        else:
            field = ".".join(str(loc) for loc in e["loc"])
            message = f"{field}: {e['msg']}"
        if message not in errors:
            errors.append(message)
    return errors
