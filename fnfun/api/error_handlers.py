"""Error Handlers — map FnFun errors, request validation and crashes to one envelope.

Invariants:
    - Every error response is {"error": {code, message, category, severity, ...}}
    - FnFunError responses carry the failing function's name and arity; the same
      two values are logged as structured extras
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, message never includes the exception text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from fnfun.core.errors import ErrorCategory, ErrorSeverity, FnFunError

logger = logging.getLogger(__name__)


def error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **details: object,
) -> dict:
    """Envelope for errors that are not FnFunError instances."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **details,
        },
    }


async def _fnfun_error(request: Request, exc: FnFunError) -> JSONResponse:
    logger.log(
        logging.WARNING if exc.http_status < 500 else logging.ERROR,
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "function_name": exc.context.function_name,
            "arity": exc.context.arity,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request on {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the FnFun, validation and catch-all handlers on the app."""
    app.add_exception_handler(FnFunError, _fnfun_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)
