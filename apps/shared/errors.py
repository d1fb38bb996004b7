"""
Error taxonomy and secure error handling

Application errors carry their HTTP status and are turned into failure
envelopes by the handlers registered in register_exception_handlers().
Internal details are logged server-side and never returned to clients.
"""

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.shared.responses import error_response

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto a failure envelope."""

    status_code = 500

    def __init__(self, message: str, details: Optional[list[dict]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class ValidationError(AppError):
    """Malformed or constraint-violating input."""

    status_code = 400


class NotFoundError(AppError):
    """An id or object name that does not resolve."""

    status_code = 404


class StorageError(AppError):
    """The persistence or object-storage backend failed."""

    status_code = 500


def log_and_sanitize_error(
    error: Exception,
    context: str,
    user_message: Optional[str] = None
) -> tuple[str, str]:
    """
    Log full error details server-side and return sanitized message for client.

    Args:
        error: The exception that occurred
        context: Description of what operation failed (e.g., "update blog 12")
        user_message: Optional custom message to show user. If None, uses generic message.

    Returns:
        Tuple of (sanitized_message, error_id) for client response
    """
    # Generate unique error ID for correlation
    error_id = str(uuid.uuid4())[:8]

    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error,
    )

    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id


def validation_details(errors) -> list[dict]:
    """Flatten pydantic/FastAPI error entries into [{field, message}]."""
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        message = err.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"field": ".".join(loc) or "body", "message": message})
    return details


def _request_error_message(errors) -> str:
    if not errors:
        return "Validation failed"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON format"
    source = first.get("loc", ("body",))[0]
    if source == "query":
        return "Invalid query parameters"
    if source == "path":
        if "id" in first.get("loc", ()):
            return "Invalid ID parameter. Must be a positive integer."
        return "Invalid path parameter"
    return "Validation failed"


def register_exception_handlers(app: FastAPI) -> None:
    """Normalize every error raised while serving a request into the envelope."""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        return error_response(exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        return error_response(400, _request_error_message(errors), validation_details(errors))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = "Route not found"
        else:
            message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(exc.status_code, message)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        log_and_sanitize_error(exc, f"{request.method} {request.url.path}")
        return error_response(500, "Internal server error")
