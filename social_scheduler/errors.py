"""
Social Scheduler error taxonomy and the handlers that turn errors into JSON.

Every error response has the same body: ``{"error": <message>, "error_code": <code>}``.
"""
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging_config import api_logger


# ============================================================
# SERVICE ERRORS
# ============================================================

class ServiceError(Exception):
    """Base class for errors raised by the domain services."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(ServiceError):
    """Missing or malformed required input."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class NotFound(ServiceError):
    """A referenced entity id does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, id: Optional[str] = None):
        self.resource = resource
        self.id = id
        super().__init__(f"{resource} not found", {"id": id} if id else None)


class StoreError(ServiceError):
    """Underlying persistence failure."""

    status_code = 500
    error_code = "STORE_ERROR"


def require(value: Any, field_name: str) -> Any:
    """Require a field to be present and, for strings, non-blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required", {"field": field_name})
    return value


# ============================================================
# EXCEPTION HANDLERS
# ============================================================

def error_body(message: str, error_code: str) -> Dict[str, Any]:
    return {"error": message, "error_code": error_code}


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        api_logger.error(
            f"Store error: {exc.message}",
            error=exc.__cause__ or exc,
            path=request.url.path,
        )
    else:
        api_logger.warning(
            f"API Error: {exc.message}",
            status_code=exc.status_code,
            error_code=exc.error_code,
            path=request.url.path,
        )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.error_code))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors (400), not 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    api_logger.warning(f"Request validation failed: {message}", path=request.url.path)
    return JSONResponse(status_code=400, content=error_body(message, "VALIDATION_ERROR"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    api_logger.warning(
        f"HTTP Error: {exc.detail}",
        status_code=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), f"HTTP_{exc.status_code}"),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    api_logger.error(f"Unexpected error: {exc}", error=exc, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body("An unexpected error occurred", "INTERNAL_ERROR"),
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
