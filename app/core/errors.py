"""
Central error handling for the Factory Attendance Backend
"""
import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

logger = logging.getLogger(__name__)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
}


class AttendanceError(Exception):
    """Base class for attendance domain errors"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(AttendanceError):
    """
    A punch request is missing required fields or carries invalid values.

    Raised before any store access, so nothing is persisted.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, str]], detail: str = "Missing or invalid fields"):
        super().__init__(detail)
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        return [e["field"] for e in self.errors]


class InfrastructureError(AttendanceError):
    """
    The backing store could not be read, or the primary punch write failed.

    Safe to retry the whole punch: no partial PunchEvent is left behind.
    """

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, detail: str = "Attendance store unavailable", cause: Optional[BaseException] = None):
        super().__init__(detail)
        self.cause = cause


def _error_body(request: Request, status_code: int, detail: Any) -> Dict[str, Any]:
    return {
        "error": True,
        "status_code": status_code,
        "detail": detail,
        "path": str(request.url.path)
    }


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """
    Handle HTTPException with consistent JSON response format

    Args:
        request: FastAPI request object
        exc: HTTPException instance

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, exc.detail),
        headers={**_CORS_HEADERS, **(exc.headers or {})},
    )


async def attendance_exception_handler(request: Request, exc: AttendanceError) -> JSONResponse:
    """
    Handle domain errors raised by the attendance services

    ValidationError carries field-level detail; InfrastructureError only a generic
    message, the cause having been logged where it happened.
    """
    content = _error_body(request, exc.status_code, exc.detail)
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content, headers=_CORS_HEADERS)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle RequestValidationError with consistent JSON response format

    Does not leak internal validation details in production.
    """
    from app.core.config import settings

    if settings.APP_ENV == "prod":
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(request, 422, "Validation error: Invalid request data"),
        )

    # Sanitize for JSON: e.g. ctx.error ValueError -> str
    errors = []
    for e in exc.errors():
        err = dict(e)
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {
                k: (str(v) if not isinstance(v, (str, int, float, bool, type(None))) else v)
                for k, v in err["ctx"].items()
            }
        errors.append(err)
    content = _error_body(request, 422, "Validation error")
    content["errors"] = errors
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=content)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions with consistent JSON response format

    Does not leak internal error details in production.
    """
    from app.core.config import settings

    logger.error("Unhandled exception: %s", exc, exc_info=True)

    if settings.APP_ENV == "prod":
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(request, 500, "Internal server error"),
            headers=_CORS_HEADERS,
        )

    content = _error_body(request, 500, str(exc))
    content["traceback"] = traceback.format_exc() if settings.APP_ENV == "local" else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
        headers=_CORS_HEADERS,
    )
