# =============================================================================
# app/exceptions.py - Custom Exceptions and Error Catchers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the API in the same JSON shape:
#
#   {"code": 404, "name": "Not Found", "message": "Four, oh four!"}
#
# Application exceptions may add "suggestion" and "details" keys.
# =============================================================================

import logging
from http import HTTPStatus
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


NOT_FOUND_MESSAGE = "Four, oh four!"
UNPROCESSABLE_MESSAGE = (
    "The request was well-formed but was unable to be followed due to semantic errors."
)


class ApiError(BaseModel):
    """Error body returned by every catcher."""
    code: int
    name: str
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = None


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_response(
    status_code: int,
    message: str,
    suggestion: str | None = None,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build an ApiError JSON response for a status code."""
    error = ApiError(
        code=status_code,
        name=_reason(status_code),
        message=message,
        suggestion=suggestion,
        details=details or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(exclude_none=True),
        headers=headers,
    )


class TaskboardException(Exception):
    """
    Base exception for the Taskboard API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "TASKBOARD_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "code": self.status_code,
            "name": _reason(self.status_code),
            "message": self.message,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Task Exceptions
# =============================================================================

class TaskNotFoundError(TaskboardException):
    """Raised when a task ID doesn't exist."""

    def __init__(self, task_id: int):
        super().__init__(
            message=NOT_FOUND_MESSAGE,
            code="TASK_NOT_FOUND",
            status_code=404,
            suggestion="List tasks with GET /api/todos to find a valid id",
            details={"task_id": task_id}
        )


class StorageError(TaskboardException):
    """
    Raised when the database fails while running a task store operation.

    Never used for missing rows; those are reported as None/False.
    """

    def __init__(self, operation: str, error: Exception, status_code: int = 500):
        super().__init__(
            # The driver error (with its SQL) is logged, never sent to clients
            message=f"Storage failure during {operation}",
            code="STORAGE_ERROR",
            status_code=status_code,
            suggestion="Try again later or check the database connection settings",
            details={"operation": operation, "error": type(error).__name__}
        )
        self.operation = operation
        self.error = error


# =============================================================================
# Exception Handlers
# =============================================================================

async def taskboard_exception_handler(
    request: Request,
    exc: TaskboardException
) -> JSONResponse:
    """Convert TaskboardException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Catch framework-raised HTTP errors.

    Unmatched routes and forwarded guards arrive here as 404.
    """
    if exc.status_code == 404:
        message = NOT_FOUND_MESSAGE
    elif isinstance(exc.detail, str):
        message = exc.detail
    else:
        message = _reason(exc.status_code)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Malformed JSON bodies, missing form fields and bad query values all
    end up here as 422.
    """
    logger.debug(f"Validation failed on {request.method} {request.url.path}: {exc.errors()}")
    return error_response(
        422,
        UNPROCESSABLE_MESSAGE,
        details={
            "errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in exc.errors()
            ]
        },
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return error_response(500, "An unexpected error occurred")
