"""
Application error taxonomy.

Every error raised on purpose by a controller derives from AppError and is
rendered by the registered handlers as {"message": ..., "success": false}.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

logger = get_logger("errors")


class AppError(Exception):
    """Base class for user-facing errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Missing or malformed input."""


class ConflictError(AppError):
    """Resource already exists (e.g. duplicate email)."""


class AuthError(AppError):
    """Bad credentials, role mismatch or invalid session token."""


class NotFoundError(AppError):
    """Referenced entity does not exist."""


class UploadError(AppError):
    """The remote media host failed to store a file."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_body(message: str) -> dict:
    return {"message": message, "success": False}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Only location and type: the rejected input may be a password
    problems = [(error.get("loc"), error.get("type")) for error in exc.errors()]
    logger.info(f"Rejected malformed request to {request.url.path}: {problems}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request payload."),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal Server Error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to a FastAPI app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
