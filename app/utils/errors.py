# app/utils/errors.py
# Error taxonomy and the handlers that turn it into JSON responses

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.config.settings import settings

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"

# Primary keys are 32-bit integers on every backend
MAX_ID = 2**31 - 1


class AppError(Exception):
    """Base class for failures that map onto an HTTP status"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An unexpected error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data."


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized, admin role required"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists."


class UnexpectedError(AppError):
    pass


def _sqlstate(exc: IntegrityError):
    orig = getattr(exc, "orig", None)
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == FOREIGN_KEY_VIOLATION
    return "FOREIGN KEY" in str(getattr(exc, "orig", exc)).upper()


def is_unique_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == UNIQUE_VIOLATION
    return "UNIQUE" in str(getattr(exc, "orig", exc)).upper()


def parse_id(raw_id: str, label: str = "suggestion") -> int:
    """Parse a numeric path id or raise ValidationError"""
    try:
        return int(raw_id)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} ID provided.")


def id_in_range(value: int) -> bool:
    """Whether a parsed id can name a row at all"""
    return 0 < value <= MAX_ID


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data.", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    content = {"message": "Internal Server Error"}
    # Avoid sending error details outside development
    if settings.is_development:
        content["error"] = {"name": type(exc).__name__, "message": str(exc)}
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
