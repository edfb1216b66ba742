# backend/core/errors.py
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import (
    ConnectionFailure,
    DuplicateKeyError,
    PyMongoError,
    ServerSelectionTimeoutError,
)

logger = logging.getLogger("core.errors")

# ============================================================
# 🧱 ERROR TAXONOMY
# ============================================================
class AppError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(AppError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    # 400 on the wire, clients already depend on it
    status_code = 400
    default_message = "User already exists"


class InternalError(AppError):
    status_code = 500


class ServiceUnavailableError(AppError):
    status_code = 503
    default_message = "Database unavailable"


class DatabaseTimeoutError(AppError):
    status_code = 504
    default_message = "Database operation timed out"


# ============================================================
# 🔁 PYMONGO -> TAXONOMY
# ============================================================
def translate_mongo_error(exc: PyMongoError) -> AppError:
    """Maps a driver error to the closest taxonomy bucket."""
    if isinstance(exc, DuplicateKeyError):
        return ConflictError()
    if isinstance(exc, ServerSelectionTimeoutError):
        return ServiceUnavailableError()
    if getattr(exc, "timeout", False):
        return DatabaseTimeoutError()
    if isinstance(exc, ConnectionFailure):
        return ServiceUnavailableError()
    return InternalError()


# ============================================================
# 📨 EXCEPTION HANDLERS
# ============================================================
def app_error_handler(request: Request, exc: AppError):
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"⚠️ Invalid request on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def register_exception_handlers(app):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, general_exception_handler)
