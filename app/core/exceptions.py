# app/core/exceptions.py

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from starlette.exceptions import HTTPException


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(AppError):
    """Malformed identifier or missing required field."""
    status_code = status.HTTP_400_BAD_REQUEST


class Conflict(AppError):
    """Duplicate unique value. Reported as 400 on the wire."""
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


# ------------------------------------------------------------
# VALIDATION MESSAGES
# ------------------------------------------------------------
_MISSING_TYPES = {"missing", "string_too_short"}


def _field_name(loc) -> str:
    # loc looks like ("body", "name") or ("name",)
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "form")]
    return ".".join(parts) or "body"


def validation_message(errors) -> str:
    missing = [_field_name(e["loc"]) for e in errors if e["type"] in _MISSING_TYPES]
    if missing:
        return "Required fields are missing: " + ", ".join(missing)

    first = errors[0]
    return f"Invalid value for {_field_name(first['loc'])}: {first['msg']}"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ------------------------------------------------------------
# HANDLERS
# ------------------------------------------------------------
async def app_error_handler(request: Request, exc: AppError):
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _error(status.HTTP_400_BAD_REQUEST, validation_message(exc.errors()))


async def pydantic_validation_handler(request: Request, exc: ValidationError):
    return _error(status.HTTP_400_BAD_REQUEST, validation_message(exc.errors()))


async def http_exception_handler(request: Request, exc: HTTPException):
    return _error(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
