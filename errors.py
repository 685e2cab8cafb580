# errors.py
"""Typed application errors and the handlers that turn them into responses.

Each error kind maps to exactly one status code through ``STATUS_BY_ERROR``.
Route handlers raise and never recover locally; the handlers registered by
``register_exception_handlers`` log and render ``{"message": ...}`` bodies.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError, PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(AppError):
    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource


class ConflictError(AppError):
    message = "Resource already exists"


class ValidationError(AppError):
    message = "Invalid request body"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class DatabaseUnavailableError(AppError):
    message = "Database unavailable"


STATUS_BY_ERROR = {
    NotFoundError: 404,
    ConflictError: 409,
    ValidationError: 400,
    DatabaseUnavailableError: 503,
}


def status_for(exc: AppError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return 500


def conflict_from_duplicate_key(exc: DuplicateKeyError) -> ConflictError:
    """Name the offending field when the driver reports it."""
    details = exc.details or {}
    fields = list((details.get("keyValue") or details.get("keyPattern") or {}).keys())
    if fields:
        return ConflictError(f"{fields[0]} already exists")
    return ConflictError()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    status_code = status_for(exc)
    body: Dict[str, Any] = {"message": exc.message}
    if isinstance(exc, ValidationError) and exc.errors:
        body["errors"] = exc.errors
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status_code, content=body)


async def duplicate_key_handler(request: Request, exc: DuplicateKeyError) -> JSONResponse:
    return await app_error_handler(request, conflict_from_duplicate_key(exc))


async def pymongo_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return await app_error_handler(request, DatabaseUnavailableError())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return await app_error_handler(request, ValidationError(errors=errors))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)
    app.add_exception_handler(PyMongoError, pymongo_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
