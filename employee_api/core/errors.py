from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from employee_api.schemas.employee import ErrorResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Error raised by request handlers. Rendered as:
      {"success": false, "message": "...", "error": "..."}
    where "error" is only present when there is underlying error text.
    """

    def __init__(self, status_code: int, message: str, error: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error


def not_found() -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, "Employee not found")


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """
    Convert store failures raised inside the block into a 500 ApiError
    carrying the raw error text.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s", message)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, message, error=str(exc)) from exc


def _render(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.error)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return _render(exc.status_code, exc.message, exc.error)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
    return _render(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return _render(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
