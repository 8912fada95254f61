# File: taskboard/core/errors.py

"""
Error taxonomy for the Taskboard API.

Services raise these; ``register_exception_handlers`` turns them into
``{"detail": ...}`` JSON responses with the matching status code.
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskboard.core.config import settings

logger = logging.getLogger(__name__)


class TaskboardError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class UnauthorizedError(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authorized"


class InvalidTokenError(UnauthorizedError):
    default_detail = "Not authorized, token failed"


class ForbiddenError(TaskboardError):
    # Wrong owner is reported the same way as a bad token.
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "User not authorized"


class NotFoundError(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "User already exists"


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        msg = err.get("msg", "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def taskboard_error_handler(request: Request, exc: TaskboardError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _format_validation_errors(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content = {"detail": str(exc) or exc.__class__.__name__}
    if not settings.is_production:
        content["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskboardError, taskboard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
