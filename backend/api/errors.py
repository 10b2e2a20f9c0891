"""
API error handling.

Maps TaskboardError subclasses to their HTTP status and the standard
error body, and turns anything unexpected into a generic 500.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    ServerError,
    TaskboardError,
    ValidationError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


@contextmanager
def guard_operation(message: str) -> Iterator[None]:
    """
    Wrap a route body so unexpected failures surface as ServerError.

    Domain errors pass through untouched. Anything else is logged with its
    traceback and replaced by a ServerError carrying only ``message``.
    """
    try:
        yield
    except TaskboardError:
        raise
    except Exception as e:
        logger.exception(message)
        raise ServerError(message) from e


def error_response(exc: TaskboardError) -> JSONResponse:
    body = ErrorResponse(**exc.to_dict())
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=headers,
    )


def request_validation_details(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group FastAPI's validation errors by the offending field name."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = loc[-1] if loc else "body"
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return details


async def handle_taskboard_error(request: Request, exc: Any) -> JSONResponse:
    return error_response(exc)


async def handle_request_validation_error(request: Request, exc: Any) -> JSONResponse:
    return error_response(
        ValidationError("Validation failed", details=request_validation_details(exc))
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(TaskboardError, handle_taskboard_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
