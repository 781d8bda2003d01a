"""
Error responses for the API.

Every error body is an envelope of the form {"error": <message or field map>}.
Store errors are mapped to status codes here so route handlers only need to
let them propagate.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviedb.database.errors import EditConflictError, RecordNotFoundError, StoreError

logger = logging.getLogger(__name__)


NOT_FOUND_MESSAGE = "the requested resource could not be found"
EDIT_CONFLICT_MESSAGE = "unable to update the record due to an edit conflict, please try again"
SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"


class FailedValidationError(Exception):
    """Request data broke one or more business rules."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("failed validation")
        self.errors = errors


def error_response(status_code: int, message: Any, headers: Dict[str, str] | None = None) -> JSONResponse:
    """Build a JSON error envelope."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_request_error(exc: RequestValidationError) -> str:
    """Turn the first request parsing error into a client message."""
    errors = exc.errors()
    if not errors:
        return "body contains badly-formed JSON"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "body contains badly-formed JSON"
    if first.get("type") == "extra_forbidden":
        return f"body contains unknown key {str(first['loc'][-1])!r}"
    if first.get("type") == "missing" and tuple(first.get("loc", ())) == ("body",):
        return "body must not be empty"

    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    if field:
        return f"body contains incorrect JSON type for field {field!r}"
    return "body contains incorrect JSON type"


async def not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)


async def edit_conflict_handler(request: Request, exc: EditConflictError) -> JSONResponse:
    return error_response(status.HTTP_409_CONFLICT, EDIT_CONFLICT_MESSAGE)


async def failed_validation_handler(request: Request, exc: FailedValidationError) -> JSONResponse:
    return error_response(422, exc.errors)


async def bad_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_request_error(exc))


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(
        f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {exc.__class__.__name__} on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = NOT_FOUND_MESSAGE
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = f"the {request.method} method is not supported for this resource"
    else:
        message = exc.detail
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


def register_error_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on the app."""
    app.add_exception_handler(RecordNotFoundError, not_found_handler)
    app.add_exception_handler(EditConflictError, edit_conflict_handler)
    app.add_exception_handler(FailedValidationError, failed_validation_handler)
    app.add_exception_handler(RequestValidationError, bad_request_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
