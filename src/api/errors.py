"""Translate exceptions into the `{message, success}` response envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.models import ErrorResponse
from src.core.exceptions import (
    ConflictError,
    GameError,
    InvalidRequestError,
    NotFoundError,
)
from src.core.shared_types import ErrorKind, Message

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
    """Domain errors keep a stable envelope; the finer ErrorKind only goes to the log."""
    if isinstance(exc, InvalidRequestError):
        status_code, message = (
            status.HTTP_400_BAD_REQUEST,
            f"{Message.VALIDATION_ERROR}: {exc}",
        )
    elif isinstance(exc, NotFoundError):
        status_code, message = status.HTTP_404_NOT_FOUND, Message.NOT_FOUND
    elif isinstance(exc, ConflictError):
        status_code, message = status.HTTP_409_CONFLICT, Message.CONFLICT
    else:
        logger.error(
            "[%s] %s %s failed: %s",
            exc.kind,
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, Message.INTERNAL_SERVER_ERROR
        )

    logger.warning("[%s] %s %s: %s", exc.kind, request.method, request.url.path, exc)
    return error_response(status_code, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """
    Anything that is not a GameError.
    ----
    Starlette runs this handler in its outermost middleware and re-raises the exception after the
    response is sent, so the server logs the traceback. Only the error kind is logged here.
    """
    logger.error(
        "[%s] %s %s failed: %s",
        ErrorKind.INTERNAL,
        request.method,
        request.url.path,
        type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, Message.INTERNAL_SERVER_ERROR
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Anything wrong with the body is `invalid_json`; bad query parameters are `invalid_request`."""
    in_body = any(error.get("loc", ("",))[0] == "body" for error in exc.errors())
    message = Message.INVALID_JSON if in_body else Message.INVALID_REQUEST
    logger.warning(
        "[%s] %s %s: %s",
        ErrorKind.VALIDATION,
        request.method,
        request.url.path,
        message,
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = Message.METHOD_NOT_ALLOWED
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        message = Message.NOT_FOUND
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        RequestValidationError, handle_validation_error  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        StarletteHTTPException, handle_http_error  # type: ignore[arg-type]
    )
    app.add_exception_handler(GameError, handle_game_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
