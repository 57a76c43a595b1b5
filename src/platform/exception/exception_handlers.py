import math
from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import (
    CustomBaseError,
    PersistenceError,
    RateLimitExceededError,
)
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    headers: dict[str, str] | None = None

    if isinstance(error, PersistenceError):
        # Storage text stays in the logs
        Logger.base.error(f'[PERSISTENCE] {error}')
    elif isinstance(error, RateLimitExceededError) and error.retry_after_ms:
        headers = {'Retry-After': str(math.ceil(error.retry_after_ms / 1000))}

    return JSONResponse(
        status_code=error.status_code,
        content={'kind': error.kind, 'detail': error.message},
        headers=headers,
    )


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'kind': 'validation', 'detail': str(exc)},
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'kind': 'validation', 'detail': jsonable_errors(error.errors())},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'kind': 'internal', 'detail': 'Internal server error'},
    )


def jsonable_errors(errors: Any) -> list[dict[str, Any]]:
    """Drop non-serializable `ctx`/`input` payloads from pydantic error entries."""
    return [
        {key: value for key, value in error.items() if key in ('type', 'loc', 'msg')}
        for error in errors
    ]


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
