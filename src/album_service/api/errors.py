"""
album_service.api.errors

Exception handlers translating failures into JSON `{message, error?}` bodies.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from album_service.errors import AppError, InternalFailure, ValidationFailure
from album_service.observability.logging import get_logger

log = get_logger(__name__)


def _summarize(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await app_error_handler(request, ValidationFailure(error=_summarize(exc)))


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    log.error("store_error", error_type=type(exc).__name__, exc_info=exc)
    return await app_error_handler(request, InternalFailure())


async def unhandled_error_handler(_: Request, __: Exception) -> JSONResponse:
    # Already logged with request context by RequestContextMiddleware.
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, store_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)


# --- Module Notes -----------------------------------------------------------
# Handlers never echo exception text to the client; details go to the log only.
