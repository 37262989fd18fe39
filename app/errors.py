"""Application errors and the handlers that render them.

Every failure leaves the API as ``{"errors": [{"msg": ...}, ...]}``.
"""

from __future__ import annotations

import logging
from typing import Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg: str = "Server Error"

    def __init__(self, *messages: str) -> None:
        self.messages: list[str] = list(messages) or [self.default_msg]
        super().__init__("; ".join(self.messages))


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Invalid request"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "No Token provided, Authentication Denied"


class InvalidToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "Invalid Token, Authentication Denied"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "Invalid credentials"


class UserAlreadyExists(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "User is Already Exists"


class ProfileAlreadyExists(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Profile already exists for the User"


class AlreadyLiked(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Post has already been liked"


class NotLiked(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Post has not been liked"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_msg = "Not Found"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_msg = "User is not authorized"


class ConcurrentModification(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_msg = "Resource was modified by another request, retry"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg = "Server Error"


def error_body(messages: Iterable[str]) -> dict:
    return {"errors": [{"msg": msg} for msg in messages]}


def _location(loc: Iterable) -> str:
    parts = [str(p) for p in loc if p not in ("body", "path", "query", "header")]
    return ".".join(parts)


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.messages))


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body([str(exc.detail)]),
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        where = _location(err.get("loc", ()))
        msg = err.get("msg", "Invalid value")
        messages.append(f"{where}: {msg}" if where else msg)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(messages or ["Invalid request"]))


async def _stale_data_handler(request: Request, exc: StaleDataError) -> JSONResponse:
    logger.warning("concurrent write rejected path=%s", request.url.path)
    err = ConcurrentModification()
    return JSONResponse(status_code=err.status_code, content=error_body(err.messages))


async def _store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("store failure path=%s", request.url.path)
    err = InternalError()
    return JSONResponse(status_code=err.status_code, content=error_body(err.messages))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StaleDataError, _stale_data_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
