"""Application exception hierarchy and the handlers that render it."""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse, Response
from redis.exceptions import RedisError
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BAD_REQUEST_MESSAGE = "bad request format"


class FilmLibraryError(Exception):
    """Base error carrying the HTTP status it should be reported with."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        result = {"error": True, "message": self.message}
        if self.data is not None:
            result["data"] = self.data
        return result


class RequestFormatError(FilmLibraryError):
    status_code = 400

    def __init__(self, message: str = BAD_REQUEST_MESSAGE, data: Any = None):
        super().__init__(message, data=data)


class Unauthorized(FilmLibraryError):
    status_code = 401

    def __init__(self, message: str = "unauthorized"):
        super().__init__(message)


class Forbidden(FilmLibraryError):
    """Policy denial. Rendered without a body."""

    status_code = 403

    def __init__(self, message: str = "forbidden"):
        super().__init__(message)


class RedirectRequired(FilmLibraryError):
    """No session cookie on a non-public path; the client is sent to ``location``."""

    status_code = 308

    def __init__(self, location: str):
        super().__init__("authentication required")
        self.location = location


class PolicyError(FilmLibraryError):
    status_code = 500


class SessionError(FilmLibraryError):
    status_code = 500


class SessionNotFound(SessionError):
    def __init__(self, message: str = "session not found"):
        super().__init__(message)


class SessionCorrupt(SessionError):
    def __init__(self, message: str = "session payload is corrupt"):
        super().__init__(message)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": True, "message": message}, headers=headers)


def render_error(exc: FilmLibraryError) -> Response:
    if isinstance(exc, Forbidden):
        return Response(status_code=exc.status_code)
    if isinstance(exc, RedirectRequired):
        return RedirectResponse(exc.location, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def filmlibrary_error_handler(request: Request, exc: FilmLibraryError):
    return render_error(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    locations = [err.get("loc") for err in exc.errors()]
    logger.info("invalid request on %s %s: %s", request.method, request.url.path, locations)
    return error_response(400, BAD_REQUEST_MESSAGE)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    if isinstance(exc, NoResultFound):
        return error_response(500, "no rows in result set")
    logger.warning("storage error on %s %s: %s", request.method, request.url.path, exc.__class__.__name__)
    return error_response(500, "storage error")


async def redis_error_handler(request: Request, exc: RedisError):
    logger.warning("session store error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(500, "session store unavailable")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FilmLibraryError, filmlibrary_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(RedisError, redis_error_handler)
