from fastapi import Request, Response

from filmlibrary.core.errors import RequestFormatError
from filmlibrary.crud.sessions import SESSION_TTL_SECONDS
from filmlibrary.core.auth import SESSION_COOKIE


def require_json(request: Request) -> None:
    content_type = request.headers.get("content-type", "")
    if content_type.split(";", 1)[0].strip().lower() != "application/json":
        raise RequestFormatError()


def set_session_cookie(response: Response, session_key: str) -> None:
    response.set_cookie(
        SESSION_COOKIE,
        session_key,
        max_age=SESSION_TTL_SECONDS,
        expires=SESSION_TTL_SECONDS,
        httponly=True,
    )
