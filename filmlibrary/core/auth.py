"""Request authentication and authorization.

``resolve_identity`` turns the ``session-id`` cookie into an ``Identity``;
``enforce_policy`` asks the casbin enforcer whether that identity may
perform the request's method on its path. ``authorize_request`` runs both,
in that order, as an HTTP middleware stage, so they apply to every path
before routing and before any request body is decoded. Handlers receive
the resolved identity through ``current_identity``.
"""

import logging
from typing import Optional

import casbin
from fastapi import Request
from redis.exceptions import RedisError
from starlette.concurrency import run_in_threadpool

from filmlibrary.core.errors import (
    FilmLibraryError,
    Forbidden,
    PolicyError,
    RedirectRequired,
    SessionError,
    Unauthorized,
    render_error,
)
from filmlibrary.crud.sessions import SessionStorage
from filmlibrary.services.deps import session_hasher
from filmlibrary.services.sessions import SessionService

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session-id"
REGISTER_PATH = "/register"
PUBLIC_PATHS = frozenset({"/register", "/login", "/docs", "/swagger.yaml", "/health"})


class Identity:
    """Who is making the request: anonymous, a user, or an admin."""

    def __init__(self, username: Optional[str] = None, is_admin: bool = False):
        self.username = username
        self.is_admin = is_admin

    @property
    def subject(self) -> str:
        if self.username is None:
            return "anonymous"
        return "admin" if self.is_admin else "user"

    def __repr__(self):
        return f"Identity({self.subject}:{self.username})"


ANONYMOUS = Identity()


def load_enforcer(model: str, policy: str) -> casbin.Enforcer:
    enforcer = casbin.Enforcer(model, policy)
    enforcer.load_policy()
    logger.info("policy loaded from %s", policy)
    return enforcer


def resolve_identity(request: Request, sessions: SessionService) -> Identity:
    session_key = request.cookies.get(SESSION_COOKIE)
    if session_key is None:
        if request.url.path in PUBLIC_PATHS:
            return ANONYMOUS
        raise RedirectRequired(REGISTER_PATH)

    try:
        user = sessions.get(session_key)
    except (SessionError, RedisError) as exc:
        logger.info("session lookup failed for %s %s: %s", request.method, request.url.path, exc)
        # a stale cookie must not lock the client out of logging in again
        if request.url.path in PUBLIC_PATHS:
            return ANONYMOUS
        raise Unauthorized("session is missing or expired")
    return Identity(user.username, user.is_admin)


def enforce_policy(request: Request, identity: Identity, enforcer: casbin.Enforcer) -> Identity:
    sub, obj, act = identity.subject, request.url.path, request.method
    try:
        allowed = enforcer.enforce(sub, obj, act)
    except Exception as exc:
        logger.error("policy engine failed on (%s, %s, %s): %s", sub, obj, act, exc)
        raise PolicyError(str(exc))
    if not allowed:
        logger.info("denied %s %s for %s", act, obj, sub)
        raise Forbidden()
    return identity


async def authorize_request(request: Request, call_next):
    sessions = SessionService(SessionStorage(request.app.state.redis, session_hasher))
    try:
        identity = await run_in_threadpool(resolve_identity, request, sessions)
        enforce_policy(request, identity, request.app.state.enforcer)
    except FilmLibraryError as exc:
        return render_error(exc)
    request.state.identity = identity
    return await call_next(request)


def current_identity(request: Request) -> Identity:
    return request.state.identity
