import logging

from fastapi import APIRouter, Depends, Response

from filmlibrary.models.schemas import Credentials, StatusMessage
from filmlibrary.routers.common import require_json, set_session_cookie
from filmlibrary.services.deps import get_session_service, get_user_service
from filmlibrary.services.sessions import SessionService
from filmlibrary.services.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["user"])


@router.post("/register", status_code=201, response_model=StatusMessage, dependencies=[Depends(require_json)])
def register(
    body: Credentials,
    response: Response,
    users: UserService = Depends(get_user_service),
    sessions: SessionService = Depends(get_session_service),
):
    """Register a new user and open a session for it."""
    users.register(body)
    # the user row is already committed; a failure here still reports 500
    session_key = sessions.create(body.username)
    logger.info("created session for user [%s]", body.username)
    set_session_cookie(response, session_key)
    return StatusMessage(message="user was created")


@router.post("/login", status_code=201, response_model=StatusMessage, dependencies=[Depends(require_json)])
def login(
    body: Credentials,
    response: Response,
    users: UserService = Depends(get_user_service),
    sessions: SessionService = Depends(get_session_service),
):
    """Log in with user credentials."""
    user = users.login(body)
    session_key = sessions.create(user.username, user.is_admin)
    logger.info("created session for user [%s]", user.username)
    set_session_cookie(response, session_key)
    return StatusMessage(message="user was login")
