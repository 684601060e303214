import json
import logging

from pydantic import ValidationError
from redis import Redis

from filmlibrary.core.errors import SessionCorrupt, SessionNotFound
from filmlibrary.core.hasher import Hasher
from filmlibrary.models import schemas

logger = logging.getLogger(__name__)

SESSION_TTL_SECONDS = 8 * 60 * 60


class SessionStorage:
    """Short-lived session records kept in redis under hash(username).

    A second login by the same user overwrites the same key.
    """

    def __init__(self, client: Redis, hasher: Hasher):
        self.client = client
        self.hasher = hasher

    def create(self, username: str, is_admin: bool = False) -> str:
        key = self.hasher.get_hash(username)
        payload = schemas.SessionUser(username=username, is_admin=is_admin).model_dump_json()
        self.client.set(key, payload, ex=SESSION_TTL_SECONDS)
        return key

    def get(self, session_key: str) -> schemas.SessionUser:
        value = self.client.get(session_key)
        if value is None:
            raise SessionNotFound()
        try:
            return schemas.SessionUser.model_validate(json.loads(value))
        except (ValueError, TypeError, ValidationError) as exc:
            logger.warning("corrupt session payload under %s: %s", session_key, exc)
            raise SessionCorrupt() from exc
