from filmlibrary.crud.sessions import SessionStorage
from filmlibrary.models import schemas


class SessionService:
    def __init__(self, storage: SessionStorage):
        self.storage = storage

    def create(self, username: str, is_admin: bool = False) -> str:
        return self.storage.create(username, is_admin)

    def get(self, session_key: str) -> schemas.SessionUser:
        return self.storage.get(session_key)
