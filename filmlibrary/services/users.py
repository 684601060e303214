from filmlibrary.crud.users import UserStorage
from filmlibrary.models import schemas


class UserService:
    def __init__(self, storage: UserStorage):
        self.storage = storage

    def register(self, user: schemas.Credentials) -> None:
        self.storage.register(user)

    def login(self, user: schemas.Credentials) -> schemas.SessionUser:
        return self.storage.login(user)
