from sqlalchemy import insert, select
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from filmlibrary.core.hasher import Hasher
from filmlibrary.models import models, schemas


class UserStorage:
    def __init__(self, db: Session, hasher: Hasher):
        self.db = db
        self.hasher = hasher

    def register(self, user: schemas.Credentials) -> None:
        hashed = self.hasher.get_hash(user.password)
        try:
            self.db.execute(insert(models.User).values(username=user.username, password=hashed))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def login(self, user: schemas.Credentials) -> schemas.SessionUser:
        hashed = self.hasher.get_hash(user.password)
        row = self.db.execute(
            select(models.User.username, models.User.is_admin).where(
                models.User.username == user.username, models.User.password == hashed
            )
        ).first()
        if row is None:
            raise NoResultFound("no rows in result set")
        return schemas.SessionUser(username=row.username, is_admin=row.is_admin)
