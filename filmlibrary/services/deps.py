"""FastAPI providers wiring storages into services, one set per request."""

from fastapi import Depends, Request
from redis import Redis
from sqlalchemy.orm import Session

from filmlibrary.core.config import REDIS_DB, REDIS_HOST, REDIS_PORT, SESSION_SALT, USER_SALT
from filmlibrary.core.database import get_db
from filmlibrary.core.hasher import Hasher
from filmlibrary.crud.actors import ActorStorage
from filmlibrary.crud.movies import MovieStorage
from filmlibrary.crud.sessions import SessionStorage
from filmlibrary.crud.users import UserStorage
from filmlibrary.services.actors import ActorService
from filmlibrary.services.movies import MovieService
from filmlibrary.services.sessions import SessionService
from filmlibrary.services.users import UserService

user_hasher = Hasher(USER_SALT.encode("utf-8"))
session_hasher = Hasher(SESSION_SALT.encode("utf-8"))


def create_redis() -> Redis:
    return Redis(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB)


def get_redis(request: Request) -> Redis:
    return request.app.state.redis


def get_actor_service(db: Session = Depends(get_db)) -> ActorService:
    return ActorService(ActorStorage(db))


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService(MovieStorage(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserStorage(db, user_hasher))


def get_session_service(client: Redis = Depends(get_redis)) -> SessionService:
    return SessionService(SessionStorage(client, session_hasher))
