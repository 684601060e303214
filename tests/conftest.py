import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from filmlibrary.core import config
from filmlibrary.core.auth import SESSION_COOKIE, load_enforcer
from filmlibrary.core.database import ensure_schema, get_db
from filmlibrary.crud.actors import ActorStorage
from filmlibrary.crud.sessions import SessionStorage
from filmlibrary.main import create_app
from filmlibrary.models import schemas
from filmlibrary.services.deps import session_hasher


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    yield session
    session.close()


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis()


@pytest.fixture
def enforcer():
    return load_enforcer(config.RBAC_MODEL, config.RBAC_POLICY)


@pytest.fixture
def app(db, redis_client, enforcer):
    app = create_app(enforcer=enforcer, redis_client=redis_client, create_schema=False)

    def _db():
        yield db

    app.dependency_overrides[get_db] = _db
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sign_in(client, redis_client):
    """Put a live session for the given user in redis and its cookie on the client."""

    def _sign_in(username="bob", is_admin=False):
        key = SessionStorage(redis_client, session_hasher).create(username, is_admin)
        client.cookies.set(SESSION_COOKIE, key)
        return key

    return _sign_in


@pytest.fixture
def actors(db):
    storage = ActorStorage(db)
    for name, gender in (("Sam Worthington", "male"), ("Zoe Saldana", "female"), ("Sigourney Weaver", "female")):
        storage.create(schemas.ActorCreate(actor_name=name, gender=gender, date_of_birth="1976-08-02T00:00:00Z"))
    return [1, 2, 3]
