import pytest
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, NoResultFound

from filmlibrary.core.hasher import Hasher
from filmlibrary.crud.users import UserStorage
from filmlibrary.models import models, schemas
from filmlibrary.services.users import UserService


@pytest.fixture
def hasher():
    return Hasher(b"secret")


@pytest.fixture
def service(db, hasher):
    return UserService(UserStorage(db, hasher))


def test_register_stores_digest_not_password(service, db, hasher):
    service.register(schemas.Credentials(username="bob", password="hunter2"))

    user = db.execute(select(models.User)).scalar_one()
    assert user.password == hasher.get_hash("hunter2")
    assert user.password != "hunter2"
    assert user.is_admin is False


def test_register_twice_fails_on_uniqueness(service):
    service.register(schemas.Credentials(username="bob", password="a"))
    with pytest.raises(IntegrityError):
        service.register(schemas.Credentials(username="bob", password="b"))


def test_login_returns_session_user(service, db):
    service.register(schemas.Credentials(username="root", password="pw"))
    db.execute(update(models.User).where(models.User.username == "root").values(is_admin=True))
    db.commit()

    user = service.login(schemas.Credentials(username="root", password="pw"))
    assert user.username == "root"
    assert user.is_admin is True


def test_login_with_wrong_password(service):
    service.register(schemas.Credentials(username="bob", password="right"))
    with pytest.raises(NoResultFound):
        service.login(schemas.Credentials(username="bob", password="wrong"))
