from unittest.mock import MagicMock

import fakeredis
from fastapi.testclient import TestClient

from filmlibrary.core.auth import SESSION_COOKIE, Identity
from filmlibrary.main import create_app


def test_identity_subjects():
    assert Identity().subject == "anonymous"
    assert Identity("bob").subject == "user"
    assert Identity("root", is_admin=True).subject == "admin"


def test_no_cookie_redirects_to_register(client):
    r = client.get("/actor", follow_redirects=False)
    assert r.status_code == 308
    assert r.headers["location"] == "/register"


def test_public_paths_need_no_cookie(client):
    assert client.get("/docs").status_code == 200
    r = client.get("/swagger.yaml")
    assert r.status_code == 200
    assert "/movie/all" in r.text


def test_health_is_open(client):
    assert client.get("/health").json() == {"ok": True}


def test_unknown_session_is_unauthorized(client):
    client.cookies.set(SESSION_COOKIE, "deadbeef")
    r = client.get("/actor")
    assert r.status_code == 401
    assert r.json()["error"] is True


def test_stale_cookie_can_still_log_in(client):
    client.cookies.set(SESSION_COOKIE, "deadbeef")
    client.post("/register", json={"username": "bob", "password": "pw"})
    r = client.post("/login", json={"username": "bob", "password": "pw"})
    assert r.status_code == 201


def test_user_may_read(client, sign_in):
    sign_in("bob")
    assert client.get("/actor").status_code == 200


def test_user_may_not_write(client, sign_in):
    sign_in("bob")
    r = client.post("/actor", json={"actor_name": "x", "gender": "male", "date_of_birth": "1990-01-01T00:00:00Z"})
    assert r.status_code == 403
    assert r.content == b""


def test_admin_may_write(client, sign_in):
    sign_in("root", is_admin=True)
    r = client.post("/actor", json={"actor_name": "x", "gender": "male", "date_of_birth": "1990-01-01T00:00:00Z"})
    assert r.status_code == 201


def test_signed_in_user_cannot_delete_movies(client, sign_in):
    sign_in("bob")
    assert client.request("DELETE", "/movie", json={"movie_id": 1}).status_code == 403


def test_policy_is_evaluated_on_path_and_method(app, sign_in, client):
    seen = []
    enforcer = app.state.enforcer

    class Recording:
        def enforce(self, *args):
            seen.append(args)
            return enforcer.enforce(*args)

    app.state.enforcer = Recording()
    sign_in("root", is_admin=True)
    client.get("/movie/all", params={"order": "rating"})

    assert seen == [("admin", "/movie/all", "GET")]


def test_policy_engine_failure_is_server_error():
    enforcer = MagicMock()
    enforcer.enforce.side_effect = RuntimeError("model not loaded")
    app = create_app(enforcer=enforcer, redis_client=fakeredis.FakeRedis(), create_schema=False)

    with TestClient(app) as c:
        r = c.post("/login", json={"username": "bob", "password": "pw"})

    assert r.status_code == 500
    assert r.json() == {"error": True, "message": "model not loaded"}


def test_anonymous_malformed_body_is_redirected_before_decoding(client):
    r = client.post("/movie", content=b'{"movie_title": {', headers={"Content-Type": "application/json"},
                    follow_redirects=False)
    assert r.status_code == 308
    assert r.headers["location"] == "/register"


def test_user_malformed_body_is_denied_before_decoding(client, sign_in):
    sign_in("bob")
    r = client.request("DELETE", "/movie", content=b"{", headers={"Content-Type": "application/json"})
    assert r.status_code == 403
    assert r.content == b""


def test_unrouted_path_without_cookie_is_redirected(client):
    r = client.get("/foo", follow_redirects=False)
    assert r.status_code == 308
    assert r.headers["location"] == "/register"


def test_unrouted_path_is_denied_by_default(client, sign_in):
    sign_in("root", is_admin=True)
    r = client.get("/foo")
    assert r.status_code == 403
    assert r.content == b""
