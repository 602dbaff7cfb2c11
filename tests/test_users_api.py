"""
用户 API 测试
"""

from datetime import date, timedelta

import pytest

from filmorate import create_app, init_db
from filmorate.core.exceptions import USER_NOT_FOUND_MESSAGE
from filmorate.core.extensions import db


@pytest.fixture
def client():
    app = create_app("testing")
    with app.app_context():
        init_db()
        yield app.test_client()
        db.session.remove()
        db.drop_all()


def _payload(**overrides):
    payload = {
        "name": "Oleg",
        "email": "terentjev.dr@yandex.ru",
        "login": "OlegT",
        "birthday": "1993-12-03",
    }
    payload.update(overrides)
    return payload


def test_create_user(client):
    resp = client.post("/users", json=_payload())
    assert resp.status_code == 200
    assert resp.get_json() == {
        "id": 1,
        "email": "terentjev.dr@yandex.ru",
        "login": "OlegT",
        "name": "Oleg",
        "birthday": "1993-12-03",
    }


def test_empty_name_uses_login(client):
    resp = client.post("/users", json=_payload(name=""))
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "OlegT"


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": ""},
        {"email": "terentjev.dr@"},
        {"login": "Oleg T"},
        {"login": ""},
        {"birthday": (date.today() + timedelta(days=365)).isoformat()},
    ],
)
def test_invalid_user_returns_400(client, overrides):
    resp = client.post("/users", json=_payload(**overrides))
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_missing_body_returns_400(client):
    resp = client.post("/users", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_duplicate_login_returns_400(client):
    client.post("/users", json=_payload())
    resp = client.post("/users", json=_payload(email="other@yandex.ru"))
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "登录名已存在"


def test_update_user(client):
    client.post("/users", json=_payload())
    resp = client.put(
        "/users",
        json=_payload(
            id=1, name="Oleg_new", email="terentjevNew@yandex.ru", login="OlegT_new"
        ),
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["id"] == 1
    assert data["name"] == "Oleg_new"
    assert data["email"] == "terentjevNew@yandex.ru"
    assert data["login"] == "OlegT_new"


def test_update_keeps_own_login(client):
    client.post("/users", json=_payload())
    resp = client.put("/users", json=_payload(id=1, name="Renamed"))
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "Renamed"


def test_update_unknown_user(client):
    resp = client.put("/users", json=_payload(id=99))
    assert resp.status_code == 404
    assert resp.get_json()["error"] == USER_NOT_FOUND_MESSAGE


def test_list_and_get_users(client):
    client.post("/users", json=_payload())
    client.post("/users", json=_payload(login="second", email="second@yandex.ru"))
    resp = client.get("/users")
    assert resp.status_code == 200
    assert [u["login"] for u in resp.get_json()] == ["OlegT", "second"]
    resp = client.get("/users/2")
    assert resp.status_code == 200
    assert resp.get_json()["login"] == "second"
    assert client.get("/users/3").status_code == 404


def test_delete_user_removes_friendships(client):
    for login in ("a", "b", "c"):
        client.post("/users", json=_payload(login=login, email=f"{login}@yandex.ru"))
    client.put("/users/1/friends/2")
    client.put("/users/2/friends/3")
    client.put("/users/3/friends/2")
    client.put("/users/1/friends/3")

    resp = client.delete("/users/2")
    assert resp.status_code == 200
    assert resp.get_json()["login"] == "b"
    assert client.get("/users/2").status_code == 404
    assert [u["id"] for u in client.get("/users/1/friends").get_json()] == [3]
    assert client.get("/users/3/friends").get_json() == []
    assert client.delete("/users/2").status_code == 404
