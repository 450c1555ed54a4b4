# tests/test_users.py
import pytest

from app.models.user import AdminUser


@pytest.fixture
def admin(client):
    response = client.post(
        "/users/create",
        json={"username": "admin", "password": "correct-horse", "email": "admin@example.com"}
    )
    assert response.status_code == 201
    return response.json()


def _stored_hash(client, username: str) -> str:
    async def load():
        user = await AdminUser.get(username=username)
        return user.password_hash
    return client.portal.call(load)


def test_create_user_hides_password(admin):
    assert admin["username"] == "admin"
    assert admin["email"] == "admin@example.com"
    assert admin["last_login"] is None
    assert "password" not in admin
    assert "password_hash" not in admin


def test_create_user_stores_hash(client, admin):
    stored = _stored_hash(client, "admin")
    assert stored != "correct-horse"

    response = client.post("/users/login", json={"username": "admin", "password": "correct-horse"})
    assert response.status_code == 200


def test_login_success_returns_user(client, admin):
    response = client.post("/users/login", json={"username": "admin", "password": "correct-horse"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == admin["id"]
    assert body["username"] == "admin"
    assert body["last_login"] is not None


def test_login_wrong_password(client, admin):
    response = client.post("/users/login", json={"username": "admin", "password": "wrong-horse"})
    assert response.status_code == 401


def test_login_unknown_username(client, admin):
    response = client.post("/users/login", json={"username": "nobody", "password": "correct-horse"})
    assert response.status_code == 401


def test_login_empty_password(client, admin):
    response = client.post("/users/login", json={"username": "admin", "password": ""})
    assert response.status_code == 401


def test_duplicate_username_conflicts(client, admin):
    response = client.post(
        "/users/create",
        json={"username": "admin", "password": "another-pass", "email": "other@example.com"}
    )
    assert response.status_code == 409


def test_update_rehashes_password(client, admin):
    before = _stored_hash(client, "admin")

    response = client.post(f"/users/update/{admin['id']}", json={"password": "correct-horse"})
    assert response.status_code == 200

    after = _stored_hash(client, "admin")
    assert after != before
    login = client.post("/users/login", json={"username": "admin", "password": "correct-horse"})
    assert login.status_code == 200


def test_update_without_password_keeps_login(client, admin):
    response = client.post(f"/users/update/{admin['id']}", json={"email": "new@example.com"})

    assert response.status_code == 200
    assert response.json()["email"] == "new@example.com"
    login = client.post("/users/login", json={"username": "admin", "password": "correct-horse"})
    assert login.status_code == 200


def test_update_password_changes_login(client, admin):
    client.post(f"/users/update/{admin['id']}", json={"password": "new-password"})

    old = client.post("/users/login", json={"username": "admin", "password": "correct-horse"})
    new = client.post("/users/login", json={"username": "admin", "password": "new-password"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_update_missing_user(client):
    response = client.post("/users/update/999", json={"email": "x@example.com"})
    assert response.status_code == 404


def test_get_list_and_delete(client, admin):
    assert client.get(f"/users/get/{admin['id']}").json()["username"] == "admin"
    assert [u["username"] for u in client.get("/users/all").json()] == ["admin"]

    deleted = client.post(f"/users/delete/{admin['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["id"] == admin["id"]

    assert client.get(f"/users/get/{admin['id']}").status_code == 404
    assert client.post(f"/users/delete/{admin['id']}").status_code == 404


def test_invalid_email_rejected(client):
    response = client.post(
        "/users/create",
        json={"username": "admin", "password": "correct-horse", "email": "not-an-email"}
    )
    assert response.status_code == 422
