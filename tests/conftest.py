# tests/conftest.py
import os

os.environ["DATABASE_URL"] = "sqlite://:memory:"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    """Client with a fresh in-memory database for every test."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def category(client):
    response = client.post(
        "/categories/create",
        json={"name": "Drinks", "description": "Cold and hot drinks"}
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client, category):
    response = client.post(
        "/products",
        json={
            "name": "Lemonade",
            "slug": "lemonade",
            "description": "Fresh lemonade",
            "price": "12.50",
            "category_id": category["id"]
        }
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def make_ingredient(client):
    def _make(name: str) -> dict:
        response = client.post("/ingredients/create", json={"name": name})
        assert response.status_code == 201
        return response.json()
    return _make
