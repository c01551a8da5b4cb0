from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.domain.models.restaurant import Restaurant  # noqa: E402
from app.domain.models.user import User  # noqa: E402
from app.infrastructure.database import Base, SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402


# ── In-memory repositories for service tests ─────────────────────────────


class FakeRepository:
    def __init__(self, *items):
        self.items = {i.id: i for i in items}
        self.saves = 0

    def get_by_id(self, id):
        return self.items.get(id)

    def list(self):
        return list(self.items.values())

    def add(self, obj):
        self.items[obj.id] = obj
        return obj

    def save(self, obj):
        self.saves += 1
        self.items[obj.id] = obj
        return obj


class FakeRestaurantRepository(FakeRepository):
    def get_all_cuisines(self):
        return [r.cuisine for r in self.items.values()]

    def get_with_filters(self, filters):
        return self.list()


class FakeUserRepository(FakeRepository):
    def get_by_email(self, email):
        return next((u for u in self.items.values() if u.email == email), None)


def make_restaurant(id: str = "r1", name: str = "Test Kitchen", **kwargs) -> Restaurant:
    kwargs.setdefault("upvote_user_ids", [])
    kwargs.setdefault("downvote_user_ids", [])
    return Restaurant(id=id, name=name, **kwargs)


def make_user(id: str = "u1", email: str = "diner@example.com") -> User:
    return User(
        id=id,
        email=email,
        password_hash="not-a-real-hash",
        roles=["USER"],
        enabled=True,
        favorite_restaurant_ids=[],
        browse_history=[],
    )


# ── Database-backed fixtures for API tests ───────────────────────────────


@pytest.fixture(autouse=True)
def _database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def add_restaurants(db):
    def _add(*restaurants: Restaurant):
        db.add_all(restaurants)
        db.commit()
        return restaurants

    return _add


def signup_and_login(client: TestClient, email: str = "diner@example.com", password: str = "secret123") -> dict:
    client.post("/auth/signup", json={"email": email, "password": password})
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return resp.json()


def auth_header(tokens: dict) -> dict:
    return {"Authorization": f"Bearer {tokens['accessToken']}"}


def user_id_of(client: TestClient, tokens: dict) -> Optional[str]:
    return client.get("/auth/me", headers=auth_header(tokens)).json().get("id")
