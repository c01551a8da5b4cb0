from __future__ import annotations

import base64

import pytest
from jose import jwt
from sqlalchemy.exc import IntegrityError

from app.application.services import auth_service
from app.config import get_settings
from app.core.exceptions import ConflictException
from conftest import FakeUserRepository, auth_header, signup_and_login

settings = get_settings()


# ── Signup ───────────────────────────────────────────────────────────────


def test_signup_normalizes_email(client):
    resp = client.post("/auth/signup", json={"email": "  Diner@Example.COM ", "password": "secret123"})
    assert resp.status_code == 200
    assert resp.json() == {"email": "diner@example.com"}


def test_signup_duplicate_email_conflicts(client):
    client.post("/auth/signup", json={"email": "diner@example.com", "password": "secret123"})
    resp = client.post("/auth/signup", json={"email": "DINER@example.com", "password": "another123"})
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "CONFLICT"


def test_signup_validation_errors_are_400(client):
    resp = client.post("/auth/signup", json={"email": "not-an-email", "password": "secret123"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    resp = client.post("/auth/signup", json={"email": "diner@example.com"})
    assert resp.status_code == 400

    resp = client.post("/auth/signup", json={"email": "diner@example.com", "password": "short"})
    assert resp.status_code == 400


def test_signup_stores_hash_not_password(client, db):
    from app.domain.models.user import User

    client.post("/auth/signup", json={"email": "diner@example.com", "password": "secret123"})
    user = db.query(User).filter(User.email == "diner@example.com").one()
    assert user.password_hash != "secret123"
    assert auth_service.verify_password("secret123", user.password_hash)
    assert user.roles == ["USER"]
    assert user.enabled is True


class RacingUserRepository(FakeUserRepository):
    """Email is free when checked, taken by the time the row is inserted."""

    def add(self, obj):
        raise IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email"))


def test_signup_insert_race_is_a_conflict():
    with pytest.raises(ConflictException):
        auth_service.signup(RacingUserRepository(), "diner@example.com", "secret123")


# ── Login ────────────────────────────────────────────────────────────────


def test_login_returns_token_pair(client):
    tokens = signup_and_login(client)
    assert set(tokens) == {"accessToken", "refreshToken", "expiresIn"}
    assert tokens["expiresIn"] == settings.ACCESS_TOKEN_TTL_SECONDS


def test_access_and_refresh_claims(client):
    tokens = signup_and_login(client)
    access = jwt.decode(tokens["accessToken"], settings.SECRET_KEY, algorithms=["HS256"])
    refresh = jwt.decode(tokens["refreshToken"], settings.SECRET_KEY, algorithms=["HS256"])

    me = client.get("/auth/me", headers=auth_header(tokens)).json()
    assert access["sub"] == me["id"]
    assert access["email"] == "diner@example.com"
    assert access["exp"] - access["iat"] == settings.ACCESS_TOKEN_TTL_SECONDS

    assert refresh["sub"] == "diner@example.com"
    assert refresh["type"] == "refresh"
    assert refresh["exp"] - refresh["iat"] == settings.REFRESH_TOKEN_TTL_SECONDS


def test_login_accepts_unnormalized_email(client):
    signup_and_login(client)
    resp = client.post("/auth/login", json={"email": " DINER@example.com", "password": "secret123"})
    assert resp.status_code == 200


def test_wrong_password_and_unknown_email_look_identical(client):
    signup_and_login(client)
    wrong_password = client.post("/auth/login", json={"email": "diner@example.com", "password": "nope-nope"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@example.com", "password": "secret123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json()["error"]["code"] == unknown_email.json()["error"]["code"] == "UNAUTHORIZED"
    assert wrong_password.json()["error"]["message"] == unknown_email.json()["error"]["message"]


def test_disabled_account_fails_like_bad_credentials(client, db):
    from app.domain.models.user import User

    signup_and_login(client)
    user = db.query(User).filter(User.email == "diner@example.com").one()
    user.enabled = False
    db.commit()

    disabled = client.post("/auth/login", json={"email": "diner@example.com", "password": "secret123"})
    wrong_password = client.post("/auth/login", json={"email": "diner@example.com", "password": "nope-nope"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@example.com", "password": "secret123"})

    assert disabled.status_code == wrong_password.status_code == unknown_email.status_code == 401
    assert disabled.json()["error"] == wrong_password.json()["error"] == unknown_email.json()["error"]


# ── Token verification ───────────────────────────────────────────────────


def test_me_requires_token(client):
    assert client.get("/auth/me").status_code == 401


def test_refresh_token_is_not_an_access_credential(client):
    tokens = signup_and_login(client)
    resp = client.get("/auth/me", headers={"Authorization": f"Bearer {tokens['refreshToken']}"})
    assert resp.status_code == 401


def test_tampered_and_expired_tokens_are_rejected(client):
    tokens = signup_and_login(client)
    header, _, signature = tokens["accessToken"].split(".")
    forged_payload = base64.urlsafe_b64encode(b'{"sub":"someone-else"}').rstrip(b"=").decode()
    tampered = f"{header}.{forged_payload}.{signature}"
    assert client.get("/auth/me", headers={"Authorization": f"Bearer {tampered}"}).status_code == 401

    expired = auth_service._encode({"sub": "someone"}, ttl_seconds=-60)
    assert auth_service.decode_token(expired) is None
    assert client.get("/auth/me", headers={"Authorization": f"Bearer {expired}"}).status_code == 401


def test_token_signed_with_other_secret_is_rejected():
    forged = jwt.encode({"sub": "u1", "exp": 4102444800}, "some-other-secret", algorithm="HS256")
    assert auth_service.get_user_id_from_access_token(forged) is None
