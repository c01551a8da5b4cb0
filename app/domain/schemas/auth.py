"""Pydantic schemas for User and Auth."""

from typing import Optional

from pydantic import Field, field_validator

from app.domain.schemas.common import CamelModel


def normalize_email(value: str) -> str:
    return value.strip().lower()


class Credentials(CamelModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=72)

    @field_validator("email")
    @classmethod
    def email_must_look_valid(cls, v: str) -> str:
        v = normalize_email(v)
        local, sep, domain = v.partition("@")
        if not sep or not local or "." not in domain:
            raise ValueError("Email must be a valid address")
        return v


class SignupRequest(Credentials):
    password: str = Field(min_length=8, max_length=72)


class SignupResponse(CamelModel):
    email: str


class LoginRequest(Credentials):
    pass


class TokenResponse(CamelModel):
    access_token: str
    refresh_token: str
    expires_in: int  # access token lifetime, seconds


class UserRead(CamelModel):
    id: str
    email: str
    roles: list[str]
    enabled: bool


class TokenClaims(CamelModel):
    sub: str
    email: Optional[str] = None
    type: Optional[str] = None
