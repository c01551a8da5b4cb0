"""Pydantic schemas for favorites and browse history."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.domain.models.user import DEFAULT_VIEW_TYPE
from app.domain.schemas.common import CamelModel


def _required_text(v: Optional[str]) -> str:
    if v is None or not v.strip():
        raise ValueError("must not be blank")
    return v.strip()


class UserScopedRequest(CamelModel):
    # Accepted for older clients; must match the token subject when sent
    user_id: Optional[str] = None


class FavoriteRequest(UserScopedRequest):
    restaurant_id: str

    @field_validator("restaurant_id")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _required_text(v)


class FavoriteResponse(CamelModel):
    message: str
    restaurant_id: str


class HistoryRequest(UserScopedRequest):
    restaurant_id: str
    restaurant_name: str
    view_type: Optional[str] = None

    @field_validator("restaurant_id", "restaurant_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _required_text(v)


class HistoryEntryRead(CamelModel):
    restaurant_id: str
    restaurant_name: Optional[str] = None
    viewed_at: datetime
    view_type: str = DEFAULT_VIEW_TYPE
