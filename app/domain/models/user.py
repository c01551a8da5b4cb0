"""User domain model — maps to the 'users' table."""

import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, String
from sqlalchemy.sql import func

from app.infrastructure.database import Base

HISTORY_LIMIT = 100
DEFAULT_VIEW_TYPE = "Details viewed"


def new_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    roles = Column(JSON, nullable=False, default=lambda: ["USER"])
    enabled = Column(Boolean, nullable=False, default=True)

    # Ordered, duplicate-free
    favorite_restaurant_ids = Column(JSON, nullable=False, default=list)
    # Most recent first; entries are dicts with restaurantId, restaurantName, viewedAt, viewType
    browse_history = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User {self.email}>"
