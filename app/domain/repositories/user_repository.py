"""
User Repository Interface.
"""

from typing import Optional

from app.domain.models.user import User
from app.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Look up a user by normalized email."""
        ...
