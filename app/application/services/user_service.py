"""User service — favorites and browse history."""

from datetime import datetime, timezone
from typing import List, Optional

import structlog

from app.core.exceptions import EntityNotFoundException
from app.domain.models.user import DEFAULT_VIEW_TYPE, HISTORY_LIMIT, User
from app.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


def _get_user(repo: UserRepository, user_id: str) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", details={"user_id": user_id})
    return user


def get_favorites(repo: UserRepository, user_id: str) -> List[str]:
    return list(_get_user(repo, user_id).favorite_restaurant_ids or [])


def add_favorite(repo: UserRepository, user_id: str, restaurant_id: str) -> User:
    """Append ``restaurant_id`` unless it is already a favorite."""
    user = _get_user(repo, user_id)
    favorites = list(user.favorite_restaurant_ids or [])
    if restaurant_id in favorites:
        return user

    user.favorite_restaurant_ids = favorites + [restaurant_id]
    user = repo.save(user)
    logger.info("Favorite added", user_id=user_id, restaurant_id=restaurant_id)
    return user


def remove_favorite(repo: UserRepository, user_id: str, restaurant_id: str) -> User:
    user = _get_user(repo, user_id)
    user.favorite_restaurant_ids = [
        r for r in (user.favorite_restaurant_ids or []) if r != restaurant_id
    ]
    user = repo.save(user)
    logger.info("Favorite removed", user_id=user_id, restaurant_id=restaurant_id)
    return user


def get_history(repo: UserRepository, user_id: str) -> List[dict]:
    return list(_get_user(repo, user_id).browse_history or [])


def add_to_history(
    repo: UserRepository,
    user_id: str,
    restaurant_id: str,
    restaurant_name: str,
    view_type: Optional[str] = None,
) -> User:
    """Record a view at the head of the history.

    An older entry for the same restaurant is dropped first, and only the
    newest ``HISTORY_LIMIT`` entries are kept.
    """
    user = _get_user(repo, user_id)
    entry = {
        "restaurantId": restaurant_id,
        "restaurantName": restaurant_name,
        "viewedAt": datetime.now(timezone.utc).isoformat(),
        "viewType": view_type or DEFAULT_VIEW_TYPE,
    }
    history = [e for e in (user.browse_history or []) if e.get("restaurantId") != restaurant_id]
    user.browse_history = ([entry] + history)[:HISTORY_LIMIT]
    user = repo.save(user)
    logger.info("History entry added", user_id=user_id, restaurant_id=restaurant_id)
    return user


def clear_history(repo: UserRepository, user_id: str) -> User:
    user = _get_user(repo, user_id)
    user.browse_history = []
    user = repo.save(user)
    logger.info("History cleared", user_id=user_id)
    return user
