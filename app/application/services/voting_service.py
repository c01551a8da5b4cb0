"""Voting service — one upvote-or-downvote per user per restaurant.

Each mutation builds fresh vote lists and writes the whole restaurant back,
so the returned restaurant is the post-mutation state.
"""

from typing import Optional

import structlog

from app.application.services.restaurant_service import get_restaurant
from app.domain.models.restaurant import Restaurant
from app.domain.repositories.restaurant_repository import RestaurantRepository
from app.domain.schemas.vote import VoteStatus

logger = structlog.get_logger(__name__)


def _with(ids: Optional[list], user_id: str) -> list:
    ids = list(ids or [])
    if user_id not in ids:
        ids.append(user_id)
    return ids


def _without(ids: Optional[list], user_id: str) -> list:
    return [i for i in (ids or []) if i != user_id]


def upvote(repo: RestaurantRepository, restaurant_id: str, user_id: str) -> Restaurant:
    """Upvote, switching away from a downvote if there is one."""
    restaurant = get_restaurant(repo, restaurant_id)
    restaurant.downvote_user_ids = _without(restaurant.downvote_user_ids, user_id)
    restaurant.upvote_user_ids = _with(restaurant.upvote_user_ids, user_id)
    restaurant = repo.save(restaurant)
    logger.info("Restaurant upvoted", restaurant_id=restaurant_id, user_id=user_id)
    return restaurant


def downvote(repo: RestaurantRepository, restaurant_id: str, user_id: str) -> Restaurant:
    """Downvote, switching away from an upvote if there is one."""
    restaurant = get_restaurant(repo, restaurant_id)
    restaurant.upvote_user_ids = _without(restaurant.upvote_user_ids, user_id)
    restaurant.downvote_user_ids = _with(restaurant.downvote_user_ids, user_id)
    restaurant = repo.save(restaurant)
    logger.info("Restaurant downvoted", restaurant_id=restaurant_id, user_id=user_id)
    return restaurant


def remove_vote(repo: RestaurantRepository, restaurant_id: str, user_id: str) -> Restaurant:
    restaurant = get_restaurant(repo, restaurant_id)
    restaurant.upvote_user_ids = _without(restaurant.upvote_user_ids, user_id)
    restaurant.downvote_user_ids = _without(restaurant.downvote_user_ids, user_id)
    restaurant = repo.save(restaurant)
    logger.info("Vote removed", restaurant_id=restaurant_id, user_id=user_id)
    return restaurant


def get_vote_status(
    repo: RestaurantRepository, restaurant_id: str, user_id: Optional[str] = None
) -> VoteStatus:
    """Counts for everyone; the has-voted flags only for a known caller."""
    restaurant = get_restaurant(repo, restaurant_id)
    return VoteStatus(
        has_upvoted=user_id is not None and restaurant.has_user_upvoted(user_id),
        has_downvoted=user_id is not None and restaurant.has_user_downvoted(user_id),
        upvote_count=restaurant.upvote_count,
        downvote_count=restaurant.downvote_count,
        vote_count=restaurant.vote_count,
    )
