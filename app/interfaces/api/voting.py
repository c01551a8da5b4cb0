"""Voting API routes — upvote, downvote, remove vote, vote status."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.application.services import voting_service
from app.domain.models.restaurant import Restaurant
from app.domain.repositories.restaurant_repository import RestaurantRepository
from app.domain.schemas.vote import VoteResponse, VoteStatus
from app.interfaces.api.deps import get_optional_user_id, require_user_id
from app.interfaces.deps import get_restaurant_repository

router = APIRouter(prefix="/api/restaurants", tags=["Voting"])


def _counts(restaurant: Restaurant, message: str) -> VoteResponse:
    return VoteResponse(
        message=message,
        upvote_count=restaurant.upvote_count,
        downvote_count=restaurant.downvote_count,
        vote_count=restaurant.vote_count,
    )


@router.post("/{restaurant_id}/upvote", response_model=VoteResponse)
def upvote(
    restaurant_id: str,
    user_id: str = Depends(require_user_id),
    repo: RestaurantRepository = Depends(get_restaurant_repository),
):
    return _counts(voting_service.upvote(repo, restaurant_id, user_id), "Upvoted successfully")


@router.post("/{restaurant_id}/downvote", response_model=VoteResponse)
def downvote(
    restaurant_id: str,
    user_id: str = Depends(require_user_id),
    repo: RestaurantRepository = Depends(get_restaurant_repository),
):
    return _counts(voting_service.downvote(repo, restaurant_id, user_id), "Downvoted successfully")


@router.delete("/{restaurant_id}/vote", response_model=VoteResponse)
def remove_vote(
    restaurant_id: str,
    user_id: str = Depends(require_user_id),
    repo: RestaurantRepository = Depends(get_restaurant_repository),
):
    return _counts(voting_service.remove_vote(repo, restaurant_id, user_id), "Vote removed successfully")


@router.get("/{restaurant_id}/vote-status", response_model=VoteStatus)
def vote_status(
    restaurant_id: str,
    user_id: Optional[str] = Depends(get_optional_user_id),
    repo: RestaurantRepository = Depends(get_restaurant_repository),
):
    return voting_service.get_vote_status(repo, restaurant_id, user_id)
