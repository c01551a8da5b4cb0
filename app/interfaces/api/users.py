"""User API routes — favorites and browse history of the authenticated caller."""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query

from app.application.services import user_service
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.common import MessageResponse
from app.domain.schemas.user import (
    FavoriteRequest,
    FavoriteResponse,
    HistoryEntryRead,
    HistoryRequest,
    UserScopedRequest,
)
from app.interfaces.api.deps import require_user_id, resolve_acting_user
from app.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/user", tags=["User"])


@router.get("/favorites", response_model=List[str])
def get_favorites(
    user_id: Optional[str] = Query(None, alias="userId"),
    current_user_id: str = Depends(require_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    return user_service.get_favorites(repo, resolve_acting_user(user_id, current_user_id))


@router.post("/favorites", response_model=FavoriteResponse)
def add_favorite(
    body: FavoriteRequest,
    current_user_id: str = Depends(require_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    acting = resolve_acting_user(body.user_id, current_user_id)
    user_service.add_favorite(repo, acting, body.restaurant_id)
    return FavoriteResponse(message="Added to favorites", restaurant_id=body.restaurant_id)


@router.delete("/favorites", response_model=FavoriteResponse)
def remove_favorite(
    body: FavoriteRequest,
    current_user_id: str = Depends(require_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    acting = resolve_acting_user(body.user_id, current_user_id)
    user_service.remove_favorite(repo, acting, body.restaurant_id)
    return FavoriteResponse(message="Removed from favorites", restaurant_id=body.restaurant_id)


@router.get("/history", response_model=List[HistoryEntryRead])
def get_history(
    user_id: Optional[str] = Query(None, alias="userId"),
    current_user_id: str = Depends(require_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    return user_service.get_history(repo, resolve_acting_user(user_id, current_user_id))


@router.post("/history", response_model=MessageResponse)
def add_to_history(
    body: HistoryRequest,
    current_user_id: str = Depends(require_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    acting = resolve_acting_user(body.user_id, current_user_id)
    user_service.add_to_history(repo, acting, body.restaurant_id, body.restaurant_name, body.view_type)
    return MessageResponse(message="Added to history")


@router.delete("/history", response_model=MessageResponse)
def clear_history(
    body: Optional[UserScopedRequest] = Body(None),
    current_user_id: str = Depends(require_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    acting = resolve_acting_user(body.user_id if body else None, current_user_id)
    user_service.clear_history(repo, acting)
    return MessageResponse(message="History cleared")
