"""Auth API routes — signup, login, me."""

from fastapi import APIRouter, Depends

from app.application.services import auth_service
from app.core.exceptions import UnauthorizedException
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import (
    LoginRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
    UserRead,
)
from app.interfaces.api.deps import require_user_id
from app.interfaces.deps import get_user_repository

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", response_model=SignupResponse)
def signup(body: SignupRequest, repo: UserRepository = Depends(get_user_repository)):
    user = auth_service.signup(repo, body.email, body.password)
    return SignupResponse(email=user.email)


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    return auth_service.login(repo, body.email, body.password)


@router.get("/me", response_model=UserRead)
def get_me(
    user_id: str = Depends(require_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    user = repo.get_by_id(user_id)
    if user is None or not user.enabled:
        raise UnauthorizedException("User not found or disabled")
    return UserRead.model_validate(user)
