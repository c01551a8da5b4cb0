"""Auth service — JWT token management and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError

from app.config import get_settings
from app.core.exceptions import ConflictException, UnauthorizedException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import TokenResponse, normalize_email

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid email or password"
REFRESH_TOKEN_TYPE = "refresh"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def _encode(claims: dict, ttl_seconds: int) -> str:
    now = datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode.update({"iat": now, "exp": now + timedelta(seconds=ttl_seconds)})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(user: User) -> str:
    return _encode(
        {"sub": user.id or user.email, "email": user.email},
        settings.ACCESS_TOKEN_TTL_SECONDS,
    )


def create_refresh_token(user: User) -> str:
    return _encode(
        {"sub": user.email, "type": REFRESH_TOKEN_TYPE},
        settings.REFRESH_TOKEN_TTL_SECONDS,
    )


def decode_token(token: str) -> Optional[dict]:
    """Verify signature and expiry; ``None`` when either fails."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def get_user_id_from_access_token(token: str) -> Optional[str]:
    """Subject of a valid access token, or ``None``.

    Refresh tokens carry the email as subject and are never accepted here.
    """
    payload = decode_token(token)
    if payload is None or payload.get("type") == REFRESH_TOKEN_TYPE:
        return None
    return payload.get("sub")


def signup(repo: UserRepository, email: str, password: str) -> User:
    email = normalize_email(email)
    if repo.get_by_email(email) is not None:
        raise ConflictException("Email already registered")

    user = User(
        email=email,
        password_hash=hash_password(password),
        roles=["USER"],
        enabled=True,
        favorite_restaurant_ids=[],
        browse_history=[],
    )
    try:
        user = repo.add(user)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        raise ConflictException("Email already registered")

    logger.info("User signed up", user_id=user.id)
    return user


def authenticate_user(repo: UserRepository, email: str, password: str) -> User:
    user = repo.get_by_email(normalize_email(email))
    if not user or not verify_password(password, user.password_hash) or not user.enabled:
        logger.info("Login rejected")
        raise UnauthorizedException(INVALID_CREDENTIALS)
    return user


def login(repo: UserRepository, email: str, password: str) -> TokenResponse:
    user = authenticate_user(repo, email, password)
    logger.info("User logged in", user_id=user.id)
    return TokenResponse(
        access_token=create_access_token(user),
        refresh_token=create_refresh_token(user),
        expires_in=settings.ACCESS_TOKEN_TTL_SECONDS,
    )
