"""FastAPI dependencies — bearer token authentication.

The verified token subject is threaded into handlers as an explicit user id.
An invalid or missing token leaves the caller anonymous; handlers that need
a caller depend on ``require_user_id`` instead.
"""

from typing import Optional

import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.services.auth_service import get_user_id_from_access_token
from app.core.exceptions import ForbiddenException, UnauthorizedException

logger = structlog.get_logger(__name__)

security = HTTPBearer(auto_error=False)


def get_optional_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    if credentials is None:
        return None
    user_id = get_user_id_from_access_token(credentials.credentials)
    if user_id is None:
        logger.debug("Ignoring invalid bearer token")
    return user_id


def require_user_id(user_id: Optional[str] = Depends(get_optional_user_id)) -> str:
    if user_id is None:
        raise UnauthorizedException("Authentication required")
    return user_id


def resolve_acting_user(requested_user_id: Optional[str], current_user_id: str) -> str:
    """The token subject, provided any client-supplied id agrees with it."""
    if requested_user_id and requested_user_id != current_user_id:
        raise ForbiddenException("Cannot act on behalf of another user")
    return current_user_id
