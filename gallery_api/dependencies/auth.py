"""
Authentication dependencies for FastAPI.
"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gallery_api.exceptions import ForbiddenError, UnauthenticatedError
from gallery_api.models.user import User, UserRole
from gallery_api.services.auth import AuthService
from gallery_api.store import EntityStore, get_store

logger = logging.getLogger("gallery_api.auth")

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Raw bearer token from the Authorization header, if any."""
    if not credentials:
        return None
    return credentials.credentials


def authenticate(token: Optional[str], store: EntityStore) -> User:
    """
    Resolve a bearer token to its user.

    Raises:
        UnauthenticatedError: If token is missing, invalid, revoked, or user not found
    """
    if not token:
        logger.warning("Auth failed", extra={"event": "auth", "reason": "no_token"})
        raise UnauthenticatedError("Authentication required")

    user = AuthService(store).get_user_by_token(token)
    if user is None:
        logger.warning("Auth failed", extra={"event": "auth", "reason": "invalid_or_revoked_token"})
        raise UnauthenticatedError("Invalid or expired token")

    return user


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    store: EntityStore = Depends(get_store),
) -> User:
    """
    Dependency to get the current authenticated user.

    Args:
        token: Bearer token from request header
        store: Entity store

    Returns:
        Current authenticated User

    Raises:
        UnauthenticatedError: If token is missing, invalid, revoked, or user not found
    """
    return authenticate(token, store)


async def get_optional_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    store: EntityStore = Depends(get_store),
) -> Optional[User]:
    """
    Dependency to optionally get the current user.
    Returns None if no valid token is provided.
    """
    if not token:
        return None
    return AuthService(store).get_user_by_token(token)


async def require_photographer(
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Dependency that only lets photographers through.

    Raises:
        ForbiddenError: If the user is a client
    """
    if current_user.role != UserRole.PHOTOGRAPHER:
        logger.warning(
            "Photographer role required",
            extra={"event": "auth", "reason": "role", "user_id": current_user.id},
        )
        raise ForbiddenError("Photographer access required")
    return current_user
