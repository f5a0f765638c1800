"""
Authentication service for user management.
"""
from typing import Optional, Tuple

from gallery_api.exceptions import ConflictError, UnauthenticatedError, ValidationError
from gallery_api.models.user import Identity, User, UserRole
from gallery_api.store import EntityStore, new_id, utcnow
from gallery_api.utils.logger import log_error, log_info
from gallery_api.utils.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class AuthService:
    """
    Service for handling user authentication.
    Provides methods for registration, login, logout and token resolution.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    async def signup(
        self,
        email: str,
        password: str,
        name: str,
        role,
    ) -> Tuple[User, str]:
        """
        Register a new user.

        Args:
            email: User email (unique, case-insensitive)
            password: Plain text password
            name: Display name
            role: photographer | client

        Returns:
            Created User and an access token

        Raises:
            ValidationError: Blank name or unknown role
            ConflictError: If email already exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        try:
            role = UserRole(role)
        except ValueError:
            raise ValidationError('Role must be "photographer" or "client"') from None

        hashed = hash_password(password)
        async with self.store.lock:
            if self.store.find_user_by_email(email) is not None:
                log_error("Registration failed", event="auth", email=email, reason="email_exists")
                raise ConflictError("User already exists")

            user = self.store.add_user(
                User(
                    id=new_id("user"),
                    email=email,
                    name=name,
                    role=role,
                    hashed_password=hashed,
                    created_at=utcnow(),
                )
            )

        log_info("Registration", event="auth", user_id=user.id, email=user.email, role=role.value)
        return user, create_access_token(user.id)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Authenticate a user with email and password.

        Returns:
            User and a fresh access token

        Raises:
            UnauthenticatedError: Unknown email or wrong password
        """
        user = self.store.find_user_by_email(email)
        if user is None:
            log_error("Login failed", event="auth", email=email, reason="user_not_found")
            raise UnauthenticatedError("Invalid email or password")
        if not verify_password(password, user.hashed_password):
            log_error("Login failed", event="auth", email=email, reason="wrong_password")
            raise UnauthenticatedError("Invalid email or password")

        log_info("Login", event="auth", user_id=user.id)
        return user, create_access_token(user.id)

    async def logout(self, token: Optional[str]) -> None:
        """Revoke a token. Invalid or missing tokens are ignored."""
        if not token:
            return
        payload = decode_access_token(token)
        if payload is None:
            return
        async with self.store.lock:
            self.store.revoked_tokens.add(payload.jti)
        log_info("Logout", event="auth", user_id=payload.sub)

    def get_user_by_token(self, token: str) -> Optional[User]:
        """
        Resolve a bearer token to its user.

        Returns:
            User if the token is valid, not revoked and the user exists, None otherwise
        """
        payload = decode_access_token(token)
        if payload is None:
            return None
        if payload.jti in self.store.revoked_tokens:
            return None
        return self.store.get_user(payload.sub)

    def get_identity(self, token: str) -> Optional[Identity]:
        """Caller identity (id, name, role) for a bearer token."""
        user = self.get_user_by_token(token)
        if user is None:
            return None
        return Identity.from_user(user)
