"""Tests for auth service and token helpers."""

import asyncio
from datetime import timedelta

import pytest

from gallery_api.exceptions import ConflictError, UnauthenticatedError, ValidationError
from gallery_api.models import UserRole
from gallery_api.services.auth import AuthService
from gallery_api.utils.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hashing() -> None:
    hashed = hash_password("password123")

    assert hashed != "password123"
    assert verify_password("password123", hashed)
    assert not verify_password("wrong", hashed)


def test_token_round_trip() -> None:
    payload = decode_access_token(create_access_token("user-1"))

    assert payload is not None
    assert payload.sub == "user-1"
    assert payload.jti


def test_expired_token_is_rejected() -> None:
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-10))

    assert decode_access_token(token) is None


def test_garbage_token_is_rejected() -> None:
    assert decode_access_token("not-a-jwt") is None


def test_signup_and_login(empty_store) -> None:
    service = AuthService(empty_store)

    user, token = asyncio.run(
        service.signup("new@example.com", "secret-pass", "New Photographer", "photographer")
    )

    assert user.role == UserRole.PHOTOGRAPHER
    assert user.hashed_password != "secret-pass"
    assert service.get_identity(token).id == user.id

    logged_in, _ = service.login("NEW@example.com", "secret-pass")
    assert logged_in is user


def test_signup_duplicate_email(store) -> None:
    with pytest.raises(ConflictError):
        asyncio.run(
            AuthService(store).signup("client@example.com", "password123", "Dup", "client")
        )


def test_signup_invalid_role(empty_store) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(AuthService(empty_store).signup("a@example.com", "password123", "A", "admin"))


def test_login_bad_credentials(store) -> None:
    service = AuthService(store)

    with pytest.raises(UnauthenticatedError):
        service.login("client@example.com", "wrong-password")
    with pytest.raises(UnauthenticatedError):
        service.login("nobody@example.com", "password123")


def test_identity_from_token(store) -> None:
    identity = AuthService(store).get_identity(create_access_token("user-2"))

    assert identity.id == "user-2"
    assert identity.name == "Jane Client"
    assert identity.role == UserRole.CLIENT
    assert not identity.is_photographer


def test_identity_unknown_user(store) -> None:
    assert AuthService(store).get_identity(create_access_token("user-404")) is None


def test_logout_revokes_token(store) -> None:
    service = AuthService(store)
    token = create_access_token("user-1")

    asyncio.run(service.logout(token))

    assert service.get_identity(token) is None
    assert service.get_identity(create_access_token("user-1")) is not None


def test_logout_ignores_invalid_token(store) -> None:
    asyncio.run(AuthService(store).logout("garbage"))

    assert store.revoked_tokens == set()
