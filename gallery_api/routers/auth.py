"""
Authentication router for signup, login and logout.
"""
import time
from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from gallery_api.config import get_settings
from gallery_api.dependencies.auth import get_bearer_token, get_current_user
from gallery_api.exceptions import ConflictError, UnauthenticatedError
from gallery_api.middlewares.rate_limit_middleware import get_rate_limit_decorator
from gallery_api.models.user import User
from gallery_api.schemas.common import ApiResponse
from gallery_api.schemas.user import AuthResponse, LoginRequest, SignupRequest, UserResponse
from gallery_api.services.auth import AuthService
from gallery_api.store import EntityStore, get_store
from gallery_api.utils.logger import log_warning
from gallery_api.utils.prometheus_metrics import (
    login_duration_seconds,
    user_login_total,
    user_registration_total,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

# 로그인 무차별 대입 방지
login_rate_limit = get_rate_limit_decorator(f"{get_settings().rate_limit_per_minute}/minute")


@router.post(
    "/signup",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def signup(
    signup_data: SignupRequest,
    store: EntityStore = Depends(get_store),
) -> ApiResponse[AuthResponse]:
    """
    Register a new photographer or client account.

    - **email**: Valid email address (must be unique)
    - **password**: Password (8-100 characters)
    - **name**: Display name
    - **role**: `photographer` or `client`
    """
    try:
        user, token = await AuthService(store).signup(
            signup_data.email,
            signup_data.password,
            signup_data.name,
            signup_data.role,
        )
    except ConflictError:
        user_registration_total.labels(result="failure").inc()
        raise

    user_registration_total.labels(result="success").inc()
    return ApiResponse(
        data=AuthResponse(user=UserResponse.model_validate(user), token=token),
        message="Account created",
    )


@router.post(
    "/login",
    response_model=ApiResponse[AuthResponse],
    summary="Login to get access token",
)
@login_rate_limit
async def login(
    request: Request,
    login_data: LoginRequest,
    store: EntityStore = Depends(get_store),
) -> ApiResponse[AuthResponse]:
    """
    Login with email and password to get a JWT access token.

    Send the token as `Authorization: Bearer <token>` on authenticated endpoints.
    """
    start = time.perf_counter()
    try:
        user, token = AuthService(store).login(login_data.email, login_data.password)
    except UnauthenticatedError:
        login_duration_seconds.labels(result="failure").observe(time.perf_counter() - start)
        user_login_total.labels(result="failure").inc()
        log_warning("Login failed - invalid credentials", event="user_login")
        raise

    login_duration_seconds.labels(result="success").observe(time.perf_counter() - start)
    user_login_total.labels(result="success").inc()
    return ApiResponse(data=AuthResponse(user=UserResponse.model_validate(user), token=token))


@router.post(
    "/logout",
    response_model=ApiResponse,
    summary="Revoke the current access token",
)
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    store: EntityStore = Depends(get_store),
) -> ApiResponse:
    """Revoke the bearer token. Always succeeds."""
    await AuthService(store).logout(token)
    return ApiResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=ApiResponse[UserResponse],
    summary="Get current user profile",
)
async def get_me(
    current_user: User = Depends(get_current_user),
) -> ApiResponse[UserResponse]:
    """
    Get the current authenticated user's profile.
    """
    return ApiResponse(data=UserResponse.model_validate(current_user))
