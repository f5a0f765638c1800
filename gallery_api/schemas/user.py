"""
User-related Pydantic schemas for request/response validation.
"""
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from gallery_api.models.user import UserRole
from gallery_api.schemas.common import CamelModel


class SignupRequest(CamelModel):
    """Schema for user registration."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole


class LoginRequest(CamelModel):
    """Schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """Schema for user response (excludes sensitive data)."""

    id: str
    email: str
    name: str
    role: UserRole
    created_at: datetime


class AuthResponse(CamelModel):
    """Signup/login payload: the user plus a bearer token."""

    user: UserResponse
    token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):
    """Schema for JWT token payload."""

    sub: str  # User ID
    exp: datetime
    jti: str
