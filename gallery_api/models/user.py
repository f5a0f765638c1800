"""
User model and the caller identity handed to the core services.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """Account roles."""
    PHOTOGRAPHER = "photographer"
    CLIENT = "client"


@dataclass
class User:
    """Registered account. Passwords are stored hashed only."""

    id: str
    email: str
    name: str
    role: UserRole
    hashed_password: str
    created_at: datetime


@dataclass(frozen=True)
class Identity:
    """Authenticated caller as seen by the services."""

    id: str
    name: str
    role: UserRole

    @property
    def is_photographer(self) -> bool:
        return self.role == UserRole.PHOTOGRAPHER

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(id=user.id, name=user.name, role=user.role)
