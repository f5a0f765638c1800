"""
FastAPI dependencies package.
"""
from gallery_api.dependencies.auth import (
    get_bearer_token,
    get_current_user,
    get_optional_current_user,
    require_photographer,
)

__all__ = [
    "get_bearer_token",
    "get_current_user",
    "get_optional_current_user",
    "require_photographer",
]
