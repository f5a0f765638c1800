"""
Domain exceptions raised by the service layer.

Each exception carries the HTTP status the route layer answers with;
the handlers registered in ``gallery_api.main`` translate them into the
``{success: false, error}`` envelope.
"""
from fastapi import status


class GalleryError(Exception):
    """Base class for expected, client-facing failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GalleryError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"


class UnauthenticatedError(GalleryError):
    """No caller identity could be established."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHENTICATED"


class ForbiddenError(GalleryError):
    """Caller is known but may not perform the operation."""

    status_code = status.HTTP_403_FORBIDDEN
    error_code = "FORBIDDEN"


class NotFoundError(GalleryError):
    """Unknown id or share token."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"


class ConflictError(GalleryError):
    """Uniqueness constraint violated (e.g. duplicate email)."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT"
