"""
Business logic services package.
"""
from gallery_api.services.auth import AuthService
from gallery_api.services.comment import CommentService
from gallery_api.services.gallery import GalleryService
from gallery_api.services.project import ProjectService
from gallery_api.services.selection import SelectionService

__all__ = [
    "AuthService",
    "CommentService",
    "GalleryService",
    "ProjectService",
    "SelectionService",
]
