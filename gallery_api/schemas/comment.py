"""
Comment Pydantic schemas for request/response validation.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from gallery_api.schemas.common import CamelModel


class CommentCreate(CamelModel):
    """Schema for adding a comment. Blank content is rejected by the service."""

    content: str = Field(..., max_length=5000)
    parent_id: Optional[str] = None


class CommentUpdate(CamelModel):
    """Schema for editing a comment's content."""

    content: str = Field(..., max_length=5000)


class CommentResponse(CamelModel):
    """Schema for comment response."""

    id: str
    photo_id: str
    project_id: str
    author_id: str
    author_name: str
    content: str
    parent_id: Optional[str] = None
    created_at: datetime


class ThreadedComment(CommentResponse):
    """Top-level comment with its direct replies, oldest first."""

    replies: List[CommentResponse] = []


class PhotoComments(CamelModel):
    """Threaded comments for one photo."""

    comments: List[ThreadedComment]
    total: int


class ProjectComments(CamelModel):
    """Project comments grouped by photo id, newest first within each photo."""

    comments_by_photo: Dict[str, List[CommentResponse]]
    total: int
    photos_with_comments: int


class CommentDeleteResponse(CamelModel):
    """Number of comments removed, including cascaded replies."""

    deleted_count: int
