"""
Gallery (share link) Pydantic schemas.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from gallery_api.models.project import ProjectStatus
from gallery_api.schemas.common import CamelModel
from gallery_api.schemas.photo import PhotoResponse
from gallery_api.schemas.project import FolderResponse
from gallery_api.schemas.selection import PhotoSelection, SelectionStats


class GalleryStatusFilter(str, Enum):
    """Status filter accepted by the gallery view."""
    ALL = "all"
    SELECTED = "selected"
    REJECTED = "rejected"
    PENDING = "pending"


class GalleryProject(CamelModel):
    """Public subset of project fields shown to clients."""

    id: str
    name: str
    description: Optional[str] = None
    status: ProjectStatus


class GalleryPhoto(PhotoResponse):
    """Photo with its current selection."""

    selection: PhotoSelection


class GalleryView(CamelModel):
    """
    Schema for the shared gallery (public access).
    ``stats`` always covers the whole gallery; filters only narrow ``photos``.
    """

    project: GalleryProject
    folders: List[FolderResponse] = []
    photos: List[GalleryPhoto] = []
    stats: SelectionStats


class GalleryCompleteResponse(CamelModel):
    """Result of a client marking the gallery complete."""

    project_id: str
    completed_at: datetime
