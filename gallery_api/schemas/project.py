"""
Project and folder Pydantic schemas for request/response validation.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from gallery_api.models.project import ProjectStatus
from gallery_api.schemas.common import CamelModel
from gallery_api.schemas.photo import PhotoResponse


class ProjectCreate(CamelModel):
    """Schema for project creation."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class ProjectUpdate(CamelModel):
    """Schema for updating a project. Omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None


class ProjectResponse(CamelModel):
    """Schema for project response."""

    id: str
    name: str
    description: Optional[str] = None
    owner_id: str
    share_token: str
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime


class ProjectSummary(ProjectResponse):
    """Project list entry with counts."""

    folder_count: int = 0
    photo_count: int = 0


class FolderCreate(CamelModel):
    """Schema for folder creation."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class FolderResponse(CamelModel):
    """Schema for folder response."""

    id: str
    project_id: str
    name: str
    description: Optional[str] = None
    created_at: datetime


class ProjectStats(CamelModel):
    """Size statistics of a project."""

    folder_count: int
    photo_count: int
    total_size: int


class ProjectDetail(ProjectResponse):
    """Project with its folders, photos and size statistics."""

    folders: List[FolderResponse] = []
    photos: List[PhotoResponse] = []
    stats: ProjectStats
