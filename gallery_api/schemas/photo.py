"""
Photo-related Pydantic schemas for request/response validation.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from gallery_api.schemas.common import CamelModel


class PhotoMetadataSchema(CamelModel):
    """Optional camera metadata."""

    camera: Optional[str] = None
    lens: Optional[str] = None
    iso: Optional[int] = Field(None, gt=0)
    aperture: Optional[str] = None
    shutter_speed: Optional[str] = None
    taken_at: Optional[datetime] = None


class PhotoCreate(CamelModel):
    """
    Schema for registering a photo in a project.
    The file itself lives in external storage; only URLs and dimensions are recorded.
    """

    folder_id: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1, max_length=255)
    original_name: Optional[str] = Field(None, max_length=255)
    url: str = Field(..., min_length=1)
    thumbnail_url: str = Field(..., min_length=1)
    size: int = Field(..., ge=0, description="File size in bytes")
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    metadata: Optional[PhotoMetadataSchema] = None


class PhotoResponse(CamelModel):
    """Schema for photo response."""

    id: str
    folder_id: str
    project_id: str
    filename: str
    original_name: Optional[str] = None
    url: str
    thumbnail_url: str
    size: int
    width: int
    height: int
    metadata: Optional[PhotoMetadataSchema] = None
    uploaded_at: datetime
