"""
Photo model. Only metadata and delivery URLs are kept; file storage is external.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PhotoMetadata:
    """Camera/EXIF style metadata, all optional."""

    camera: Optional[str] = None
    lens: Optional[str] = None
    iso: Optional[int] = None
    aperture: Optional[str] = None
    shutter_speed: Optional[str] = None
    taken_at: Optional[datetime] = None


@dataclass
class Photo:
    """A photo registered in a project folder."""

    id: str
    folder_id: str
    project_id: str
    filename: str
    url: str
    thumbnail_url: str
    size: int
    width: int
    height: int
    uploaded_at: datetime
    original_name: Optional[str] = None
    metadata: Optional[PhotoMetadata] = None
