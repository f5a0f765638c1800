"""
Selection Pydantic schemas for request/response validation.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from gallery_api.models.selection import SelectionStatus
from gallery_api.schemas.common import CamelModel


class SelectionUpdate(CamelModel):
    """Schema for setting one photo's status."""

    status: SelectionStatus


class BulkSelectionRequest(CamelModel):
    """Schema for setting the same status on many photos."""

    photo_ids: List[str] = Field(..., min_length=1)
    status: SelectionStatus


class SelectionResponse(CamelModel):
    """Result of a selection change."""

    photo_id: str
    status: SelectionStatus
    updated_at: datetime


class BulkSelectionItem(CamelModel):
    """Per-photo outcome of a bulk selection."""

    photo_id: str
    success: bool
    status: Optional[SelectionStatus] = None
    error: Optional[str] = None


class BulkSelectionResponse(CamelModel):
    """Bulk selection outcome. Items are in request order."""

    results: List[BulkSelectionItem]
    updated: int
    failed: int


class PhotoSelection(CamelModel):
    """
    Current selection attached to a gallery photo.
    Pending photos carry ``{id: null, status: "pending", updatedAt: null}``.
    """

    id: Optional[str] = None
    status: SelectionStatus = SelectionStatus.PENDING
    updated_at: Optional[datetime] = None


class SelectionStats(CamelModel):
    """Aggregate counts. selected + rejected + pending == total."""

    total: int
    selected: int
    rejected: int
    pending: int
