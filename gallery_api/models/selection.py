"""
Selection model.

A photo is "pending" when no Selection exists for (photo_id, project_id);
pending is never stored as a record.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SelectionStatus(str, Enum):
    """Statuses a client may request for a photo."""
    SELECTED = "selected"
    REJECTED = "rejected"
    PENDING = "pending"


@dataclass
class Selection:
    """Client decision on a photo. Status is only ever SELECTED or REJECTED."""

    id: str
    photo_id: str
    project_id: str
    client_id: str
    status: SelectionStatus
    created_at: datetime
    updated_at: datetime
