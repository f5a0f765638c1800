"""
Project and folder models.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class ProjectStatus(str, Enum):
    """Project lifecycle: draft -> shared -> completed (reverse is not enforced)."""
    DRAFT = "draft"
    SHARED = "shared"
    COMPLETED = "completed"


@dataclass
class Project:
    """
    A photographer's project.
    The share token is the only credential a client needs to open the gallery.
    """

    id: str
    name: str
    owner_id: str
    share_token: str
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None

    @property
    def is_shared(self) -> bool:
        """Check if the gallery is currently open to clients."""
        return self.status == ProjectStatus.SHARED


@dataclass
class Folder:
    """Folder grouping photos inside one project."""

    id: str
    project_id: str
    name: str
    created_at: datetime
    description: Optional[str] = None
