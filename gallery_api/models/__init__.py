"""
Entity models package.
All models are exported here for easy import.
"""
from gallery_api.models.user import User, UserRole, Identity
from gallery_api.models.project import Project, ProjectStatus, Folder
from gallery_api.models.photo import Photo, PhotoMetadata
from gallery_api.models.selection import Selection, SelectionStatus
from gallery_api.models.comment import Comment

__all__ = [
    "User",
    "UserRole",
    "Identity",
    "Project",
    "ProjectStatus",
    "Folder",
    "Photo",
    "PhotoMetadata",
    "Selection",
    "SelectionStatus",
    "Comment",
]
