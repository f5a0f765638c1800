"""
Pydantic schemas package.
All schemas are exported here for easy import.
"""
from gallery_api.schemas.common import ApiResponse, CamelModel, ErrorResponse
from gallery_api.schemas.user import (
    SignupRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    TokenPayload,
)
from gallery_api.schemas.photo import (
    PhotoCreate,
    PhotoMetadataSchema,
    PhotoResponse,
)
from gallery_api.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectSummary,
    ProjectDetail,
    ProjectStats,
    FolderCreate,
    FolderResponse,
)
from gallery_api.schemas.selection import (
    SelectionUpdate,
    BulkSelectionRequest,
    SelectionResponse,
    BulkSelectionItem,
    BulkSelectionResponse,
    PhotoSelection,
    SelectionStats,
)
from gallery_api.schemas.gallery import (
    GalleryStatusFilter,
    GalleryProject,
    GalleryPhoto,
    GalleryView,
    GalleryCompleteResponse,
)
from gallery_api.schemas.comment import (
    CommentCreate,
    CommentUpdate,
    CommentResponse,
    ThreadedComment,
    PhotoComments,
    ProjectComments,
    CommentDeleteResponse,
)

__all__ = [
    # Envelope
    "ApiResponse",
    "CamelModel",
    "ErrorResponse",
    # User schemas
    "SignupRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "TokenPayload",
    # Photo schemas
    "PhotoCreate",
    "PhotoMetadataSchema",
    "PhotoResponse",
    # Project schemas
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ProjectSummary",
    "ProjectDetail",
    "ProjectStats",
    "FolderCreate",
    "FolderResponse",
    # Selection schemas
    "SelectionUpdate",
    "BulkSelectionRequest",
    "SelectionResponse",
    "BulkSelectionItem",
    "BulkSelectionResponse",
    "PhotoSelection",
    "SelectionStats",
    # Gallery schemas
    "GalleryStatusFilter",
    "GalleryProject",
    "GalleryPhoto",
    "GalleryView",
    "GalleryCompleteResponse",
    # Comment schemas
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "ThreadedComment",
    "PhotoComments",
    "ProjectComments",
    "CommentDeleteResponse",
]
