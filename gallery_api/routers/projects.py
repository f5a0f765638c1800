"""
Projects router for photographers: projects, folders and photo registration.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from gallery_api.dependencies.auth import require_photographer
from gallery_api.exceptions import GalleryError
from gallery_api.models.photo import PhotoMetadata
from gallery_api.models.user import User
from gallery_api.schemas.common import ApiResponse
from gallery_api.schemas.photo import PhotoCreate, PhotoResponse
from gallery_api.schemas.project import (
    FolderCreate,
    FolderResponse,
    ProjectCreate,
    ProjectDetail,
    ProjectResponse,
    ProjectSummary,
    ProjectUpdate,
)
from gallery_api.services.project import ProjectService
from gallery_api.store import EntityStore, get_store
from gallery_api.utils.prometheus_metrics import project_operations_total

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get(
    "",
    response_model=ApiResponse[List[ProjectSummary]],
    summary="List my projects",
)
async def list_projects(
    current_user: User = Depends(require_photographer),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[List[ProjectSummary]]:
    """
    Get all projects of the current photographer, newest first.
    """
    return ApiResponse(data=ProjectService(store).list_projects(current_user.id))


@router.post(
    "",
    response_model=ApiResponse[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new project",
)
async def create_project(
    project_data: ProjectCreate,
    current_user: User = Depends(require_photographer),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[ProjectResponse]:
    """
    Create a new project in draft status.

    - **name**: Project name (1-255 characters)
    - **description**: Optional description
    """
    try:
        project = await ProjectService(store).create_project(
            current_user.id, project_data.name, project_data.description
        )
    except GalleryError:
        project_operations_total.labels(operation="create", result="failure").inc()
        raise

    project_operations_total.labels(operation="create", result="success").inc()
    return ApiResponse(data=ProjectResponse.model_validate(project))


@router.get(
    "/{project_id}",
    response_model=ApiResponse[ProjectDetail],
    summary="Get project details",
)
async def get_project(
    project_id: str,
    current_user: User = Depends(require_photographer),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[ProjectDetail]:
    """Project with folders, photos and size statistics."""
    return ApiResponse(data=ProjectService(store).get_project_detail(project_id, current_user.id))


@router.put(
    "/{project_id}",
    response_model=ApiResponse[ProjectResponse],
    summary="Update project",
)
async def update_project(
    project_id: str,
    update_data: ProjectUpdate,
    current_user: User = Depends(require_photographer),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[ProjectResponse]:
    """
    Update name, description or status. Omitted fields are unchanged.
    Setting status to `shared` opens the gallery to its share link.
    """
    try:
        project = await ProjectService(store).update_project(
            project_id,
            current_user.id,
            name=update_data.name,
            description=update_data.description,
            status=update_data.status,
        )
    except GalleryError:
        project_operations_total.labels(operation="update", result="failure").inc()
        raise

    project_operations_total.labels(operation="update", result="success").inc()
    return ApiResponse(data=ProjectResponse.model_validate(project))


@router.post(
    "/{project_id}/folders",
    response_model=ApiResponse[FolderResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a folder",
)
async def create_folder(
    project_id: str,
    folder_data: FolderCreate,
    current_user: User = Depends(require_photographer),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[FolderResponse]:
    """Create a folder inside a project."""
    try:
        folder = await ProjectService(store).create_folder(
            project_id, current_user.id, folder_data.name, folder_data.description
        )
    except GalleryError:
        project_operations_total.labels(operation="create_folder", result="failure").inc()
        raise

    project_operations_total.labels(operation="create_folder", result="success").inc()
    return ApiResponse(data=FolderResponse.model_validate(folder))


@router.get(
    "/{project_id}/folders",
    response_model=ApiResponse[List[FolderResponse]],
    summary="List folders",
)
async def list_folders(
    project_id: str,
    current_user: User = Depends(require_photographer),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[List[FolderResponse]]:
    """Folders of a project."""
    folders = ProjectService(store).list_folders(project_id, current_user.id)
    return ApiResponse(data=[FolderResponse.model_validate(f) for f in folders])


@router.post(
    "/{project_id}/photos",
    response_model=ApiResponse[PhotoResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a photo",
)
async def add_photo(
    project_id: str,
    photo_data: PhotoCreate,
    current_user: User = Depends(require_photographer),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[PhotoResponse]:
    """
    Register a photo already stored elsewhere (URLs, size, dimensions).
    The folder must belong to the project.
    """
    metadata = None
    if photo_data.metadata is not None:
        metadata = PhotoMetadata(**photo_data.metadata.model_dump())

    try:
        photo = await ProjectService(store).add_photo(
            project_id,
            current_user.id,
            folder_id=photo_data.folder_id,
            filename=photo_data.filename,
            url=photo_data.url,
            thumbnail_url=photo_data.thumbnail_url,
            size=photo_data.size,
            width=photo_data.width,
            height=photo_data.height,
            original_name=photo_data.original_name,
            metadata=metadata,
        )
    except GalleryError:
        project_operations_total.labels(operation="add_photo", result="failure").inc()
        raise

    project_operations_total.labels(operation="add_photo", result="success").inc()
    return ApiResponse(data=PhotoResponse.model_validate(photo))
