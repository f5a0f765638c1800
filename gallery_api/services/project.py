"""
Project service for managing projects, folders and photo registration.
"""
from typing import List, Optional

from gallery_api.exceptions import NotFoundError, ValidationError
from gallery_api.models.photo import Photo, PhotoMetadata
from gallery_api.models.project import Folder, Project, ProjectStatus
from gallery_api.schemas.photo import PhotoResponse
from gallery_api.schemas.project import (
    FolderResponse,
    ProjectDetail,
    ProjectResponse,
    ProjectStats,
    ProjectSummary,
)
from gallery_api.store import EntityStore, new_id, utcnow
from gallery_api.utils.logger import log_info
from gallery_api.utils.security import generate_share_token


class ProjectService:
    """
    Service for handling a photographer's projects.
    Every operation is scoped to the owner; other owners' projects look missing.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    # ============== Project CRUD ==============

    def list_projects(self, owner_id: str) -> List[ProjectSummary]:
        """
        Get all projects for a photographer, newest first.

        Returns:
            List of ProjectSummary with folder and photo counts
        """
        projects = sorted(
            (p for p in self.store.projects.values() if p.owner_id == owner_id),
            key=lambda p: p.created_at,
            reverse=True,
        )
        return [
            ProjectSummary(
                **ProjectResponse.model_validate(project).model_dump(),
                folder_count=len(self.store.project_folders(project.id)),
                photo_count=len(self.store.project_photos(project.id)),
            )
            for project in projects
        ]

    async def create_project(
        self,
        owner_id: str,
        name: str,
        description: Optional[str] = None,
    ) -> Project:
        """
        Create a new project in draft status with a fresh share token.

        Args:
            owner_id: Photographer user ID
            name: Project name
            description: Optional description

        Returns:
            Created Project
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Project name is required")

        async with self.store.lock:
            share_token = generate_share_token()
            while self.store.find_project_by_share_token(share_token) is not None:
                share_token = generate_share_token()

            now = utcnow()
            project = self.store.add_project(
                Project(
                    id=new_id("proj"),
                    name=name,
                    description=description,
                    owner_id=owner_id,
                    share_token=share_token,
                    status=ProjectStatus.DRAFT,
                    created_at=now,
                    updated_at=now,
                )
            )

        log_info("Project created", event="project", project_id=project.id, owner_id=owner_id)
        return project

    def get_project(self, project_id: str, owner_id: str) -> Project:
        """
        Get a project owned by the caller.

        Raises:
            NotFoundError: Missing or owned by someone else
        """
        project = self.store.get_project(project_id)
        if project is None or project.owner_id != owner_id:
            raise NotFoundError("Project not found")
        return project

    def get_project_detail(self, project_id: str, owner_id: str) -> ProjectDetail:
        """Project with folders, photos and size statistics."""
        project = self.get_project(project_id, owner_id)
        folders = self.store.project_folders(project.id)
        photos = self.store.project_photos(project.id)

        return ProjectDetail(
            **ProjectResponse.model_validate(project).model_dump(),
            folders=[FolderResponse.model_validate(f) for f in folders],
            photos=[PhotoResponse.model_validate(p) for p in photos],
            stats=ProjectStats(
                folder_count=len(folders),
                photo_count=len(photos),
                total_size=sum(p.size for p in photos),
            ),
        )

    async def update_project(
        self,
        project_id: str,
        owner_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        status=None,
    ) -> Project:
        """
        Partially update a project. Omitted (None) fields are left unchanged.

        Raises:
            ValidationError: Blank name or unknown status
            NotFoundError: Project not found
        """
        if status is not None:
            try:
                status = ProjectStatus(status)
            except ValueError:
                raise ValidationError(
                    'Invalid status. Must be "draft", "shared", or "completed"'
                ) from None
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Project name cannot be empty")

        async with self.store.lock:
            project = self.get_project(project_id, owner_id)
            if name is not None:
                project.name = name
            if description is not None:
                # 빈 문자열이면 설명 삭제
                project.description = description.strip() or None
            if status is not None:
                project.status = status
            project.updated_at = utcnow()

        log_info(
            "Project updated",
            event="project",
            project_id=project_id,
            status=project.status.value,
        )
        return project

    # ============== Folders ==============

    async def create_folder(
        self,
        project_id: str,
        owner_id: str,
        name: str,
        description: Optional[str] = None,
    ) -> Folder:
        """Create a folder in an owned project."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Folder name is required")

        async with self.store.lock:
            project = self.get_project(project_id, owner_id)
            folder = self.store.add_folder(
                Folder(
                    id=new_id("folder"),
                    project_id=project.id,
                    name=name,
                    description=description,
                    created_at=utcnow(),
                )
            )

        log_info("Folder created", event="project", project_id=project_id, folder_id=folder.id)
        return folder

    def list_folders(self, project_id: str, owner_id: str) -> List[Folder]:
        """Folders of an owned project."""
        project = self.get_project(project_id, owner_id)
        return self.store.project_folders(project.id)

    # ============== Photos ==============

    async def add_photo(
        self,
        project_id: str,
        owner_id: str,
        folder_id: str,
        filename: str,
        url: str,
        thumbnail_url: str,
        size: int,
        width: int,
        height: int,
        original_name: Optional[str] = None,
        metadata: Optional[PhotoMetadata] = None,
    ) -> Photo:
        """
        Register a photo (metadata and URLs only) in a folder of an owned project.

        Raises:
            NotFoundError: Project not found
            ValidationError: Folder does not belong to the project
        """
        async with self.store.lock:
            project = self.get_project(project_id, owner_id)
            folder = self.store.get_folder(folder_id)
            if folder is None or folder.project_id != project.id:
                raise ValidationError("Folder does not belong to this project")

            photo = self.store.add_photo(
                Photo(
                    id=new_id("photo"),
                    folder_id=folder.id,
                    project_id=project.id,
                    filename=filename,
                    original_name=original_name,
                    url=url,
                    thumbnail_url=thumbnail_url,
                    size=size,
                    width=width,
                    height=height,
                    metadata=metadata,
                    uploaded_at=utcnow(),
                )
            )

        log_info(
            "Photo registered",
            event="project",
            project_id=project_id,
            folder_id=folder_id,
            photo_id=photo.id,
            size=size,
        )
        return photo
