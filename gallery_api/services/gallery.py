"""
Gallery service: the client-facing view of a project opened by share token.
"""
from typing import List, Optional

from gallery_api.exceptions import ForbiddenError, NotFoundError
from gallery_api.models.project import Project, ProjectStatus
from gallery_api.schemas.gallery import (
    GalleryCompleteResponse,
    GalleryPhoto,
    GalleryProject,
    GalleryView,
)
from gallery_api.schemas.photo import PhotoResponse
from gallery_api.schemas.project import FolderResponse
from gallery_api.schemas.selection import (
    BulkSelectionResponse,
    PhotoSelection,
    SelectionResponse,
)
from gallery_api.services.selection import SelectionService
from gallery_api.store import EntityStore, utcnow
from gallery_api.utils.logger import log_info


class GalleryService:
    """
    Service for share-token gallery access.
    Assembles the gallery view and routes client selections to SelectionService.
    """

    def __init__(self, store: EntityStore):
        self.store = store
        self.selections = SelectionService(store)

    def find_project(self, share_token: str) -> Project:
        """
        Resolve a share token regardless of project status.

        Raises:
            NotFoundError: Unknown token
        """
        project = self.store.find_project_by_share_token(share_token)
        if project is None:
            raise NotFoundError("Gallery not found")
        return project

    def get_shared_project(self, share_token: str) -> Project:
        """
        Resolve a share token to a project that is open for viewing.

        Raises:
            NotFoundError: Unknown token
            ForbiddenError: Project exists but is not shared
        """
        project = self.store.find_project_by_share_token(share_token)
        if project is None:
            raise NotFoundError("Gallery not found or access denied")
        if not project.is_shared:
            raise ForbiddenError("Gallery is not currently available for viewing")
        return project

    def assemble_gallery(
        self,
        share_token: str,
        folder_id: Optional[str] = None,
        status=None,
    ) -> GalleryView:
        """
        Build the gallery view for a share token.

        Args:
            share_token: Gallery share token
            folder_id: Only include photos of this folder
            status: Only include photos with this selection status ("all" = no filter)

        Returns:
            GalleryView. Stats always cover every photo of the project.
        """
        project = self.get_shared_project(share_token)

        folders = self.store.project_folders(project.id)
        all_photos = self.store.project_photos(project.id)

        photos = all_photos
        if folder_id:
            photos = [p for p in photos if p.folder_id == folder_id]

        gallery_photos: List[GalleryPhoto] = []
        for photo in photos:
            selection = self.selections.get_selection_view(project.id, photo.id) or PhotoSelection()
            gallery_photos.append(
                GalleryPhoto(
                    **PhotoResponse.model_validate(photo).model_dump(),
                    selection=selection,
                )
            )

        status_value = getattr(status, "value", status)
        if status_value and status_value != "all":
            gallery_photos = [p for p in gallery_photos if p.selection.status.value == status_value]

        return GalleryView(
            project=GalleryProject.model_validate(project),
            folders=[FolderResponse.model_validate(f) for f in folders],
            photos=gallery_photos,
            stats=self.selections.compute_stats(project.id),
        )

    async def set_selection(
        self,
        share_token: str,
        photo_id: str,
        status,
        client_id: str,
    ) -> SelectionResponse:
        """Set one photo's selection through a share token."""
        project = self.find_project(share_token)
        return await self.selections.set_selection(project.id, photo_id, status, client_id)

    async def bulk_set_selection(
        self,
        share_token: str,
        photo_ids: List[str],
        status,
        client_id: str,
    ) -> BulkSelectionResponse:
        """Set many photos' selection through a share token."""
        project = self.find_project(share_token)
        return await self.selections.bulk_set_selection(project.id, photo_ids, status, client_id)

    async def complete_gallery(self, share_token: str) -> GalleryCompleteResponse:
        """
        Mark the gallery as completed by the client.

        The photographer notification is emitted as a log event.
        """
        project = self.find_project(share_token)

        async with self.store.lock:
            now = utcnow()
            project.status = ProjectStatus.COMPLETED
            project.updated_at = now

        stats = self.selections.compute_stats(project.id)
        log_info(
            "Gallery completed, notifying photographer",
            event="gallery",
            project_id=project.id,
            owner_id=project.owner_id,
            selected=stats.selected,
            rejected=stats.rejected,
            pending=stats.pending,
        )
        return GalleryCompleteResponse(project_id=project.id, completed_at=now)
