"""
Selection service: per-photo client decisions (selected / rejected / pending).

A photo is pending when it has no Selection record. Setting "pending"
deletes the record instead of storing one.
"""
from typing import Iterable, List, Optional

from gallery_api.exceptions import NotFoundError, ValidationError
from gallery_api.models.selection import Selection, SelectionStatus
from gallery_api.schemas.selection import (
    BulkSelectionItem,
    BulkSelectionResponse,
    PhotoSelection,
    SelectionResponse,
    SelectionStats,
)
from gallery_api.store import EntityStore, new_id, utcnow
from gallery_api.utils.logger import log_info


def parse_selection_status(value) -> SelectionStatus:
    """
    Convert a raw status value to SelectionStatus.

    Raises:
        ValidationError: If the value is not selected, rejected or pending
    """
    try:
        return SelectionStatus(value)
    except ValueError:
        raise ValidationError(
            'Invalid status. Must be "selected", "rejected", or "pending"'
        ) from None


class SelectionService:
    """
    Service for handling photo selections.
    Guarantees at most one Selection per (project, photo).
    """

    def __init__(self, store: EntityStore):
        self.store = store

    async def set_selection(
        self,
        project_id: str,
        photo_id: str,
        status,
        client_id: str,
    ) -> SelectionResponse:
        """
        Set the selection status of one photo.

        Args:
            project_id: Project the photo must belong to
            photo_id: Photo ID
            status: selected | rejected | pending
            client_id: Caller recorded on newly created selections

        Returns:
            SelectionResponse with the applied status and timestamp

        Raises:
            ValidationError: Invalid status
            NotFoundError: Photo not in the project
        """
        status = parse_selection_status(status)
        async with self.store.lock:
            result = self._apply(project_id, photo_id, status, client_id)

        log_info(
            "Selection updated",
            event="selection",
            project_id=project_id,
            photo_id=photo_id,
            status=status.value,
            client_id=client_id,
        )
        return result

    async def bulk_set_selection(
        self,
        project_id: str,
        photo_ids: List[str],
        status,
        client_id: str,
    ) -> BulkSelectionResponse:
        """
        Apply the same status to many photos.

        Each photo is handled independently; an unknown photo is reported in
        the results without aborting the rest of the batch.

        Returns:
            BulkSelectionResponse with results in input order
        """
        if not photo_ids:
            raise ValidationError("photoIds array is required")
        status = parse_selection_status(status)

        results: List[BulkSelectionItem] = []
        for photo_id in photo_ids:
            async with self.store.lock:
                try:
                    self._apply(project_id, photo_id, status, client_id)
                except NotFoundError as e:
                    results.append(
                        BulkSelectionItem(photo_id=photo_id, success=False, error=e.message)
                    )
                    continue
            results.append(BulkSelectionItem(photo_id=photo_id, success=True, status=status))

        updated = sum(1 for r in results if r.success)
        failed = len(results) - updated
        log_info(
            "Bulk selection applied",
            event="selection",
            project_id=project_id,
            status=status.value,
            updated=updated,
            failed=failed,
            client_id=client_id,
        )
        return BulkSelectionResponse(results=results, updated=updated, failed=failed)

    def compute_stats(
        self,
        project_id: str,
        photo_ids: Optional[Iterable[str]] = None,
    ) -> SelectionStats:
        """
        Count selected / rejected / pending photos.

        Args:
            project_id: Project ID
            photo_ids: Restrict counting to these photos (default: whole project)

        Returns:
            SelectionStats where selected + rejected + pending == total
        """
        ids = {p.id for p in self.store.project_photos(project_id)}
        if photo_ids is not None:
            ids &= set(photo_ids)

        selected = rejected = decided = 0
        for selection in self.store.project_selections(project_id):
            if selection.photo_id not in ids:
                continue
            decided += 1
            if selection.status == SelectionStatus.SELECTED:
                selected += 1
            elif selection.status == SelectionStatus.REJECTED:
                rejected += 1

        return SelectionStats(
            total=len(ids),
            selected=selected,
            rejected=rejected,
            pending=len(ids) - decided,
        )

    def get_selection_view(self, project_id: str, photo_id: str) -> Optional[PhotoSelection]:
        """Current selection of a photo, or None when it is pending."""
        selection = self.store.find_selection(project_id, photo_id)
        if selection is None:
            return None
        return PhotoSelection(
            id=selection.id,
            status=selection.status,
            updated_at=selection.updated_at,
        )

    def _apply(
        self,
        project_id: str,
        photo_id: str,
        status: SelectionStatus,
        client_id: str,
    ) -> SelectionResponse:
        # 호출자가 store.lock 을 잡고 있어야 함
        photo = self.store.get_photo(photo_id)
        if photo is None or photo.project_id != project_id:
            raise NotFoundError("Photo not found")

        now = utcnow()
        existing = self.store.find_selection(project_id, photo_id)

        if status == SelectionStatus.PENDING:
            if existing is not None:
                self.store.remove_selection(existing)
        elif existing is not None:
            existing.status = status
            existing.updated_at = now
        else:
            self.store.add_selection(
                Selection(
                    id=new_id("sel"),
                    photo_id=photo_id,
                    project_id=project_id,
                    client_id=client_id,
                    status=status,
                    created_at=now,
                    updated_at=now,
                )
            )

        return SelectionResponse(photo_id=photo_id, status=status, updated_at=now)
