"""
Gallery router for public (share token) access.

No authentication is required; a bearer token, when present, identifies
the client recorded on selections.
"""
import time
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from gallery_api.config import get_settings
from gallery_api.dependencies.auth import get_optional_current_user
from gallery_api.exceptions import ForbiddenError, GalleryError, NotFoundError
from gallery_api.middlewares.rate_limit_middleware import get_rate_limit_decorator
from gallery_api.models.user import User
from gallery_api.schemas.common import ApiResponse
from gallery_api.schemas.gallery import GalleryCompleteResponse, GalleryStatusFilter, GalleryView
from gallery_api.schemas.selection import (
    BulkSelectionRequest,
    BulkSelectionResponse,
    SelectionResponse,
    SelectionUpdate,
)
from gallery_api.services.gallery import GalleryService
from gallery_api.store import EntityStore, get_store
from gallery_api.utils.prometheus_metrics import (
    bulk_selection_items_total,
    gallery_access_duration_seconds,
    gallery_access_total,
    gallery_completions_total,
    selection_updates_total,
)

router = APIRouter(prefix="/gallery", tags=["Gallery"])

# Rate limiting 설정 (토큰 추측 방지)
gallery_rate_limit = get_rate_limit_decorator(f"{get_settings().rate_limit_gallery_per_minute}/minute")


def _client_id(user: Optional[User]) -> str:
    if user is not None:
        return user.id
    return get_settings().guest_client_id


@router.get(
    "/{share_token}",
    response_model=ApiResponse[GalleryView],
    summary="Open a shared gallery",
)
@gallery_rate_limit
async def get_gallery(
    share_token: str,
    request: Request,
    folder: Optional[str] = Query(None, description="Only photos of this folder"),
    status: GalleryStatusFilter = Query(GalleryStatusFilter.ALL, description="Selection status filter"),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[GalleryView]:
    """
    Access a gallery by its share token.

    - **folder**: folder id filter
    - **status**: `all`, `selected`, `rejected` or `pending`

    Stats always describe the whole gallery, regardless of filters.
    """
    start_time = time.perf_counter()
    try:
        view = GalleryService(store).assemble_gallery(share_token, folder_id=folder, status=status)
    except NotFoundError:
        gallery_access_total.labels(token_status="invalid", result="denied").inc()
        gallery_access_duration_seconds.labels(result="denied").observe(time.perf_counter() - start_time)
        raise
    except ForbiddenError:
        gallery_access_total.labels(token_status="not_shared", result="denied").inc()
        gallery_access_duration_seconds.labels(result="denied").observe(time.perf_counter() - start_time)
        raise

    gallery_access_total.labels(token_status="valid", result="success").inc()
    gallery_access_duration_seconds.labels(result="success").observe(time.perf_counter() - start_time)
    return ApiResponse(data=view)


@router.post(
    "/{share_token}/selections/{photo_id}",
    response_model=ApiResponse[SelectionResponse],
    summary="Select, reject or reset one photo",
)
@gallery_rate_limit
async def update_selection(
    share_token: str,
    photo_id: str,
    request: Request,
    selection_data: SelectionUpdate,
    store: EntityStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_current_user),
) -> ApiResponse[SelectionResponse]:
    """
    Set a photo's selection status. `pending` clears the selection.
    """
    status_label = selection_data.status.value
    try:
        result = await GalleryService(store).set_selection(
            share_token, photo_id, selection_data.status, _client_id(current_user)
        )
    except GalleryError:
        selection_updates_total.labels(status=status_label, result="failure").inc()
        raise

    selection_updates_total.labels(status=status_label, result="success").inc()
    return ApiResponse(data=result)


@router.post(
    "/{share_token}/bulk-selection",
    response_model=ApiResponse[BulkSelectionResponse],
    summary="Apply one status to many photos",
)
@gallery_rate_limit
async def bulk_update_selection(
    share_token: str,
    request: Request,
    bulk_data: BulkSelectionRequest,
    store: EntityStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_current_user),
) -> ApiResponse[BulkSelectionResponse]:
    """
    Set the same status on several photos.
    Unknown photos are reported per item and do not fail the request.
    """
    result = await GalleryService(store).bulk_set_selection(
        share_token, bulk_data.photo_ids, bulk_data.status, _client_id(current_user)
    )

    status_label = bulk_data.status.value
    if result.updated:
        bulk_selection_items_total.labels(status=status_label, result="success").inc(result.updated)
    if result.failed:
        bulk_selection_items_total.labels(status=status_label, result="failure").inc(result.failed)

    return ApiResponse(
        data=result,
        message=f"Updated {result.updated} photos, {result.failed} failed",
    )


@router.post(
    "/{share_token}/complete",
    response_model=ApiResponse[GalleryCompleteResponse],
    summary="Mark the gallery as completed",
)
@gallery_rate_limit
async def complete_gallery(
    share_token: str,
    request: Request,
    store: EntityStore = Depends(get_store),
) -> ApiResponse[GalleryCompleteResponse]:
    """
    Client finished reviewing; the photographer is notified.
    """
    result = await GalleryService(store).complete_gallery(share_token)
    gallery_completions_total.inc()
    return ApiResponse(
        data=result,
        message="Gallery marked as complete. Photographer has been notified.",
    )
