"""
Comments router for per-photo discussion threads.
"""
from typing import Optional

from fastapi import APIRouter, Depends, status

from gallery_api.dependencies.auth import authenticate, get_bearer_token, get_current_user
from gallery_api.exceptions import GalleryError, NotFoundError
from gallery_api.models.user import User
from gallery_api.schemas.comment import (
    CommentCreate,
    CommentDeleteResponse,
    CommentResponse,
    CommentUpdate,
    PhotoComments,
    ProjectComments,
)
from gallery_api.schemas.common import ApiResponse
from gallery_api.services.comment import CommentService, clean_content
from gallery_api.store import EntityStore, get_store
from gallery_api.utils.prometheus_metrics import comment_operations_total

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.get(
    "/photo/{photo_id}",
    response_model=ApiResponse[PhotoComments],
    summary="List threaded comments of a photo",
)
async def list_photo_comments(
    photo_id: str,
    store: EntityStore = Depends(get_store),
) -> ApiResponse[PhotoComments]:
    """
    Comments of a photo, oldest first, with replies nested under their parent.
    """
    comments = CommentService(store).list_for_photo(photo_id)
    # total 은 답글 포함 전체 댓글 수
    total = len(comments) + sum(len(c.replies) for c in comments)
    return ApiResponse(data=PhotoComments(comments=comments, total=total))


@router.post(
    "/photo/{photo_id}",
    response_model=ApiResponse[CommentResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a photo",
)
async def create_comment(
    photo_id: str,
    comment_data: CommentCreate,
    token: Optional[str] = Depends(get_bearer_token),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[CommentResponse]:
    """
    Add a comment, or a reply when **parentId** is given.
    Replies can only target top-level comments.
    Blank content is rejected before the caller is authenticated.
    """
    try:
        content = clean_content(comment_data.content)
        current_user = authenticate(token, store)

        photo = store.get_photo(photo_id)
        if photo is None:
            raise NotFoundError("Photo not found")

        comment = await CommentService(store).add_comment(
            photo_id=photo.id,
            project_id=photo.project_id,
            author_id=current_user.id,
            author_name=current_user.name,
            content=content,
            parent_id=comment_data.parent_id,
        )
    except GalleryError:
        comment_operations_total.labels(operation="create", result="failure").inc()
        raise

    comment_operations_total.labels(operation="create", result="success").inc()
    return ApiResponse(data=CommentResponse.model_validate(comment))


@router.put(
    "/{comment_id}",
    response_model=ApiResponse[CommentResponse],
    summary="Edit own comment",
)
async def update_comment(
    comment_id: str,
    comment_data: CommentUpdate,
    token: Optional[str] = Depends(get_bearer_token),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[CommentResponse]:
    """Edit the content of a comment you wrote."""
    try:
        content = clean_content(comment_data.content)
        current_user = authenticate(token, store)

        comment = await CommentService(store).update_comment(
            comment_id, current_user.id, content
        )
    except GalleryError:
        comment_operations_total.labels(operation="update", result="failure").inc()
        raise

    comment_operations_total.labels(operation="update", result="success").inc()
    return ApiResponse(data=CommentResponse.model_validate(comment))


@router.delete(
    "/{comment_id}",
    response_model=ApiResponse[CommentDeleteResponse],
    summary="Delete own comment and its replies",
)
async def delete_comment(
    comment_id: str,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> ApiResponse[CommentDeleteResponse]:
    """Delete a comment you wrote. Replies to it are deleted too."""
    try:
        deleted = await CommentService(store).delete_comment(comment_id, current_user.id)
    except GalleryError:
        comment_operations_total.labels(operation="delete", result="failure").inc()
        raise

    comment_operations_total.labels(operation="delete", result="success").inc()
    return ApiResponse(
        data=CommentDeleteResponse(deleted_count=deleted),
        message="Comment deleted successfully",
    )


@router.get(
    "/project/{project_id}",
    response_model=ApiResponse[ProjectComments],
    summary="List comments of a project grouped by photo",
)
async def list_project_comments(
    project_id: str,
    store: EntityStore = Depends(get_store),
) -> ApiResponse[ProjectComments]:
    """Comments grouped by photo id, newest first within each photo."""
    return ApiResponse(data=CommentService(store).list_for_project(project_id))
