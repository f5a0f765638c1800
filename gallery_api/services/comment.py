"""
Comment service for per-photo discussion threads.
"""
from collections import defaultdict
from typing import Dict, List, Optional

from gallery_api.exceptions import ForbiddenError, NotFoundError, ValidationError
from gallery_api.models.comment import Comment
from gallery_api.schemas.comment import CommentResponse, ProjectComments, ThreadedComment
from gallery_api.store import EntityStore, new_id, utcnow
from gallery_api.utils.logger import log_info


def clean_content(content: Optional[str]) -> str:
    content = (content or "").strip()
    if not content:
        raise ValidationError("Comment content is required")
    return content


class CommentService:
    """
    Service for handling comments.
    Threads are one level deep: replies attach to top-level comments only.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    async def add_comment(
        self,
        photo_id: str,
        project_id: str,
        author_id: str,
        author_name: str,
        content: str,
        parent_id: Optional[str] = None,
    ) -> Comment:
        """
        Add a comment or a reply to a photo.

        Args:
            photo_id: Photo being discussed
            project_id: Project of the photo
            author_id: Author user ID
            author_name: Author display name
            content: Comment text (trimmed before storing)
            parent_id: Top-level comment to reply to

        Returns:
            Created Comment

        Raises:
            ValidationError: Empty content or reply to a reply
            NotFoundError: Parent comment not found on this photo
        """
        content = clean_content(content)

        async with self.store.lock:
            if parent_id is not None:
                parent = self.store.get_comment(parent_id)
                if parent is None or parent.photo_id != photo_id:
                    raise NotFoundError("Parent comment not found")
                if parent.is_reply:
                    raise ValidationError("Cannot reply to a reply")

            comment = self.store.add_comment(
                Comment(
                    id=new_id("comment"),
                    photo_id=photo_id,
                    project_id=project_id,
                    author_id=author_id,
                    author_name=author_name,
                    content=content,
                    created_at=utcnow(),
                    parent_id=parent_id,
                )
            )

        log_info(
            "Comment added",
            event="comment",
            comment_id=comment.id,
            photo_id=photo_id,
            project_id=project_id,
            author_id=author_id,
            parent_id=parent_id,
        )
        return comment

    async def update_comment(self, comment_id: str, author_id: str, new_content: str) -> Comment:
        """
        Replace a comment's content. Only the author may edit.

        Raises:
            NotFoundError: Comment not found
            ForbiddenError: Caller is not the author
            ValidationError: Empty content
        """
        async with self.store.lock:
            comment = self._get_own_comment(comment_id, author_id, action="edit")
            comment.content = clean_content(new_content)

        log_info("Comment updated", event="comment", comment_id=comment_id, author_id=author_id)
        return comment

    async def delete_comment(self, comment_id: str, author_id: str) -> int:
        """
        Delete a comment and its replies. Only the author may delete.

        Returns:
            Number of deleted comments, including the comment itself
        """
        async with self.store.lock:
            self._get_own_comment(comment_id, author_id, action="delete")
            reply_ids = [c.id for c in self.store.comments.values() if c.parent_id == comment_id]
            for reply_id in reply_ids:
                self.store.remove_comment(reply_id)
            self.store.remove_comment(comment_id)

        deleted = len(reply_ids) + 1
        log_info(
            "Comment deleted",
            event="comment",
            comment_id=comment_id,
            author_id=author_id,
            deleted_count=deleted,
        )
        return deleted

    def list_for_photo(self, photo_id: str) -> List[ThreadedComment]:
        """
        Threaded comments of a photo.

        Top-level comments and each reply list are ordered oldest first.
        """
        comments = sorted(
            (c for c in self.store.comments.values() if c.photo_id == photo_id),
            key=lambda c: c.created_at,
        )

        replies: Dict[str, List[CommentResponse]] = defaultdict(list)
        for comment in comments:
            if comment.is_reply:
                replies[comment.parent_id].append(CommentResponse.model_validate(comment))

        return [
            ThreadedComment(
                **CommentResponse.model_validate(comment).model_dump(),
                replies=replies.get(comment.id, []),
            )
            for comment in comments
            if not comment.is_reply
        ]

    def list_for_project(self, project_id: str) -> ProjectComments:
        """
        Project comments grouped by photo, newest first within each photo.
        """
        grouped: Dict[str, List[Comment]] = defaultdict(list)
        total = 0
        for comment in self.store.comments.values():
            if comment.project_id == project_id:
                grouped[comment.photo_id].append(comment)
                total += 1

        comments_by_photo = {
            photo_id: [
                CommentResponse.model_validate(c)
                for c in sorted(items, key=lambda c: c.created_at, reverse=True)
            ]
            for photo_id, items in grouped.items()
        }
        return ProjectComments(
            comments_by_photo=comments_by_photo,
            total=total,
            photos_with_comments=len(comments_by_photo),
        )

    def _get_own_comment(self, comment_id: str, author_id: str, action: str) -> Comment:
        comment = self.store.get_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        if comment.author_id != author_id:
            raise ForbiddenError(f"You can only {action} your own comments")
        return comment
