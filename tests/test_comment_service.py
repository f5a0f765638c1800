"""Tests for comment service."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from gallery_api.exceptions import ForbiddenError, NotFoundError, ValidationError
from gallery_api.models import Comment
from gallery_api.services.comment import CommentService


def _add(service: CommentService, content: str, parent_id=None, photo_id="photo-9", author="user-2"):
    return asyncio.run(
        service.add_comment(
            photo_id=photo_id,
            project_id="proj-1",
            author_id=author,
            author_name="Jane Client",
            content=content,
            parent_id=parent_id,
        )
    )


def test_add_comment_trims_content(empty_store) -> None:
    service = CommentService(empty_store)

    comment = _add(service, "  Lovely light  ")

    assert comment.content == "Lovely light"
    assert comment.parent_id is None
    assert empty_store.get_comment(comment.id) is comment


def test_add_comment_rejects_blank_content(empty_store) -> None:
    service = CommentService(empty_store)

    with pytest.raises(ValidationError):
        _add(service, "   ")
    assert empty_store.comments == {}


def test_reply_to_missing_parent(empty_store) -> None:
    service = CommentService(empty_store)

    with pytest.raises(NotFoundError):
        _add(service, "reply", parent_id="comment-missing")


def test_reply_parent_must_be_on_same_photo(store) -> None:
    service = CommentService(store)

    with pytest.raises(NotFoundError):
        _add(service, "reply", parent_id="comment-1", photo_id="photo-2")


def test_top_level_comment_accepts_many_replies(empty_store) -> None:
    service = CommentService(empty_store)
    root = _add(service, "root")

    for index in range(3):
        _add(service, f"reply {index}", parent_id=root.id)

    threads = service.list_for_photo("photo-9")
    assert len(threads) == 1
    assert len(threads[0].replies) == 3


def test_thread_end_to_end(empty_store) -> None:
    service = CommentService(empty_store)

    c1 = _add(service, "first")
    c2 = _add(service, "answer", parent_id=c1.id)
    with pytest.raises(ValidationError, match="Cannot reply to a reply"):
        _add(service, "nested", parent_id=c2.id)

    deleted = asyncio.run(service.delete_comment(c1.id, "user-2"))

    assert deleted == 2
    assert service.list_for_photo("photo-9") == []


def test_delete_reply_removes_only_reply(store) -> None:
    service = CommentService(store)

    deleted = asyncio.run(service.delete_comment("comment-2", "user-1"))

    assert deleted == 1
    assert store.get_comment("comment-1") is not None


def test_delete_requires_author(store) -> None:
    service = CommentService(store)

    with pytest.raises(ForbiddenError):
        asyncio.run(service.delete_comment("comment-1", "user-1"))
    with pytest.raises(NotFoundError):
        asyncio.run(service.delete_comment("comment-404", "user-1"))


def test_update_comment(store) -> None:
    service = CommentService(store)
    created_at = store.get_comment("comment-1").created_at

    comment = asyncio.run(service.update_comment("comment-1", "user-2", "  Edited  "))

    assert comment.content == "Edited"
    assert comment.created_at == created_at


def test_update_comment_errors(store) -> None:
    service = CommentService(store)

    with pytest.raises(NotFoundError):
        asyncio.run(service.update_comment("comment-404", "user-2", "x"))
    with pytest.raises(ForbiddenError):
        asyncio.run(service.update_comment("comment-1", "user-1", "x"))
    with pytest.raises(ValidationError):
        asyncio.run(service.update_comment("comment-1", "user-2", "   "))


def test_list_for_photo_is_ascending_with_nested_replies(store) -> None:
    threads = CommentService(store).list_for_photo("photo-1")

    assert [t.id for t in threads] == ["comment-1"]
    assert [r.id for r in threads[0].replies] == ["comment-2"]


def test_list_for_photo_orders_by_created_at(empty_store) -> None:
    base = datetime(2024, 1, 16, 11, 0, tzinfo=timezone.utc)
    for index, offset in enumerate((30, 0, 15)):
        empty_store.add_comment(
            Comment(
                id=f"comment-{index}",
                photo_id="photo-9",
                project_id="proj-1",
                author_id="user-2",
                author_name="Jane Client",
                content=f"#{index}",
                created_at=base + timedelta(minutes=offset),
            )
        )

    threads = CommentService(empty_store).list_for_photo("photo-9")

    assert [t.id for t in threads] == ["comment-1", "comment-2", "comment-0"]


def test_list_for_project_groups_newest_first(store) -> None:
    result = CommentService(store).list_for_project("proj-1")

    assert result.total == 3
    assert result.photos_with_comments == 2
    assert [c.id for c in result.comments_by_photo["photo-1"]] == ["comment-2", "comment-1"]
    assert [c.id for c in result.comments_by_photo["photo-2"]] == ["comment-3"]


def test_list_for_unknown_project_is_empty(store) -> None:
    result = CommentService(store).list_for_project("proj-404")

    assert result.total == 0
    assert result.comments_by_photo == {}
