"""Tests for selection service."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from gallery_api.exceptions import NotFoundError, ValidationError
from gallery_api.models import SelectionStatus
from gallery_api.services.selection import SelectionService


def _records(store, photo_id: str):
    return [s for s in store.selections.values() if s.photo_id == photo_id]


def test_set_selection_creates_record_for_pending_photo(store) -> None:
    service = SelectionService(store)

    result = asyncio.run(service.set_selection("proj-1", "photo-2", "selected", "user-2"))

    assert result.photo_id == "photo-2"
    assert result.status == SelectionStatus.SELECTED
    records = _records(store, "photo-2")
    assert len(records) == 1
    assert records[0].client_id == "user-2"
    assert records[0].created_at == records[0].updated_at


def test_repeated_updates_keep_one_record(store) -> None:
    service = SelectionService(store)

    asyncio.run(service.set_selection("proj-1", "photo-2", "selected", "user-2"))
    first = _records(store, "photo-2")[0]
    asyncio.run(service.set_selection("proj-1", "photo-2", "rejected", "user-2"))
    asyncio.run(service.set_selection("proj-1", "photo-2", "rejected", "user-2"))

    records = _records(store, "photo-2")
    assert len(records) == 1
    assert records[0].id == first.id
    assert records[0].status == SelectionStatus.REJECTED
    assert records[0].updated_at >= records[0].created_at


def test_repeated_same_status_refreshes_updated_at(store, monkeypatch) -> None:
    base = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    ticks = iter(base + timedelta(seconds=i) for i in range(10))
    monkeypatch.setattr("gallery_api.services.selection.utcnow", lambda: next(ticks))
    service = SelectionService(store)

    first = asyncio.run(service.set_selection("proj-1", "photo-2", "rejected", "user-2"))
    second = asyncio.run(service.set_selection("proj-1", "photo-2", "rejected", "user-2"))

    record = _records(store, "photo-2")[0]
    assert second.updated_at > first.updated_at
    assert record.updated_at == second.updated_at
    assert record.created_at == first.updated_at


def test_pending_removes_record_and_is_idempotent(store) -> None:
    service = SelectionService(store)

    result = asyncio.run(service.set_selection("proj-1", "photo-1", "pending", "user-2"))
    assert result.status == SelectionStatus.PENDING
    assert result.updated_at is not None
    assert _records(store, "photo-1") == []

    asyncio.run(service.set_selection("proj-1", "photo-1", "pending", "user-2"))
    assert _records(store, "photo-1") == []
    assert store.find_selection("proj-1", "photo-1") is None


def test_set_selection_rejects_invalid_status(store) -> None:
    service = SelectionService(store)

    with pytest.raises(ValidationError):
        asyncio.run(service.set_selection("proj-1", "photo-2", "maybe", "user-2"))


def test_set_selection_unknown_photo(store) -> None:
    service = SelectionService(store)

    with pytest.raises(NotFoundError):
        asyncio.run(service.set_selection("proj-1", "photo-404", "selected", "user-2"))


def test_set_selection_photo_from_other_project(store) -> None:
    service = SelectionService(store)

    with pytest.raises(NotFoundError):
        asyncio.run(service.set_selection("proj-2", "photo-1", "selected", "user-2"))


def test_bulk_selection_reports_failures_in_order(store) -> None:
    service = SelectionService(store)

    result = asyncio.run(
        service.bulk_set_selection("proj-1", ["photo-1", "photo-404"], "selected", "user-2")
    )

    assert result.updated == 1
    assert result.failed == 1
    assert [r.photo_id for r in result.results] == ["photo-1", "photo-404"]
    assert result.results[0].success is True
    assert result.results[0].status == SelectionStatus.SELECTED
    assert result.results[1].success is False
    assert result.results[1].error == "Photo not found"


def test_bulk_selection_requires_photo_ids(store) -> None:
    service = SelectionService(store)

    with pytest.raises(ValidationError):
        asyncio.run(service.bulk_set_selection("proj-1", [], "selected", "user-2"))


def test_bulk_selection_invalid_status_fails_whole_request(store) -> None:
    service = SelectionService(store)

    with pytest.raises(ValidationError):
        asyncio.run(service.bulk_set_selection("proj-1", ["photo-2"], "favorite", "user-2"))
    assert _records(store, "photo-2") == []


def test_compute_stats_on_demo_gallery(store) -> None:
    stats = SelectionService(store).compute_stats("proj-1")

    assert stats.total == 6
    assert stats.selected == 1
    assert stats.rejected == 1
    assert stats.pending == 4


def test_compute_stats_on_photo_subset(store) -> None:
    stats = SelectionService(store).compute_stats("proj-1", ["photo-1", "photo-2"])

    assert stats.total == 2
    assert stats.selected == 1
    assert stats.rejected == 0
    assert stats.pending == 1


def test_compute_stats_sum_invariant_after_changes(store) -> None:
    service = SelectionService(store)

    async def _mutate() -> None:
        await service.set_selection("proj-1", "photo-2", "rejected", "user-2")
        await service.set_selection("proj-1", "photo-1", "pending", "user-2")
        await service.bulk_set_selection("proj-1", ["photo-4", "photo-5"], "selected", "user-2")

    asyncio.run(_mutate())
    stats = service.compute_stats("proj-1")

    assert stats.selected + stats.rejected + stats.pending == stats.total
    assert (stats.selected, stats.rejected, stats.pending) == (2, 2, 2)


def test_compute_stats_empty_project(store) -> None:
    stats = SelectionService(store).compute_stats("proj-2")

    assert (stats.total, stats.selected, stats.rejected, stats.pending) == (0, 0, 0, 0)


def test_concurrent_toggles_create_single_record(store) -> None:
    service = SelectionService(store)

    async def _toggle() -> None:
        await asyncio.gather(
            *(
                service.set_selection("proj-1", "photo-6", status, "user-2")
                for status in ("selected", "rejected", "selected", "rejected")
            )
        )

    asyncio.run(_toggle())

    assert len(_records(store, "photo-6")) == 1


def test_get_selection_view(store) -> None:
    service = SelectionService(store)

    view = service.get_selection_view("proj-1", "photo-1")
    assert view is not None
    assert view.id == "sel-1"
    assert view.status == SelectionStatus.SELECTED
    assert service.get_selection_view("proj-1", "photo-2") is None
