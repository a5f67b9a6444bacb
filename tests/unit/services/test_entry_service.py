"""Unit tests for EntryService."""

from datetime import datetime

import pytest

from core.exceptions import AppException, EntryNotFoundError, ValidationError
from domain.entities.clipboard_entry import ClipboardEntry
from domain.entities.search import EntrySearch
from domain.services.entry_service import EntryService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> EntryService:
    return EntryService(lambda: uow)


def _entry(id: int = 1, **kwargs) -> ClipboardEntry:
    return ClipboardEntry(id=id, content=kwargs.pop("content", "snippet"), **kwargs)


# --- listings ---


class TestListings:
    @pytest.mark.asyncio
    async def test_get_all_passes_no_search(self, service: EntryService, uow: FakeUnitOfWork):
        uow.entries.list_entries.return_value = [_entry(2), _entry(1)]

        result = await service.get_all()

        assert [e.id for e in result] == [2, 1]
        uow.entries.list_entries.assert_called_once_with(None)

    @pytest.mark.asyncio
    async def test_search_forwards_filters(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        search = EntrySearch(query="git", tags=("cli",), limit=10, offset=5)
        uow.entries.list_entries.return_value = []

        await service.search(search)

        uow.entries.list_entries.assert_called_once_with(search)

    @pytest.mark.asyncio
    async def test_search_without_filters(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.list_entries.return_value = []

        await service.search(None)

        uow.entries.list_entries.assert_called_once_with(None)
        assert not uow.committed


# --- create ---


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_entry_with_defaults(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.create.side_effect = lambda entry: entry

        result = await service.create(content="echo hi", tags=["shell"])

        assert result.content == "echo hi"
        assert result.title is None
        assert result.tags == ["shell"]
        assert result.is_pinned is False
        assert result.is_favorite is False
        assert result.usage_count == 0
        assert result.last_used_at is None
        assert uow.committed

    @pytest.mark.asyncio
    async def test_empty_title_stored_as_none(self, service: EntryService, uow: FakeUnitOfWork):
        uow.entries.create.side_effect = lambda entry: entry

        result = await service.create(content="x", title="")

        assert result.title is None

    @pytest.mark.asyncio
    async def test_missing_tags_default_to_empty_list(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.create.side_effect = lambda entry: entry

        result = await service.create(content="x")

        assert result.tags == []

    @pytest.mark.asyncio
    async def test_empty_content_raises(self, service: EntryService, uow: FakeUnitOfWork):
        with pytest.raises(ValidationError) as exc_info:
            await service.create(content="")

        assert exc_info.value.details == {"field": "content"}
        uow.entries.create.assert_not_called()
        assert not uow.committed


# --- update ---


class TestUpdate:
    @pytest.mark.asyncio
    async def test_only_supplied_fields_are_changed(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.update.return_value = _entry(7, is_pinned=True)

        result = await service.update(7, is_pinned=True)

        assert result.is_pinned is True
        uow.entries.update.assert_called_once_with(7, {"is_pinned": True})
        assert uow.committed

    @pytest.mark.asyncio
    async def test_explicit_none_title_clears_it(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.update.return_value = _entry(7)

        await service.update(7, title=None)

        uow.entries.update.assert_called_once_with(7, {"title": None})

    @pytest.mark.asyncio
    async def test_no_fields_still_touches_entry(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.update.return_value = _entry(7)

        await service.update(7)

        uow.entries.update.assert_called_once_with(7, {})

    @pytest.mark.asyncio
    async def test_tags_are_copied(self, service: EntryService, uow: FakeUnitOfWork):
        tags = ("a", "b")
        uow.entries.update.return_value = _entry(7, tags=["a", "b"])

        await service.update(7, tags=tags)

        uow.entries.update.assert_called_once_with(7, {"tags": ["a", "b"]})

    @pytest.mark.asyncio
    async def test_missing_entry_raises_not_found(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.update.return_value = None

        with pytest.raises(EntryNotFoundError) as exc_info:
            await service.update(99, content="new")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {"entry_id": 99}
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_empty_content_raises(self, service: EntryService, uow: FakeUnitOfWork):
        with pytest.raises(AppException) as exc_info:
            await service.update(1, content="")

        assert exc_info.value.error_code == "VALIDATION_ERROR"
        uow.entries.update.assert_not_called()


# --- delete ---


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_existing(self, service: EntryService, uow: FakeUnitOfWork):
        uow.entries.delete.return_value = True

        await service.delete(3)

        uow.entries.delete.assert_called_once_with(3)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, service: EntryService, uow: FakeUnitOfWork):
        uow.entries.delete.return_value = False

        await service.delete(404)

        uow.entries.delete.assert_called_once_with(404)

    @pytest.mark.asyncio
    async def test_bulk_delete_returns_count(self, service: EntryService, uow: FakeUnitOfWork):
        uow.entries.delete_many.return_value = 2

        result = await service.bulk_delete([1, 2, 999])

        assert result == 2
        uow.entries.delete_many.assert_called_once_with([1, 2, 999])
        assert uow.committed

    @pytest.mark.asyncio
    async def test_bulk_delete_requires_ids(self, service: EntryService, uow: FakeUnitOfWork):
        with pytest.raises(ValidationError):
            await service.bulk_delete([])

        uow.entries.delete_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_clear_all_returns_count(self, service: EntryService, uow: FakeUnitOfWork):
        uow.entries.delete_all.return_value = 5

        assert await service.clear_all() == 5
        assert uow.committed


# --- track_usage ---


class TestTrackUsage:
    @pytest.mark.asyncio
    async def test_returns_updated_entry(self, service: EntryService, uow: FakeUnitOfWork):
        used_at = datetime(2026, 1, 1, 12, 0, 0)
        uow.entries.increment_usage.return_value = _entry(
            4, usage_count=1, last_used_at=used_at
        )

        result = await service.track_usage(4)

        assert result.usage_count == 1
        assert result.last_used_at == used_at
        uow.entries.increment_usage.assert_called_once_with(4)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_missing_entry_raises_not_found(
        self, service: EntryService, uow: FakeUnitOfWork
    ):
        uow.entries.increment_usage.return_value = None

        with pytest.raises(EntryNotFoundError):
            await service.track_usage(404)

        assert not uow.committed
