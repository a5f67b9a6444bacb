"""Unit tests for StatsService."""

import pytest

from domain.entities.clipboard_entry import ClipboardEntry
from domain.entities.stats import RECENT_ENTRIES_LIMIT, EntryCounts
from domain.services.stats_service import StatsService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> StatsService:
    return StatsService(lambda: uow)


class TestGetStats:
    @pytest.mark.asyncio
    async def test_aggregates_repository_reads(self, service: StatsService, uow: FakeUnitOfWork):
        most_used = ClipboardEntry(id=2, content="popular", usage_count=9)
        recent = [ClipboardEntry(id=3, content="new"), most_used]
        uow.entries.get_counts.return_value = EntryCounts(total=3, pinned=1, favorite=2)
        uow.tags.count_distinct.return_value = 4
        uow.entries.get_most_used.return_value = most_used
        uow.entries.get_recent.return_value = recent

        stats = await service.get_stats()

        assert stats.total_entries == 3
        assert stats.pinned_entries == 1
        assert stats.favorite_entries == 2
        assert stats.total_tags == 4
        assert stats.most_used_entry is most_used
        assert stats.recent_entries == recent
        uow.entries.get_recent.assert_called_once_with(RECENT_ENTRIES_LIMIT)

    @pytest.mark.asyncio
    async def test_empty_store(self, service: StatsService, uow: FakeUnitOfWork):
        uow.entries.get_counts.return_value = EntryCounts()
        uow.tags.count_distinct.return_value = 0
        uow.entries.get_most_used.return_value = None
        uow.entries.get_recent.return_value = []

        stats = await service.get_stats()

        assert stats.total_entries == 0
        assert stats.most_used_entry is None
        assert stats.recent_entries == []
        assert not uow.committed
