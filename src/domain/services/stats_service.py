"""Statistics service: aggregates entry and tag reads into one summary."""

from collections.abc import Callable

from domain.entities.stats import RECENT_ENTRIES_LIMIT, ClipboardStats
from domain.repositories.unit_of_work import IUnitOfWork


class StatsService:
    """Service layer for clipboard statistics."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_stats(self) -> ClipboardStats:
        """Build the statistics summary.

        All reads share one unit of work. Concurrent writers may still land
        between reads; the summary is best-effort, not a snapshot.
        """
        async with self._uow_factory() as uow:
            counts = await uow.entries.get_counts()
            total_tags = await uow.tags.count_distinct()
            most_used = await uow.entries.get_most_used()
            recent = await uow.entries.get_recent(RECENT_ENTRIES_LIMIT)

        return ClipboardStats(
            total_entries=counts.total,
            pinned_entries=counts.pinned,
            favorite_entries=counts.favorite,
            total_tags=total_tags,
            most_used_entry=most_used,
            recent_entries=recent,
        )
