"""Clipboard entry service layer with business logic."""

from collections.abc import Callable, Collection
from typing import Any

import structlog

from core.exceptions import EntryNotFoundError, ValidationError
from domain.entities.clipboard_entry import ClipboardEntry
from domain.entities.search import EntrySearch
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class EntryService:
    """Service layer for clipboard entry mutations and listings."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[ClipboardEntry]:
        """Get every entry, pinned first then newest first, without pagination."""
        async with self._uow_factory() as uow:
            return await uow.entries.list_entries(None)

    async def search(self, search: EntrySearch | None) -> list[ClipboardEntry]:
        """Search entries.

        Passing ``None`` is the same as ``get_all``. A search with no filters
        still applies its limit and offset.
        """
        async with self._uow_factory() as uow:
            return await uow.entries.list_entries(search)

    async def create(
        self,
        content: str,
        title: str | None = None,
        tags: list[str] | None = None,
    ) -> ClipboardEntry:
        """Create a new entry with zeroed usage and unset flags."""
        if not content:
            raise ValidationError("Content cannot be empty", field="content")

        async with self._uow_factory() as uow:
            entry = ClipboardEntry(
                content=content,
                title=title or None,
                tags=list(tags or []),
            )
            created = await uow.entries.create(entry)
            await uow.commit()

        logger.info("entry_created", entry_id=created.id, tag_count=len(created.tags))
        return created

    async def update(
        self,
        entry_id: int,
        content: object = ...,  # Sentinel: ... means "leave unchanged"
        title: object = ...,  # None clears the title
        is_pinned: object = ...,
        is_favorite: object = ...,
        tags: object = ...,
    ) -> ClipboardEntry:
        """Apply a partial update. Only explicitly supplied fields change."""
        if content is not ... and not content:
            raise ValidationError("Content cannot be empty", field="content")

        changes: dict[str, Any] = {
            name: value
            for name, value in (
                ("content", content),
                ("title", title),
                ("is_pinned", is_pinned),
                ("is_favorite", is_favorite),
                ("tags", tags),
            )
            if value is not ...
        }
        if "tags" in changes:
            changes["tags"] = list(changes["tags"])

        async with self._uow_factory() as uow:
            updated = await uow.entries.update(entry_id, changes)
            if not updated:
                raise EntryNotFoundError(entry_id)
            await uow.commit()

        logger.info("entry_updated", entry_id=entry_id, fields=sorted(changes))
        return updated

    async def delete(self, entry_id: int) -> None:
        """Delete an entry. Deleting a missing entry is a no-op."""
        async with self._uow_factory() as uow:
            deleted = await uow.entries.delete(entry_id)
            await uow.commit()

        logger.info("entry_deleted", entry_id=entry_id, existed=deleted)

    async def bulk_delete(self, entry_ids: Collection[int]) -> int:
        """Delete every listed entry that exists and return how many were removed."""
        if not entry_ids:
            raise ValidationError("At least one ID required", field="ids")

        async with self._uow_factory() as uow:
            deleted_count = await uow.entries.delete_many(entry_ids)
            await uow.commit()

        logger.info(
            "entries_bulk_deleted",
            requested=len(set(entry_ids)),
            deleted_count=deleted_count,
        )
        return deleted_count

    async def clear_all(self) -> int:
        """Delete every entry and return how many were removed."""
        async with self._uow_factory() as uow:
            deleted_count = await uow.entries.delete_all()
            await uow.commit()

        logger.info("entries_cleared", deleted_count=deleted_count)
        return deleted_count

    async def track_usage(self, entry_id: int) -> ClipboardEntry:
        """Record one use of an entry (count, last_used_at and updated_at)."""
        async with self._uow_factory() as uow:
            entry = await uow.entries.increment_usage(entry_id)
            if not entry:
                raise EntryNotFoundError(entry_id)
            await uow.commit()

        logger.info("entry_usage_tracked", entry_id=entry_id, usage_count=entry.usage_count)
        return entry
