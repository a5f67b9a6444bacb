"""Clipboard entry repository protocol."""

from collections.abc import Collection
from typing import Any, Protocol

from domain.entities.clipboard_entry import ClipboardEntry
from domain.entities.search import EntrySearch
from domain.entities.stats import EntryCounts


class IClipboardEntryRepository(Protocol):
    """Repository interface for ClipboardEntry entities."""

    async def get(self, id: int) -> ClipboardEntry | None:
        """Get an entry by ID."""
        ...

    async def list_entries(self, search: EntrySearch | None = None) -> list[ClipboardEntry]:
        """List entries pinned-first, newest-first.

        ``None`` returns every row; a search applies its filters and pagination.
        """
        ...

    async def create(self, entry: ClipboardEntry) -> ClipboardEntry:
        """Insert a new entry and return it with its store-assigned ID."""
        ...

    async def update(self, id: int, changes: dict[str, Any]) -> ClipboardEntry | None:
        """Apply a partial update. Returns None if the entry does not exist."""
        ...

    async def delete(self, id: int) -> bool:
        """Delete an entry and report whether a row was removed."""
        ...

    async def delete_many(self, ids: Collection[int]) -> int:
        """Delete every entry whose ID is in ``ids``. Returns rows removed."""
        ...

    async def delete_all(self) -> int:
        """Delete every entry. Returns rows removed."""
        ...

    async def increment_usage(self, id: int) -> ClipboardEntry | None:
        """Atomically bump usage_count and stamp last_used_at/updated_at."""
        ...

    async def get_counts(self) -> EntryCounts:
        """Get total, pinned and favorite counts in one read."""
        ...

    async def get_most_used(self) -> ClipboardEntry | None:
        """Get the entry with the highest positive usage_count (lowest ID on ties)."""
        ...

    async def get_recent(self, limit: int) -> list[ClipboardEntry]:
        """Get the most recently created entries, ignoring pin status."""
        ...
