"""Tag index protocol."""

from typing import Protocol

from domain.entities.tag import TagCount


class ITagIndex(Protocol):
    """Read-only index over the tags embedded in clipboard entries."""

    async def list_distinct(self) -> list[str]:
        """Get every distinct tag, sorted ascending."""
        ...

    async def count_distinct(self) -> int:
        """Get the number of distinct tags."""
        ...

    async def list_popular(self, limit: int) -> list[TagCount]:
        """Get tags ranked by occurrence count, ties broken by name."""
        ...
