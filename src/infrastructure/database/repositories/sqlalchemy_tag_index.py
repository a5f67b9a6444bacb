"""SQLAlchemy implementation of the tag index.

Every query unnests ``clipboard_entries.tags`` so a tag appearing in three
entries is seen three times (flattened multiset).
"""

from sqlalchemy import distinct, func, select, true
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.selectable import TableValuedAlias

from domain.entities.tag import TagCount
from infrastructure.database.entry_query import tag_elements
from infrastructure.database.models import ClipboardEntryModel


class SQLAlchemyTagIndex:
    """SQLAlchemy implementation of ITagIndex."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _elements(self) -> TableValuedAlias:
        return tag_elements(self._session.get_bind().dialect.name)

    async def list_distinct(self) -> list[str]:
        """Get every distinct tag, sorted ascending."""
        elements = self._elements()
        stmt = (
            select(elements.c.value)
            .select_from(ClipboardEntryModel)
            .join(elements, true())
            .distinct()
            .order_by(elements.c.value.asc())
        )
        result = await self._session.execute(stmt)
        return [str(tag) for tag in result.scalars()]

    async def count_distinct(self) -> int:
        """Get the number of distinct tags."""
        elements = self._elements()
        stmt = (
            select(func.count(distinct(elements.c.value)))
            .select_from(ClipboardEntryModel)
            .join(elements, true())
        )
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def list_popular(self, limit: int) -> list[TagCount]:
        """Get tags ranked by occurrence count, ties broken by tag name."""
        elements = self._elements()
        stmt = (
            select(elements.c.value, func.count().label("occurrences"))
            .select_from(ClipboardEntryModel)
            .join(elements, true())
            .group_by(elements.c.value)
            .order_by(func.count().desc(), elements.c.value.asc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [TagCount(tag=str(tag), count=int(count)) for tag, count in result]
