"""SQLAlchemy implementation of the ClipboardEntry repository."""

from collections.abc import Collection
from typing import Any

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.clipboard_entry import ClipboardEntry, utcnow
from domain.entities.search import EntrySearch
from domain.entities.stats import EntryCounts
from infrastructure.database.entry_query import NEWEST_FIRST_ORDER, build_listing_query
from infrastructure.database.models import ClipboardEntryModel


class SQLAlchemyClipboardEntryRepository:
    """SQLAlchemy implementation of IClipboardEntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def _dialect_name(self) -> str:
        return self._session.get_bind().dialect.name

    async def get(self, id: int) -> ClipboardEntry | None:
        """Get an entry by ID."""
        stmt = select(ClipboardEntryModel).where(ClipboardEntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_entries(self, search: EntrySearch | None = None) -> list[ClipboardEntry]:
        """List entries in pinned-first, newest-first order."""
        stmt = build_listing_query(search, self._dialect_name)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, entry: ClipboardEntry) -> ClipboardEntry:
        """Create a new entry."""
        model = self._to_model(entry)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, id: int, changes: dict[str, Any]) -> ClipboardEntry | None:
        """Apply only the supplied fields and refresh updated_at."""
        stmt = (
            update(ClipboardEntryModel)
            .where(ClipboardEntryModel.id == id)
            .values(**changes, updated_at=utcnow())
            .returning(ClipboardEntryModel)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def delete(self, id: int) -> bool:
        """Delete an entry if present."""
        stmt = delete(ClipboardEntryModel).where(ClipboardEntryModel.id == id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined, no-any-return]

    async def delete_many(self, ids: Collection[int]) -> int:
        """Delete all entries matching ``ids`` and return how many existed."""
        if not ids:
            return 0
        stmt = delete(ClipboardEntryModel).where(ClipboardEntryModel.id.in_(set(ids)))
        result = await self._session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined, no-any-return]

    async def delete_all(self) -> int:
        """Delete every entry."""
        result = await self._session.execute(delete(ClipboardEntryModel))
        return result.rowcount  # type: ignore[attr-defined, no-any-return]

    async def increment_usage(self, id: int) -> ClipboardEntry | None:
        """Bump usage in a single UPDATE so concurrent trackers never lose counts."""
        now = utcnow()
        stmt = (
            update(ClipboardEntryModel)
            .where(ClipboardEntryModel.id == id)
            .values(
                usage_count=ClipboardEntryModel.usage_count + 1,
                last_used_at=now,
                updated_at=now,
            )
            .returning(ClipboardEntryModel)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_counts(self) -> EntryCounts:
        """Get total, pinned and favorite counts in a single query."""
        stmt = select(
            func.count().label("total"),
            func.sum(
                case((ClipboardEntryModel.is_pinned == True, 1), else_=0)  # noqa: E712
            ).label("pinned"),
            func.sum(
                case((ClipboardEntryModel.is_favorite == True, 1), else_=0)  # noqa: E712
            ).label("favorite"),
        ).select_from(ClipboardEntryModel)
        row = (await self._session.execute(stmt)).one()
        return EntryCounts(
            total=row.total or 0,
            pinned=row.pinned or 0,
            favorite=row.favorite or 0,
        )

    async def get_most_used(self) -> ClipboardEntry | None:
        """Get the most used entry; the lowest ID wins a tie."""
        stmt = (
            select(ClipboardEntryModel)
            .where(ClipboardEntryModel.usage_count > 0)
            .order_by(ClipboardEntryModel.usage_count.desc(), ClipboardEntryModel.id.asc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_recent(self, limit: int) -> list[ClipboardEntry]:
        """Get the newest entries regardless of pin status."""
        stmt = select(ClipboardEntryModel).order_by(*NEWEST_FIRST_ORDER).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: ClipboardEntryModel) -> ClipboardEntry:
        """Convert ORM model to domain entity."""
        return ClipboardEntry(
            id=model.id,
            content=model.content,
            title=model.title,
            is_pinned=model.is_pinned,
            is_favorite=model.is_favorite,
            tags=list(model.tags or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
            usage_count=model.usage_count,
            last_used_at=model.last_used_at,
        )

    def _to_model(self, entity: ClipboardEntry) -> ClipboardEntryModel:
        """Convert domain entity to ORM model."""
        return ClipboardEntryModel(
            id=entity.id,
            content=entity.content,
            title=entity.title,
            is_pinned=entity.is_pinned,
            is_favorite=entity.is_favorite,
            tags=list(entity.tags),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            usage_count=entity.usage_count,
            last_used_at=entity.last_used_at,
        )
