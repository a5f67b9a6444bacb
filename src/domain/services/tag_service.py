"""Tag service layer."""

from typing import Callable, List

from domain.entities.tag import TagCount
from domain.repositories.unit_of_work import IUnitOfWork

DEFAULT_POPULAR_TAGS_LIMIT = 10


class TagService:
    """Service layer for reading the tags embedded in clipboard entries."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all_tags(self) -> List[str]:
        """Get every distinct tag, sorted ascending."""
        async with self._uow_factory() as uow:
            return await uow.tags.list_distinct()

    async def get_popular_tags(
        self, limit: int = DEFAULT_POPULAR_TAGS_LIMIT
    ) -> List[TagCount]:
        """Get the most frequent tags, highest count first, ties by name."""
        async with self._uow_factory() as uow:
            return await uow.tags.list_popular(limit)
