"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.entry_service import EntryService
from domain.services.stats_service import StatsService
from domain.services.tag_service import TagService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_entry_service() -> EntryService:
    """Get Entry service instance."""
    return EntryService(get_uow_factory())


@lru_cache
def get_tag_service() -> TagService:
    """Get Tag service instance."""
    return TagService(get_uow_factory())


@lru_cache
def get_stats_service() -> StatsService:
    """Get Stats service instance."""
    return StatsService(get_uow_factory())
