"""Per-request repository scopes for each storage backend."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.base import ActivityRepository, CatalogRepository, RepositoryBundle
from app.repositories.sql import SqlActivityRepository, SqlCatalogRepository

RepositoryFactory = Callable[[], AbstractAsyncContextManager[RepositoryBundle]]


def memory_repository_factory(
    catalog: CatalogRepository, activity: ActivityRepository
) -> RepositoryFactory:
    """Every scope shares the same process-local repositories."""

    @asynccontextmanager
    async def open_repositories() -> AsyncIterator[RepositoryBundle]:
        yield RepositoryBundle(catalog=catalog, activity=activity)

    return open_repositories


def sql_repository_factory(
    session_maker_provider: Callable[[], async_sessionmaker[AsyncSession]],
) -> RepositoryFactory:
    """One session per scope: commit on success, rollback on exception."""

    @asynccontextmanager
    async def open_repositories() -> AsyncIterator[RepositoryBundle]:
        session_maker = session_maker_provider()
        async with session_maker() as session:
            try:
                yield RepositoryBundle(
                    catalog=SqlCatalogRepository(session),
                    activity=SqlActivityRepository(session),
                )
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return open_repositories
