"""Unit of Work: one repository scope per request, scoped services from the registry."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any, cast

from fastapi import Request

from app.repositories.base import RepositoryBundle
from app.repositories.factory import RepositoryFactory
from app.services.activity_service import ActivityService
from app.services.catalog_service import CatalogService
from app.services.recommendation_service import RecommendationService
from app.services.syllabus_service import SyllabusService


class UnitOfWork:
    """Holds the request's repositories and exposes scoped services from the registry."""

    def __init__(self, repositories: RepositoryBundle, services: Mapping[str, Any]) -> None:
        self._repositories = repositories
        self._services = services
        self._resolved: dict[str, Any] = {}

    def _resolve(self, key: str) -> Any:
        if key not in self._resolved:
            service = self._services[key]
            if callable(service):
                service = cast(Callable[[RepositoryBundle], Any], service)(self._repositories)
            self._resolved[key] = service
        return self._resolved[key]

    @property
    def catalog_service(self) -> CatalogService:
        """Request-scoped catalog service."""
        return cast(CatalogService, self._resolve("catalog_service"))

    @property
    def recommendation_service(self) -> RecommendationService:
        """Request-scoped recommendation service."""
        return cast(RecommendationService, self._resolve("recommendation_service"))

    @property
    def activity_service(self) -> ActivityService:
        """Request-scoped activity service."""
        return cast(ActivityService, self._resolve("activity_service"))

    @property
    def syllabus_service(self) -> SyllabusService:
        """Request-scoped syllabus service."""
        return cast(SyllabusService, self._resolve("syllabus_service"))


async def get_uow(request: Request) -> AsyncIterator[UnitOfWork]:
    """Per-request dependency: one repository scope, committed when the request succeeds."""
    repository_factory = cast(RepositoryFactory, request.app.state.repository_factory)
    async with repository_factory() as repositories:
        yield UnitOfWork(repositories, request.app.state.services)
