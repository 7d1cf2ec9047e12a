from app.repositories.base import (
    ActivityRepository,
    CatalogRepository,
    ContentItemAlreadyExistsError,
    RepositoryBundle,
)
from app.repositories.factory import (
    RepositoryFactory,
    memory_repository_factory,
    sql_repository_factory,
)
from app.repositories.memory import InMemoryActivityRepository, InMemoryCatalogRepository
from app.repositories.sql import SqlActivityRepository, SqlCatalogRepository

__all__ = [
    "ActivityRepository",
    "CatalogRepository",
    "ContentItemAlreadyExistsError",
    "InMemoryActivityRepository",
    "InMemoryCatalogRepository",
    "RepositoryBundle",
    "RepositoryFactory",
    "SqlActivityRepository",
    "SqlCatalogRepository",
    "memory_repository_factory",
    "sql_repository_factory",
]
