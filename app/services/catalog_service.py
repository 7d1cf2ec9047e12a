"""Catalog service - browsing and publishing content items."""

from __future__ import annotations

import logging
from collections.abc import Callable

from app.core.errors import ServiceError
from app.recommendation.models import ContentItem
from app.repositories.base import CatalogRepository, RepositoryBundle

logger = logging.getLogger(__name__)


class ContentItemNotFoundError(ServiceError):
    """Raised when a content item id is not in the catalog."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Content item '{item_id}' not found", "content_not_found")
        self.item_id = item_id


def filter_items(
    items: list[ContentItem],
    *,
    is_short_form: bool | None = None,
    category: str | None = None,
) -> list[ContentItem]:
    """Filter a catalog snapshot, keeping catalog order.

    A blank ``category`` applies no category filter.
    """
    wanted_category = (category or "").strip().lower() or None
    return [
        item
        for item in items
        if (is_short_form is None or item.is_short_form == is_short_form)
        and (wanted_category is None or item.category == wanted_category)
    ]


class CatalogService:
    def __init__(self, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    async def list_items(
        self, *, is_short_form: bool | None = None, category: str | None = None
    ) -> list[ContentItem]:
        items = await self._catalog.list_items()
        return filter_items(items, is_short_form=is_short_form, category=category)

    async def get_item(self, item_id: str) -> ContentItem:
        """Return the item or raise ContentItemNotFoundError."""
        item = await self._catalog.get_item(item_id)
        if item is None:
            raise ContentItemNotFoundError(item_id)
        return item

    async def add_item(self, item: ContentItem) -> ContentItem:
        """Publish a new item. Raises ContentItemAlreadyExistsError on a duplicate id."""
        added = await self._catalog.add_item(item)
        logger.info(
            "Added content item %s (%s)",
            added.id,
            "short-form" if added.is_short_form else "long-form",
        )
        return added


def catalog_service_factory_provider() -> Callable[[RepositoryBundle], CatalogService]:
    def factory(repositories: RepositoryBundle) -> CatalogService:
        return CatalogService(repositories.catalog)

    return factory
