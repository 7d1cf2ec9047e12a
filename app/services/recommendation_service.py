"""Recommendation service - reads snapshots from storage and ranks them.

Only the repository reads are asynchronous; scoring and ranking run
synchronously on the fetched snapshots.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from app.recommendation.models import ContentItem, ScoredItem
from app.recommendation.ranking import (
    next_item,
    rank_scored,
    related_items,
    trending_exam_content,
)
from app.recommendation.topics import extract_topic_scores
from app.repositories.base import ActivityRepository, CatalogRepository, RepositoryBundle
from app.services.catalog_service import ContentItemNotFoundError, filter_items

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class RecommendationService:
    """Personalized and catalog-wide content selection for the platform's views."""

    def __init__(
        self,
        catalog: CatalogRepository,
        activity: ActivityRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._catalog = catalog
        self._activity = activity
        self._clock = clock

    async def feed(
        self,
        user_id: str,
        *,
        is_short_form: bool,
        limit: int,
        category: str | None = None,
    ) -> list[ScoredItem]:
        """Top ``limit`` items of one content pool for a learner, with scores.

        ``category`` narrows the catalog before ranking.
        """
        items = filter_items(await self._catalog.list_items(), category=category)
        activity = await self._activity.get_activity(user_id)
        ranked = rank_scored(items, activity, is_short_form, limit, self._clock())
        logger.debug(
            "Ranked %d of %d items for %s (short_form=%s)",
            len(ranked),
            len(items),
            user_id,
            is_short_form,
        )
        return ranked

    async def whats_next(self, user_id: str) -> ContentItem | None:
        items = await self._catalog.list_items()
        activity = await self._activity.get_activity(user_id)
        return next_item(items, activity)

    async def trending_exam(self, limit: int) -> list[ContentItem]:
        items = await self._catalog.list_items()
        return trending_exam_content(items, limit)

    async def related(self, item_id: str, limit: int) -> list[ContentItem]:
        """Items similar to ``item_id``. Raises ContentItemNotFoundError for unknown ids."""
        reference = await self._catalog.get_item(item_id)
        if reference is None:
            raise ContentItemNotFoundError(item_id)
        items = await self._catalog.list_items()
        return related_items(items, reference, limit)

    async def topic_scores(self, user_id: str) -> dict[str, float]:
        activity = await self._activity.get_activity(user_id)
        return extract_topic_scores(activity)


def recommendation_service_factory_provider(
    clock: Clock = utc_now,
) -> Callable[[RepositoryBundle], RecommendationService]:
    def factory(repositories: RepositoryBundle) -> RecommendationService:
        return RecommendationService(repositories.catalog, repositories.activity, clock)

    return factory
