"""Activity service - records the behavioural signals that personalize ranking."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from app.recommendation.models import ActivityRecord, SearchQuery, WatchEvent, as_aware
from app.repositories.base import ActivityRepository, CatalogRepository, RepositoryBundle
from app.services.catalog_service import ContentItemNotFoundError
from app.services.recommendation_service import Clock, utc_now

logger = logging.getLogger(__name__)


class ActivityService:
    def __init__(
        self,
        catalog: CatalogRepository,
        activity: ActivityRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._catalog = catalog
        self._activity = activity
        self._clock = clock

    async def get_activity(self, user_id: str) -> ActivityRecord:
        return await self._activity.get_activity(user_id)

    async def record_watch(
        self,
        user_id: str,
        item_id: str,
        watched_duration_seconds: int,
        timestamp: datetime | None = None,
    ) -> WatchEvent:
        """Record a viewing, capturing the item's current topics on the event.

        Raises:
            ContentItemNotFoundError: If the item is not in the catalog.
        """
        item = await self._catalog.get_item(item_id)
        if item is None:
            raise ContentItemNotFoundError(item_id)
        event = WatchEvent(
            item_id=item.id,
            watched_duration_seconds=watched_duration_seconds,
            timestamp=timestamp or self._clock(),
            topics=item.topics,
        )
        await self._activity.add_watch_event(user_id, event)
        return event

    async def record_search(
        self, user_id: str, text: str, timestamp: datetime | None = None
    ) -> SearchQuery:
        query = SearchQuery(text=text, timestamp=timestamp or self._clock())
        await self._activity.add_search_query(user_id, query)
        return query

    async def request_topics(self, user_id: str, topics: Sequence[str]) -> ActivityRecord:
        """Add explicit topic requests (onboarding selections or later requests)."""
        await self._activity.add_requested_topics(user_id, topics)
        return await self._activity.get_activity(user_id)

    async def like(self, user_id: str, item_id: str) -> None:
        if await self._catalog.get_item(item_id) is None:
            raise ContentItemNotFoundError(item_id)
        await self._activity.set_like(user_id, item_id, True)

    async def unlike(self, user_id: str, item_id: str) -> None:
        await self._activity.set_like(user_id, item_id, False)

    async def follow(self, user_id: str, creator_id: str) -> None:
        await self._activity.set_follow(user_id, creator_id, True)

    async def unfollow(self, user_id: str, creator_id: str) -> None:
        await self._activity.set_follow(user_id, creator_id, False)

    async def set_exam_date(self, user_id: str, exam_date: datetime | None) -> None:
        """Set or clear the learner's next exam. Naive datetimes are taken as UTC."""
        if exam_date is not None:
            exam_date = as_aware(exam_date)
        await self._activity.set_exam_date(user_id, exam_date)
        if exam_date is None:
            logger.info("Cleared exam date for %s", user_id)
        else:
            logger.info("Set exam date for %s to %s", user_id, exam_date.isoformat())


def activity_service_factory_provider(
    clock: Clock = utc_now,
) -> Callable[[RepositoryBundle], ActivityService]:
    def factory(repositories: RepositoryBundle) -> ActivityService:
        return ActivityService(repositories.catalog, repositories.activity, clock)

    return factory
