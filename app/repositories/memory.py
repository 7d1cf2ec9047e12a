"""Process-local repositories.

Suitable for development, tests and single-instance demos. Reads always
return fresh immutable snapshots, so callers never observe later writes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from app.recommendation.models import (
    ActivityRecord,
    ContentItem,
    SearchQuery,
    WatchEvent,
    normalize_topics,
)
from app.repositories.base import (
    ActivityRepository,
    CatalogRepository,
    ContentItemAlreadyExistsError,
)


class InMemoryCatalogRepository(CatalogRepository):
    def __init__(self, items: Iterable[ContentItem] = ()) -> None:
        self._items: dict[str, ContentItem] = {}
        for item in items:
            if item.id in self._items:
                raise ContentItemAlreadyExistsError(item.id)
            self._items[item.id] = item

    async def list_items(self) -> list[ContentItem]:
        return list(self._items.values())

    async def get_item(self, item_id: str) -> ContentItem | None:
        return self._items.get(item_id)

    async def add_item(self, item: ContentItem) -> ContentItem:
        if item.id in self._items:
            raise ContentItemAlreadyExistsError(item.id)
        self._items[item.id] = item
        return item


@dataclass
class _LearnerState:
    watch_events: list[WatchEvent] = field(default_factory=list)
    search_queries: list[SearchQuery] = field(default_factory=list)
    requested_topics: list[str] = field(default_factory=list)
    liked_item_ids: set[str] = field(default_factory=set)
    followed_creator_ids: set[str] = field(default_factory=set)
    syllabus_topics: tuple[str, ...] | None = None
    exam_date: datetime | None = None

    def snapshot(self) -> ActivityRecord:
        return ActivityRecord(
            watch_events=tuple(self.watch_events),
            search_queries=tuple(self.search_queries),
            requested_topics=tuple(self.requested_topics),
            liked_item_ids=frozenset(self.liked_item_ids),
            followed_creator_ids=frozenset(self.followed_creator_ids),
            syllabus_topics=self.syllabus_topics,
            exam_date=self.exam_date,
        )


class InMemoryActivityRepository(ActivityRepository):
    def __init__(self) -> None:
        self._learners: dict[str, _LearnerState] = {}

    def _state(self, user_id: str) -> _LearnerState:
        return self._learners.setdefault(user_id, _LearnerState())

    async def get_activity(self, user_id: str) -> ActivityRecord:
        state = self._learners.get(user_id)
        if state is None:
            return ActivityRecord()
        return state.snapshot()

    async def add_watch_event(self, user_id: str, event: WatchEvent) -> None:
        self._state(user_id).watch_events.append(event)

    async def add_search_query(self, user_id: str, query: SearchQuery) -> None:
        self._state(user_id).search_queries.append(query)

    async def add_requested_topics(self, user_id: str, topics: Sequence[str]) -> None:
        state = self._state(user_id)
        for topic in normalize_topics(list(topics)):
            if topic not in state.requested_topics:
                state.requested_topics.append(topic)

    async def set_like(self, user_id: str, item_id: str, liked: bool) -> None:
        liked_ids = self._state(user_id).liked_item_ids
        if liked:
            liked_ids.add(item_id)
        else:
            liked_ids.discard(item_id)

    async def set_follow(self, user_id: str, creator_id: str, following: bool) -> None:
        followed = self._state(user_id).followed_creator_ids
        if following:
            followed.add(creator_id)
        else:
            followed.discard(creator_id)

    async def set_syllabus_topics(self, user_id: str, topics: Sequence[str] | None) -> None:
        self._state(user_id).syllabus_topics = (
            None if topics is None else normalize_topics(list(topics))
        )

    async def set_exam_date(self, user_id: str, exam_date: datetime | None) -> None:
        self._state(user_id).exam_date = exam_date
