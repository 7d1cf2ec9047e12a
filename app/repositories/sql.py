"""SQLAlchemy-backed repositories (PostgreSQL via asyncpg)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import ContentItemRecord, LearnerProfile, SearchQueryRecord, WatchEventRecord
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


def _to_content_item(record: ContentItemRecord) -> ContentItem:
    return ContentItem(
        id=record.id,
        title=record.title,
        creator_id=record.creator_id,
        creator_name=record.creator_name,
        creator_avatar_url=record.creator_avatar_url,
        thumbnail_url=record.thumbnail_url,
        category=record.category,
        duration_seconds=record.duration_seconds,
        view_count=record.view_count,
        like_count=record.like_count,
        comment_count=record.comment_count,
        average_watch_percentage=record.average_watch_percentage,
        uploaded_at=record.uploaded_at,
        topics=tuple(record.topics or ()),
        is_short_form=record.is_short_form,
        is_exam_relevant=record.is_exam_relevant,
    )


class SqlCatalogRepository(CatalogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_items(self) -> list[ContentItem]:
        result = await self._session.execute(
            select(ContentItemRecord).order_by(ContentItemRecord.uploaded_at, ContentItemRecord.id)
        )
        return [_to_content_item(record) for record in result.scalars()]

    async def get_item(self, item_id: str) -> ContentItem | None:
        record = await self._session.get(ContentItemRecord, item_id)
        return _to_content_item(record) if record is not None else None

    async def add_item(self, item: ContentItem) -> ContentItem:
        if await self._session.get(ContentItemRecord, item.id) is not None:
            raise ContentItemAlreadyExistsError(item.id)
        self._session.add(
            ContentItemRecord(
                id=item.id,
                title=item.title,
                creator_id=item.creator_id,
                creator_name=item.creator_name,
                creator_avatar_url=item.creator_avatar_url,
                thumbnail_url=item.thumbnail_url,
                category=item.category,
                duration_seconds=item.duration_seconds,
                view_count=item.view_count,
                like_count=item.like_count,
                comment_count=item.comment_count,
                average_watch_percentage=item.average_watch_percentage,
                uploaded_at=item.uploaded_at,
                topics=list(item.topics),
                is_short_form=item.is_short_form,
                is_exam_relevant=item.is_exam_relevant,
            )
        )
        await self._session.flush()
        return item


class SqlActivityRepository(ActivityRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _load_profile(self, user_id: str) -> LearnerProfile | None:
        result = await self._session.execute(
            select(LearnerProfile)
            .where(LearnerProfile.user_id == user_id)
            .options(
                selectinload(LearnerProfile.watch_events),
                selectinload(LearnerProfile.search_queries),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _profile(self, user_id: str) -> LearnerProfile:
        profile = await self._session.get(LearnerProfile, user_id)
        if profile is None:
            profile = LearnerProfile(
                user_id=user_id,
                requested_topics=[],
                liked_item_ids=[],
                followed_creator_ids=[],
            )
            self._session.add(profile)
            await self._session.flush()
        return profile

    async def get_activity(self, user_id: str) -> ActivityRecord:
        profile = await self._load_profile(user_id)
        if profile is None:
            return ActivityRecord()
        return ActivityRecord(
            watch_events=tuple(
                WatchEvent(
                    item_id=event.item_id,
                    watched_duration_seconds=event.watched_duration_seconds,
                    timestamp=event.watched_at,
                    topics=tuple(event.topics or ()),
                )
                for event in profile.watch_events
            ),
            search_queries=tuple(
                SearchQuery(text=query.text, timestamp=query.searched_at)
                for query in profile.search_queries
            ),
            requested_topics=tuple(profile.requested_topics or ()),
            liked_item_ids=frozenset(profile.liked_item_ids or ()),
            followed_creator_ids=frozenset(profile.followed_creator_ids or ()),
            syllabus_topics=(
                tuple(profile.syllabus_topics) if profile.syllabus_topics is not None else None
            ),
            exam_date=profile.exam_date,
        )

    async def add_watch_event(self, user_id: str, event: WatchEvent) -> None:
        await self._profile(user_id)
        self._session.add(
            WatchEventRecord(
                user_id=user_id,
                item_id=event.item_id,
                watched_duration_seconds=event.watched_duration_seconds,
                watched_at=event.timestamp,
                topics=list(event.topics),
            )
        )
        await self._session.flush()

    async def add_search_query(self, user_id: str, query: SearchQuery) -> None:
        await self._profile(user_id)
        self._session.add(
            SearchQueryRecord(user_id=user_id, text=query.text, searched_at=query.timestamp)
        )
        await self._session.flush()

    # JSON columns are reassigned rather than mutated in place so the ORM sees the change.

    async def add_requested_topics(self, user_id: str, topics: Sequence[str]) -> None:
        profile = await self._profile(user_id)
        existing = list(profile.requested_topics or [])
        additions = [topic for topic in normalize_topics(list(topics)) if topic not in existing]
        if additions:
            profile.requested_topics = existing + additions
            await self._session.flush()

    async def set_like(self, user_id: str, item_id: str, liked: bool) -> None:
        profile = await self._profile(user_id)
        profile.liked_item_ids = _toggle(profile.liked_item_ids, item_id, liked)
        await self._session.flush()

    async def set_follow(self, user_id: str, creator_id: str, following: bool) -> None:
        profile = await self._profile(user_id)
        profile.followed_creator_ids = _toggle(profile.followed_creator_ids, creator_id, following)
        await self._session.flush()

    async def set_syllabus_topics(self, user_id: str, topics: Sequence[str] | None) -> None:
        profile = await self._profile(user_id)
        profile.syllabus_topics = None if topics is None else list(normalize_topics(list(topics)))
        await self._session.flush()

    async def set_exam_date(self, user_id: str, exam_date: datetime | None) -> None:
        profile = await self._profile(user_id)
        profile.exam_date = exam_date
        await self._session.flush()


def _toggle(values: list[str] | None, value: str, present: bool) -> list[str]:
    current = [v for v in (values or []) if v != value]
    if present:
        current.append(value)
    return current
