"""Immutable inputs and outputs of the content ranking module."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_topics(values: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Lower-case and strip topics, dropping blanks and duplicates (order preserved)."""
    normalized: list[str] = []
    seen: set[str] = set()
    for value in values:
        topic = value.strip().lower()
        if not topic or topic in seen:
            continue
        seen.add(topic)
        normalized.append(topic)
    return tuple(normalized)


def as_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ContentItem(BaseModel):
    """A lesson or short in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    creator_id: str
    creator_name: str
    creator_avatar_url: str | None = None
    thumbnail_url: str | None = None
    category: str | None = None
    duration_seconds: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    average_watch_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    uploaded_at: datetime
    topics: tuple[str, ...] = ()
    is_short_form: bool
    is_exam_relevant: bool = False

    @field_validator("topics")
    @classmethod
    def _normalize_topics(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return normalize_topics(value)

    @field_validator("category")
    @classmethod
    def _normalize_category(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().lower() or None

    @field_validator("uploaded_at")
    @classmethod
    def _aware_uploaded_at(cls, value: datetime) -> datetime:
        return as_aware(value)


class WatchEvent(BaseModel):
    """One viewing of an item, with the item's topics captured at watch time."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    watched_duration_seconds: int = Field(default=0, ge=0)
    timestamp: datetime
    topics: tuple[str, ...] = ()

    @field_validator("topics")
    @classmethod
    def _normalize_topics(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return normalize_topics(value)

    @field_validator("timestamp")
    @classmethod
    def _aware_timestamp(cls, value: datetime) -> datetime:
        return as_aware(value)


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def _aware_timestamp(cls, value: datetime) -> datetime:
        return as_aware(value)


class ActivityRecord(BaseModel):
    """Snapshot of one learner's behavioural signals.

    ``syllabus_topics`` is ``None`` when no syllabus has been uploaded, and
    ``exam_date`` is ``None`` when no exam is scheduled.
    """

    model_config = ConfigDict(frozen=True)

    watch_events: tuple[WatchEvent, ...] = ()
    search_queries: tuple[SearchQuery, ...] = ()
    requested_topics: tuple[str, ...] = ()
    liked_item_ids: frozenset[str] = frozenset()
    followed_creator_ids: frozenset[str] = frozenset()
    syllabus_topics: tuple[str, ...] | None = None
    exam_date: datetime | None = None

    @field_validator("exam_date")
    @classmethod
    def _aware_exam_date(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return as_aware(value)


class ScoredItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: ContentItem
    score: float
