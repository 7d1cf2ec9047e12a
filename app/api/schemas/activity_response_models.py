"""Response models for activity API endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class WatchEventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item_id: str
    watched_duration_seconds: int
    timestamp: datetime
    topics: list[str]


class SearchQueryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    text: str
    timestamp: datetime


class ActivityResponse(BaseModel):
    """Response model for a learner's activity record."""

    model_config = ConfigDict(from_attributes=True)

    watch_events: list[WatchEventResponse]
    search_queries: list[SearchQueryResponse]
    requested_topics: list[str]
    liked_item_ids: list[str]
    followed_creator_ids: list[str]
    syllabus_topics: list[str] | None
    exam_date: datetime | None

    @field_validator("liked_item_ids", "followed_creator_ids", mode="before")
    @classmethod
    def _sorted_ids(cls, value: Iterable[str]) -> list[str]:
        return sorted(value)


class SyllabusTopicsResponse(BaseModel):
    """Response model for topics imported from a syllabus."""

    topics: list[str]
