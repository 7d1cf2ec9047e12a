"""Response models for catalog API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ContentItemResponse(BaseModel):
    """Response model for a catalog item."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    creator_id: str
    creator_name: str
    creator_avatar_url: str | None = None
    thumbnail_url: str | None = None
    category: str | None = None
    duration_seconds: int
    view_count: int
    like_count: int
    comment_count: int
    average_watch_percentage: float
    uploaded_at: datetime
    topics: list[str]
    is_short_form: bool
    is_exam_relevant: bool


class ContentItemListResponse(BaseModel):
    """Response model for a list of catalog items."""

    items: list[ContentItemResponse]
