"""Request models for catalog API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.recommendation.models import ContentItem


class CreateContentItemRequest(BaseModel):
    """Request model for publishing a content item."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": "short-42",
                    "title": "Quick Tip: Chain Rule",
                    "creator_id": "math-masters",
                    "creator_name": "Math Masters",
                    "category": "math",
                    "duration_seconds": 58,
                    "uploaded_at": "2024-03-01T10:00:00Z",
                    "topics": ["calculus", "derivatives", "chain rule"],
                    "is_short_form": True,
                    "is_exam_relevant": True,
                }
            ]
        }
    )

    id: str = Field(..., min_length=1, max_length=100, pattern=r"^[A-Za-z0-9_.:-]+$")
    title: str = Field(..., min_length=1, max_length=300)
    creator_id: str = Field(..., min_length=1, max_length=200)
    creator_name: str = Field(..., min_length=1, max_length=200)
    creator_avatar_url: str | None = Field(default=None, max_length=2048)
    thumbnail_url: str | None = Field(default=None, max_length=2048)
    category: str | None = Field(default=None, max_length=100)
    duration_seconds: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    average_watch_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    uploaded_at: datetime | None = Field(
        default=None, description="Upload time; defaults to the time of the request"
    )
    topics: list[str] = Field(default_factory=list, max_length=30)
    is_short_form: bool
    is_exam_relevant: bool = False

    def to_content_item(self, uploaded_at: datetime) -> ContentItem:
        return ContentItem.model_validate(
            {**self.model_dump(), "uploaded_at": self.uploaded_at or uploaded_at}
        )
