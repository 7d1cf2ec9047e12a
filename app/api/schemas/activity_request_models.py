"""Request models for activity API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.core.prompt_sanitizer import MAX_DOCUMENT_CHARS


class WatchEventRequest(BaseModel):
    """Request model for recording a viewing."""

    item_id: str = Field(..., min_length=1, max_length=100)
    watched_duration_seconds: int = Field(default=0, ge=0)
    timestamp: datetime | None = Field(
        default=None, description="When the item was watched; defaults to now"
    )


class SearchRequest(BaseModel):
    """Request model for recording a search query."""

    text: str = Field(..., min_length=1, max_length=200)


class TopicRequest(BaseModel):
    """Request model for explicit topic requests (e.g. onboarding topic selection)."""

    topics: list[str] = Field(..., min_length=1, max_length=20)


class ExamDateRequest(BaseModel):
    """Request model for setting or clearing the learner's next exam."""

    exam_date: datetime | None


class SyllabusRequest(BaseModel):
    """Request model for importing topics from a syllabus document."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_DOCUMENT_CHARS,
        description="Plain text of the syllabus or exam notes",
        examples=["Unit 1: Limits and continuity. Unit 2: Derivatives and the chain rule."],
    )
