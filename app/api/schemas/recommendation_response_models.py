"""Response models for recommendation API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.api.schemas.catalog_response_models import ContentItemResponse


class ScoredContentItemResponse(BaseModel):
    """A recommended item with its personalized score."""

    item: ContentItemResponse
    score: float


class FeedResponse(BaseModel):
    """Response model for a personalized feed, best first."""

    items: list[ScoredContentItemResponse]


class NextItemResponse(BaseModel):
    """Response model for the "what's next" pick; ``item`` is null when nothing fits."""

    item: ContentItemResponse | None


class TopicScoresResponse(BaseModel):
    """Response model for a learner's topic affinity."""

    topic_scores: dict[str, float] = Field(
        ..., description="Topic -> accumulated interest weight", examples=[{"calculus": 5.0}]
    )
