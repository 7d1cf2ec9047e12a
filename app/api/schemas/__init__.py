"""API request and response schemas.

Import request/response models from the submodules (e.g. catalog_request_models,
recommendation_response_models) or from this package for a single entry point.
"""

from __future__ import annotations

from app.api.schemas.activity_request_models import (
    ExamDateRequest,
    SearchRequest,
    SyllabusRequest,
    TopicRequest,
    WatchEventRequest,
)
from app.api.schemas.activity_response_models import (
    ActivityResponse,
    SearchQueryResponse,
    SyllabusTopicsResponse,
    WatchEventResponse,
)
from app.api.schemas.catalog_request_models import CreateContentItemRequest
from app.api.schemas.catalog_response_models import ContentItemListResponse, ContentItemResponse
from app.api.schemas.meta_response_models import HealthResponse
from app.api.schemas.recommendation_response_models import (
    FeedResponse,
    NextItemResponse,
    ScoredContentItemResponse,
    TopicScoresResponse,
)

__all__ = [
    "ActivityResponse",
    "ContentItemListResponse",
    "ContentItemResponse",
    "CreateContentItemRequest",
    "ExamDateRequest",
    "FeedResponse",
    "HealthResponse",
    "NextItemResponse",
    "ScoredContentItemResponse",
    "SearchQueryResponse",
    "SearchRequest",
    "SyllabusRequest",
    "SyllabusTopicsResponse",
    "TopicRequest",
    "TopicScoresResponse",
    "WatchEventRequest",
    "WatchEventResponse",
]
