from app.recommendation.models import (
    ActivityRecord,
    ContentItem,
    ScoredItem,
    SearchQuery,
    WatchEvent,
)
from app.recommendation.ranking import (
    next_item,
    rank,
    rank_scored,
    related_items,
    trending_exam_content,
)
from app.recommendation.scoring import score_item, trending_score
from app.recommendation.topics import extract_topic_scores

__all__ = [
    "ActivityRecord",
    "ContentItem",
    "ScoredItem",
    "SearchQuery",
    "WatchEvent",
    "extract_topic_scores",
    "next_item",
    "rank",
    "rank_scored",
    "related_items",
    "score_item",
    "trending_exam_content",
    "trending_score",
]
