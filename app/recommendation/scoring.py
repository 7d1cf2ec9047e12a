from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Final

from app.recommendation.models import ActivityRecord, ContentItem

FOLLOWED_CREATOR_BONUS: Final[float] = 5.0

EXAM_WINDOW_DAYS: Final[int] = 30
EXAM_MAX_BONUS: Final[float] = 10.0

RECENCY_WINDOW_DAYS: Final[int] = 14

SAME_CATEGORY_SIMILARITY: Final[float] = 20.0
SHARED_TOPIC_SIMILARITY: Final[float] = 10.0

_ONE_DAY = timedelta(days=1)


def whole_days(delta: timedelta) -> int:
    """Floor a time difference to whole days (negative deltas round down)."""
    return math.floor(delta / _ONE_DAY)


def topic_match_bonus(item: ContentItem, topic_scores: Mapping[str, float]) -> float:
    return sum(topic_scores.get(topic, 0.0) for topic in item.topics)


def is_followed_creator(item: ContentItem, activity: ActivityRecord) -> bool:
    followed = activity.followed_creator_ids
    return item.creator_id in followed or item.creator_name in followed


def exam_proximity_bonus(item: ContentItem, activity: ActivityRecord, now: datetime) -> float:
    """Bonus for exam-relevant items when an exam is less than 30 days away.

    Past exams earn nothing; the bonus is clamped to [0, 10].
    """
    if not item.is_exam_relevant or activity.exam_date is None:
        return 0.0
    days_to_exam = whole_days(activity.exam_date - now)
    if days_to_exam < 0 or days_to_exam >= EXAM_WINDOW_DAYS:
        return 0.0
    bonus = EXAM_MAX_BONUS - days_to_exam / 3
    return min(EXAM_MAX_BONUS, max(0.0, bonus))


def recency_bonus(item: ContentItem, now: datetime) -> float:
    # Items dated in the future count as uploaded today.
    days_since_upload = max(0, whole_days(now - item.uploaded_at))
    if days_since_upload >= RECENCY_WINDOW_DAYS:
        return 0.0
    return (RECENCY_WINDOW_DAYS - days_since_upload) / 2


def popularity_bonus(item: ContentItem) -> float:
    return math.log10(max(item.view_count, 1)) / 2


def score_item(
    item: ContentItem,
    topic_scores: Mapping[str, float],
    activity: ActivityRecord,
    now: datetime,
) -> float:
    """Personalized relevance of ``item`` for the learner behind ``activity``.

    The unweighted sum of topic match, followed-creator, exam-proximity,
    recency and popularity terms.
    """
    score = topic_match_bonus(item, topic_scores)
    if is_followed_creator(item, activity):
        score += FOLLOWED_CREATOR_BONUS
    score += exam_proximity_bonus(item, activity, now)
    score += recency_bonus(item, now)
    score += popularity_bonus(item)
    return score


def trending_score(item: ContentItem) -> float:
    """Catalog-wide engagement composite, independent of any learner."""
    return item.like_count / 1000 * 3 + item.comment_count / 100 * 2 + item.view_count / 10000


def similarity_score(candidate: ContentItem, reference: ContentItem) -> float:
    score = 0.0
    if candidate.category is not None and candidate.category == reference.category:
        score += SAME_CATEGORY_SIMILARITY
    shared = set(candidate.topics) & set(reference.topics)
    score += len(shared) * SHARED_TOPIC_SIMILARITY
    score += candidate.average_watch_percentage / 10
    return score
