"""Ordering and selection over a catalog snapshot.

Every function here is pure: it reads the catalog and activity snapshots it
is given and returns new lists. Sorting is stable, so equal scores keep
catalog order.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from app.recommendation.models import ActivityRecord, ContentItem, ScoredItem
from app.recommendation.scoring import (
    is_followed_creator,
    score_item,
    similarity_score,
    trending_score,
)
from app.recommendation.topics import extract_topic_scores


def rank_scored(
    catalog: Sequence[ContentItem],
    activity: ActivityRecord,
    is_short_form: bool,
    limit: int,
    now: datetime,
) -> list[ScoredItem]:
    """Score one content pool for a learner and return the top ``limit`` items with scores."""
    if limit <= 0:
        return []
    topic_scores = extract_topic_scores(activity)
    scored = [
        ScoredItem(item=item, score=score_item(item, topic_scores, activity, now))
        for item in catalog
        if item.is_short_form == is_short_form
    ]
    scored.sort(key=lambda entry: entry.score, reverse=True)
    return scored[:limit]


def rank(
    catalog: Sequence[ContentItem],
    activity: ActivityRecord,
    is_short_form: bool,
    limit: int,
    now: datetime,
) -> list[ContentItem]:
    """Top-N personalized recommendations from the short-form or long-form pool."""
    return [entry.item for entry in rank_scored(catalog, activity, is_short_form, limit, now)]


def next_item(catalog: Sequence[ContentItem], activity: ActivityRecord) -> ContentItem | None:
    """Pick the single best unwatched follow-up to the learner's latest watch.

    Candidates must share at least one topic with the most recently watched
    item. The highest topic overlap wins; ties go to followed creators and
    then to catalog order.
    """
    if not activity.watch_events:
        return None

    latest = max(activity.watch_events, key=lambda event: event.timestamp)
    latest_topics = set(latest.topics)
    watched_ids = {event.item_id for event in activity.watch_events}

    best: ContentItem | None = None
    best_key: tuple[int, bool] | None = None
    for item in catalog:
        if item.id in watched_ids:
            continue
        overlap = len(latest_topics.intersection(item.topics))
        if overlap == 0:
            continue
        key = (overlap, is_followed_creator(item, activity))
        if best_key is None or key > best_key:
            best, best_key = item, key
    return best


def trending_exam_content(catalog: Sequence[ContentItem], limit: int) -> list[ContentItem]:
    """Most engaging long-form items across the whole catalog."""
    if limit <= 0:
        return []
    long_form = [item for item in catalog if not item.is_short_form]
    long_form.sort(key=trending_score, reverse=True)
    return long_form[:limit]


def related_items(
    catalog: Sequence[ContentItem], reference: ContentItem, limit: int
) -> list[ContentItem]:
    """Items similar to ``reference`` by category, shared topics and engagement."""
    if limit <= 0:
        return []
    reference_topics = set(reference.topics)
    related = [
        item
        for item in catalog
        if item.id != reference.id
        and (
            (item.category is not None and item.category == reference.category)
            or reference_topics.intersection(item.topics)
        )
    ]
    related.sort(key=lambda item: similarity_score(item, reference), reverse=True)
    return related[:limit]
