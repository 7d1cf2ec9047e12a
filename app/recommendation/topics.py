from __future__ import annotations

from collections import defaultdict
from typing import Final

from app.recommendation.models import ActivityRecord

WATCHED_TOPIC_WEIGHT: Final[float] = 2.0
SEARCH_WORD_WEIGHT: Final[float] = 1.0
REQUESTED_TOPIC_WEIGHT: Final[float] = 3.0
SYLLABUS_TOPIC_WEIGHT: Final[float] = 1.5

# Search words shorter than this are ignored as pseudo-topics.
MIN_SEARCH_WORD_LENGTH: Final[int] = 4


def search_words(text: str) -> list[str]:
    """Return the lower-cased words of a search query that count as pseudo-topics."""
    return [word for word in text.lower().split() if len(word) >= MIN_SEARCH_WORD_LENGTH]


def extract_topic_scores(activity: ActivityRecord) -> dict[str, float]:
    """Accumulate a topic -> interest weight map from a learner's activity.

    Weights are additive per occurrence and never normalized:

    - each topic of each watch event: +2
    - each search word longer than three characters: +1
    - each explicitly requested topic: +3
    - each syllabus topic: +1.5

    Topics are lower-cased on insertion and matched verbatim afterwards, so
    "equation" and "equations" are distinct topics.
    """
    scores: defaultdict[str, float] = defaultdict(float)

    for event in activity.watch_events:
        for topic in event.topics:
            scores[topic.lower()] += WATCHED_TOPIC_WEIGHT

    for query in activity.search_queries:
        for word in search_words(query.text):
            scores[word] += SEARCH_WORD_WEIGHT

    for topic in activity.requested_topics:
        scores[topic.lower()] += REQUESTED_TOPIC_WEIGHT

    for topic in activity.syllabus_topics or ():
        scores[topic.lower()] += SYLLABUS_TOPIC_WEIGHT

    return dict(scores)
