"""Demo catalog used when the in-memory backend starts with SEED_CATALOG enabled."""

from __future__ import annotations

from datetime import UTC, datetime

from app.recommendation.models import ContentItem


def _lesson(
    item_id: str,
    title: str,
    creator_id: str,
    creator_name: str,
    *,
    category: str,
    topics: list[str],
    uploaded_at: datetime,
    duration_seconds: int,
    view_count: int,
    like_count: int,
    comment_count: int,
    average_watch_percentage: float,
    is_short_form: bool = False,
    is_exam_relevant: bool = False,
) -> ContentItem:
    return ContentItem(
        id=item_id,
        title=title,
        creator_id=creator_id,
        creator_name=creator_name,
        category=category,
        topics=tuple(topics),
        uploaded_at=uploaded_at,
        duration_seconds=duration_seconds,
        view_count=view_count,
        like_count=like_count,
        comment_count=comment_count,
        average_watch_percentage=average_watch_percentage,
        is_short_form=is_short_form,
        is_exam_relevant=is_exam_relevant,
    )


SEED_CATALOG: tuple[ContentItem, ...] = (
    _lesson(
        "video-1",
        "Introduction to Calculus: Limits and Derivatives",
        "math-masters",
        "Math Masters",
        category="math",
        topics=["calculus", "mathematics", "derivatives", "limits"],
        uploaded_at=datetime(2023, 9, 15, tzinfo=UTC),
        duration_seconds=18 * 60 + 42,
        view_count=245_000,
        like_count=15_000,
        comment_count=800,
        average_watch_percentage=78,
        is_exam_relevant=True,
    ),
    _lesson(
        "video-2",
        "Learn Python Programming: Complete Course for Beginners",
        "code-mastery",
        "Code Mastery",
        category="programming",
        topics=["python", "programming", "coding", "computer science"],
        uploaded_at=datetime(2023, 10, 3, tzinfo=UTC),
        duration_seconds=1 * 3600 + 24 * 60 + 36,
        view_count=578_000,
        like_count=35_000,
        comment_count=2_200,
        average_watch_percentage=65,
    ),
    _lesson(
        "video-3",
        "Chemistry Basics: Atomic Structure and Periodic Table",
        "science-simplified",
        "Science Simplified",
        category="science",
        topics=["chemistry", "atomic structure", "periodic table", "science"],
        uploaded_at=datetime(2023, 8, 22, tzinfo=UTC),
        duration_seconds=15 * 60 + 18,
        view_count=189_000,
        like_count=12_000,
        comment_count=650,
        average_watch_percentage=85,
        is_exam_relevant=True,
    ),
    _lesson(
        "video-4",
        "World War II: Major Events and Timeline",
        "history-horizon",
        "History Horizon",
        category="history",
        topics=["history", "world war 2", "wwii", "20th century"],
        uploaded_at=datetime(2023, 7, 12, tzinfo=UTC),
        duration_seconds=22 * 60 + 45,
        view_count=392_000,
        like_count=22_000,
        comment_count=1_800,
        average_watch_percentage=72,
        is_exam_relevant=True,
    ),
    _lesson(
        "video-5",
        "Advanced JavaScript: Promises and Async/Await",
        "web-dev-warriors",
        "Web Dev Warriors",
        category="programming",
        topics=["javascript", "async", "promises", "web development"],
        uploaded_at=datetime(2023, 9, 28, tzinfo=UTC),
        duration_seconds=27 * 60 + 14,
        view_count=215_000,
        like_count=18_000,
        comment_count=920,
        average_watch_percentage=81,
    ),
    _lesson(
        "video-6",
        "Digital Art Fundamentals: From Sketch to Final Piece",
        "creative-canvas",
        "Creative Canvas",
        category="art",
        topics=["digital art", "painting", "creative", "design"],
        uploaded_at=datetime(2023, 10, 10, tzinfo=UTC),
        duration_seconds=41 * 60 + 9,
        view_count=167_000,
        like_count=14_500,
        comment_count=780,
        average_watch_percentage=68,
    ),
    _lesson(
        "video-7",
        "Biology: The Cell Structure and Functions",
        "science-simplified",
        "Science Simplified",
        category="science",
        topics=["biology", "cell structure", "science", "microbiology"],
        uploaded_at=datetime(2023, 9, 5, tzinfo=UTC),
        duration_seconds=19 * 60 + 52,
        view_count=231_000,
        like_count=16_800,
        comment_count=720,
        average_watch_percentage=79,
        is_exam_relevant=True,
    ),
    _lesson(
        "video-8",
        "Marketing Strategies for Small Businesses",
        "business-boost",
        "Business Boost",
        category="business",
        topics=["marketing", "business", "entrepreneurship", "strategy"],
        uploaded_at=datetime(2023, 10, 1, tzinfo=UTC),
        duration_seconds=32 * 60 + 18,
        view_count=128_000,
        like_count=9_500,
        comment_count=620,
        average_watch_percentage=62,
    ),
    _lesson(
        "short-1",
        "Quick Calculus Tip: Power Rule",
        "math-masters",
        "Math Masters",
        category="math",
        topics=["calculus", "quick tip", "derivatives"],
        uploaded_at=datetime(2023, 9, 20, tzinfo=UTC),
        duration_seconds=59,
        view_count=125_000,
        like_count=18_000,
        comment_count=320,
        average_watch_percentage=94,
        is_short_form=True,
        is_exam_relevant=True,
    ),
    _lesson(
        "short-2",
        "JavaScript Array Methods in 60 Seconds",
        "code-mastery",
        "Code Mastery",
        category="programming",
        topics=["javascript", "arrays", "coding", "quick tip"],
        uploaded_at=datetime(2023, 10, 5, tzinfo=UTC),
        duration_seconds=60,
        view_count=182_000,
        like_count=22_000,
        comment_count=450,
        average_watch_percentage=91,
        is_short_form=True,
    ),
    _lesson(
        "short-3",
        "Understanding Quadratic Equations",
        "saramath",
        "Sara Johnson",
        category="math",
        topics=["algebra", "quadratic equations", "quick tip"],
        uploaded_at=datetime(2023, 10, 8, tzinfo=UTC),
        duration_seconds=58,
        view_count=41_000,
        like_count=1_245,
        comment_count=89,
        average_watch_percentage=88,
        is_short_form=True,
        is_exam_relevant=True,
    ),
    _lesson(
        "short-4",
        "Cell Division Explained",
        "drmikebio",
        "Dr. Mike Brown",
        category="science",
        topics=["biology", "cell division", "mitosis", "meiosis"],
        uploaded_at=datetime(2023, 10, 12, tzinfo=UTC),
        duration_seconds=57,
        view_count=33_000,
        like_count=986,
        comment_count=42,
        average_watch_percentage=90,
        is_short_form=True,
        is_exam_relevant=True,
    ),
)
