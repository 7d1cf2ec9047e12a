from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class LearnerProfile(Base):
    """Per-learner preferences; the id is the identity provider's subject."""

    __tablename__ = "learner_profiles"

    user_id: Mapped[str] = mapped_column(String(200), primary_key=True)
    requested_topics: Mapped[list[str]] = mapped_column(JSON, default=list)
    liked_item_ids: Mapped[list[str]] = mapped_column(JSON, default=list)
    followed_creator_ids: Mapped[list[str]] = mapped_column(JSON, default=list)
    syllabus_topics: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    exam_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    watch_events = relationship(
        "WatchEventRecord",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="WatchEventRecord.id",
    )
    search_queries = relationship(
        "SearchQueryRecord",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="SearchQueryRecord.id",
    )


class WatchEventRecord(Base):
    __tablename__ = "watch_events"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("learner_profiles.user_id", ondelete="CASCADE"), index=True
    )
    item_id: Mapped[str] = mapped_column(String(100), index=True)
    watched_duration_seconds: Mapped[int] = mapped_column(Integer, default=0)
    watched_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    topics: Mapped[list[str]] = mapped_column(JSON, default=list)

    profile = relationship("LearnerProfile", back_populates="watch_events")


class SearchQueryRecord(Base):
    __tablename__ = "search_queries"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("learner_profiles.user_id", ondelete="CASCADE"), index=True
    )
    text: Mapped[str] = mapped_column(Text)
    searched_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    profile = relationship("LearnerProfile", back_populates="search_queries")
