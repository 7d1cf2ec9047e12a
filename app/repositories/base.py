"""Storage interfaces for the catalog and learner activity.

The ranking module never talks to storage; services read snapshots through
these interfaces and hand them to the pure ranking functions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from app.core.errors import ServiceError
from app.recommendation.models import ActivityRecord, ContentItem, SearchQuery, WatchEvent


class ContentItemAlreadyExistsError(ServiceError):
    """Raised when adding an item whose id is already in the catalog."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Content item '{item_id}' already exists", "content_exists")
        self.item_id = item_id


class CatalogRepository(ABC):
    """Read/write access to the content catalog."""

    @abstractmethod
    async def list_items(self) -> list[ContentItem]:
        """Return every item in stable catalog order."""
        raise NotImplementedError

    @abstractmethod
    async def get_item(self, item_id: str) -> ContentItem | None:
        raise NotImplementedError

    @abstractmethod
    async def add_item(self, item: ContentItem) -> ContentItem:
        """Add an item. Raises ContentItemAlreadyExistsError on a duplicate id."""
        raise NotImplementedError


class ActivityRepository(ABC):
    """Per-learner behavioural signals, keyed by the identity provider's user id."""

    @abstractmethod
    async def get_activity(self, user_id: str) -> ActivityRecord:
        """Return a snapshot of the learner's activity (empty for unknown learners)."""
        raise NotImplementedError

    @abstractmethod
    async def add_watch_event(self, user_id: str, event: WatchEvent) -> None:
        raise NotImplementedError

    @abstractmethod
    async def add_search_query(self, user_id: str, query: SearchQuery) -> None:
        raise NotImplementedError

    @abstractmethod
    async def add_requested_topics(self, user_id: str, topics: Sequence[str]) -> None:
        """Append topics not already requested, preserving request order."""
        raise NotImplementedError

    @abstractmethod
    async def set_like(self, user_id: str, item_id: str, liked: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    async def set_follow(self, user_id: str, creator_id: str, following: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    async def set_syllabus_topics(self, user_id: str, topics: Sequence[str] | None) -> None:
        raise NotImplementedError

    @abstractmethod
    async def set_exam_date(self, user_id: str, exam_date: datetime | None) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class RepositoryBundle:
    """The repositories available to one unit of work."""

    catalog: CatalogRepository
    activity: ActivityRepository
