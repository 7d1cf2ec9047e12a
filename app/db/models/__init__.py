from app.db.models.content_item import ContentItemRecord
from app.db.models.learner import LearnerProfile, SearchQueryRecord, WatchEventRecord

__all__ = ["ContentItemRecord", "LearnerProfile", "SearchQueryRecord", "WatchEventRecord"]
