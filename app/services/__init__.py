from app.services.activity_service import ActivityService
from app.services.catalog_service import CatalogService, ContentItemNotFoundError
from app.services.recommendation_service import RecommendationService
from app.services.syllabus_service import SyllabusExtractionError, SyllabusService

__all__ = [
    "ActivityService",
    "CatalogService",
    "ContentItemNotFoundError",
    "RecommendationService",
    "SyllabusExtractionError",
    "SyllabusService",
]
