from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.activity_api import router as activity_router
from app.api.catalog_api import router as catalog_router
from app.api.openapi_responses import public_responses
from app.api.recommendations_api import router as recommendations_router
from app.api.schemas.meta_response_models import HealthResponse
from app.core.config import settings
from app.core.rate_limit import HEALTH_RATE_LIMIT, limit, rate_limit_ip_key

router = APIRouter()


@router.get(
    "/health",
    tags=["meta"],
    summary="Health check",
    response_model=HealthResponse,
    responses=public_responses(),
)
@limit(HEALTH_RATE_LIMIT, key_func=rate_limit_ip_key)
def health(request: Request) -> HealthResponse:
    """Check the health of the application."""
    return HealthResponse(status="ok", repository_backend=settings.repository_backend)


# Include sub-routers
router.include_router(catalog_router, prefix="/catalog", tags=["catalog"])
router.include_router(
    recommendations_router, prefix="/recommendations", tags=["recommendations"]
)
router.include_router(activity_router, prefix="/activity", tags=["activity"])
