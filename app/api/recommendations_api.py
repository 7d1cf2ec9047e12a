from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from app.api.dependencies import UnitOfWork, get_current_user_id, get_uow
from app.api.openapi_responses import authenticated_responses, public_responses
from app.api.schemas.catalog_response_models import ContentItemListResponse, ContentItemResponse
from app.api.schemas.recommendation_response_models import (
    FeedResponse,
    NextItemResponse,
    ScoredContentItemResponse,
)

router = APIRouter()


@router.get(
    "/feed",
    summary="Personalized feed",
    description=(
        "Rank one content pool (lessons or shorts) for the caller using topic "
        "interest, followed creators, exam proximity, recency and popularity."
    ),
    response_model=FeedResponse,
    responses=authenticated_responses(),
)
async def feed(
    request: Request,
    is_short_form: bool = Query(default=False, description="Rank shorts instead of lessons"),
    limit: int = Query(default=10, ge=1, le=50),
    category: str | None = Query(default=None, max_length=100),
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> FeedResponse:
    """Return the caller's feed, best first."""
    ranked = await uow.recommendation_service.feed(
        user_id, is_short_form=is_short_form, limit=limit, category=category
    )
    return FeedResponse(
        items=[
            ScoredContentItemResponse(
                item=ContentItemResponse.model_validate(scored.item), score=scored.score
            )
            for scored in ranked
        ]
    )


@router.get(
    "/next",
    summary="What's next",
    description=(
        "Suggest one unwatched item to continue with after the caller's most recent "
        "viewing. Returns a null item when there is no viewing history or nothing fits."
    ),
    response_model=NextItemResponse,
    responses=authenticated_responses(),
)
async def whats_next(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> NextItemResponse:
    item = await uow.recommendation_service.whats_next(user_id)
    if item is None:
        return NextItemResponse(item=None)
    return NextItemResponse(item=ContentItemResponse.model_validate(item))


@router.get(
    "/trending-exam",
    summary="Trending exam content",
    description="Long-form items ordered by engagement. Not personalized.",
    response_model=ContentItemListResponse,
    responses=public_responses(),
)
async def trending_exam(
    request: Request,
    limit: int = Query(default=5, ge=1, le=50),
    uow: UnitOfWork = Depends(get_uow),
) -> ContentItemListResponse:
    items = await uow.recommendation_service.trending_exam(limit)
    return ContentItemListResponse(
        items=[ContentItemResponse.model_validate(item) for item in items]
    )
