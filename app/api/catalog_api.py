from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status

from app.api.dependencies import UnitOfWork, get_current_user_id, get_uow
from app.api.openapi_responses import (
    CONTENT_EXISTS,
    CONTENT_NOT_FOUND,
    authenticated_responses,
    public_responses,
)
from app.api.schemas.catalog_request_models import CreateContentItemRequest
from app.api.schemas.catalog_response_models import ContentItemListResponse, ContentItemResponse
from app.core.rate_limit import CATALOG_WRITE_RATE_LIMIT, limit, rate_limit_user_or_ip_key
from app.services.recommendation_service import utc_now

router = APIRouter()


@router.get(
    "/items",
    summary="List catalog items",
    description="List the content catalog, optionally narrowed by form and category.",
    response_model=ContentItemListResponse,
    responses=public_responses(),
)
async def list_items(
    request: Request,
    is_short_form: bool | None = Query(default=None, description="Only shorts (true) or lessons (false)"),
    category: str | None = Query(default=None, max_length=100),
    uow: UnitOfWork = Depends(get_uow),
) -> ContentItemListResponse:
    """List catalog items in catalog order."""
    items = await uow.catalog_service.list_items(is_short_form=is_short_form, category=category)
    return ContentItemListResponse(
        items=[ContentItemResponse.model_validate(item) for item in items]
    )


@router.get(
    "/items/{item_id}",
    summary="Get catalog item",
    response_model=ContentItemResponse,
    responses=public_responses(CONTENT_NOT_FOUND),
)
async def get_item(
    request: Request,
    item_id: str,
    uow: UnitOfWork = Depends(get_uow),
) -> ContentItemResponse:
    """Return one catalog item."""
    item = await uow.catalog_service.get_item(item_id)
    return ContentItemResponse.model_validate(item)


@router.post(
    "/items",
    summary="Publish catalog item",
    description="Add a new lesson or short to the catalog.",
    response_model=ContentItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses=authenticated_responses(CONTENT_EXISTS),
)
@limit(CATALOG_WRITE_RATE_LIMIT, key_func=rate_limit_user_or_ip_key)
async def create_item(
    request: Request,
    payload: CreateContentItemRequest,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> ContentItemResponse:
    """Publish a content item."""
    item = await uow.catalog_service.add_item(payload.to_content_item(utc_now()))
    return ContentItemResponse.model_validate(item)


@router.get(
    "/items/{item_id}/related",
    summary="Related items",
    description=(
        "Items most similar to the given one: same category, shared topics and "
        "engagement. The reference item is never included."
    ),
    response_model=ContentItemListResponse,
    responses=public_responses(CONTENT_NOT_FOUND),
)
async def related_items(
    request: Request,
    item_id: str,
    limit_: int = Query(default=4, ge=1, le=50, alias="limit"),
    uow: UnitOfWork = Depends(get_uow),
) -> ContentItemListResponse:
    """Return items related to ``item_id``."""
    items = await uow.recommendation_service.related(item_id, limit_)
    return ContentItemListResponse(
        items=[ContentItemResponse.model_validate(item) for item in items]
    )
