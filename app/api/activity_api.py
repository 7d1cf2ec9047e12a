from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from app.api.dependencies import UnitOfWork, get_current_user_id, get_uow
from app.api.openapi_responses import (
    CONTENT_NOT_FOUND,
    SYLLABUS_IMPORT_ERRORS,
    authenticated_responses,
)
from app.api.schemas.activity_request_models import (
    ExamDateRequest,
    SearchRequest,
    SyllabusRequest,
    TopicRequest,
    WatchEventRequest,
)
from app.api.schemas.activity_response_models import (
    ActivityResponse,
    SearchQueryResponse,
    SyllabusTopicsResponse,
    WatchEventResponse,
)
from app.api.schemas.recommendation_response_models import TopicScoresResponse
from app.core.rate_limit import SYLLABUS_EXTRACT_RATE_LIMIT, limit, rate_limit_user_or_ip_key

router = APIRouter()


@router.get(
    "",
    summary="Get activity",
    description="Return the caller's recorded learning activity.",
    response_model=ActivityResponse,
    responses=authenticated_responses(),
)
async def get_activity(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> ActivityResponse:
    activity = await uow.activity_service.get_activity(user_id)
    return ActivityResponse.model_validate(activity)


@router.get(
    "/topic-scores",
    summary="Topic interest scores",
    description="Topic affinity derived from the caller's activity, as used by the feed.",
    response_model=TopicScoresResponse,
    responses=authenticated_responses(),
)
async def get_topic_scores(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> TopicScoresResponse:
    topic_scores = await uow.recommendation_service.topic_scores(user_id)
    return TopicScoresResponse(topic_scores=topic_scores)


@router.post(
    "/watch-events",
    summary="Record a viewing",
    description="Record that the caller watched an item. The item's topics are captured on the event.",
    response_model=WatchEventResponse,
    status_code=status.HTTP_201_CREATED,
    responses=authenticated_responses(CONTENT_NOT_FOUND),
)
async def record_watch_event(
    request: Request,
    payload: WatchEventRequest,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> WatchEventResponse:
    event = await uow.activity_service.record_watch(
        user_id,
        payload.item_id,
        payload.watched_duration_seconds,
        payload.timestamp,
    )
    return WatchEventResponse.model_validate(event)


@router.post(
    "/searches",
    summary="Record a search",
    response_model=SearchQueryResponse,
    status_code=status.HTTP_201_CREATED,
    responses=authenticated_responses(),
)
async def record_search(
    request: Request,
    payload: SearchRequest,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> SearchQueryResponse:
    query = await uow.activity_service.record_search(user_id, payload.text)
    return SearchQueryResponse.model_validate(query)


@router.post(
    "/topic-requests",
    summary="Request topics",
    description="Add topics the caller explicitly asked for. These weigh most in the feed.",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED,
    responses=authenticated_responses(),
)
async def request_topics(
    request: Request,
    payload: TopicRequest,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> ActivityResponse:
    activity = await uow.activity_service.request_topics(user_id, payload.topics)
    return ActivityResponse.model_validate(activity)


@router.put(
    "/likes/{item_id}",
    summary="Like an item",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=authenticated_responses(CONTENT_NOT_FOUND),
)
async def like_item(
    request: Request,
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> Response:
    await uow.activity_service.like(user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/likes/{item_id}",
    summary="Unlike an item",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=authenticated_responses(),
)
async def unlike_item(
    request: Request,
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> Response:
    await uow.activity_service.unlike(user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/follows/{creator_id}",
    summary="Follow a creator",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=authenticated_responses(),
)
async def follow_creator(
    request: Request,
    creator_id: str,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> Response:
    await uow.activity_service.follow(user_id, creator_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/follows/{creator_id}",
    summary="Unfollow a creator",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=authenticated_responses(),
)
async def unfollow_creator(
    request: Request,
    creator_id: str,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> Response:
    await uow.activity_service.unfollow(user_id, creator_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/exam-date",
    summary="Set exam date",
    description="Set the caller's next exam date, or clear it with null.",
    response_model=ActivityResponse,
    responses=authenticated_responses(),
)
async def set_exam_date(
    request: Request,
    payload: ExamDateRequest,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> ActivityResponse:
    await uow.activity_service.set_exam_date(user_id, payload.exam_date)
    activity = await uow.activity_service.get_activity(user_id)
    return ActivityResponse.model_validate(activity)


@router.post(
    "/syllabus",
    summary="Import syllabus topics",
    description=(
        "Extract study topics from syllabus text with the LLM and store them as weak "
        "interest signals. Replaces previously imported syllabus topics."
    ),
    response_model=SyllabusTopicsResponse,
    responses=authenticated_responses(*SYLLABUS_IMPORT_ERRORS),
)
@limit(SYLLABUS_EXTRACT_RATE_LIMIT, key_func=rate_limit_user_or_ip_key)
async def import_syllabus(
    request: Request,
    payload: SyllabusRequest,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> SyllabusTopicsResponse:
    topics = await uow.syllabus_service.import_syllabus(user_id, payload.text)
    return SyllabusTopicsResponse(topics=topics)


@router.delete(
    "/syllabus",
    summary="Clear syllabus topics",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=authenticated_responses(),
)
async def clear_syllabus(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_uow),
) -> Response:
    await uow.syllabus_service.clear_syllabus(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
