"""Integration tests for recommendation API endpoints."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

import pytest
from fastapi import status
from httpx import AsyncClient

from app.api.schemas import ContentItemListResponse, FeedResponse, NextItemResponse


class TestFeed:
    @pytest.mark.asyncio
    async def test_requires_authentication(self, async_http_client: AsyncClient) -> None:
        response = await async_http_client.get("/api/recommendations/feed")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_rejects_invalid_token(self, async_http_client: AsyncClient) -> None:
        response = await async_http_client.get(
            "/api/recommendations/feed", headers={"Authorization": "Bearer invalid_token"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {
            "error": "unauthorized",
            "message": "Could not validate credentials",
        }

    @pytest.mark.asyncio
    async def test_new_learner_gets_most_popular_lessons(
        self, async_http_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await async_http_client.get(
            "/api/recommendations/feed", params={"limit": 3}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        feed = FeedResponse.model_validate(response.json())
        assert [entry.item.id for entry in feed.items] == ["video-2", "video-4", "video-1"]
        assert all(not entry.item.is_short_form for entry in feed.items)

    @pytest.mark.asyncio
    async def test_requested_topics_lead_the_feed(
        self, async_http_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await async_http_client.post(
            "/api/activity/topic-requests", json={"topics": ["Biology"]}, headers=auth_headers
        )

        lessons = await async_http_client.get("/api/recommendations/feed", headers=auth_headers)
        shorts = await async_http_client.get(
            "/api/recommendations/feed", params={"is_short_form": "true"}, headers=auth_headers
        )

        lesson_feed = FeedResponse.model_validate(lessons.json())
        short_feed = FeedResponse.model_validate(shorts.json())
        assert lesson_feed.items[0].item.id == "video-7"
        assert short_feed.items[0].item.id == "short-4"
        assert all(entry.item.is_short_form for entry in short_feed.items)
        assert len(short_feed.items) == 4

    @pytest.mark.asyncio
    async def test_followed_creator_leads_the_feed(
        self, async_http_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await async_http_client.put("/api/activity/follows/drmikebio", headers=auth_headers)

        response = await async_http_client.get(
            "/api/recommendations/feed", params={"is_short_form": "true"}, headers=auth_headers
        )

        feed = FeedResponse.model_validate(response.json())
        assert feed.items[0].item.creator_id == "drmikebio"

    @pytest.mark.asyncio
    async def test_upcoming_exam_boosts_exam_content(
        self,
        async_http_client: AsyncClient,
        auth_headers: dict[str, str],
        fixed_now: datetime,
    ) -> None:
        exam_date = (fixed_now + timedelta(days=3)).isoformat()
        await async_http_client.put(
            "/api/activity/exam-date", json={"exam_date": exam_date}, headers=auth_headers
        )

        response = await async_http_client.get(
            "/api/recommendations/feed", params={"limit": 4}, headers=auth_headers
        )

        feed = FeedResponse.model_validate(response.json())
        assert {entry.item.id for entry in feed.items} == {
            "video-1",
            "video-3",
            "video-4",
            "video-7",
        }

    @pytest.mark.asyncio
    async def test_category_filter(
        self, async_http_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await async_http_client.get(
            "/api/recommendations/feed", params={"category": "programming"}, headers=auth_headers
        )

        feed = FeedResponse.model_validate(response.json())
        assert {entry.item.id for entry in feed.items} == {"video-2", "video-5"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, 51])
    async def test_limit_is_validated(
        self, async_http_client: AsyncClient, auth_headers: dict[str, str], limit: int
    ) -> None:
        response = await async_http_client.get(
            "/api/recommendations/feed", params={"limit": limit}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    @pytest.mark.asyncio
    async def test_learners_do_not_share_activity(
        self,
        async_http_client: AsyncClient,
        make_token: Callable[[str], str],
    ) -> None:
        first = {"Authorization": f"Bearer {make_token('learner-a')}"}
        second = {"Authorization": f"Bearer {make_token('learner-b')}"}
        await async_http_client.post(
            "/api/activity/topic-requests", json={"topics": ["marketing"]}, headers=first
        )

        first_feed = FeedResponse.model_validate(
            (await async_http_client.get("/api/recommendations/feed", headers=first)).json()
        )
        second_feed = FeedResponse.model_validate(
            (await async_http_client.get("/api/recommendations/feed", headers=second)).json()
        )

        assert first_feed.items[0].item.id == "video-8"
        assert second_feed.items[0].item.id == "video-2"


class TestWhatsNext:
    @pytest.mark.asyncio
    async def test_no_history_returns_null(
        self, async_http_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await async_http_client.get("/api/recommendations/next", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"item": None}

    @pytest.mark.asyncio
    async def test_follows_latest_watch(
        self, async_http_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await async_http_client.post(
            "/api/activity/watch-events",
            json={"item_id": "video-1", "watched_duration_seconds": 600},
            headers=auth_headers,
        )

        response = await async_http_client.get("/api/recommendations/next", headers=auth_headers)

        parsed = NextItemResponse.model_validate(response.json())
        assert parsed.item is not None
        assert parsed.item.id == "short-1"


class TestTrendingExam:
    @pytest.mark.asyncio
    async def test_is_public_and_long_form(self, async_http_client: AsyncClient) -> None:
        response = await async_http_client.get(
            "/api/recommendations/trending-exam", params={"limit": 3}
        )

        assert response.status_code == status.HTTP_200_OK
        parsed = ContentItemListResponse.model_validate(response.json())
        assert [item.id for item in parsed.items] == ["video-2", "video-4", "video-5"]

    @pytest.mark.asyncio
    async def test_default_limit(self, async_http_client: AsyncClient) -> None:
        response = await async_http_client.get("/api/recommendations/trending-exam")

        assert len(response.json()["items"]) == 5
