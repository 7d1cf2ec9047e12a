"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os

# Settings are validated at import time, so test defaults must be in place first.
os.environ.setdefault("OPENAI_API_KEY", "test_key")
os.environ.setdefault("IDENTITY_JWT_SECRET", "StrongSecretKeyWith123!@#AndMoreChars")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("REPOSITORY_BACKEND", "memory")

import types
from collections.abc import AsyncIterator, Callable, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core import config
from app.core.rate_limit import limiter
from app.db.base import Base
from app.llm.client import LLMClient
from app.llm.schemas import SyllabusTopicsResult
from app.main import create_app
from app.recommendation.models import ContentItem
from app.services.activity_service import activity_service_factory_provider
from app.services.catalog_service import catalog_service_factory_provider
from app.services.recommendation_service import recommendation_service_factory_provider
from app.services.syllabus_service import syllabus_service_factory_provider

FIXED_NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


class MockLLMClient(LLMClient):
    """LLM client returning canned syllabus topics."""

    def __init__(self, topics: list[str] | None = None) -> None:
        self.topics = topics if topics is not None else ["calculus", "derivatives"]
        self.documents: list[str] = []

    async def extract_syllabus_topics(self, document: str) -> SyllabusTopicsResult:
        self.documents.append(document)
        return SyllabusTopicsResult(topics=self.topics)


@pytest.fixture(autouse=True)
def reset_rate_limiter() -> Iterator[None]:
    """Rate limit counters are process-global; start every test from zero."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def mock_llm_client() -> MockLLMClient:
    return MockLLMClient()


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch, mock_llm_client: MockLLMClient) -> FastAPI:
    """Creates a FastAPI app on a fresh seeded in-memory store (function-scoped).

    Services use a fixed clock and a mock LLM client so responses are deterministic.
    """
    monkeypatch.setattr(config.settings, "environment", "test")
    monkeypatch.setattr(config.settings, "repository_backend", "memory")
    monkeypatch.setattr(config.settings, "seed_catalog", True)

    fastapi_app = create_app()

    def clock() -> datetime:
        return FIXED_NOW

    fastapi_app.state.services = types.MappingProxyType(
        {
            "catalog_service": catalog_service_factory_provider(),
            "recommendation_service": recommendation_service_factory_provider(clock),
            "activity_service": activity_service_factory_provider(clock),
            "syllabus_service": syllabus_service_factory_provider(mock_llm_client),
        }
    )
    return fastapi_app


@pytest.fixture
def http_client(app: FastAPI) -> TestClient:
    """Creates a synchronous http client."""
    return TestClient(app)


@pytest_asyncio.fixture
async def async_http_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Creates an async http client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def make_token() -> Callable[[str], str]:
    """Return a helper that signs identity-provider style access tokens."""

    def _make_token(subject: str) -> str:
        return jwt.encode(
            {"sub": subject},
            config.settings.identity_jwt_secret,
            algorithm=config.settings.identity_jwt_algorithm,
        )

    return _make_token


@pytest.fixture
def auth_headers(make_token: Callable[[str], str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token('learner-1')}"}


@pytest.fixture
def item_factory() -> Callable[..., ContentItem]:
    """Return a helper building catalog items with neutral defaults."""

    def _make_item(item_id: str = "item-1", **overrides: Any) -> ContentItem:
        fields: dict[str, Any] = {
            "id": item_id,
            "title": f"Item {item_id}",
            "creator_id": "creator-1",
            "creator_name": "Creator One",
            "category": "math",
            "duration_seconds": 600,
            "view_count": 1000,
            "like_count": 0,
            "comment_count": 0,
            "average_watch_percentage": 50.0,
            "uploaded_at": FIXED_NOW - timedelta(days=30),
            "topics": (),
            "is_short_form": False,
        }
        fields.update(overrides)
        return ContentItem(**fields)

    return _make_item


# Database fixtures. The SQL repositories run against a real PostgreSQL
# database named by TEST_DATABASE_URL; tests using them are skipped without it.

test_database_url = os.getenv("TEST_DATABASE_URL")


@pytest_asyncio.fixture
async def db_session_maker() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Creates the schema on the test database and drops it afterwards."""
    if not test_database_url:
        pytest.skip("TEST_DATABASE_URL is not set")

    engine = create_async_engine(test_database_url, pool_pre_ping=True, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture
async def db_session(
    db_session_maker: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Creates a database session for a test."""
    async with db_session_maker() as session:
        yield session
