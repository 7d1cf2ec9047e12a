from __future__ import annotations

import logging
import sys
import types
from importlib.metadata import PackageNotFoundError, version
from typing import cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ExceptionHandler

from app.api.router import router as api_router
from app.core.config import InvalidSettingsError, MissingRequiredSettingsError
from app.core.errors import (
    ServiceError,
    http_exception_handler,
    rate_limit_exception_handler,
    request_validation_exception_handler,
    service_exception_handler,
    unhandled_exception_handler,
)
from app.core.lifespan import lifespan
from app.core.logging import configure_logging
from app.core.rate_limit import limiter
from app.db.session import get_session_maker
from app.llm.client import OpenAIClient
from app.repositories import (
    InMemoryActivityRepository,
    InMemoryCatalogRepository,
    RepositoryFactory,
    memory_repository_factory,
    sql_repository_factory,
)
from app.repositories.seed import SEED_CATALOG
from app.services.activity_service import activity_service_factory_provider
from app.services.catalog_service import catalog_service_factory_provider
from app.services.recommendation_service import recommendation_service_factory_provider
from app.services.syllabus_service import syllabus_service_factory_provider

# Import settings - this may raise MissingRequiredSettingsError
try:
    from app.core.config import settings
except MissingRequiredSettingsError as e:
    print("ERROR: Missing required environment variables:", file=sys.stderr)
    for field in e.missing_fields:
        print(f"  - {field}", file=sys.stderr)
    print(
        "\nPlease set these in your .env file (see env.example for reference)",
        file=sys.stderr,
    )
    sys.exit(1)
except InvalidSettingsError as e:
    print("ERROR: Invalid environment variable values:", file=sys.stderr)
    for field, message in e.invalid_fields:
        print(f"  - {field}: {message}", file=sys.stderr)
    print(
        "\nPlease update these in your .env file (see env.example for reference)",
        file=sys.stderr,
    )
    sys.exit(1)


def build_repository_factory() -> RepositoryFactory:
    if settings.repository_backend == "database":
        return sql_repository_factory(get_session_maker)
    catalog = InMemoryCatalogRepository(SEED_CATALOG if settings.seed_catalog else ())
    return memory_repository_factory(catalog, InMemoryActivityRepository())


def create_app() -> FastAPI:
    configure_logging()

    try:
        api_version = version("learnfeed-api")
    except PackageNotFoundError:
        api_version = "0.1.0"  # Fallback if package not installed
        logging.warning("learnfeed-api package not found, using fallback version 0.1.0")

    is_debug_mode = settings.environment == "local"
    app = FastAPI(
        title=settings.app_name,
        version=api_version,
        debug=is_debug_mode,
        lifespan=lifespan,
    )
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast(ExceptionHandler, request_validation_exception_handler)
    )
    app.add_exception_handler(
        RateLimitExceeded, cast(ExceptionHandler, rate_limit_exception_handler)
    )
    app.add_exception_handler(ServiceError, cast(ExceptionHandler, service_exception_handler))
    app.add_exception_handler(Exception, cast(ExceptionHandler, unhandled_exception_handler))
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.include_router(api_router, prefix="/api")
    app.state.repository_factory = build_repository_factory()
    openai_client = OpenAIClient()

    _services = {
        "catalog_service": catalog_service_factory_provider(),
        "recommendation_service": recommendation_service_factory_provider(),
        "activity_service": activity_service_factory_provider(),
        "syllabus_service": syllabus_service_factory_provider(openai_client),
    }
    app.state.services = types.MappingProxyType(_services)

    return app


app = create_app()
