"""OpenAPI ``responses`` entries for the error payloads routes can return."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import status

from app.core.errors import ErrorResponse

ResponsesDoc = dict[int | str, dict[str, Any]]


@dataclass(frozen=True)
class ErrorExample:
    status_code: int
    error: str
    message: str
    description: str
    summary: str | None = None


def error_responses(*examples: ErrorExample) -> ResponsesDoc:
    """Group error examples by status code; the first example names the response."""
    responses: ResponsesDoc = {}
    for example in examples:
        response = responses.setdefault(
            example.status_code,
            {
                "model": ErrorResponse,
                "description": example.description,
                "content": {"application/json": {"examples": {}}},
            },
        )
        response["content"]["application/json"]["examples"][example.error] = {
            "summary": example.summary or example.description,
            "value": {"error": example.error, "message": example.message},
        }
    return responses


RATE_LIMITED = ErrorExample(
    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
    error="rate_limited",
    message="Too many requests",
    description="Rate limit exceeded",
)

UNAUTHORIZED = ErrorExample(
    status_code=status.HTTP_401_UNAUTHORIZED,
    error="unauthorized",
    message="Could not validate credentials",
    description="Missing or invalid bearer token",
)

CONTENT_NOT_FOUND = ErrorExample(
    status_code=status.HTTP_404_NOT_FOUND,
    error="content_not_found",
    message="Content item 'video-99' not found",
    description="Unknown content item",
)

CONTENT_EXISTS = ErrorExample(
    status_code=status.HTTP_409_CONFLICT,
    error="content_exists",
    message="Content item 'short-1' already exists",
    description="Duplicate content item id",
)

# invalid_prompt, then the LLM error codes mapped in app.core.errors.
SYLLABUS_IMPORT_ERRORS = (
    ErrorExample(
        status_code=status.HTTP_400_BAD_REQUEST,
        error="invalid_prompt",
        message="Document contains disallowed instruction patterns.",
        description="Document rejected",
    ),
    ErrorExample(
        status_code=status.HTTP_502_BAD_GATEWAY,
        error="llm_auth_failed",
        message="LLM authentication failed.",
        description="LLM authentication or response error",
    ),
    ErrorExample(
        status_code=status.HTTP_502_BAD_GATEWAY,
        error="llm_response_invalid",
        message="LLM response did not match expected format.",
        description="LLM authentication or response error",
    ),
    ErrorExample(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        error="llm_unavailable",
        message="LLM service error. Try again later.",
        description="LLM unavailable",
    ),
)


def public_responses(*examples: ErrorExample) -> ResponsesDoc:
    """Responses for an anonymous route: the given errors plus rate limiting."""
    return error_responses(*examples, RATE_LIMITED)


def authenticated_responses(*examples: ErrorExample) -> ResponsesDoc:
    """Responses for a learner route: the given errors plus 401 and rate limiting."""
    return error_responses(*examples, UNAUTHORIZED, RATE_LIMITED)
