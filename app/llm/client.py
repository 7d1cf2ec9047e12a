from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod

from openai import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AsyncOpenAI,
    AuthenticationError,
    RateLimitError,
)
from openai.types.chat import ChatCompletion
from pydantic import ValidationError

from app.core.config import settings
from app.llm.prompts import SYLLABUS_TOPICS_SYSTEM_PROMPT, get_syllabus_topics_prompt
from app.llm.schemas import SyllabusTopicsResult

logger = logging.getLogger(__name__)


class LLMServiceError(Exception):
    """Base error raised when the LLM service cannot fulfill a request."""

    def __init__(self, message: str, error_code: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class LLMUnavailableError(LLMServiceError):
    """LLM is unavailable (timeout, rate limit, or upstream outage)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "llm_unavailable")


class LLMAuthenticationError(LLMServiceError):
    """LLM authentication failed (service credentials invalid)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "llm_auth_failed")


class LLMInvalidResponseError(LLMServiceError):
    """LLM returned an invalid or unexpected response."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "llm_response_invalid")


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    async def extract_syllabus_topics(self, document: str) -> SyllabusTopicsResult:
        """Extract study topics from syllabus text."""
        raise NotImplementedError


class OpenAIClient(LLMClient):
    """OpenAI implementation of LLM client."""

    def __init__(self, api_key: str | None = None, model: str | None = None) -> None:
        """Initialize OpenAI client."""
        self.client = AsyncOpenAI(api_key=api_key or settings.openai_api_key)
        self.model = model or settings.openai_model

    def _handle_errors(self, error: Exception) -> LLMServiceError:
        """Log error with appropriate message based on error type."""
        # APITimeoutError subclasses APIConnectionError, so it is checked first.
        if isinstance(error, APITimeoutError):
            logger.error("OpenAI API request timed out. Error: %s", error)
            return LLMUnavailableError("LLM request timed out. Try again.")
        elif isinstance(error, APIConnectionError):
            logger.error("OpenAI API connection failed. Error: %s", error)
            return LLMUnavailableError("LLM service unreachable. Try again shortly.")
        elif isinstance(error, RateLimitError):
            logger.error("OpenAI API rate limit exceeded. Error: %s", error)
            return LLMUnavailableError("LLM rate limit exceeded. Try again later.")
        elif isinstance(error, AuthenticationError):
            logger.error("OpenAI API authentication failed. Error: %s", error)
            return LLMAuthenticationError("LLM authentication failed.")
        elif isinstance(error, APIError):
            logger.error("OpenAI API error. Error: %s", error)
            return LLMUnavailableError("LLM service error. Try again later.")
        elif isinstance(error, (IndexError, AttributeError)):
            logger.error("Unexpected response structure from OpenAI. Error: %s", error)
            return LLMInvalidResponseError("LLM returned an unexpected response.")
        elif isinstance(error, json.JSONDecodeError):
            logger.error("Invalid JSON response from OpenAI. Error: %s", error)
            return LLMInvalidResponseError("LLM returned invalid JSON.")
        elif isinstance(error, ValidationError):
            logger.error("Pydantic validation failed. Error: %s", error)
            return LLMInvalidResponseError("LLM response did not match expected format.")
        elif isinstance(error, ValueError):
            logger.error("Invalid value encountered. Error: %s", error)
            return LLMInvalidResponseError(str(error))
        else:
            logger.error("Unexpected error extracting syllabus topics. Error: %s", error)
            return LLMServiceError("LLM request failed. Try again later.", "llm_error")

    async def extract_syllabus_topics(self, document: str) -> SyllabusTopicsResult:
        """Extract study topics from syllabus text using OpenAI."""
        try:
            response: ChatCompletion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYLLABUS_TOPICS_SYSTEM_PROMPT},
                    {"role": "user", "content": get_syllabus_topics_prompt(document)},
                ],
                response_format={"type": "json_object"},
                temperature=0.2,
            )

            content = response.choices[0].message.content
            if not content:
                raise ValueError("Empty response from OpenAI")

            parsed = json.loads(content)
            return SyllabusTopicsResult.model_validate(parsed)
        except Exception as e:
            raise self._handle_errors(e) from e
