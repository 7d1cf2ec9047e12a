"""Syllabus service - turns an uploaded syllabus into weak topic-interest signals."""

from __future__ import annotations

import logging
from collections.abc import Callable

from app.core.errors import ServiceError
from app.core.prompt_sanitizer import sanitize_document
from app.llm.client import LLMClient, LLMServiceError
from app.repositories.base import ActivityRepository, RepositoryBundle

logger = logging.getLogger(__name__)


class SyllabusExtractionError(ServiceError):
    """Raised when syllabus topics cannot be extracted by the LLM."""


class SyllabusService:
    def __init__(self, activity: ActivityRepository, llm_client: LLMClient) -> None:
        self._activity = activity
        self._llm_client = llm_client

    async def import_syllabus(self, user_id: str, text: str) -> list[str]:
        """Extract study topics from syllabus text and store them for the learner.

        Returns:
            The stored topics (lower-cased, de-duplicated).

        Raises:
            PromptValidationError: When the document is rejected by sanitization.
            SyllabusExtractionError: When the LLM layer fails (unavailable, auth, invalid
                response).
        """
        document = sanitize_document(text)
        try:
            result = await self._llm_client.extract_syllabus_topics(document)
        except LLMServiceError as exc:
            raise SyllabusExtractionError(str(exc), exc.error_code) from exc

        await self._activity.set_syllabus_topics(user_id, result.topics)
        logger.info("Stored %d syllabus topics for %s", len(result.topics), user_id)
        return result.topics

    async def clear_syllabus(self, user_id: str) -> None:
        await self._activity.set_syllabus_topics(user_id, None)


def syllabus_service_factory_provider(
    llm_client: LLMClient,
) -> Callable[[RepositoryBundle], SyllabusService]:
    def factory(repositories: RepositoryBundle) -> SyllabusService:
        return SyllabusService(repositories.activity, llm_client)

    return factory
