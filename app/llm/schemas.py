from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

MAX_SYLLABUS_TOPICS = 50


class SyllabusTopicsResult(BaseModel):
    """Structured output from LLM for syllabus topic extraction."""

    topics: list[str] = Field(
        default_factory=list,
        description="Study topics covered by the syllabus document",
    )

    @field_validator("topics")
    @classmethod
    def normalize_topics(cls, value: list[str]) -> list[str]:
        """Lower-case, trim, drop empty values and de-duplicate topics."""
        normalized: list[str] = []
        seen: set[str] = set()
        for item in value:
            cleaned = " ".join(item.split()).lower()
            if not cleaned or cleaned in seen:
                continue
            seen.add(cleaned)
            normalized.append(cleaned)
        return normalized[:MAX_SYLLABUS_TOPICS]
