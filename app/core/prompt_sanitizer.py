from __future__ import annotations

import logging
import re
from typing import Final

from app.core.errors import ServiceError

logger = logging.getLogger(__name__)

MAX_DOCUMENT_CHARS: Final[int] = 20_000

_CODE_BLOCK_PATTERN = re.compile(r"```.*?```", re.DOTALL)
_URL_PATTERN = re.compile(r"(https?://|www\.)\S+", re.IGNORECASE)
# Tabs and newlines are allowed; syllabus documents are multi-line.
_CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_INJECTION_PATTERNS = [
    re.compile(r"ignore (all|previous|prior) instructions", re.IGNORECASE),
    re.compile(r"system prompt", re.IGNORECASE),
    re.compile(r"developer message", re.IGNORECASE),
    re.compile(r"jailbreak", re.IGNORECASE),
]


class PromptValidationError(ServiceError):
    """Raised when document text is rejected before it reaches the LLM."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "invalid_prompt")


def _reject_injection(text: str) -> None:
    for pattern in _INJECTION_PATTERNS:
        if pattern.search(text):
            raise PromptValidationError("Document contains disallowed instruction patterns.")


def sanitize_document(text: str) -> str:
    """Sanitize uploaded syllabus text and return safe text for LLM usage.

    URLs and code blocks are stripped rather than rejected, since course
    documents routinely contain both. Over-long documents, control characters
    and prompt-injection phrases reject the whole document.
    """
    if len(text) > MAX_DOCUMENT_CHARS:
        raise PromptValidationError(
            f"Document must be at most {MAX_DOCUMENT_CHARS} characters long."
        )
    if _CONTROL_CHARS_PATTERN.search(text):
        raise PromptValidationError("Document contains unsupported control characters.")
    _reject_injection(text)

    sanitized = _CODE_BLOCK_PATTERN.sub(" ", text)
    sanitized = _URL_PATTERN.sub(" ", sanitized)
    lines = (" ".join(line.split()) for line in sanitized.splitlines())
    sanitized = "\n".join(line for line in lines if line)
    # Stripping can join phrases that were split by a code block or URL.
    _reject_injection(" ".join(sanitized.split()))

    if not sanitized:
        raise PromptValidationError("Document must include valid text after sanitization.")

    if sanitized != text:
        logger.info(
            "Sanitized syllabus document",
            extra={"original_length": len(text), "sanitized_length": len(sanitized)},
        )

    return sanitized
