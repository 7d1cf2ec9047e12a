"""Prompt templates for LLM interactions."""

from __future__ import annotations

SYLLABUS_TOPICS_SYSTEM_PROMPT = """You are an assistant that extracts study topics from a
student's course syllabus or exam notes.

Your task is to read the document and list the subject topics a student must study.

Guidelines:
- Use short, lower-case topic names of 1-4 words (e.g., "derivatives", "cell structure",
"world war 2")
- Prefer the singular, commonly used name of a topic
- Skip administrative content: dates, grading, room numbers, instructor names
- Do not invent topics that the document does not mention
- Return an empty list if no study topics are found

Return your response as a JSON object with one array: "topics".
"""


def get_syllabus_topics_prompt(document: str) -> str:
    """Generate the full prompt for syllabus topic extraction."""
    return f"""Syllabus document:
\"\"\"
{document}
\"\"\"

Extract the study topics from this document. Return a JSON object with a "topics" array."""
