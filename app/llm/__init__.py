from app.llm.client import LLMClient, OpenAIClient
from app.llm.schemas import SyllabusTopicsResult

__all__ = ["LLMClient", "OpenAIClient", "SyllabusTopicsResult"]
