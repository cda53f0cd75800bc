from app.infra.llm.base import BaseLLMClient
from app.infra.llm.factory import get_analysis_client, reset_clients
from app.infra.llm.gemini_client import GeminiClient

__all__ = [
    "BaseLLMClient",
    "GeminiClient",
    "get_analysis_client",
    "reset_clients",
]
