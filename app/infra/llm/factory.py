from app.core.config import Settings
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.gemini_client import GeminiClient

logger = get_logger(__name__)

_analysis_client: BaseLLMClient | None = None


def get_analysis_client(config: Settings) -> BaseLLMClient:
    """커밋 분석용 LLM 클라이언트 반환

    Raises:
        ConfigError: Gemini API 키가 없는 경우
    """
    global _analysis_client

    if _analysis_client is not None:
        return _analysis_client

    _analysis_client = GeminiClient(config)
    logger.info("Gemini 클라이언트 초기화 model=%s", config.gemini_model)

    return _analysis_client


def reset_clients() -> None:
    """클라이언트 캐시 초기화 - 테스트용"""
    global _analysis_client
    _analysis_client = None
