from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from app.core.config import Settings
from app.core.exceptions import ConfigError
from app.infra.llm.base import BaseLLMClient


class GeminiClient(BaseLLMClient):
    """Gemini 클라이언트 - 커밋 요약/피드백용"""

    def __init__(self, config: Settings):
        if not config.gemini_api_key:
            raise ConfigError("GEMINI_API_KEY 환경변수가 설정되지 않았습니다.")

        super().__init__(config)
        self._model = ChatGoogleGenerativeAI(
            model=config.gemini_model,
            google_api_key=config.gemini_api_key,
            temperature=config.gemini_temperature,
            timeout=config.gemini_timeout,
        )

    def get_chat_model(self) -> BaseChatModel:
        """LangChain ChatGoogleGenerativeAI 모델 반환"""
        return self._model

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return self._config.gemini_model
