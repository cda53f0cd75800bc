from abc import ABC, abstractmethod

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from app.core.config import Settings
from app.core.exceptions import LLMError
from app.core.logging import get_logger
from app.infra.llm.client import build_run_config, extract_text

logger = get_logger(__name__)


class BaseLLMClient(ABC):
    """LLM 클라이언트 추상 클래스"""

    def __init__(self, config: Settings):
        self._config = config

    @abstractmethod
    def get_chat_model(self) -> BaseChatModel:
        """LangChain 호환 채팅 모델 반환"""
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        pass

    async def generate(
        self,
        prompt: str,
        tags: list[str] | None = None,
        session_id: str | None = None,
    ) -> str:
        """프롬프트 한 개로 완성된 텍스트 생성. 재시도 없음

        Raises:
            LLMError: 모델 호출이 실패한 경우
        """
        run_config = build_run_config(self._config, tags or ["commit-analysis"], session_id)
        logger.debug("LLM 호출 model=%s prompt_chars=%d", self.get_model_name(), len(prompt))

        try:
            message = await self.get_chat_model().ainvoke(
                [HumanMessage(content=prompt)], config=run_config
            )
        except Exception as e:
            logger.error("LLM 호출 실패 model=%s error=%s", self.get_model_name(), e)
            raise LLMError(detail=str(e) or type(e).__name__) from e

        text = extract_text(message)
        logger.debug("LLM 응답 수신 model=%s chars=%d", self.get_model_name(), len(text))
        return text
