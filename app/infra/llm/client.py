import os

from langchain_core.messages import BaseMessage
from langfuse.langchain import CallbackHandler

from app.core.config import Settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def get_langfuse_handler(config: Settings) -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환. 키가 없으면 None"""
    if not config.langfuse_public_key or not config.langfuse_secret_key:
        return None

    os.environ.setdefault("LANGFUSE_PUBLIC_KEY", config.langfuse_public_key)
    os.environ.setdefault("LANGFUSE_SECRET_KEY", config.langfuse_secret_key)
    if config.langfuse_base_url:
        os.environ.setdefault("LANGFUSE_HOST", config.langfuse_base_url)

    return CallbackHandler()


def build_run_config(
    config: Settings,
    tags: list[str],
    session_id: str | None = None,
) -> dict:
    """LangChain 호출 설정 생성"""
    langfuse_handler = get_langfuse_handler(config)
    return {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": tags,
        },
    }


def extract_text(message: BaseMessage) -> str:
    """모델 응답 메시지에서 텍스트만 추출"""
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
