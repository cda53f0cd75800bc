"""
structlog 기반 로깅 설정

개발 환경은 콘솔 렌더러, 프로덕션은 한 줄 JSON.
모든 로그에 request_id와 repo 컨텍스트를 붙이고 토큰/API 키는 가린다.
"""

import logging
import re
import sys

import structlog

from app.core.config import Settings, settings
from app.core.context import get_repo, get_request_id

# GitHub 토큰, Gemini API 키, Authorization 헤더
SECRET_PATTERNS = [
    (re.compile(r"(Bearer\s+)\S+", re.IGNORECASE), r"\1***"),
    (re.compile(r"\b(ghp|gho|ghs|ghu)_[A-Za-z0-9]{20,}"), "***"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}"), "***"),
    (re.compile(r"\bAIza[0-9A-Za-z_-]{20,}"), "***"),
    (re.compile(r"((?:api[_-]?)?key=)[^&\s]+", re.IGNORECASE), r"\1***"),
]

# diff나 프롬프트가 통째로 로그에 남지 않도록 자르는 길이
MAX_FIELD_CHARS = 2000

NOISY_LOGGERS = (
    "httpcore",
    "httpx",
    "langfuse",
    "langchain",
    "langgraph",
    "google_genai",
    "grpc",
    "anyio",
)


def mask_secrets(value: str) -> str:
    for pattern, replacement in SECRET_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def inject_context(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """request_id, repo 컨텍스트 주입"""
    request_id = get_request_id()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    repo = get_repo()
    if repo:
        event_dict.setdefault("repo", repo)
    return event_dict


def sanitize_values(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """문자열 값의 비밀값을 가리고 긴 값은 자른다"""
    for key, value in event_dict.items():
        if not isinstance(value, str):
            continue
        value = mask_secrets(value)
        if len(value) > MAX_FIELD_CHARS:
            value = f"{value[:MAX_FIELD_CHARS]}...(+{len(value) - MAX_FIELD_CHARS}자)"
        event_dict[key] = value
    return event_dict


def _build_renderer(config: Settings):
    if config.is_production:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(config: Settings = settings, level: str | None = None) -> None:
    """structlog과 표준 logging을 같은 포맷터로 묶는다"""
    log_level = getattr(logging, (level or config.log_level).upper(), logging.INFO)

    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=config.is_production),
        inject_context,
        sanitize_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if config.is_production:
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _build_renderer(config),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # uvicorn 로그도 root 핸들러로 출력
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers.clear()
        logging.getLogger(name).propagate = True

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
