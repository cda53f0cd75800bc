from enum import Enum
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    INVALID_INPUT = "INVALID_INPUT"
    CONFIG_ERROR = "CONFIG_ERROR"
    GITHUB_API_ERROR = "GITHUB_API_ERROR"
    LLM_API_ERROR = "LLM_API_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CustomException(Exception):
    def __init__(
        self,
        status_code: int,
        error_code: ErrorCode | str,
        message: str,
        detail: Any = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.detail = detail
        super().__init__(message)


class ValidationError(CustomException):
    def __init__(self, message: str = "입력값이 올바르지 않습니다", detail: Any = None):
        super().__init__(
            status_code=400,
            error_code=ErrorCode.INVALID_INPUT,
            message=message,
            detail=detail,
        )


class ConfigError(CustomException):
    def __init__(self, message: str = "서버 설정이 올바르지 않습니다", detail: Any = None):
        super().__init__(
            status_code=500,
            error_code=ErrorCode.CONFIG_ERROR,
            message=message,
            detail=detail,
        )


class UpstreamError(CustomException):
    """GitHub 또는 LLM 호출 실패. 상태 코드를 알 수 없으면 500"""

    def __init__(
        self,
        message: str = "외부 서비스 호출에 실패했습니다",
        status_code: int | None = None,
        detail: Any = None,
        error_code: ErrorCode | str = ErrorCode.INTERNAL_ERROR,
    ):
        super().__init__(
            status_code=status_code or 500,
            error_code=error_code,
            message=message,
            detail=detail,
        )


class GitHubAPIError(UpstreamError):
    def __init__(
        self,
        message: str = "GitHub API 호출에 실패했습니다",
        status_code: int | None = None,
        detail: Any = None,
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            detail=detail,
            error_code=ErrorCode.GITHUB_API_ERROR,
        )


class LLMError(UpstreamError):
    def __init__(self, message: str = "Gemini 분석 실패", detail: Any = None):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail,
            error_code=ErrorCode.LLM_API_ERROR,
        )


def build_error_content(exc: CustomException) -> dict:
    """에러 응답 본문 생성"""
    error_code = exc.error_code.value if isinstance(exc.error_code, ErrorCode) else exc.error_code
    content = {
        "error_code": error_code,
        "message": exc.message,
        "status": exc.status_code,
    }
    if exc.detail is not None and not settings.is_production:
        content["detail"] = exc.detail
    return content


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            "요청 처리 실패",
            path=request.url.path,
            error_code=str(exc.error_code),
            status_code=exc.status_code,
            detail=str(exc.detail) if exc.detail is not None else None,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_content(exc),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """본문이 없거나 형식이 틀린 요청도 같은 에러 응답 형식으로 400"""
        return await custom_exception_handler(
            request,
            ValidationError(
                "분석할 커밋 배열(commits)이 필요합니다.",
                detail=jsonable_encoder(exc.errors()),
            ),
        )
