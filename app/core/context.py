"""
요청 컨텍스트 관리 모듈

contextvars로 요청마다 request_id와 조회 중인 레포지토리를 보관.
로그 processor와 Langfuse 세션 ID가 이 값을 읽는다.
"""

import uuid
from contextvars import ContextVar

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
repo_var: ContextVar[str | None] = ContextVar("repo", default=None)


def get_request_id() -> str | None:
    return request_id_var.get()


def set_request_id(request_id: str | None = None) -> str:
    """request_id 설정. 헤더 값이 없으면 12자리 hex 생성"""
    request_id = (request_id or "").strip() or uuid.uuid4().hex[:12]
    request_id_var.set(request_id)
    return request_id


def get_repo() -> str | None:
    return repo_var.get()


def set_repo(owner: str, repo: str) -> None:
    """현재 요청이 다루는 레포지토리를 owner/repo 형식으로 기록"""
    repo_var.set(f"{owner}/{repo}")


def clear_context() -> None:
    request_id_var.set(None)
    repo_var.set(None)
