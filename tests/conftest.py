"""테스트 공통 fixture"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_commit_analyzer, get_github
from app.core.config import Settings
from app.core.exceptions import GitHubAPIError, LLMError
from app.core.limiter import limiter
from app.domain.commit.schemas import (
    ChangedFile,
    CommitPerson,
    CommitRecord,
    CommitSummary,
    CommitTotals,
)
from app.domain.commit.workflow import CommitAnalyzer
from app.main import app
from tests.fakes import FakeCommitSource, FakeLLMClient


@pytest.fixture(autouse=True)
def disable_rate_limit():
    """테스트 중 요청 제한 비활성화"""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def test_settings() -> Settings:
    """테스트용 설정"""
    return Settings(
        _env_file=None,
        environment="development",
        gemini_api_key="test-gemini-key",
        github_token="",
    )


@pytest.fixture
def settings_without_key(test_settings) -> Settings:
    """Gemini 키가 없는 설정"""
    return test_settings.model_copy(update={"gemini_api_key": ""})


@pytest.fixture
def sample_patch() -> str:
    """5줄짜리 patch"""
    return "\n".join(
        [
            "@@ -1,3 +1,4 @@",
            " import os",
            "-print('old')",
            "+print('new')",
            "+print('added')",
            " # end",
        ]
    )


@pytest.fixture
def sample_commit_record(sample_patch) -> CommitRecord:
    """파일 2개(이름 변경 1개, patch 1개)를 가진 커밋"""
    return CommitRecord(
        sha="abc1234567890def",
        message="feat: 출력 메시지 변경\n\n상세 설명",
        author=CommitPerson(
            name="홍길동",
            email="hong@example.com",
            date="2024-05-01T10:00:00Z",
            login="hong",
        ),
        committer=CommitPerson(name="홍길동", email="hong@example.com", date="2024-05-01"),
        files=(
            ChangedFile(path="docs/old.md", status="renamed"),
            ChangedFile(
                path="src/main.py",
                status="modified",
                additions=2,
                deletions=1,
                patch=sample_patch,
            ),
        ),
        totals=CommitTotals(additions=2, deletions=1, total=3),
        html_url="https://github.com/user/repo/commit/abc1234567890def",
    )


@pytest.fixture
def sample_commits() -> list[CommitSummary]:
    """테스트용 커밋 목록"""
    return [
        CommitSummary(
            sha="abc1234567890",
            author_name="user1",
            date="2024-05-01T10:00:00Z",
            message="fix: 버그 수정\n\n상세   설명",
        ),
        CommitSummary(
            sha="def4567890123",
            author_name="user2",
            date="2024-05-02T10:00:00Z",
            message="docs: README 갱신",
        ),
    ]


@pytest.fixture
def fake_source(sample_commit_record) -> FakeCommitSource:
    return FakeCommitSource(record=sample_commit_record)


@pytest.fixture
def fake_llm(test_settings) -> FakeLLMClient:
    return FakeLLMClient(test_settings)


@pytest.fixture
def analyzer(test_settings, fake_source, fake_llm) -> CommitAnalyzer:
    """stub 클라이언트를 주입한 분석기"""
    return CommitAnalyzer(test_settings, fake_source, lambda: fake_llm)


@pytest.fixture
def github_error():
    """GitHubAPIError 생성 helper"""

    def _create(status_code: int | None = 404, detail=None):
        return GitHubAPIError(status_code=status_code, detail=detail or {"message": "Not Found"})

    return _create


@pytest.fixture
def llm_error() -> LLMError:
    return LLMError(detail="quota exceeded")


@pytest.fixture
def mock_transport_factory():
    """httpx MockTransport 기반 AsyncClient 생성 helper. 요청을 기록"""

    def _create(handler):
        requests: list[httpx.Request] = []

        def _recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler))
        return client, requests

    return _create


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def override_dependencies():
    """FastAPI 의존성 교체 helper. 테스트 종료 시 원복"""

    def _override(analyzer=None, github=None):
        if analyzer is not None:
            app.dependency_overrides[get_commit_analyzer] = lambda: analyzer
        if github is not None:
            app.dependency_overrides[get_github] = lambda: github

    yield _override
    app.dependency_overrides.clear()
