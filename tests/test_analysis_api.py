"""커밋 분석 API 엔드포인트 테스트"""

import pytest

from app.api.v1.schemas import CommitAnalysisRequest
from app.core import exceptions
from app.core.exceptions import LLMError, build_error_content
from app.domain.commit.schemas import RepoRef
from app.domain.commit.workflow import CommitAnalyzer
from tests.fakes import FakeCommitSource, FakeLLMClient

REPO_URL = "https://github.com/user/repo"

COMMITS = [
    {
        "sha": "abc1234567890",
        "authorName": "user1",
        "date": "2024-05-01T10:00:00Z",
        "message": "fix: 버그 수정",
    },
    {
        "sha": "def4567890123",
        "authorName": "user2",
        "date": "2024-05-02T10:00:00Z",
        "message": "docs: README",
    },
]


class TestCommitAnalysisRequest:
    """CommitAnalysisRequest 스키마 테스트"""

    def test_to_domain(self):
        """camelCase 본문을 도메인 요청으로 변환"""
        body = CommitAnalysisRequest.model_validate(
            {"commits": COMMITS, "mode": "feedback", "singleCommit": True, "repoUrl": REPO_URL}
        )

        request = body.to_domain()

        assert request.mode == "feedback"
        assert request.single_commit is True
        assert request.repo_ref == RepoRef(owner="user", repo="repo")
        assert request.commits[0].author_name == "user1"
        assert request.commits[1].short_sha == "def4567"

    def test_defaults(self):
        """mode 기본값 summary, 단일 분석 아님"""
        request = CommitAnalysisRequest.model_validate({}).to_domain()

        assert request.commits is None
        assert request.mode == "summary"
        assert request.single_commit is False
        assert request.repo_ref is None

    def test_invalid_repo_url_becomes_none(self):
        """해석할 수 없는 repoUrl은 레포 참조 없음"""
        body = CommitAnalysisRequest.model_validate(
            {"commits": COMMITS, "repoUrl": "not-a-url"}
        )

        assert body.to_domain().repo_ref is None


class TestCommitAnalysisEndpoint:
    """POST /api/commit-analysis 테스트"""

    @pytest.mark.asyncio
    async def test_multi_commit_summary(
        self, async_client, analyzer, fake_llm, override_dependencies
    ):
        """다중 커밋 요약 응답"""
        override_dependencies(analyzer=analyzer)

        async with async_client as client:
            response = await client.post("/api/commit-analysis", json={"commits": COMMITS})

        assert response.status_code == 200
        body = response.json()
        assert body["mode"] == "summary"
        assert body["singleCommit"] is False
        assert body["result"].startswith("1. ")
        assert "- abc1234 2024-05-01T10:00:00Z user1: fix: 버그 수정" in fake_llm.prompts[0]

    @pytest.mark.asyncio
    async def test_single_commit_feedback(
        self, async_client, analyzer, fake_llm, fake_source, override_dependencies
    ):
        """단일 커밋 피드백은 상세 조회 후 분석"""
        override_dependencies(analyzer=analyzer)

        async with async_client as client:
            response = await client.post(
                "/api/commit-analysis",
                json={
                    "commits": COMMITS[:1],
                    "mode": "feedback",
                    "singleCommit": True,
                    "repoUrl": REPO_URL,
                },
            )

        assert response.status_code == 200
        assert response.json()["singleCommit"] is True
        assert fake_source.calls == [("user", "repo", "abc1234567890")]
        assert "코드 변경사항:" in fake_llm.prompts[0]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("commits", [None, []])
    async def test_empty_commits(self, async_client, analyzer, override_dependencies, commits):
        """커밋이 없으면 400"""
        override_dependencies(analyzer=analyzer)

        async with async_client as client:
            response = await client.post("/api/commit-analysis", json={"commits": commits})

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["error_code"] == "INVALID_INPUT"
        assert body["message"] == "분석할 커밋 배열(commits)이 필요합니다."

    @pytest.mark.asyncio
    async def test_single_without_repo_url(
        self, async_client, analyzer, fake_source, override_dependencies
    ):
        """단일 커밋 분석에 repoUrl이 없으면 400이고 GitHub을 호출하지 않음"""
        override_dependencies(analyzer=analyzer)

        async with async_client as client:
            response = await client.post(
                "/api/commit-analysis", json={"commits": COMMITS[:1], "singleCommit": True}
            )

        assert response.status_code == 400
        assert fake_source.calls == []

    @pytest.mark.asyncio
    async def test_github_status_pass_through(
        self, async_client, test_settings, fake_llm, github_error, override_dependencies
    ):
        """GitHub 상세 조회 실패 상태 코드를 그대로 전달"""
        source = FakeCommitSource(error=github_error(403, {"message": "rate limited"}))
        override_dependencies(analyzer=CommitAnalyzer(test_settings, source, lambda: fake_llm))

        async with async_client as client:
            response = await client.post(
                "/api/commit-analysis",
                json={"commits": COMMITS[:1], "singleCommit": True, "repoUrl": REPO_URL},
            )

        assert response.status_code == 403
        assert response.json()["error_code"] == "GITHUB_API_ERROR"
        assert fake_llm.prompts == []

    @pytest.mark.asyncio
    async def test_llm_failure(
        self, async_client, test_settings, fake_source, llm_error, override_dependencies
    ):
        """Gemini 실패는 500"""
        llm = FakeLLMClient(test_settings, error=llm_error)
        override_dependencies(analyzer=CommitAnalyzer(test_settings, fake_source, lambda: llm))

        async with async_client as client:
            response = await client.post("/api/commit-analysis", json={"commits": COMMITS})

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Gemini 분석 실패"
        assert body["error_code"] == "LLM_API_ERROR"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"commits": "abc"},
            {"commits": [{"sha": 123}]},
            {"singleCommit": "maybe"},
        ],
    )
    async def test_malformed_body(
        self, async_client, analyzer, fake_llm, override_dependencies, payload
    ):
        """형식이 틀린 본문은 422 대신 같은 에러 형식의 400"""
        override_dependencies(analyzer=analyzer)

        async with async_client as client:
            response = await client.post("/api/commit-analysis", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["error_code"] == "INVALID_INPUT"
        assert body["message"] == "분석할 커밋 배열(commits)이 필요합니다."
        assert fake_llm.prompts == []

    @pytest.mark.asyncio
    async def test_missing_body(self, async_client, analyzer, fake_llm, override_dependencies):
        """본문이 없으면 커밋 누락으로 400"""
        override_dependencies(analyzer=analyzer)

        async with async_client as client:
            response = await client.post("/api/commit-analysis")

        assert response.status_code == 400
        assert response.json()["message"] == "분석할 커밋 배열(commits)이 필요합니다."
        assert fake_llm.prompts == []


class TestErrorContent:
    """build_error_content 함수 테스트"""

    def test_detail_in_development(self, test_settings, monkeypatch):
        """개발 환경에서는 detail 포함"""
        monkeypatch.setattr(exceptions, "settings", test_settings)

        content = build_error_content(LLMError(detail="quota exceeded"))

        assert content == {
            "error_code": "LLM_API_ERROR",
            "message": "Gemini 분석 실패",
            "status": 500,
            "detail": "quota exceeded",
        }

    def test_detail_hidden_in_production(self, test_settings, monkeypatch):
        """프로덕션에서는 detail 숨김"""
        production = test_settings.model_copy(update={"environment": "production"})
        monkeypatch.setattr(exceptions, "settings", production)

        content = build_error_content(LLMError(detail="quota exceeded"))

        assert "detail" not in content
        assert content["status"] == 500
