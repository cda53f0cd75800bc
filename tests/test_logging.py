"""로깅 processor 테스트"""

import pytest

from app.core import logging as app_logging
from app.core.context import clear_context, set_repo, set_request_id


@pytest.fixture(autouse=True)
def reset_context():
    clear_context()
    yield
    clear_context()


class TestMaskSecrets:
    """mask_secrets 함수 테스트"""

    @pytest.mark.parametrize(
        "raw,leaked",
        [
            ("Authorization: Bearer abc.def.ghi", "abc.def.ghi"),
            ("token ghp_" + "a" * 36, "ghp_" + "a" * 36),
            ("github_pat_" + "B" * 40, "github_pat_" + "B" * 40),
            ("AIza" + "x" * 35, "AIza" + "x" * 35),
            ("https://host/v1?key=secret123&alt=json", "secret123"),
        ],
    )
    def test_masks(self, raw, leaked):
        """토큰과 API 키를 가림"""
        masked = app_logging.mask_secrets(raw)

        assert leaked not in masked
        assert "***" in masked

    def test_plain_text_untouched(self):
        """비밀값이 없으면 그대로"""
        assert app_logging.mask_secrets("커밋 조회 완료 repo=user/repo") == (
            "커밋 조회 완료 repo=user/repo"
        )


class TestProcessors:
    """structlog processor 테스트"""

    def test_inject_context(self):
        """request_id와 repo 주입"""
        set_request_id("req-1")
        set_repo("user", "repo")

        event = app_logging.inject_context(None, "info", {"event": "x"})

        assert event["request_id"] == "req-1"
        assert event["repo"] == "user/repo"

    def test_inject_context_empty(self):
        """컨텍스트가 없으면 필드를 추가하지 않음"""
        event = app_logging.inject_context(None, "info", {"event": "x"})

        assert event == {"event": "x"}

    def test_generated_request_id(self):
        """헤더 값이 비어 있으면 새 request_id 생성"""
        request_id = set_request_id("  ")

        assert len(request_id) == 12

    def test_sanitize_truncates_long_values(self):
        """긴 문자열은 잘라서 남은 길이 표시"""
        event = app_logging.sanitize_values(
            None, "info", {"detail": "a" * (app_logging.MAX_FIELD_CHARS + 5), "count": 3}
        )

        assert event["detail"].endswith("...(+5자)")
        assert event["count"] == 3
