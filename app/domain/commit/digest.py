import re
from collections.abc import Sequence

from app.domain.commit.compactor import CharBudget, compact_files
from app.domain.commit.schemas import CommitRecord, CommitSummary

DEFAULT_MAX_COMMITS = 200

_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_message(message: str | None) -> str:
    """연속 공백과 줄바꿈을 공백 하나로 합치고 양끝 공백 제거"""
    if not message:
        return ""
    return _WHITESPACE_PATTERN.sub(" ", message).strip()


def build_commit_digest(commit: CommitRecord, budget: CharBudget | None = None) -> str:
    """단일 커밋의 메타데이터와 압축된 diff로 프롬프트 본문 생성"""
    file_changes = compact_files(commit.files, budget)
    return (
        f"커밋: {commit.short_sha}\n"
        f"작성자: {commit.author_name}\n"
        f"날짜: {commit.author.date or ''}\n"
        f"메시지: {normalize_message(commit.message)}\n"
        f"변경된 파일: {len(commit.files)}개\n"
        f"추가: {commit.totals.additions}줄, 삭제: {commit.totals.deletions}줄"
        f"{file_changes}"
    )


def build_multi_digest(
    commits: Sequence[CommitSummary], max_commits: int = DEFAULT_MAX_COMMITS
) -> str:
    """커밋 목록을 한 줄씩 요약. max_commits를 넘는 커밋은 생략 표시 없이 버린다"""
    lines = [
        f"- {c.short_sha} {c.date or ''} {c.author_name or ''}: {normalize_message(c.message)}"
        for c in commits[:max_commits]
    ]
    return "\n".join(lines)
