from enum import Enum
from typing import TypedDict

from pydantic import BaseModel

from app.core.exceptions import CustomException
from app.domain.commit.schemas.github import CommitRecord, CommitSummary, RepoRef


class AnalysisMode(str, Enum):
    """분석 모드"""

    SUMMARY = "summary"
    FEEDBACK = "feedback"

    @classmethod
    def resolve(cls, value: "str | AnalysisMode | None") -> "AnalysisMode":
        """알 수 없는 모드는 summary로 처리"""
        try:
            return cls(value)
        except ValueError:
            return cls.SUMMARY


class AnalysisRequest(BaseModel):
    """커밋 분석 요청"""

    commits: list[CommitSummary] | None = None
    mode: str = AnalysisMode.SUMMARY.value
    single_commit: bool = False
    repo_ref: RepoRef | None = None

    @property
    def is_single_path(self) -> bool:
        """단일 커밋 상세 분석 경로 여부"""
        return self.single_commit and len(self.commits or []) == 1


class AnalysisResult(BaseModel):
    """커밋 분석 결과"""

    mode: str
    single_commit: bool
    text: str


class AnalysisState(TypedDict, total=False):
    """LangGraph 분석 워크플로우 상태"""

    request: AnalysisRequest
    commit: CommitRecord
    digest: str
    prompt: str
    text: str
    error: CustomException
