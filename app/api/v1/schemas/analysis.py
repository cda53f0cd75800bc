"""커밋 분석 API 스키마."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.commit.schemas import AnalysisRequest, CommitSummary, RepoRef
from app.infra.github.client import parse_repo_url


class CommitPayload(BaseModel):
    """분석 요청의 커밋 항목. 커밋 목록 응답과 같은 모양"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sha: str | None = None
    author_name: str | None = Field(default=None, alias="authorName")
    author_email: str | None = Field(default=None, alias="authorEmail")
    date: str | None = None
    message: str | None = None
    url: str | None = None


class CommitAnalysisRequest(BaseModel):
    """커밋 분석 요청."""

    model_config = ConfigDict(populate_by_name=True)

    commits: list[CommitPayload] | None = None
    mode: str | None = "summary"
    single_commit: bool = Field(default=False, alias="singleCommit")
    repo_url: str | None = Field(default=None, alias="repoUrl")

    def to_domain(self) -> AnalysisRequest:
        """도메인 요청으로 변환. 해석할 수 없는 repoUrl은 레포 참조 없음으로 취급"""
        repo_ref: RepoRef | None = None
        if self.repo_url:
            try:
                repo_ref = parse_repo_url(self.repo_url)
            except ValueError:
                repo_ref = None

        commits = None
        if self.commits is not None:
            commits = [
                CommitSummary(**c.model_dump(exclude={"message"}), message=c.message or "")
                for c in self.commits
            ]

        return AnalysisRequest(
            commits=commits,
            mode=self.mode or "summary",
            single_commit=self.single_commit,
            repo_ref=repo_ref,
        )


class CommitAnalysisResponse(BaseModel):
    """커밋 분석 응답."""

    model_config = ConfigDict(populate_by_name=True)

    mode: str
    result: str
    single_commit: bool = Field(alias="singleCommit")
