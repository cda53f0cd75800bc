"""GitHub 조회 API 스키마."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.commit.schemas import BranchInfo, CommitPage, CommitRecord, CommitSummary


class BranchItem(BaseModel):
    name: str
    sha: str
    protected: bool


class BranchesResponse(BaseModel):
    """브랜치 목록 응답."""

    owner: str
    repo: str
    branches: list[BranchItem]

    @classmethod
    def build(cls, owner: str, repo: str, branches: list[BranchInfo]) -> "BranchesResponse":
        return cls(
            owner=owner,
            repo=repo,
            branches=[BranchItem(**b.model_dump()) for b in branches],
        )


class CommitItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sha: str | None
    author_name: str | None = Field(alias="authorName")
    author_email: str | None = Field(alias="authorEmail")
    date: str | None
    message: str
    url: str | None

    @classmethod
    def from_summary(cls, commit: CommitSummary) -> "CommitItem":
        return cls(**commit.model_dump())


class PaginationItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage")
    per_page: int = Field(alias="perPage")
    total_pages: int = Field(alias="totalPages")
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")


class CommitsResponse(BaseModel):
    """커밋 목록 응답."""

    owner: str
    repo: str
    commits: list[CommitItem]
    pagination: PaginationItem

    @classmethod
    def build(cls, owner: str, repo: str, page: CommitPage) -> "CommitsResponse":
        p = page.pagination
        return cls(
            owner=owner,
            repo=repo,
            commits=[CommitItem.from_summary(c) for c in page.commits],
            pagination=PaginationItem(
                current_page=p.current_page,
                per_page=p.per_page,
                total_pages=p.total_pages,
                has_next=p.has_next,
                has_prev=p.has_prev,
            ),
        )


class CommitDetailResponse(BaseModel):
    """커밋 상세 응답. commit은 GitHub 필드 이름을 그대로 쓴다."""

    owner: str
    repo: str
    commit: dict

    @classmethod
    def build(cls, owner: str, repo: str, record: CommitRecord) -> "CommitDetailResponse":
        commit = {
            "sha": record.sha,
            "message": record.message,
            "author": record.author.model_dump(),
            "committer": record.committer.model_dump(include={"name", "email", "date"}),
            "stats": record.totals.model_dump(),
            "files": [
                {
                    "filename": f.path,
                    "status": f.status,
                    "additions": f.additions,
                    "deletions": f.deletions,
                    "changes": f.changes,
                    "patch": f.patch,
                    "blob_url": f.blob_url,
                    "raw_url": f.raw_url,
                    "contents_url": f.contents_url,
                }
                for f in record.files
            ],
            "url": record.html_url,
        }
        return cls(owner=owner, repo=repo, commit=commit)
