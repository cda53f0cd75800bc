from pydantic import BaseModel, ConfigDict


class RepoRef(BaseModel):
    """GitHub 레포지토리 참조"""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str


class BranchInfo(BaseModel):
    """브랜치 정보"""

    name: str
    sha: str
    protected: bool = False


class ChangedFile(BaseModel):
    """커밋에서 변경된 파일"""

    model_config = ConfigDict(frozen=True)

    path: str
    status: str
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    patch: str | None = None
    blob_url: str | None = None
    raw_url: str | None = None
    contents_url: str | None = None


class CommitTotals(BaseModel):
    """커밋 전체 추가/삭제 라인 수"""

    model_config = ConfigDict(frozen=True)

    additions: int = 0
    deletions: int = 0
    total: int = 0


class CommitPerson(BaseModel):
    """커밋 작성자/커미터"""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    date: str | None = None
    login: str | None = None
    avatar: str | None = None


class CommitRecord(BaseModel):
    """커밋 상세 정보"""

    model_config = ConfigDict(frozen=True)

    sha: str
    message: str = ""
    author: CommitPerson = CommitPerson()
    committer: CommitPerson = CommitPerson()
    files: tuple[ChangedFile, ...] = ()
    totals: CommitTotals = CommitTotals()
    html_url: str | None = None

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def author_name(self) -> str:
        return self.author.name or self.author.login or "Unknown"


class CommitSummary(BaseModel):
    """커밋 목록의 한 항목"""

    sha: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    date: str | None = None
    message: str = ""
    url: str | None = None

    @property
    def short_sha(self) -> str:
        return (self.sha or "")[:7]


class Pagination(BaseModel):
    """커밋 목록 페이지 정보"""

    current_page: int
    per_page: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1


class CommitPage(BaseModel):
    """커밋 목록 조회 결과"""

    commits: list[CommitSummary]
    pagination: Pagination
