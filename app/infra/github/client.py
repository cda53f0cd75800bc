import re
from typing import Any

import httpx

from app.core.config import Settings, settings
from app.core.exceptions import GitHubAPIError
from app.core.logging import get_logger
from app.domain.commit.schemas import (
    BranchInfo,
    ChangedFile,
    CommitPage,
    CommitPerson,
    CommitRecord,
    CommitSummary,
    CommitTotals,
    Pagination,
    RepoRef,
)

logger = get_logger(__name__)

GITHUB_URL_PATTERN = re.compile(r"^https?://(?:www\.)?github\.com/([\w.-]+)/([\w.-]+)(?:[/?#].*)?$")


def parse_repo_url(repo_url: str | None) -> RepoRef:
    """GitHub URL에서 owner와 repo 추출

    Args:
        repo_url: GitHub 레포지토리 URL. 레포 하위 경로가 붙어 있어도 된다

    Returns:
        레포지토리 참조

    Raises:
        ValueError: 유효하지 않은 GitHub URL인 경우
    """
    match = GITHUB_URL_PATTERN.match((repo_url or "").strip())
    if not match:
        raise ValueError(f"유효하지 않은 GitHub URL: {repo_url}")
    owner = match.group(1)
    repo = match.group(2).removesuffix(".git")
    if not repo:
        raise ValueError(f"유효하지 않은 GitHub URL: {repo_url}")
    return RepoRef(owner=owner, repo=repo)


def _error_body(response: httpx.Response) -> Any:
    """에러 응답 본문. JSON이 아니면 텍스트"""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _page_from_url(url: str) -> int | None:
    page = httpx.URL(url).params.get("page")
    return int(page) if page and page.isdigit() else None


def total_pages_from_links(response: httpx.Response, current_page: int) -> int:
    """Link 헤더로 전체 페이지 수 계산

    last 링크가 있으면 그 페이지, next만 있으면 최소 다음 페이지,
    prev만 있으면 현재 페이지가 마지막, 링크가 없으면 1페이지
    """
    links = response.links
    if "last" in links:
        last_page = _page_from_url(links["last"].get("url", ""))
        if last_page is not None:
            return last_page
    if "next" in links:
        return current_page + 1
    if "prev" in links:
        return current_page
    return 1


def _to_commit_summary(data: dict) -> CommitSummary:
    commit = data.get("commit") or {}
    author = commit.get("author") or {}
    account = data.get("author") or {}
    return CommitSummary(
        sha=data.get("sha"),
        author_name=author.get("name") or account.get("login") or "unknown",
        author_email=author.get("email"),
        date=author.get("date"),
        message=commit.get("message") or "",
        url=data.get("html_url"),
    )


def _to_changed_file(data: dict) -> ChangedFile:
    return ChangedFile(
        path=data["filename"],
        status=data.get("status", "modified"),
        additions=data.get("additions", 0),
        deletions=data.get("deletions", 0),
        changes=data.get("changes", 0),
        patch=data.get("patch"),
        blob_url=data.get("blob_url"),
        raw_url=data.get("raw_url"),
        contents_url=data.get("contents_url"),
    )


def _to_commit_record(data: dict) -> CommitRecord:
    commit = data.get("commit") or {}
    author = commit.get("author") or {}
    committer = commit.get("committer") or {}
    account = data.get("author") or {}
    stats = data.get("stats") or {}
    return CommitRecord(
        sha=data["sha"],
        message=commit.get("message") or "",
        author=CommitPerson(
            name=author.get("name"),
            email=author.get("email"),
            date=author.get("date"),
            login=account.get("login"),
            avatar=account.get("avatar_url"),
        ),
        committer=CommitPerson(
            name=committer.get("name"),
            email=committer.get("email"),
            date=committer.get("date"),
        ),
        files=tuple(_to_changed_file(f) for f in data.get("files") or []),
        totals=CommitTotals(
            additions=stats.get("additions", 0),
            deletions=stats.get("deletions", 0),
            total=stats.get("total", 0),
        ),
        html_url=data.get("html_url"),
    )


class GitHubClient:
    """GitHub REST API 클라이언트"""

    def __init__(self, config: Settings, http_client: httpx.AsyncClient | None = None):
        self._config = config
        self._api_base = config.github_api_base.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=config.github_timeout)

    async def aclose(self) -> None:
        """httpx 클라이언트 종료"""
        await self._client.aclose()

    def _get_headers(self) -> dict[str, str]:
        """GitHub API 요청 헤더 생성"""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self._config.github_api_version,
            "User-Agent": self._config.github_user_agent,
        }
        if self._config.github_token:
            headers["Authorization"] = f"Bearer {self._config.github_token}"
        return headers

    async def _get(
        self,
        path: str,
        failure_message: str,
        params: dict | None = None,
    ) -> httpx.Response:
        """GET 요청. 실패 시 GitHub 상태 코드와 응답 본문을 담아 GitHubAPIError 발생"""
        url = f"{self._api_base}{path}"
        try:
            response = await self._client.get(url, headers=self._get_headers(), params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning("GitHub API 오류 path=%s status=%d", path, status_code)
            raise GitHubAPIError(
                failure_message, status_code=status_code, detail=_error_body(e.response)
            ) from e
        except httpx.RequestError as e:
            logger.warning("GitHub 요청 실패 path=%s error=%s", path, type(e).__name__)
            raise GitHubAPIError(failure_message, detail=str(e) or type(e).__name__) from e
        return response

    async def get_root(self) -> Any:
        """GitHub API 루트 조회 - 연결 확인용"""
        response = await self._get("", "External request failed")
        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError("External request failed", detail=response.text or None) from e

    async def get_branches(self, ref: RepoRef) -> list[BranchInfo]:
        """레포지토리 브랜치 목록 조회

        Args:
            ref: 레포지토리 참조

        Returns:
            브랜치 목록
        """
        response = await self._get(
            f"/repos/{ref.owner}/{ref.repo}/branches",
            "GitHub 브랜치 조회 실패",
            params={"per_page": 100},
        )
        branches = [
            BranchInfo(
                name=b["name"],
                sha=b["commit"]["sha"],
                protected=bool(b.get("protected")),
            )
            for b in response.json() or []
        ]

        logger.info("브랜치 조회 완료 repo=%s/%s count=%d", ref.owner, ref.repo, len(branches))
        return branches

    async def get_commits(
        self,
        ref: RepoRef,
        per_page: int | None = None,
        page: int = 1,
        branch: str | None = None,
    ) -> CommitPage:
        """레포지토리 커밋 목록 한 페이지 조회

        Args:
            ref: 레포지토리 참조
            per_page: 페이지당 커밋 수, 최대값으로 제한
            page: 1부터 시작하는 페이지 번호
            branch: 브랜치 이름 또는 SHA

        Returns:
            커밋 목록과 페이지 정보
        """
        per_page = min(
            per_page or self._config.commits_default_per_page,
            self._config.commits_max_per_page,
        )
        page = max(page, 1)

        params: dict[str, Any] = {"per_page": per_page, "page": page}
        if branch:
            params["sha"] = branch

        response = await self._get(
            f"/repos/{ref.owner}/{ref.repo}/commits",
            "GitHub 커밋 조회 실패",
            params=params,
        )
        commits = [_to_commit_summary(c) for c in response.json() or []]
        total_pages = total_pages_from_links(response, page)

        logger.info(
            "커밋 조회 완료 repo=%s/%s page=%d total_pages=%d count=%d",
            ref.owner,
            ref.repo,
            page,
            total_pages,
            len(commits),
        )
        return CommitPage(
            commits=commits,
            pagination=Pagination(current_page=page, per_page=per_page, total_pages=total_pages),
        )

    async def get_commit_detail(self, owner: str, repo: str, sha: str) -> CommitRecord:
        """개별 커밋 상세 정보 조회

        Args:
            owner: 레포지토리 소유자
            repo: 레포지토리 이름
            sha: 커밋 SHA

        Returns:
            변경 파일과 patch를 포함한 커밋 상세 정보
        """
        response = await self._get(
            f"/repos/{owner}/{repo}/commits/{sha}",
            "GitHub 커밋 상세 조회 실패",
        )
        record = _to_commit_record(response.json())

        logger.info(
            "커밋 상세 조회 완료 repo=%s/%s sha=%s files=%d",
            owner,
            repo,
            record.short_sha,
            len(record.files),
        )
        return record


_github_client: GitHubClient | None = None


def get_github_client() -> GitHubClient:
    """프로세스 공용 GitHub 클라이언트 반환"""
    global _github_client

    if _github_client is None:
        _github_client = GitHubClient(settings)
    return _github_client


async def close_client() -> None:
    """공용 GitHub 클라이언트 종료"""
    global _github_client

    if _github_client is not None:
        await _github_client.aclose()
        _github_client = None
