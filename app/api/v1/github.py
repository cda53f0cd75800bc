from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_github
from app.api.v1.schemas import BranchesResponse, CommitDetailResponse, CommitsResponse
from app.core.context import set_repo
from app.core.exceptions import ValidationError
from app.domain.commit.schemas import RepoRef
from app.infra.github.client import GitHubClient, parse_repo_url

router = APIRouter(tags=["github"])

INVALID_REPO_URL_MESSAGE = "유효한 GitHub 리포지토리 URL을 제공하세요."


def _require_repo_ref(repo_url: str | None, message: str = INVALID_REPO_URL_MESSAGE) -> RepoRef:
    """repoUrl 쿼리를 레포 참조로 변환. 실패 시 400"""
    try:
        ref = parse_repo_url(repo_url)
    except ValueError as e:
        raise ValidationError(message, detail=str(e)) from e
    set_repo(ref.owner, ref.repo)
    return ref


def _to_positive_int(value: str | None, default: int) -> int:
    try:
        number = int(value) if value else default
    except ValueError:
        return default
    return number if number > 0 else default


@router.get("/branches", response_model=BranchesResponse)
async def list_branches(
    repo_url: str | None = Query(default=None, alias="repoUrl"),
    github: GitHubClient = Depends(get_github),
) -> BranchesResponse:
    ref = _require_repo_ref(repo_url)
    branches = await github.get_branches(ref)
    return BranchesResponse.build(ref.owner, ref.repo, branches)


@router.get("/commits", response_model=CommitsResponse)
async def list_commits(
    repo_url: str | None = Query(default=None, alias="repoUrl"),
    per_page: str | None = None,
    page: str | None = None,
    branch: str | None = None,
    github: GitHubClient = Depends(get_github),
) -> CommitsResponse:
    ref = _require_repo_ref(repo_url)
    commit_page = await github.get_commits(
        ref,
        per_page=_to_positive_int(per_page, 0) or None,
        page=_to_positive_int(page, 1),
        branch=branch or None,
    )
    return CommitsResponse.build(ref.owner, ref.repo, commit_page)


@router.get("/commit-detail", response_model=CommitDetailResponse)
async def get_commit_detail(
    repo_url: str | None = Query(default=None, alias="repoUrl"),
    sha: str | None = None,
    github: GitHubClient = Depends(get_github),
) -> CommitDetailResponse:
    message = "유효한 GitHub 리포지토리 URL과 커밋 SHA를 제공하세요."
    ref = _require_repo_ref(repo_url, message)
    if not sha:
        raise ValidationError(message)

    record = await github.get_commit_detail(ref.owner, ref.repo, sha)
    return CommitDetailResponse.build(ref.owner, ref.repo, record)
