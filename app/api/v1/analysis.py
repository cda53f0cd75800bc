from fastapi import APIRouter, Depends

from app.api.dependencies import get_commit_analyzer
from app.api.v1.schemas import CommitAnalysisRequest, CommitAnalysisResponse
from app.core.context import set_repo
from app.core.logging import get_logger
from app.domain.commit.workflow import CommitAnalyzer

router = APIRouter(tags=["analysis"])
logger = get_logger(__name__)


@router.post("/commit-analysis", response_model=CommitAnalysisResponse)
async def analyze_commits(
    body: CommitAnalysisRequest | None = None,
    analyzer: CommitAnalyzer = Depends(get_commit_analyzer),
) -> CommitAnalysisResponse:
    request = (body or CommitAnalysisRequest()).to_domain()
    if request.repo_ref is not None:
        set_repo(request.repo_ref.owner, request.repo_ref.repo)
    logger.info(
        "커밋 분석 요청 commits=%d mode=%s single=%s",
        len(request.commits or []),
        request.mode,
        request.single_commit,
    )

    result = await analyzer.analyze(request)
    return CommitAnalysisResponse(
        mode=result.mode,
        result=result.text,
        single_commit=result.single_commit,
    )
