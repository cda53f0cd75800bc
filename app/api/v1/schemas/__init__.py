from app.api.v1.schemas.analysis import (
    CommitAnalysisRequest,
    CommitAnalysisResponse,
    CommitPayload,
)
from app.api.v1.schemas.github import (
    BranchesResponse,
    CommitDetailResponse,
    CommitsResponse,
)

__all__ = [
    "CommitAnalysisRequest",
    "CommitAnalysisResponse",
    "CommitPayload",
    "BranchesResponse",
    "CommitDetailResponse",
    "CommitsResponse",
]
