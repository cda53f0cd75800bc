from app.domain.commit.schemas.base import (
    AnalysisMode,
    AnalysisRequest,
    AnalysisResult,
    AnalysisState,
)
from app.domain.commit.schemas.github import (
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

__all__ = [
    "AnalysisMode",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisState",
    "BranchInfo",
    "ChangedFile",
    "CommitPage",
    "CommitPerson",
    "CommitRecord",
    "CommitSummary",
    "CommitTotals",
    "Pagination",
    "RepoRef",
]
