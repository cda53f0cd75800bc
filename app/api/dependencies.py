from fastapi import Depends

from app.core.config import Settings, settings
from app.domain.commit.workflow import CommitAnalyzer
from app.infra.github.client import GitHubClient, get_github_client
from app.infra.llm.factory import get_analysis_client

_commit_analyzer: CommitAnalyzer | None = None


def get_settings() -> Settings:
    return settings


def get_github(config: Settings = Depends(get_settings)) -> GitHubClient:
    return get_github_client()


def get_commit_analyzer(
    config: Settings = Depends(get_settings),
    github: GitHubClient = Depends(get_github),
) -> CommitAnalyzer:
    """커밋 분석기 반환. 워크플로우 컴파일은 한 번만 한다"""
    global _commit_analyzer
    if _commit_analyzer is None:
        _commit_analyzer = CommitAnalyzer(
            config=config,
            source=github,
            llm_factory=lambda: get_analysis_client(config),
        )
    return _commit_analyzer


def reset_dependencies() -> None:
    """캐시된 의존성 초기화 - 테스트/종료용"""
    global _commit_analyzer
    _commit_analyzer = None
