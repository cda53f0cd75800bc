from collections.abc import Callable
from typing import Literal, Protocol

from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from app.core.config import Settings
from app.core.context import get_request_id
from app.core.exceptions import (
    ConfigError,
    CustomException,
    GitHubAPIError,
    ValidationError,
)
from app.core.logging import get_logger
from app.domain.commit.compactor import CharBudget
from app.domain.commit.composer import compose_prompt
from app.domain.commit.digest import build_commit_digest, build_multi_digest
from app.domain.commit.schemas import (
    AnalysisMode,
    AnalysisRequest,
    AnalysisResult,
    AnalysisState,
    CommitRecord,
)
from app.infra.llm.base import BaseLLMClient

logger = get_logger(__name__)


class CommitSource(Protocol):
    """커밋 상세 정보를 제공하는 소스 컨트롤 호스트"""

    async def get_commit_detail(self, owner: str, repo: str, sha: str) -> CommitRecord: ...


LLMClientFactory = Callable[[], BaseLLMClient]


class CommitAnalyzer:
    """커밋 요약/피드백 워크플로우

    validate → (fetch_detail → compact | compose_multi) → compose → invoke 순서로
    진행하며, 어느 노드에서든 실패하면 상태에 에러를 기록하고 종료한다.
    """

    def __init__(self, config: Settings, source: CommitSource, llm_factory: LLMClientFactory):
        self._config = config
        self._source = source
        self._llm_factory = llm_factory
        self._budget = CharBudget(
            max_chars=config.diff_max_chars,
            max_lines_per_file=config.diff_max_lines_per_file,
            max_files=config.diff_max_files,
        )
        self._workflow = self._create_workflow()

    async def validate_node(self, state: AnalysisState) -> AnalysisState:
        """요청 검증 노드: 커밋 목록, API 키, 단일 커밋 경로의 레포 참조 확인"""
        request = state["request"]

        if not request.commits:
            return {**state, "error": ValidationError("분석할 커밋 배열(commits)이 필요합니다.")}

        if not self._config.gemini_api_key:
            return {
                **state,
                "error": ConfigError("GEMINI_API_KEY 환경변수가 설정되지 않았습니다."),
            }

        if request.is_single_path:
            if request.repo_ref is None:
                return {
                    **state,
                    "error": ValidationError("유효한 GitHub 리포지토리 URL이 필요합니다."),
                }
            if not request.commits[0].sha:
                return {**state, "error": ValidationError("분석할 커밋의 SHA가 필요합니다.")}

        logger.info(
            "validate_node 완료 commits=%d mode=%s single=%s",
            len(request.commits),
            request.mode,
            request.is_single_path,
        )
        return state

    async def fetch_detail_node(self, state: AnalysisState) -> AnalysisState:
        """커밋 상세 조회 노드"""
        request = state["request"]
        ref = request.repo_ref
        sha = request.commits[0].sha

        try:
            commit = await self._source.get_commit_detail(ref.owner, ref.repo, sha)
        except CustomException as e:
            logger.error("fetch_detail_node 실패 status=%d", e.status_code)
            return {**state, "error": e}
        except (KeyError, TypeError, ValueError) as e:
            logger.error("fetch_detail_node 데이터 오류 error=%s", e, exc_info=True)
            return {
                **state,
                "error": GitHubAPIError("GitHub 커밋 상세 응답을 해석할 수 없습니다", detail=str(e)),
            }

        return {**state, "commit": commit}

    async def compact_node(self, state: AnalysisState) -> AnalysisState:
        """단일 커밋 diff 압축 노드"""
        digest = build_commit_digest(state["commit"], self._budget)
        logger.info("compact_node 완료 sha=%s chars=%d", state["commit"].short_sha, len(digest))
        return {**state, "digest": digest}

    async def compose_multi_node(self, state: AnalysisState) -> AnalysisState:
        """다중 커밋 목록 요약 노드"""
        digest = build_multi_digest(state["request"].commits, self._config.multi_commit_max)
        return {**state, "digest": digest}

    async def compose_node(self, state: AnalysisState) -> AnalysisState:
        """프롬프트 생성 노드"""
        request = state["request"]
        prompt = compose_prompt(request.mode, request.is_single_path, state["digest"])
        return {**state, "prompt": prompt}

    async def invoke_node(self, state: AnalysisState) -> AnalysisState:
        """LLM 호출 노드"""
        request = state["request"]
        mode = AnalysisMode.resolve(request.mode)
        tags = ["commit", mode.value, "single" if request.is_single_path else "multi"]

        try:
            llm = self._llm_factory()
            text = await llm.generate(state["prompt"], tags=tags, session_id=get_request_id())
        except CustomException as e:
            return {**state, "error": e}

        logger.info("invoke_node 완료 chars=%d", len(text))
        return {**state, "text": text}

    def route_after_validate(
        self, state: AnalysisState
    ) -> Literal["fetch_detail", "compose_multi", "end"]:
        """검증 결과와 요청 형태에 따라 다음 노드 결정"""
        if state.get("error"):
            logger.info("route_after_validate: 검증 실패, 종료")
            return "end"
        if state["request"].is_single_path:
            return "fetch_detail"
        return "compose_multi"

    def route_after_fetch(self, state: AnalysisState) -> Literal["compact", "end"]:
        """커밋 조회 실패 시 종료"""
        if state.get("error"):
            logger.info("route_after_fetch: 커밋 조회 실패, 종료")
            return "end"
        return "compact"

    def _create_workflow(self) -> CompiledStateGraph:
        """커밋 분석 워크플로우 생성"""
        workflow = StateGraph(AnalysisState)

        workflow.add_node("validate", self.validate_node)
        workflow.add_node("fetch_detail", self.fetch_detail_node)
        workflow.add_node("compact", self.compact_node)
        workflow.add_node("compose_multi", self.compose_multi_node)
        workflow.add_node("compose", self.compose_node)
        workflow.add_node("invoke", self.invoke_node)

        workflow.set_entry_point("validate")

        workflow.add_conditional_edges(
            "validate",
            self.route_after_validate,
            {
                "fetch_detail": "fetch_detail",
                "compose_multi": "compose_multi",
                "end": END,
            },
        )
        workflow.add_conditional_edges(
            "fetch_detail",
            self.route_after_fetch,
            {
                "compact": "compact",
                "end": END,
            },
        )
        workflow.add_edge("compact", "compose")
        workflow.add_edge("compose_multi", "compose")
        workflow.add_edge("compose", "invoke")
        workflow.add_edge("invoke", END)

        return workflow.compile()

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """커밋 분석 실행

        Raises:
            ValidationError: 커밋 목록이 비었거나 단일 커밋 분석에 필요한 값이 없는 경우
            ConfigError: Gemini API 키가 없는 경우
            UpstreamError: GitHub 또는 LLM 호출이 실패한 경우
        """
        final_state = await self._workflow.ainvoke({"request": request})

        error = final_state.get("error")
        if error is not None:
            raise error

        return AnalysisResult(
            mode=request.mode,
            single_commit=request.single_commit,
            text=final_state["text"],
        )
