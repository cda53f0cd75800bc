from typing import NamedTuple

from app.domain.commit.prompts import (
    MULTI_COMMIT_FEEDBACK,
    MULTI_COMMIT_LABEL,
    MULTI_COMMIT_SUMMARY,
    SINGLE_COMMIT_FEEDBACK,
    SINGLE_COMMIT_LABEL,
    SINGLE_COMMIT_SUMMARY,
)
from app.domain.commit.schemas import AnalysisMode


class TemplateKey(NamedTuple):
    mode: AnalysisMode
    single_commit: bool


class PromptTemplate(NamedTuple):
    instructions: str
    label: str


PROMPT_TEMPLATES: dict[TemplateKey, PromptTemplate] = {
    TemplateKey(AnalysisMode.SUMMARY, True): PromptTemplate(
        SINGLE_COMMIT_SUMMARY, SINGLE_COMMIT_LABEL
    ),
    TemplateKey(AnalysisMode.FEEDBACK, True): PromptTemplate(
        SINGLE_COMMIT_FEEDBACK, SINGLE_COMMIT_LABEL
    ),
    TemplateKey(AnalysisMode.SUMMARY, False): PromptTemplate(
        MULTI_COMMIT_SUMMARY, MULTI_COMMIT_LABEL
    ),
    TemplateKey(AnalysisMode.FEEDBACK, False): PromptTemplate(
        MULTI_COMMIT_FEEDBACK, MULTI_COMMIT_LABEL
    ),
}


def select_template(mode: str | AnalysisMode | None, single_commit: bool) -> PromptTemplate:
    """(모드, 단일 커밋 여부)에 맞는 템플릿 반환. 알 수 없는 모드는 summary"""
    return PROMPT_TEMPLATES[TemplateKey(AnalysisMode.resolve(mode), bool(single_commit))]


def compose_prompt(mode: str | AnalysisMode | None, single_commit: bool, digest: str) -> str:
    """지시문과 커밋 본문을 합쳐 LLM 프롬프트 생성"""
    template = select_template(mode, single_commit)
    return f"{template.instructions}\n\n{template.label}\n{digest}"
