from app.domain.commit.prompts.analysis import (
    MULTI_COMMIT_FEEDBACK,
    MULTI_COMMIT_LABEL,
    MULTI_COMMIT_SUMMARY,
    SINGLE_COMMIT_FEEDBACK,
    SINGLE_COMMIT_LABEL,
    SINGLE_COMMIT_SUMMARY,
)

__all__ = [
    "SINGLE_COMMIT_FEEDBACK",
    "SINGLE_COMMIT_SUMMARY",
    "MULTI_COMMIT_FEEDBACK",
    "MULTI_COMMIT_SUMMARY",
    "SINGLE_COMMIT_LABEL",
    "MULTI_COMMIT_LABEL",
]
