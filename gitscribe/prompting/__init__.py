"""Prompt templates and rendering."""

from .builder import PromptBuilder
from .constants import (
    BRANCH_DIFF_LIMIT,
    COMMIT_DIFF_LIMIT,
    DEFAULT_BRANCH_PROMPT,
    DEFAULT_COMMIT_PROMPT,
    DEFAULT_PR_PROMPT,
    PR_DIFF_LIMIT,
)

__all__ = [
    "BRANCH_DIFF_LIMIT",
    "COMMIT_DIFF_LIMIT",
    "DEFAULT_BRANCH_PROMPT",
    "DEFAULT_COMMIT_PROMPT",
    "DEFAULT_PR_PROMPT",
    "PR_DIFF_LIMIT",
    "PromptBuilder",
]
