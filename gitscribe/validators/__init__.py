"""Artifact validation and sanitization."""

from .artifacts import (
    MAX_BRANCH_LENGTH,
    extract_branch_name,
    extract_commit_message,
    extract_pr_content,
    sanitize_branch_input,
)

__all__ = [
    "MAX_BRANCH_LENGTH",
    "extract_branch_name",
    "extract_commit_message",
    "extract_pr_content",
    "sanitize_branch_input",
]
