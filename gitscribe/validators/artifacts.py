"""Per-artifact validation of defenced model output."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

from ..errors import EmptyResultError, EmptyTitleError, InvalidNameError, ParseError
from ..models import PRContent

MAX_BRANCH_LENGTH = 40

_BRANCH_DISALLOWED = re.compile(r"[^a-z0-9-]")
_USER_BRANCH_DISALLOWED = re.compile(r"[^a-zA-Z0-9\-_]")
_HYPHEN_RUNS = re.compile(r"-+")


def extract_commit_message(content: str) -> str:
    """Return the trimmed commit message, preserving internal newlines."""
    message = content.strip()
    if not message:
        raise EmptyResultError("AI generated empty commit subject")
    return message


def extract_branch_name(content: str) -> str:
    """Turn model output into a ``[a-z0-9-]`` slug of at most 40 characters.

    Truncation runs after hyphen trimming and can leave a trailing hyphen.
    """
    name = content.strip().lower()
    name = name.replace(" ", "-").replace("_", "-")
    name = _BRANCH_DISALLOWED.sub("", name)
    name = name.strip("-")
    name = name[:MAX_BRANCH_LENGTH]
    if not name:
        raise InvalidNameError("AI generated invalid branch name")
    return name


def extract_pr_content(content: str) -> PRContent:
    """Decode ``{"title": ..., "description": ...}`` and validate the title."""
    try:
        payload = json.loads(content)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ParseError(f"failed to parse AI response: {exc}", source="pr-content") from exc
    if not isinstance(payload, Mapping):
        raise ParseError(
            "failed to parse AI response: expected a JSON object", source="pr-content"
        )

    title = _text_field(payload, "title").strip()
    if not title:
        raise EmptyTitleError("AI generated empty PR title")
    description = _text_field(payload, "description").strip()
    return PRContent(title=title, description=description)


def sanitize_branch_input(branch: str) -> str:
    """Sanitize a user-typed branch name for use with git.

    Unlike ``extract_branch_name`` this keeps case and underscores.
    """
    sanitized = _USER_BRANCH_DISALLOWED.sub("-", branch)
    sanitized = _HYPHEN_RUNS.sub("-", sanitized)
    return sanitized.strip("-")


def _text_field(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(
            f"failed to parse AI response: '{key}' must be a string", source="pr-content"
        )
    return value


__all__ = [
    "MAX_BRANCH_LENGTH",
    "extract_branch_name",
    "extract_commit_message",
    "extract_pr_content",
    "sanitize_branch_input",
]
