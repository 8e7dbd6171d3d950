"""Renders prompt templates from git context."""

from __future__ import annotations

import re
from typing import Dict

from ..models import GitContext
from .constants import PLACEHOLDERS

_PLACEHOLDER_PATTERN = re.compile(
    r"\{(" + "|".join(re.escape(name) for name in PLACEHOLDERS) + r")\}"
)


class PromptBuilder:
    """Fills ``{status}``, ``{diff}``, ``{branch}`` and ``{log}`` tokens in a template.

    Substitution is a single pass over the template, so values that happen to
    contain a token literal are inserted verbatim and never expanded again.
    """

    def build(self, template: str, context: GitContext, max_diff_length: int) -> str:
        """Return ``template`` with placeholders replaced by ``context`` values.

        The diff is cut to ``max_diff_length`` characters before substitution.
        """
        values = self._values(context, max_diff_length)
        return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(1)], template)

    @staticmethod
    def truncate_diff(diff: str, max_diff_length: int) -> str:
        if max_diff_length < 0:
            raise ValueError("max_diff_length must be non-negative")
        return diff[:max_diff_length]

    def _values(self, context: GitContext, max_diff_length: int) -> Dict[str, str]:
        return {
            "status": context.status,
            "diff": self.truncate_diff(context.diff, max_diff_length),
            "branch": context.branch,
            "log": context.log,
        }


__all__ = ["PromptBuilder"]
