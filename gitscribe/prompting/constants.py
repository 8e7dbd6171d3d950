"""Built-in prompt templates and per-artifact diff budgets."""

from __future__ import annotations

COMMIT_DIFF_LIMIT = 5000
BRANCH_DIFF_LIMIT = 3000
PR_DIFF_LIMIT = 5000

PLACEHOLDERS: tuple[str, ...] = ("status", "diff", "branch", "log")

DEFAULT_COMMIT_PROMPT = """Write a one-line conventional commit subject for the staged changes below.

Rules:
- Use the form <type>(<optional scope>): <description>
- Types: feat, fix, docs, style, refactor, perf, test, build, ci, chore
- Keep it under 72 characters, imperative mood, no trailing period
- Respond with the subject line only, no quotes or explanation

Current branch: {branch}

Recent commits:
{log}

git status:
{status}

git diff:
{diff}
"""

DEFAULT_BRANCH_PROMPT = """Suggest a short git branch name for the changes below.

Rules:
- Lowercase letters, numbers and hyphens only
- At most 40 characters, e.g. fix-login-redirect or add-user-export
- Respond with the branch name only, no prefix or explanation

git diff:
{diff}
"""

DEFAULT_PR_PROMPT = """Write a pull request title and description for the changes below.

Respond with JSON only, using exactly this shape:
{"title": "<concise title under 72 characters>", "description": "<markdown summary of what changed and why>"}

git diff:
{diff}
"""

CONNECTION_TEST_PROMPT = "Say 'test' and nothing else."


__all__ = [
    "BRANCH_DIFF_LIMIT",
    "COMMIT_DIFF_LIMIT",
    "CONNECTION_TEST_PROMPT",
    "DEFAULT_BRANCH_PROMPT",
    "DEFAULT_COMMIT_PROMPT",
    "DEFAULT_PR_PROMPT",
    "PLACEHOLDERS",
    "PR_DIFF_LIMIT",
]
