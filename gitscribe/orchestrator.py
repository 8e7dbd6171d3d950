"""Pipeline orchestration for commit, branch and PR generation."""

from __future__ import annotations

from typing import Callable, TypeVar

from .config import GitScribeConfig
from .llm.parser import parse_output
from .llm.runner import ClaudeRunner
from .logging import DebugLog, get_logger
from .models import GitContext, PRContent
from .postproc.fences import strip_code_fence
from .prompting.builder import PromptBuilder
from .prompting.constants import (
    BRANCH_DIFF_LIMIT,
    COMMIT_DIFF_LIMIT,
    CONNECTION_TEST_PROMPT,
    DEFAULT_BRANCH_PROMPT,
    DEFAULT_COMMIT_PROMPT,
    DEFAULT_PR_PROMPT,
    PR_DIFF_LIMIT,
)
from .validators.artifacts import (
    extract_branch_name,
    extract_commit_message,
    extract_pr_content,
)

T = TypeVar("T")


class Orchestrator:
    """Runs prompt building, the Claude CLI, output parsing and validation.

    Every public operation is a single blocking call that spawns exactly one
    CLI process. Failures surface as ``GenerationError`` subclasses and are
    never retried.
    """

    def __init__(
        self,
        runner: ClaudeRunner | None = None,
        prompt_builder: PromptBuilder | None = None,
        *,
        commit_template: str = "",
        branch_template: str = "",
        pr_template: str = "",
    ) -> None:
        self.runner = runner or ClaudeRunner()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.commit_template = commit_template
        self.branch_template = branch_template
        self.pr_template = pr_template
        self.logger = get_logger("orchestrator")

    @classmethod
    def from_config(cls, config: GitScribeConfig) -> "Orchestrator":
        debug_log = DebugLog(config.debug.log_file, enabled=config.debug.enabled)
        runner = ClaudeRunner(
            executable=config.claude.executable,
            output_format=config.claude.output_format,
            timeout=config.claude.timeout,
            debug_log=debug_log,
        )
        return cls(
            runner,
            commit_template=config.prompts.commit,
            branch_template=config.prompts.branch,
            pr_template=config.prompts.pr,
        )

    @property
    def debug_log(self) -> DebugLog:
        return self.runner.debug_log

    def generate_commit_message(self, context: GitContext, template: str = "") -> str:
        """Return a one-line commit subject for the given git context."""
        chosen = template or self.commit_template or DEFAULT_COMMIT_PROMPT
        self.logger.info("Generating commit message for branch %s", context.branch or "(unknown)")
        return self._generate(chosen, context, COMMIT_DIFF_LIMIT, extract_commit_message)

    def generate_branch_name(self, diff: str, template: str = "") -> str:
        """Return a branch-name slug derived from ``diff``."""
        chosen = template or self.branch_template or DEFAULT_BRANCH_PROMPT
        self.logger.info("Generating branch name")
        return self._generate(chosen, GitContext(diff=diff), BRANCH_DIFF_LIMIT, extract_branch_name)

    def generate_pr_content(self, diff: str, template: str = "") -> PRContent:
        """Return a PR title and description derived from ``diff``."""
        chosen = template or self.pr_template or DEFAULT_PR_PROMPT
        self.logger.info("Generating pull request content")
        return self._generate(chosen, GitContext(diff=diff), PR_DIFF_LIMIT, extract_pr_content)

    def test_connection(self) -> None:
        """Round-trip a trivial prompt to confirm the CLI is installed and authorised."""
        self._complete(CONNECTION_TEST_PROMPT)

    def _generate(
        self,
        template: str,
        context: GitContext,
        max_diff_length: int,
        extract: Callable[[str], T],
    ) -> T:
        prompt = self.prompt_builder.build(template, context, max_diff_length)
        content = self._complete(prompt)
        return extract(content)

    def _complete(self, prompt: str) -> str:
        stdout = self.runner.run(prompt)
        content = parse_output(stdout, debug_log=self.debug_log)
        self.debug_log.write("=== EXTRACTED CONTENT ===")
        self.debug_log.write("Content: %s", content)
        cleaned = strip_code_fence(content)
        self.logger.debug("Extracted %d characters of content", len(cleaned))
        return cleaned


__all__ = ["Orchestrator"]
