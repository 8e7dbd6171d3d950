"""Collects git context for prompt templates."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable

from ..models import GitContext


class GitContextCollector:
    """Reads status, diff, branch and recent log from a repository."""

    LOG_LIMIT = 10

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def collect(self, repo_path: str) -> GitContext:
        repo = self._require_repo(repo_path)
        return GitContext(
            status=self._run(["git", "status", "--short"], cwd=repo),
            diff=self._working_diff(repo),
            branch=self._run(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=repo).strip(),
            log=self._log(repo),
        )

    def pr_diff(self, repo_path: str, base: str) -> str:
        """Return the diff between ``base`` and HEAD for pull-request generation."""
        repo = self._require_repo(repo_path)
        return self._run(["git", "diff", f"{base}...HEAD"], cwd=repo)

    # ------------------------------------------------------------------
    # Internals

    @staticmethod
    def _require_repo(repo_path: str) -> Path:
        repo = Path(repo_path)
        if not (repo / ".git").exists():
            raise RuntimeError(f"{repo_path} is not a Git repository")
        return repo

    def _working_diff(self, repo: Path) -> str:
        try:
            return self._run(["git", "diff", "HEAD"], cwd=repo)
        except subprocess.CalledProcessError:
            # No commits yet, so HEAD does not resolve.
            return self._run(["git", "diff", "--cached"], cwd=repo)

    def _log(self, repo: Path) -> str:
        try:
            return self._run(["git", "log", "--oneline", "-n", str(self.LOG_LIMIT)], cwd=repo)
        except subprocess.CalledProcessError:
            return ""

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            encoding="utf-8",
            errors="replace",
            capture_output=True,
        )
        return completed.stdout
