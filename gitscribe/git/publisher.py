"""Git publishing utilities."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable


class Publisher:
    """Applies generated commit messages, branch names and PR content."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def commit(self, repo_path: str, message: str, *, stage_all: bool = False) -> bool:
        """Create a commit with ``message`` if there is anything to commit."""
        repo = Path(repo_path)
        if not (repo / ".git").exists():
            return False

        if stage_all:
            self._run(["git", "add", "--all"], cwd=repo)

        staged = self._run(["git", "diff", "--cached", "--name-only"], cwd=repo, capture_output=True)
        if not staged.strip():
            return False

        self._run(["git", "commit", "-m", message], cwd=repo)
        return True

    def create_branch(self, repo_path: str, name: str, *, base: str | None = None) -> bool:
        """Create and check out ``name``, optionally starting from ``base``."""
        repo = Path(repo_path)
        if not (repo / ".git").exists():
            return False

        args = ["git", "checkout", "-b", name]
        if base:
            args.append(base)
        self._run(args, cwd=repo)
        return True

    def open_pr(
        self,
        repo_path: str,
        *,
        title: str,
        body: str,
        base: str | None = None,
        push: bool = True,
    ) -> bool:
        """Push the current branch and open a pull request via the GitHub CLI."""
        repo = Path(repo_path)
        if not (repo / ".git").exists():
            return False

        if push:
            self._run(["git", "push", "-u", "origin", "HEAD"], cwd=repo)

        pr_args = ["gh", "pr", "create", "--title", title, "--body", body]
        if base:
            pr_args.extend(["--base", base])
        self._run(pr_args, cwd=repo)
        return True

    # ------------------------------------------------------------------
    # Helpers

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        return self._runner(args, cwd=cwd, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            encoding="utf-8",
            errors="replace",
            capture_output=capture_output,
        )
        if capture_output:
            return completed.stdout
        return ""
