"""CLI parser and command tests."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from gitscribe import cli
from gitscribe.cli import _build_parser
from gitscribe.llm.runner import ClaudeRunner
from gitscribe.models import GitContext
from gitscribe.orchestrator import Orchestrator
from tests._fixtures.claude_cli import ScriptedCLI, result_output


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "commit"])
    assert args.verbose is True
    assert args.command == "commit"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["branch", "--verbose"])
    assert args.verbose is True
    assert args.command == "branch"


def test_cli_pr_defaults() -> None:
    parser = _build_parser()
    args = parser.parse_args(["pr"])
    assert args.base == "origin/main"
    assert args.path == "."
    assert args.open is False
    assert args.prompt_file is None


def test_cli_serve_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(["serve", "--port", "9000"])
    assert args.port == 9000
    assert args.host == "127.0.0.1"


class _StubCollector:
    def collect(self, repo_path: str) -> GitContext:
        return GitContext(status="M a.py", diff="+a", branch="main", log="abc")

    def pr_diff(self, repo_path: str, base: str) -> str:
        return "+pr"


def _install_stubs(monkeypatch, cli_transport: ScriptedCLI) -> None:
    monkeypatch.setattr(cli, "GitContextCollector", _StubCollector)
    monkeypatch.setattr(
        cli.Orchestrator,
        "from_config",
        classmethod(lambda klass, config: Orchestrator(ClaudeRunner(runner=cli_transport))),
    )


def test_commit_command_prints_message(monkeypatch, capsys, tmp_path: Path) -> None:
    transport = ScriptedCLI(stdout=result_output("feat: add login"))
    _install_stubs(monkeypatch, transport)

    cli.main(["commit", str(tmp_path)])

    assert capsys.readouterr().out.strip() == "feat: add login"


def test_commit_command_reads_prompt_file(monkeypatch, capsys, tmp_path: Path) -> None:
    transport = ScriptedCLI(stdout=result_output("feat: custom"))
    _install_stubs(monkeypatch, transport)
    prompt_file = tmp_path / "prompt.txt"
    prompt_file.write_text("Branch {branch}: {diff}", encoding="utf-8")

    cli.main(["commit", str(tmp_path), "--prompt-file", str(prompt_file)])

    assert transport.last_prompt == "Branch main: +a"


def test_pr_command_prints_title_and_description(monkeypatch, capsys, tmp_path: Path) -> None:
    transport = ScriptedCLI(stdout=result_output('{"title": "Add caching", "description": "Faster"}'))
    _install_stubs(monkeypatch, transport)

    cli.main(["pr", str(tmp_path)])

    assert capsys.readouterr().out == "Add caching\n\nFaster\n"


def test_failures_exit_with_status_one(monkeypatch, capsys, tmp_path: Path) -> None:
    transport = ScriptedCLI(stdout="[]")
    _install_stubs(monkeypatch, transport)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["branch", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "gitscribe branch failed: no content found in 0 messages" in capsys.readouterr().err


class _RecordingPublisher:
    calls: list[tuple[str, tuple, dict]] = []

    def create_branch(self, repo_path: str, name: str, *, base: str | None = None) -> bool:
        self.calls.append(("create_branch", (repo_path, name), {"base": base}))
        return True

    def open_pr(self, repo_path: str, **kwargs) -> bool:  # type: ignore[no-untyped-def]
        self.calls.append(("open_pr", (repo_path,), kwargs))
        return True


@pytest.fixture
def recording_publisher(monkeypatch) -> type[_RecordingPublisher]:
    _RecordingPublisher.calls = []
    monkeypatch.setattr(cli, "Publisher", _RecordingPublisher)
    return _RecordingPublisher


def test_git_failures_exit_with_status_one(monkeypatch, capsys, tmp_path: Path) -> None:
    class _FailingCollector(_StubCollector):
        def pr_diff(self, repo_path: str, base: str) -> str:
            raise subprocess.CalledProcessError(128, ["git", "diff", f"{base}...HEAD"])

    _install_stubs(monkeypatch, ScriptedCLI())
    monkeypatch.setattr(cli, "GitContextCollector", _FailingCollector)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["pr", str(tmp_path), "--base", "origin/nope"])

    assert excinfo.value.code == 1
    assert "gitscribe pr failed:" in capsys.readouterr().err


def test_branch_create_with_user_name_is_sanitized(
    monkeypatch, capsys, tmp_path: Path, recording_publisher
) -> None:
    transport = ScriptedCLI()
    _install_stubs(monkeypatch, transport)

    cli.main(["branch", str(tmp_path), "--create", "--name", "feature/login page", "--from", "main"])

    assert recording_publisher.calls == [
        ("create_branch", (str(tmp_path), "feature-login-page"), {"base": "main"})
    ]
    assert not transport.requests
    assert capsys.readouterr().out.strip() == "Switched to new branch feature-login-page"


def test_branch_name_without_usable_characters_fails(monkeypatch, capsys, tmp_path: Path) -> None:
    _install_stubs(monkeypatch, ScriptedCLI())

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["branch", str(tmp_path), "--name", "!!!"])

    assert excinfo.value.code == 1
    assert "has no usable characters" in capsys.readouterr().err


def test_pr_open_without_push(monkeypatch, tmp_path: Path, recording_publisher) -> None:
    transport = ScriptedCLI(stdout=result_output('{"title": "Add caching", "description": "Faster"}'))
    _install_stubs(monkeypatch, transport)

    cli.main(["pr", str(tmp_path), "--open", "--no-push", "--base", "origin/develop"])

    assert recording_publisher.calls == [
        (
            "open_pr",
            (str(tmp_path),),
            {"title": "Add caching", "body": "Faster", "base": "develop", "push": False},
        )
    ]
