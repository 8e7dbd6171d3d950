"""CLI entrypoints for gitscribe commands."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

from .config import ConfigError, GitScribeConfig, load_config
from .errors import GenerationError
from .git.context import GitContextCollector
from .git.publisher import Publisher
from .logging import configure_logging
from .orchestrator import Orchestrator
from .validators.artifacts import sanitize_branch_input


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_repo_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )
    parser.add_argument(
        "--prompt-file",
        type=Path,
        default=None,
        help="Read a custom prompt template from this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitscribe",
        description="Generate commit messages, branch names and pull requests with the Claude CLI.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    commit_parser = subparsers.add_parser(
        "commit",
        help="Generate a commit message for the current changes.",
    )
    _add_verbose_option(commit_parser, suppress_default=True)
    _add_repo_options(commit_parser)
    commit_parser.add_argument(
        "--apply",
        action="store_true",
        help="Stage all changes and commit with the generated message.",
    )

    branch_parser = subparsers.add_parser(
        "branch",
        help="Suggest a branch name for the current changes.",
    )
    _add_verbose_option(branch_parser, suppress_default=True)
    _add_repo_options(branch_parser)
    branch_parser.add_argument(
        "--create",
        action="store_true",
        help="Create and check out the suggested branch.",
    )
    branch_parser.add_argument(
        "--name",
        default=None,
        help="Use this branch name (sanitized) instead of generating one.",
    )
    branch_parser.add_argument(
        "--from",
        dest="start_point",
        default=None,
        help="Start the created branch from this ref instead of HEAD.",
    )

    pr_parser = subparsers.add_parser(
        "pr",
        help="Generate a pull request title and description.",
    )
    _add_verbose_option(pr_parser, suppress_default=True)
    _add_repo_options(pr_parser)
    pr_parser.add_argument(
        "--base",
        default="origin/main",
        help="Commit or ref to compare against when computing the diff.",
    )
    pr_parser.add_argument(
        "--open",
        action="store_true",
        help="Push the branch and open the pull request with the GitHub CLI.",
    )
    pr_parser.add_argument(
        "--no-push",
        action="store_true",
        help="Open the pull request without pushing the current branch first.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Verify that the Claude CLI is installed and responding.",
    )
    _add_verbose_option(check_parser, suppress_default=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for gitscribe commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    repo_path = getattr(args, "path", ".")
    try:
        config = load_config(Path(repo_path))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "serve":
        from .service import run_service

        run_service(args.host, args.port, lambda: Orchestrator.from_config(config))
        return

    orchestrator = Orchestrator.from_config(config)
    try:
        _dispatch(args, orchestrator, config)
    except (GenerationError, RuntimeError, OSError, subprocess.SubprocessError) as exc:
        parser.exit(
            1,
            f"gitscribe {args.command} failed: {exc}\nRun with --verbose for more details.\n",
        )


def _dispatch(args: argparse.Namespace, orchestrator: Orchestrator, config: GitScribeConfig) -> None:
    collector = GitContextCollector()
    publisher = Publisher()
    template = _read_template(getattr(args, "prompt_file", None))

    if args.command == "commit":
        context = collector.collect(args.path)
        message = orchestrator.generate_commit_message(context, template)
        if args.apply:
            if publisher.commit(args.path, message, stage_all=True):
                print(f"Committed: {message}")
            else:
                print("Nothing to commit")
        else:
            print(message)
    elif args.command == "branch":
        name = _branch_name(args, collector, orchestrator, template)
        if args.create:
            publisher.create_branch(args.path, name, base=args.start_point)
            print(f"Switched to new branch {name}")
        else:
            print(name)
    elif args.command == "pr":
        diff = collector.pr_diff(args.path, args.base)
        content = orchestrator.generate_pr_content(diff, template)
        if args.open:
            publisher.open_pr(
                args.path,
                title=content.title,
                body=content.description,
                base=_strip_remote(args.base),
                push=not args.no_push,
            )
            print(f"Opened pull request: {content.title}")
        else:
            print(content.title)
            if content.description:
                print()
                print(content.description)
    elif args.command == "check":
        orchestrator.test_connection()
        print(f"Claude CLI ({config.claude.executable}) is responding")
    else:  # pragma: no cover - argparse enforces choices
        raise RuntimeError("Unknown command")


def _branch_name(
    args: argparse.Namespace,
    collector: GitContextCollector,
    orchestrator: Orchestrator,
    template: str,
) -> str:
    if args.name is not None:
        name = sanitize_branch_input(args.name)
        if not name:
            raise RuntimeError(f"branch name {args.name!r} has no usable characters")
        return name
    context = collector.collect(args.path)
    return orchestrator.generate_branch_name(context.diff, template)


def _read_template(path: Path | None) -> str:
    if path is None:
        return ""
    return path.read_text(encoding="utf-8")


def _strip_remote(ref: str) -> str:
    return ref.split("/", 1)[1] if ref.startswith("origin/") else ref


if __name__ == "__main__":
    main(sys.argv[1:])
