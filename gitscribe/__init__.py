"""Generate commit messages, branch names and PR content with the Claude CLI."""

__version__ = "0.1.0"
