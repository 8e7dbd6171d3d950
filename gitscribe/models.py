"""Core data models shared across gitscribe components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitContext:
    """Raw git context used to fill prompt templates."""

    status: str = ""
    diff: str = ""
    branch: str = ""
    log: str = ""


@dataclass(frozen=True)
class PRContent:
    """Validated pull-request title and description."""

    title: str
    description: str = ""
