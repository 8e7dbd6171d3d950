"""Error taxonomy for artifact generation."""

from __future__ import annotations


class GenerationError(RuntimeError):
    """Base class for every failure raised while producing an artifact."""


class ProcessError(GenerationError):
    """Raised when the Claude CLI cannot be launched or exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        *,
        underlying: BaseException | None = None,
        stderr: str = "",
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.underlying = underlying
        self.stderr = stderr
        self.returncode = returncode


class ParseError(GenerationError):
    """Raised when CLI output or artifact payloads cannot be decoded."""

    def __init__(self, message: str, *, source: str = "cli-output") -> None:
        super().__init__(message)
        self.source = source


class NotFoundError(GenerationError):
    """Raised when no message record carried usable content."""

    def __init__(self, record_count: int) -> None:
        super().__init__(f"no content found in {record_count} messages")
        self.record_count = record_count


class EmptyResultError(GenerationError):
    """Raised when the generated commit message is blank."""


class InvalidNameError(GenerationError):
    """Raised when nothing usable remains after branch-name sanitization."""


class EmptyTitleError(GenerationError):
    """Raised when the generated PR title is blank."""


__all__ = [
    "EmptyResultError",
    "EmptyTitleError",
    "GenerationError",
    "InvalidNameError",
    "NotFoundError",
    "ParseError",
    "ProcessError",
]
