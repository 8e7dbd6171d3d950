"""Logging utilities for gitscribe commands."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

_LOGGER_NAME = "gitscribe"

DEFAULT_DEBUG_LOG = Path(tempfile.gettempdir()) / "gitscribe-debug.log"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the gitscribe hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the gitscribe logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[gitscribe] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


class DebugLog:
    """Append-only diagnostic sink for raw Claude CLI traffic.

    Writes are best effort: a sink that cannot be opened or written never
    affects the outcome of a generation call. Each entry is appended with a
    single write so concurrent callers interleave whole lines.
    """

    def __init__(self, path: Path | None = None, *, enabled: bool = False) -> None:
        self.path = Path(path) if path is not None else DEFAULT_DEBUG_LOG
        self.enabled = enabled

    @classmethod
    def disabled(cls) -> "DebugLog":
        return cls(enabled=False)

    def write(self, message: str, *args: object) -> None:
        if not self.enabled:
            return
        line = message % args if args else message
        try:
            with self.path.open("a", encoding="utf-8", errors="backslashreplace") as handle:
                handle.write(f"{line}\n")
        except (OSError, ValueError):
            return


__all__ = ["DEFAULT_DEBUG_LOG", "DebugLog", "configure_logging", "get_logger"]
