"""Adapter around the Claude CLI headless mode."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import ProcessError
from ..logging import DebugLog, get_logger

_PROMPT_LOG_LIMIT = 500


@dataclass
class CLIRequest:
    """Represents a single invocation of the Claude CLI."""

    prompt: str
    executable: str
    output_format: str
    timeout: Optional[float]

    def args(self) -> list[str]:
        return [self.executable, "-p", self.prompt, "--output-format", self.output_format]


@dataclass
class CLIResult:
    """Captured output of a finished CLI process."""

    stdout: str
    stderr: str
    returncode: int = 0


class ClaudeRunner:
    """Spawns the Claude CLI once per prompt and returns its raw stdout."""

    DEFAULT_EXECUTABLE = "claude"
    DEFAULT_OUTPUT_FORMAT = "json"
    DEFAULT_TIMEOUT = 120.0

    def __init__(
        self,
        *,
        executable: str | None = None,
        output_format: str | None = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        debug_log: DebugLog | None = None,
        runner: Callable[[CLIRequest], CLIResult] | None = None,
    ) -> None:
        self.executable = executable or self.DEFAULT_EXECUTABLE
        self.output_format = output_format or self.DEFAULT_OUTPUT_FORMAT
        self.timeout = timeout if timeout else None
        self.debug_log = debug_log or DebugLog.disabled()
        self._runner = runner or self._subprocess_runner
        self.logger = get_logger("llm.runner")

    def run(self, prompt: str) -> str:
        """Send ``prompt`` to the CLI and return stdout untouched.

        Raises ``ProcessError`` when the CLI cannot be launched, times out or
        exits with a non-zero status.
        """
        request = CLIRequest(
            prompt=prompt,
            executable=self.executable,
            output_format=self.output_format,
            timeout=self.timeout,
        )
        self.debug_log.write("=== CLAUDE CLI REQUEST ===")
        self.debug_log.write("Prompt: %s", prompt[:_PROMPT_LOG_LIMIT])
        self.logger.debug("Invoking %s (prompt %d chars)", self.executable, len(prompt))

        try:
            result = self._runner(request)
        except ProcessError as exc:
            self.debug_log.write("ERROR: %s", exc.underlying or exc)
            self.debug_log.write("STDERR: %s", exc.stderr)
            raise

        if result.returncode != 0:
            error = subprocess.CalledProcessError(
                result.returncode, request.args(), output=result.stdout, stderr=result.stderr
            )
            self.debug_log.write("ERROR: %s", error)
            self.debug_log.write("STDERR: %s", result.stderr)
            raise ProcessError(
                f"claude CLI failed with exit code {result.returncode}: {result.stderr.strip()}",
                underlying=error,
                stderr=result.stderr,
                returncode=result.returncode,
            )

        self.debug_log.write("=== CLAUDE CLI RAW RESPONSE ===")
        self.debug_log.write("STDOUT: %s", result.stdout)
        self.debug_log.write("STDERR: %s", result.stderr)
        return result.stdout

    @staticmethod
    def _subprocess_runner(request: CLIRequest) -> CLIResult:
        try:
            completed = subprocess.run(
                request.args(),
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=request.timeout,
            )
        except FileNotFoundError as exc:
            raise ProcessError(
                f"Unable to locate '{request.executable}'. Install the Claude CLI or configure its path.",
                underlying=exc,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            stderr = _as_text(exc.stderr)
            raise ProcessError(
                f"claude CLI timed out after {request.timeout:g}s",
                underlying=exc,
                stderr=stderr,
            ) from exc
        except OSError as exc:
            raise ProcessError(f"claude CLI failed to start: {exc}", underlying=exc) from exc
        return CLIResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


__all__ = ["CLIRequest", "CLIResult", "ClaudeRunner"]
