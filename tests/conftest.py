from __future__ import annotations

import pytest

from gitscribe.llm.runner import ClaudeRunner
from gitscribe.orchestrator import Orchestrator
from tests._fixtures.claude_cli import ScriptedCLI


@pytest.fixture
def scripted_cli() -> ScriptedCLI:
    """Provide a fake CLI transport that returns an empty message array."""
    return ScriptedCLI()


@pytest.fixture
def orchestrator(scripted_cli: ScriptedCLI) -> Orchestrator:
    """Provide an orchestrator wired to the scripted CLI."""
    return Orchestrator(ClaudeRunner(runner=scripted_cli))
