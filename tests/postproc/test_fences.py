"""Tests for markdown fence stripping."""

from __future__ import annotations

import pytest

from gitscribe.postproc import strip_code_fence


def test_multiline_fence_drops_language_line() -> None:
    assert strip_code_fence('```json\n{"a":1}\n```') == '{"a":1}'


def test_multiline_fence_without_language() -> None:
    assert strip_code_fence("```\nfeat: add login\n```") == "feat: add login"


def test_single_line_json_fence() -> None:
    assert strip_code_fence("```jsonX```") == "X"


def test_single_line_plain_fence() -> None:
    assert strip_code_fence("```fix-bug```") == "fix-bug"


def test_missing_closing_fence_keeps_body() -> None:
    assert strip_code_fence("```python\nprint('hi')") == "print('hi')"


def test_surrounding_whitespace_is_trimmed_before_detection() -> None:
    assert strip_code_fence('  \n```json\n{"a": 1}\n```\n  ') == '{"a": 1}'


def test_unfenced_content_is_only_trimmed() -> None:
    assert strip_code_fence("  fix: handle nulls \n") == "fix: handle nulls"


def test_inner_fences_are_not_touched_when_content_is_not_fenced() -> None:
    text = "Summary\n```\ncode\n```"
    assert strip_code_fence(text) == text


@pytest.mark.parametrize(
    "content",
    ['```json\n{"a":1}\n```', "```jsonX```", "plain text", "  padded  "],
)
def test_stripping_is_idempotent_on_clean_output(content: str) -> None:
    once = strip_code_fence(content)
    assert strip_code_fence(once) == once
