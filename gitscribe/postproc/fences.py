"""Markdown code-fence removal for model responses."""

from __future__ import annotations

FENCE = "```"
_JSON_FENCE = "```json"


def strip_code_fence(content: str) -> str:
    """Remove a markdown code fence wrapping ``content``.

    Multi-line payloads lose the whole opening fence line, language tag
    included. A payload fenced on a single line only loses a leading
    ```` ```json ```` or ```` ``` ```` marker. In both cases a closing fence is
    dropped and the result is trimmed. Unfenced content is only trimmed.
    """
    text = content.strip()
    if not text.startswith(FENCE):
        return text

    newline = text.find("\n")
    if newline != -1:
        text = text[newline + 1 :]
    elif text.startswith(_JSON_FENCE):
        text = text[len(_JSON_FENCE) :]
    else:
        text = text[len(FENCE) :]

    if text.endswith(FENCE):
        text = text[: -len(FENCE)]
    return text.strip()


__all__ = ["FENCE", "strip_code_fence"]
