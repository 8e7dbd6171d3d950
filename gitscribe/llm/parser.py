"""Decoding of the Claude CLI ``--output-format json`` message array.

The CLI prints a JSON array of heterogeneous records. Each element is decoded
once into one of three variants (``ResultMessage``, ``AssistantMessage`` or
``OtherMessage``) and content is then selected by array position: the first
record that carries usable text wins, whatever its kind.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from ..errors import NotFoundError, ParseError
from ..logging import DebugLog, get_logger

_LOGGER = get_logger("llm.parser")


@dataclass(frozen=True)
class ContentBlock:
    type: str
    text: str


@dataclass(frozen=True)
class AssistantBody:
    model: str = ""
    id: str = ""
    role: str = ""
    content: Tuple[ContentBlock, ...] = ()
    stop_reason: str = ""


@dataclass(frozen=True)
class ResultMessage:
    """Final ``"result"`` record emitted at the end of a CLI run."""

    subtype: str
    result: str


@dataclass(frozen=True)
class AssistantMessage:
    """Intermediate ``"assistant"`` turn with content blocks."""

    subtype: str
    message: AssistantBody

    def first_text(self) -> Optional[str]:
        for block in self.message.content:
            if block.type == "text" and block.text:
                return block.text
        return None


@dataclass(frozen=True)
class OtherMessage:
    """Any record kind that never carries selectable content (``system``, ``user``...)."""

    type: str
    subtype: str = ""


Message = Union[ResultMessage, AssistantMessage, OtherMessage]


def parse_output(raw_stdout: str, *, debug_log: DebugLog | None = None) -> str:
    """Return the selected content from raw CLI stdout.

    Raises ``ParseError`` when stdout is not a JSON array of records and
    ``NotFoundError`` when no record carries usable content.
    """
    sink = debug_log or DebugLog.disabled()
    text = raw_stdout.strip()
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        sink.write("Failed to parse JSON array: %s", exc)
        raise ParseError(f"failed to parse Claude CLI output: {exc}") from exc

    if not isinstance(payload, list):
        sink.write("Failed to parse JSON array: top-level value is %s", type(payload).__name__)
        raise ParseError("failed to parse Claude CLI output: expected a JSON array of messages")

    messages = [decode_message(item) for item in payload]
    sink.write("Parsed %d messages from JSON array", len(messages))
    _LOGGER.debug("Decoded %d messages from Claude CLI output", len(messages))
    return select_content(messages, debug_log=sink)


def select_content(messages: Sequence[Message], *, debug_log: DebugLog | None = None) -> str:
    """Return the content of the first qualifying record in array order."""
    sink = debug_log or DebugLog.disabled()
    for index, message in enumerate(messages):
        sink.write("Message %d: type=%s, subtype=%s", index, _kind(message), message.subtype)
        if isinstance(message, ResultMessage):
            if message.result:
                sink.write("Message %d: found result: %s", index, message.result[:100])
                return message.result
        elif isinstance(message, AssistantMessage):
            text = message.first_text()
            if text:
                sink.write("Message %d: found assistant text: %s", index, text[:100])
                return text
    raise NotFoundError(len(messages))


def decode_message(item: Any) -> Message:
    """Decode one array element into its message variant."""
    if item is None:
        return OtherMessage(type="")
    if not isinstance(item, Mapping):
        raise ParseError(
            f"failed to parse Claude CLI output: message must be an object, got {type(item).__name__}"
        )
    kind = _string_field(item, "type")
    subtype = _string_field(item, "subtype")
    result = _string_field(item, "result")
    body = _decode_body(item.get("message"))
    if kind == "result":
        return ResultMessage(subtype=subtype, result=result)
    if kind == "assistant":
        return AssistantMessage(subtype=subtype, message=body)
    return OtherMessage(type=kind, subtype=subtype)


def _decode_body(value: Any) -> AssistantBody:
    if value is None:
        return AssistantBody()
    if not isinstance(value, Mapping):
        raise ParseError("failed to parse Claude CLI output: 'message' must be an object")
    return AssistantBody(
        model=_string_field(value, "model"),
        id=_string_field(value, "id"),
        role=_string_field(value, "role"),
        content=tuple(_decode_blocks(value.get("content"))),
        stop_reason=_string_field(value, "stop_reason"),
    )


def _decode_blocks(value: Any) -> Iterable[ContentBlock]:
    if value is None:
        return
    if not isinstance(value, list):
        raise ParseError("failed to parse Claude CLI output: 'content' must be an array")
    for block in value:
        if block is None:
            yield ContentBlock(type="", text="")
            continue
        if not isinstance(block, Mapping):
            raise ParseError("failed to parse Claude CLI output: content blocks must be objects")
        yield ContentBlock(type=_string_field(block, "type"), text=_string_field(block, "text"))


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(
            f"failed to parse Claude CLI output: field '{key}' must be a string"
        )
    return value


def _kind(message: Message) -> str:
    if isinstance(message, ResultMessage):
        return "result"
    if isinstance(message, AssistantMessage):
        return "assistant"
    return message.type


__all__ = [
    "AssistantBody",
    "AssistantMessage",
    "ContentBlock",
    "Message",
    "OtherMessage",
    "ResultMessage",
    "decode_message",
    "parse_output",
    "select_content",
]
