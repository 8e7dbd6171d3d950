"""Claude CLI adapters."""

from .parser import (
    AssistantBody,
    AssistantMessage,
    ContentBlock,
    Message,
    OtherMessage,
    ResultMessage,
    decode_message,
    parse_output,
    select_content,
)
from .runner import CLIRequest, CLIResult, ClaudeRunner

__all__ = [
    "AssistantBody",
    "AssistantMessage",
    "CLIRequest",
    "CLIResult",
    "ClaudeRunner",
    "ContentBlock",
    "Message",
    "OtherMessage",
    "ResultMessage",
    "decode_message",
    "parse_output",
    "select_content",
]
