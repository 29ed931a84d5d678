"""DTO validation package for providers."""

from .chat import (
    ChatCompletionRequestDTO,
    CompletionRequestDTO,
    MessageDTO,
    Role,
    parse_chat_request,
    parse_completion_request,
)

__all__ = [
    "Role",
    "MessageDTO",
    "ChatCompletionRequestDTO",
    "CompletionRequestDTO",
    "parse_chat_request",
    "parse_completion_request",
]
