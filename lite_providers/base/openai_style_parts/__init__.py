"""Shared building blocks for OpenAI-shaped HTTP APIs.

``style_helpers`` holds pure payload/response translations; ``calls`` holds
the request flows built on ``ProviderTransport``.
"""

from .calls import post_chat, post_completion, stream_chat, stream_completion
from .style_helpers import (
    build_chat_payload,
    build_completion_payload,
    chat_event_to_chunk,
    completion_event_to_chunk,
    map_finish_reason,
    parse_chat_response,
    parse_completion_response,
    parse_usage,
)

__all__ = [
    "post_chat",
    "post_completion",
    "stream_chat",
    "stream_completion",
    "build_chat_payload",
    "build_completion_payload",
    "chat_event_to_chunk",
    "completion_event_to_chunk",
    "map_finish_reason",
    "parse_chat_response",
    "parse_completion_response",
    "parse_usage",
]
