"""Anthropic Messages API translation helpers.

Pure functions mapping our DTOs to the ``/messages`` payload and mapping
responses and stream events back. No network I/O.

Stream event handling:
- ``content_block_delta`` yields a text chunk.
- ``message_delta`` yields an empty chunk carrying the mapped stop reason.
- Every other event type (message_start, ping, content_block_start, ...) is
  ignored, as is malformed JSON.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..base.constants import ANTHROPIC_DEFAULT_MAX_TOKENS
from ..base.errors import RequestValidationError
from ..base.logging import LogContext, normalized_log_event
from ..base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    FinishReason,
    Message,
    StreamChunk,
    Usage,
)
from ..base.utils.messages import split_system_messages

_STOP_REASONS: Dict[str, FinishReason] = {
    "end_turn": "stop",
    "stop_sequence": "stop",
    "max_tokens": "length",
}


def map_stop_reason(reason: Any) -> Optional[FinishReason]:
    """end_turn/stop_sequence -> stop, max_tokens -> length, anything else -> None."""
    return _STOP_REASONS.get(reason) if isinstance(reason, str) else None


def format_messages(messages: Sequence[Message]) -> Tuple[Optional[str], List[Dict[str, str]]]:
    """Split system text out and shape the rest for the Messages API.

    Raises:
        RequestValidationError: if a non-system message has a role other than
            ``user`` or ``assistant``.
    """
    system, rest = split_system_messages(messages)
    formatted: List[Dict[str, str]] = []
    for m in rest:
        if m.role not in ("user", "assistant"):
            raise RequestValidationError(
                message=f"Unsupported message role for Anthropic: {m.role}",
                provider="anthropic",
            )
        formatted.append({"role": m.role, "content": m.content})
    return system, formatted


def _stop_sequences(stop: Any) -> Optional[List[str]]:
    if stop is None:
        return None
    if isinstance(stop, str):
        return [stop] if stop else None
    return list(stop)


def build_messages_payload(request: ChatCompletionRequest, *, stream: bool = False) -> Dict[str, Any]:
    """Assemble the ``POST /messages`` body; ``None`` fields are omitted."""
    system, messages = format_messages(request.messages)
    payload: Dict[str, Any] = {
        "model": request.model,
        "messages": messages,
        "max_tokens": request.max_tokens if request.max_tokens is not None else ANTHROPIC_DEFAULT_MAX_TOKENS,
    }
    optional = {
        "system": system,
        "temperature": request.temperature,
        "top_p": request.top_p,
        "stop_sequences": _stop_sequences(request.stop),
    }
    payload.update({k: v for k, v in optional.items() if v is not None})
    payload["stream"] = stream
    return payload


def parse_messages_response(data: Dict[str, Any]) -> ChatCompletionResponse:
    content = data.get("content") or []
    first = content[0] if content and isinstance(content[0], dict) else {}
    usage = data.get("usage")
    parsed_usage = None
    if isinstance(usage, dict):
        prompt = int(usage.get("input_tokens") or 0)
        completion = int(usage.get("output_tokens") or 0)
        parsed_usage = Usage(prompt_tokens=prompt, completion_tokens=completion, total_tokens=prompt + completion)
    return ChatCompletionResponse(
        id=str(data.get("id", "")),
        model=str(data.get("model", "")),
        content=first.get("text") or "",
        finish_reason=map_stop_reason(data.get("stop_reason")),
        usage=parsed_usage,
    )


def event_to_chunk(
    raw: str,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> Optional[StreamChunk]:
    """Translate one Messages API SSE payload into a chunk, or ``None``."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        if logger is not None:
            normalized_log_event(
                logger,
                "stream.decode_error",
                ctx,
                phase="stream",
                attempt=None,
                emitted=None,
                tokens=None,
                level=logging.DEBUG,
            )
        return None
    if not isinstance(data, dict):
        return None
    delta = data.get("delta")
    if not isinstance(delta, dict):
        return None
    kind = data.get("type")
    if kind == "content_block_delta":
        return StreamChunk(delta=delta.get("text") or "")
    if kind == "message_delta":
        return StreamChunk(delta="", finish_reason=map_stop_reason(delta.get("stop_reason")))
    return None


__all__ = [
    "map_stop_reason",
    "format_messages",
    "build_messages_payload",
    "parse_messages_response",
    "event_to_chunk",
]
