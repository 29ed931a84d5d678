"""
Helper utilities for OpenAI-shaped HTTP APIs.

Purpose:
- Translate our request DTOs into OpenAI-style JSON payloads, omitting any
  sampling parameter left as ``None``.
- Interpret non-streaming responses and individual SSE event payloads.

Used by the OpenAI-compatible and OpenRouter adapters. No network I/O
happens here; functions only prepare inputs or interpret outputs.
"""

from __future__ import annotations

import json
import logging
import typing as _t

from ..logging import LogContext, normalized_log_event
from ..models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    FinishReason,
    SamplingParams,
    StreamChunk,
    Usage,
)

_PASSTHROUGH_FINISH: frozenset[str] = frozenset({"stop", "length", "content_filter"})

_SAMPLING_FIELDS = (
    "temperature",
    "max_tokens",
    "top_p",
    "frequency_penalty",
    "presence_penalty",
    "stop",
)


def map_finish_reason(reason: _t.Any) -> FinishReason | None:
    """Map a vendor finish reason: stop/length/content_filter 1:1, else None."""
    if isinstance(reason, str) and reason in _PASSTHROUGH_FINISH:
        return _t.cast(FinishReason, reason)
    return None


def _sampling_params(request: SamplingParams) -> dict:
    params: dict = {}
    for name in _SAMPLING_FIELDS:
        value = getattr(request, name)
        if value is None:
            continue
        params[name] = value if isinstance(value, (str, int, float)) else list(value)
    return params


def build_chat_payload(request: ChatCompletionRequest, *, stream: bool = False) -> dict:
    """Assemble the JSON body for ``POST /chat/completions``."""
    payload: dict = {
        "model": request.model,
        "messages": [m.to_dict() for m in request.messages],
    }
    payload.update(_sampling_params(request))
    payload["stream"] = stream
    return payload


def build_completion_payload(request: CompletionRequest, *, stream: bool = False) -> dict:
    """Assemble the JSON body for the legacy ``POST /completions``."""
    payload: dict = {"model": request.model, "prompt": request.prompt}
    payload.update(_sampling_params(request))
    payload["stream"] = stream
    return payload


def parse_usage(data: _t.Any) -> Usage | None:
    """Return ``Usage`` from an OpenAI-style ``usage`` object, if present."""
    if not isinstance(data, dict):
        return None
    return Usage(
        prompt_tokens=int(data.get("prompt_tokens") or 0),
        completion_tokens=int(data.get("completion_tokens") or 0),
        total_tokens=int(data.get("total_tokens") or 0),
    )


def _first_choice(data: dict) -> dict:
    choices = data.get("choices") or []
    return choices[0] if choices and isinstance(choices[0], dict) else {}


def parse_chat_response(data: dict) -> ChatCompletionResponse:
    """Build a ``ChatCompletionResponse`` from a chat completion body."""
    choice = _first_choice(data)
    message = choice.get("message") or {}
    return ChatCompletionResponse(
        id=str(data.get("id", "")),
        model=str(data.get("model", "")),
        content=message.get("content") or "",
        finish_reason=map_finish_reason(choice.get("finish_reason")),
        usage=parse_usage(data.get("usage")),
    )


def parse_completion_response(data: dict) -> CompletionResponse:
    """Build a ``CompletionResponse`` from a legacy completion body."""
    choice = _first_choice(data)
    return CompletionResponse(
        id=str(data.get("id", "")),
        model=str(data.get("model", "")),
        text=choice.get("text") or "",
        finish_reason=map_finish_reason(choice.get("finish_reason")),
        usage=parse_usage(data.get("usage")),
    )


def _decode_event(raw: str, logger: logging.Logger | None, ctx: LogContext | None) -> dict | None:
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
    return data if isinstance(data, dict) else None


def chat_event_to_chunk(
    raw: str,
    logger: logging.Logger | None = None,
    ctx: LogContext | None = None,
) -> StreamChunk | None:
    """Translate one chat SSE payload; ``None`` for malformed or choiceless events."""
    data = _decode_event(raw, logger, ctx)
    if not data or not data.get("choices"):
        return None
    choice = _first_choice(data)
    delta = choice.get("delta") or {}
    return StreamChunk(
        delta=delta.get("content") or "",
        finish_reason=map_finish_reason(choice.get("finish_reason")),
    )


def completion_event_to_chunk(
    raw: str,
    logger: logging.Logger | None = None,
    ctx: LogContext | None = None,
) -> StreamChunk | None:
    """Translate one legacy completion SSE payload."""
    data = _decode_event(raw, logger, ctx)
    if not data or not data.get("choices"):
        return None
    choice = _first_choice(data)
    return StreamChunk(
        delta=choice.get("text") or "",
        finish_reason=map_finish_reason(choice.get("finish_reason")),
    )


__all__ = [
    "map_finish_reason",
    "build_chat_payload",
    "build_completion_payload",
    "parse_usage",
    "parse_chat_response",
    "parse_completion_response",
    "chat_event_to_chunk",
    "completion_event_to_chunk",
]
