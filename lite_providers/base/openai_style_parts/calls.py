"""
Shared request flows for OpenAI-shaped endpoints.

Both the OpenAI-compatible and the OpenRouter adapters post the same bodies to
``/chat/completions`` and ``/completions`` and read the same SSE event shapes;
only their headers, base URLs and model listings differ. These helpers
implement the common flows on top of a ``ProviderTransport``.

Logging: ``chat.start``/``chat.end``/``chat.error`` and ``completion.start``/
``completion.end``/``completion.error`` for blocking calls; streams log
through :func:`~lite_providers.base.http.stream_translated`.
"""

from __future__ import annotations

import logging
import time
from typing import AsyncIterator, Callable, TypeVar

from ..errors import ProviderError
from ..http import ProviderTransport, stream_translated
from ..logging import LogContext, normalized_log_event
from ..models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    StreamChunk,
)
from .style_helpers import (
    build_chat_payload,
    build_completion_payload,
    chat_event_to_chunk,
    completion_event_to_chunk,
    parse_chat_response,
    parse_completion_response,
)

_R = TypeVar("_R", ChatCompletionResponse, CompletionResponse)


async def _post(
    transport: ProviderTransport,
    url: str,
    body: dict,
    parse: Callable[[dict], _R],
    kind: str,
    logger: logging.Logger,
    ctx: LogContext,
) -> _R:
    normalized_log_event(logger, f"{kind}.start", ctx, phase="start", attempt=None, emitted=None, tokens=None)
    t0 = time.perf_counter()
    try:
        data = await transport.send_json(url, method="POST", body=body)
    except ProviderError as exc:
        normalized_log_event(
            logger,
            f"{kind}.error",
            ctx,
            phase="start",
            attempt=None,
            error_code=exc.code.value,
            emitted=None,
            tokens=None,
            level=logging.WARNING,
            status=exc.status_code,
            error=exc.message,
        )
        raise
    result = parse(data)
    ctx.response_id = result.id or None
    normalized_log_event(
        logger,
        f"{kind}.end",
        ctx,
        phase="finalize",
        attempt=None,
        emitted=True,
        tokens=result.usage,
        latency_ms=(time.perf_counter() - t0) * 1000.0,
        finish_reason=result.finish_reason,
    )
    return result


async def post_chat(
    transport: ProviderTransport,
    base_url: str,
    request: ChatCompletionRequest,
    logger: logging.Logger,
) -> ChatCompletionResponse:
    """POST a non-streaming chat request and normalize the response."""
    ctx = LogContext(provider=transport.provider, model=request.model)
    return await _post(
        transport,
        f"{base_url}/chat/completions",
        build_chat_payload(request),
        parse_chat_response,
        "chat",
        logger,
        ctx,
    )


async def post_completion(
    transport: ProviderTransport,
    base_url: str,
    request: CompletionRequest,
    logger: logging.Logger,
) -> CompletionResponse:
    """POST a non-streaming legacy completion request."""
    ctx = LogContext(provider=transport.provider, model=request.model)
    return await _post(
        transport,
        f"{base_url}/completions",
        build_completion_payload(request),
        parse_completion_response,
        "completion",
        logger,
        ctx,
    )


def stream_chat(
    transport: ProviderTransport,
    base_url: str,
    request: ChatCompletionRequest,
    logger: logging.Logger,
) -> AsyncIterator[StreamChunk]:
    ctx = LogContext(provider=transport.provider, model=request.model, kind="chat")
    return stream_translated(
        transport,
        f"{base_url}/chat/completions",
        build_chat_payload(request, stream=True),
        chat_event_to_chunk,
        logger,
        ctx,
    )


def stream_completion(
    transport: ProviderTransport,
    base_url: str,
    request: CompletionRequest,
    logger: logging.Logger,
) -> AsyncIterator[StreamChunk]:
    ctx = LogContext(provider=transport.provider, model=request.model, kind="completion")
    return stream_translated(
        transport,
        f"{base_url}/completions",
        build_completion_payload(request, stream=True),
        completion_event_to_chunk,
        logger,
        ctx,
    )


__all__ = ["post_chat", "post_completion", "stream_chat", "stream_completion"]
