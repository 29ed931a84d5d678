"""AnthropicProvider adapter.

Talks to the Anthropic Messages API (``POST /messages``) over plain HTTP.

Key behaviors:
* Auth via ``x-api-key`` plus the pinned ``anthropic-version`` header.
* System messages are lifted into the top-level ``system`` field.
* Model listing comes from a static catalog (no network).
* Legacy text completion is not offered by the vendor: both the blocking and
  the streaming variant raise ``UnsupportedOperationError`` before any I/O.
"""

from __future__ import annotations

import time
from typing import AsyncIterator, Dict, List, Optional

import httpx

from ..base.constants import ANTHROPIC_VERSION
from ..base.errors import ConfigurationError, ProviderError, UnsupportedOperationError
from ..base.http import ProviderTransport, stream_translated
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    Model,
    ProviderConfig,
    StreamChunk,
)
from ..config.defaults import ANTHROPIC_DEFAULT_BASE_URL
from .get_anthropic_models import PROVIDER, catalog_models
from .helpers import build_messages_payload, event_to_chunk, parse_messages_response

_UNSUPPORTED_COMPLETION = "Text completions are not supported by Anthropic. Use chat completions instead."


class AnthropicProvider:
    """Adapter for the Anthropic Messages API supporting chat and streaming."""

    def __init__(self, config: ProviderConfig, client: Optional[httpx.AsyncClient] = None) -> None:
        if not config.api_key:
            raise ConfigurationError(message="API key is required", provider=PROVIDER)
        self._config = config
        self._base_url = (config.base_url or ANTHROPIC_DEFAULT_BASE_URL).rstrip("/")
        self._logger = get_logger("lite_providers.anthropic")
        self._transport = ProviderTransport(
            PROVIDER,
            auth_headers=self._auth_headers(),
            custom_headers=config.custom_headers,
            client=client,
            logger=self._logger,
        )

    def _auth_headers(self) -> Dict[str, str]:
        return {"x-api-key": self._config.api_key, "anthropic-version": ANTHROPIC_VERSION}

    def get_type(self) -> str:
        return PROVIDER

    async def get_models(self) -> List[Model]:
        return catalog_models()

    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        payload = build_messages_payload(request)
        ctx = LogContext(provider=PROVIDER, model=request.model)
        normalized_log_event(self._logger, "chat.start", ctx, phase="start", attempt=None, emitted=None, tokens=None)
        t0 = time.perf_counter()
        try:
            data = await self._transport.send_json(f"{self._base_url}/messages", method="POST", body=payload)
        except ProviderError as exc:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="start",
                attempt=None,
                error_code=exc.code.value,
                emitted=None,
                tokens=None,
                status=exc.status_code,
                error=exc.message,
            )
            raise
        result = parse_messages_response(data)
        ctx.response_id = result.id or None
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            attempt=None,
            emitted=True,
            tokens=result.usage,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            finish_reason=result.finish_reason,
        )
        return result

    def create_chat_completion_stream(self, request: ChatCompletionRequest) -> AsyncIterator[StreamChunk]:
        # Built eagerly so invalid roles fail before a stream is opened.
        payload = build_messages_payload(request, stream=True)
        ctx = LogContext(provider=PROVIDER, model=request.model, kind="chat")
        return stream_translated(
            self._transport,
            f"{self._base_url}/messages",
            payload,
            event_to_chunk,
            self._logger,
            ctx,
        )

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        raise UnsupportedOperationError(message=_UNSUPPORTED_COMPLETION, provider=PROVIDER)

    def create_completion_stream(self, request: CompletionRequest) -> AsyncIterator[StreamChunk]:
        raise UnsupportedOperationError(message=_UNSUPPORTED_COMPLETION, provider=PROVIDER)


__all__ = ["AnthropicProvider"]
