"""OpenRouter provider adapter (OpenAI-style over HTTP).

Summary:
- Chat and legacy completion share the OpenAI-shaped flows.
- Model listing uses OpenRouter's own pricing/context metadata.

Headers:
- ``Authorization: Bearer <api_key>``
- ``HTTP-Referer`` (default empty) and ``X-Title`` (default ``"Lite"``);
  both can be overridden through the config's custom headers.
"""

from __future__ import annotations

from typing import AsyncIterator, Dict, List, Optional

import httpx

from ..base.constants import OPENROUTER_DEFAULT_REFERER, OPENROUTER_DEFAULT_TITLE
from ..base.errors import ConfigurationError
from ..base.http import ProviderTransport
from ..base.logging import get_logger
from ..base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    Model,
    ProviderConfig,
    StreamChunk,
)
from ..base.openai_style_parts import post_chat, post_completion, stream_chat, stream_completion
from ..config.defaults import OPENROUTER_DEFAULT_BASE_URL
from .get_openrouter_models import PROVIDER, fetch_models


class OpenRouterProvider:
    """Adapter for the OpenRouter routing API."""

    def __init__(self, config: ProviderConfig, client: Optional[httpx.AsyncClient] = None) -> None:
        if not config.api_key:
            raise ConfigurationError(message="API key is required", provider=PROVIDER)
        self._config = config
        self._base_url = (config.base_url or OPENROUTER_DEFAULT_BASE_URL).rstrip("/")
        self._logger = get_logger("lite_providers.openrouter")
        self._transport = ProviderTransport(
            PROVIDER,
            auth_headers=self._auth_headers(),
            custom_headers=config.custom_headers,
            client=client,
            logger=self._logger,
        )

    def _auth_headers(self) -> Dict[str, str]:
        custom = self._config.custom_headers or {}
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "HTTP-Referer": custom.get("HTTP-Referer") or OPENROUTER_DEFAULT_REFERER,
            "X-Title": custom.get("X-Title") or OPENROUTER_DEFAULT_TITLE,
        }

    def get_type(self) -> str:
        return PROVIDER

    async def get_models(self) -> List[Model]:
        return await fetch_models(self._transport, self._base_url, self._logger)

    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        return await post_chat(self._transport, self._base_url, request, self._logger)

    def create_chat_completion_stream(self, request: ChatCompletionRequest) -> AsyncIterator[StreamChunk]:
        return stream_chat(self._transport, self._base_url, request, self._logger)

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        return await post_completion(self._transport, self._base_url, request, self._logger)

    def create_completion_stream(self, request: CompletionRequest) -> AsyncIterator[StreamChunk]:
        return stream_completion(self._transport, self._base_url, request, self._logger)


__all__ = ["OpenRouterProvider"]
