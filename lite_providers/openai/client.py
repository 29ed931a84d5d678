"""OpenAI-compatible provider adapter over plain HTTP.

Serves both the ``openai`` and ``custom`` provider types. A ``custom`` config
must carry a ``base_url``; everything else (auth scheme, payloads, SSE event
shapes) is identical.

Headers:
- ``Authorization: Bearer <api_key>``
- ``OpenAI-Organization`` when an organization id is configured
"""

from __future__ import annotations

from typing import AsyncIterator, Dict, List, Optional

import httpx

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
    ProviderType,
    StreamChunk,
)
from ..base.openai_style_parts import post_chat, post_completion, stream_chat, stream_completion
from ..config.defaults import OPENAI_DEFAULT_BASE_URL
from .get_openai_models import fetch_models

__all__ = ["OpenAIProvider"]


class OpenAIProvider:
    """Adapter for OpenAI and any OpenAI-shaped endpoint.

    Raises:
        ConfigurationError: at construction when the API key is empty, or
            when a ``custom`` config has no base URL.
    """

    def __init__(self, config: ProviderConfig, client: Optional[httpx.AsyncClient] = None) -> None:
        if not config.api_key:
            raise ConfigurationError(message="API key is required", provider=config.type_name)
        if config.type is ProviderType.CUSTOM and not config.base_url:
            raise ConfigurationError(
                message="Base URL is required for custom providers", provider=config.type_name
            )
        self._config = config
        self._type = config.type_name or ProviderType.OPENAI.value
        self._base_url = (config.base_url or OPENAI_DEFAULT_BASE_URL).rstrip("/")
        self._logger = get_logger(f"lite_providers.{self._type}")
        self._transport = ProviderTransport(
            self._type,
            auth_headers=self._auth_headers(),
            custom_headers=config.custom_headers,
            client=client,
            logger=self._logger,
        )

    def _auth_headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self._config.api_key}"}
        if self._config.organization:
            headers["OpenAI-Organization"] = self._config.organization
        return headers

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_type(self) -> str:
        return self._type

    async def get_models(self) -> List[Model]:
        return await fetch_models(self._transport, self._base_url, self._type, self._logger)

    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        return await post_chat(self._transport, self._base_url, request, self._logger)

    def create_chat_completion_stream(self, request: ChatCompletionRequest) -> AsyncIterator[StreamChunk]:
        return stream_chat(self._transport, self._base_url, request, self._logger)

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        return await post_completion(self._transport, self._base_url, request, self._logger)

    def create_completion_stream(self, request: CompletionRequest) -> AsyncIterator[StreamChunk]:
        return stream_completion(self._transport, self._base_url, request, self._logger)
