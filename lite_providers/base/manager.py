"""Provider registry: the single entry point callers use.

``ProviderManager`` caches adapter instances per connection identity and
caches model listings with a fixed TTL. It is explicitly constructed (there is
no module-level singleton) and takes its factory and clock as constructor
arguments so tests can substitute both.

Cache key
---------
``f"{type}:{base_url or 'default'}:{api_key[:8]}"``. Two configs sharing type,
base URL and the first eight key characters share one adapter and one model
cache entry; that collision is accepted.

Concurrency
-----------
Plain dicts, no locks. Two concurrent misses for the same key both fetch and
the later write wins.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import AsyncIterator, Callable, Dict, List, Optional

from .constants import CACHE_KEY_SECRET_PREFIX, MODEL_CACHE_TTL_SECONDS
from .factory import create_provider
from .interfaces import LLMProvider
from .logging import LogContext, get_logger, normalized_log_event
from .models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    Model,
    ProviderConfig,
    StreamChunk,
)

ProviderBuilder = Callable[[ProviderConfig], LLMProvider]
Clock = Callable[[], float]


def provider_cache_key(config: ProviderConfig) -> str:
    """Derive the registry key for a config; never contains the full API key."""
    secret = (config.api_key or "")[:CACHE_KEY_SECRET_PREFIX]
    return f"{config.type_name}:{config.base_url or 'default'}:{secret}"


@dataclass
class _CachedModels:
    models: Optional[List[Model]]
    expires_at: Optional[float]

    def is_valid(self, now: float) -> bool:
        return self.models is not None and self.expires_at is not None and now < self.expires_at


class ProviderManager:
    """Cache adapters per config and model lists per config with a TTL.

    Parameters:
        factory: Builds an adapter from a config (defaults to
            :func:`create_provider`).
        clock: Returns the current time in seconds (defaults to ``time.time``).
        ttl_seconds: Model list lifetime.
    """

    def __init__(
        self,
        factory: ProviderBuilder = create_provider,
        clock: Clock = time.time,
        ttl_seconds: float = MODEL_CACHE_TTL_SECONDS,
    ) -> None:
        self._factory = factory
        self._clock = clock
        self._ttl = ttl_seconds
        self._providers: Dict[str, LLMProvider] = {}
        self._models: Dict[str, _CachedModels] = {}
        self._logger = get_logger("lite_providers.manager")

    def get_provider(self, config: ProviderConfig) -> LLMProvider:
        """Return the cached adapter for ``config``, creating it on first use.

        Raises:
            ConfigurationError: propagated from the factory.
        """
        key = provider_cache_key(config)
        provider = self._providers.get(key)
        if provider is None:
            provider = self._factory(config)
            self._providers[key] = provider
        return provider

    async def get_models(self, config: ProviderConfig, use_cache: bool = True) -> List[Model]:
        """List models, serving a fresh cached copy when allowed.

        With ``use_cache=False`` the cache is bypassed for reading but the
        fetched list still refreshes it.
        """
        key = provider_cache_key(config)
        ctx = LogContext(provider=config.type_name)
        if use_cache:
            cached = self._models.get(key)
            if cached is not None and cached.is_valid(self._clock()):
                normalized_log_event(
                    self._logger,
                    "models.cache_hit",
                    ctx,
                    phase="cache",
                    attempt=None,
                    emitted=len(cached.models or []),
                    tokens=None,
                )
                return list(cached.models or [])
        models = await self.get_provider(config).get_models()
        self._models[key] = _CachedModels(models=list(models), expires_at=self._clock() + self._ttl)
        return list(models)

    async def create_chat_completion(
        self, config: ProviderConfig, request: ChatCompletionRequest
    ) -> ChatCompletionResponse:
        return await self.get_provider(config).create_chat_completion(request)

    def create_chat_completion_stream(
        self, config: ProviderConfig, request: ChatCompletionRequest
    ) -> AsyncIterator[StreamChunk]:
        return self.get_provider(config).create_chat_completion_stream(request)

    async def create_completion(self, config: ProviderConfig, request: CompletionRequest) -> CompletionResponse:
        return await self.get_provider(config).create_completion(request)

    def create_completion_stream(
        self, config: ProviderConfig, request: CompletionRequest
    ) -> AsyncIterator[StreamChunk]:
        return self.get_provider(config).create_completion_stream(request)

    def clear_cache(self) -> None:
        """Drop every cached model list; adapters stay cached."""
        self._models.clear()

    def clear_provider_cache(self, config: ProviderConfig) -> None:
        """Drop the cached model list for one config; the adapter stays."""
        self._models.pop(provider_cache_key(config), None)

    def remove_provider(self, config: ProviderConfig) -> None:
        """Drop both the adapter and the model list for one config."""
        key = provider_cache_key(config)
        self._providers.pop(key, None)
        self._models.pop(key, None)


__all__ = ["ProviderManager", "provider_cache_key"]
