"""LLMProvider Protocol (single-class module).

Defines the uniform contract every provider adapter satisfies.
"""

from __future__ import annotations

from typing import AsyncIterator, List, Protocol, runtime_checkable

from ..models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    Model,
    StreamChunk,
)


@runtime_checkable
class LLMProvider(Protocol):
    """Uniform interface for LLM vendor adapters.

    Implementations map request DTOs to vendor payloads and normalize vendor
    responses, stream events and errors; vendor JSON never leaks upstream.
    Failures raise subclasses of ``ProviderError``.
    """

    def get_type(self) -> str:
        """Provider type this adapter was configured as (e.g. ``"openai"``)."""
        ...

    async def get_models(self) -> List[Model]:
        """List models available to this account."""
        ...

    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Execute a single blocking chat completion."""
        ...

    def create_chat_completion_stream(self, request: ChatCompletionRequest) -> AsyncIterator[StreamChunk]:
        """Return an async iterator of incremental chat chunks.

        Closing the iterator early releases the underlying HTTP response.
        """
        ...

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Execute a legacy text completion."""
        ...

    def create_completion_stream(self, request: CompletionRequest) -> AsyncIterator[StreamChunk]:
        """Return an async iterator of incremental legacy completion chunks."""
        ...


__all__ = ["LLMProvider"]
