"""Chat session service: history in, streamed reply out, persisted on success.

Flow for one turn
-----------------
1. Load the chat history.
2. Persist the user message (before any network call, so it survives a
   failed reply).
3. Stream the reply from the manager, yielding every chunk to the caller.
4. After the stream completes, persist the accumulated assistant text and,
   when a stored provider id and a preference repository are given, record
   the model as last used for that provider.

A failure mid-stream propagates after the chunks already delivered; no
assistant row is written. Closing the returned iterator early also skips the
assistant row and releases the HTTP response.
"""

from __future__ import annotations

from contextlib import aclosing
from typing import AsyncIterator, List, Optional

from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.manager import ProviderManager
from ..base.models import ChatCompletionRequest, Message, ProviderConfig, StreamChunk
from ..persistence.messages import MessageRepository
from ..persistence.model_preferences import ModelPreferenceRepository


class ChatSession:
    """Orchestrates one chat's turns against a ``ProviderManager``."""

    def __init__(
        self,
        manager: ProviderManager,
        messages: MessageRepository,
        preferences: Optional[ModelPreferenceRepository] = None,
    ) -> None:
        self._manager = manager
        self._messages = messages
        self._preferences = preferences
        self._logger = get_logger("lite_providers.service.chat")

    async def stream_reply(
        self,
        config: ProviderConfig,
        chat_id: str,
        user_message: str,
        model: str,
        provider_id: Optional[int] = None,
        system: Optional[str] = None,
    ) -> AsyncIterator[StreamChunk]:
        """Yield reply chunks for ``user_message`` and persist the turn."""
        history = await self._messages.get_history(chat_id)
        await self._messages.save_message(chat_id, "user", user_message, model=model, provider_id=provider_id)

        conversation: List[Message] = []
        if system:
            conversation.append(Message(role="system", content=system))
        conversation.extend(history)
        conversation.append(Message(role="user", content=user_message))
        request = ChatCompletionRequest(model=model, messages=conversation, stream=True)

        parts: List[str] = []
        async with aclosing(self._manager.create_chat_completion_stream(config, request)) as chunks:
            async for chunk in chunks:
                if chunk.delta:
                    parts.append(chunk.delta)
                yield chunk

        message_id = await self._messages.save_message(
            chat_id, "assistant", "".join(parts), model=model, provider_id=provider_id
        )
        if self._preferences is not None and provider_id is not None:
            await self._preferences.record_usage(provider_id, model)
        normalized_log_event(
            self._logger,
            "chat.persisted",
            LogContext(provider=config.type_name, model=model, extra={"chat_id": chat_id}),
            phase="finalize",
            attempt=None,
            emitted=len(parts),
            tokens=None,
            message_id=message_id,
        )


__all__ = ["ChatSession"]
