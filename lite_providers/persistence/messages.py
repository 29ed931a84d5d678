"""Chat message repository over a :class:`RowStore`."""

from __future__ import annotations

from typing import List, Optional

from ..base.models import ROLES, Message
from .interfaces import MessageRecord, Row, RowStore


def row_to_message_record(row: Row) -> MessageRecord:
    return MessageRecord(
        id=int(row["id"]),
        chat_id=str(row["chat_id"]),
        role=str(row["role"]),
        content=str(row["content"]),
        model=row.get("model"),
        provider_id=row.get("provider_id"),
        tokens_prompt=row.get("tokens_prompt"),
        tokens_completion=row.get("tokens_completion"),
        created_at=row.get("created_at"),
    )


class MessageRepository:
    """Read and append chat messages."""

    def __init__(self, store: RowStore) -> None:
        self._store = store

    async def get_records(self, chat_id: str) -> List[MessageRecord]:
        rows = await self._store.get_all(
            "SELECT * FROM messages WHERE chat_id = ? ORDER BY created_at ASC, id ASC", (chat_id,)
        )
        return [row_to_message_record(r) for r in rows]

    async def get_history(self, chat_id: str) -> List[Message]:
        """Conversation history as ``Message`` DTOs, oldest first."""
        return [Message(role=r.role, content=r.content) for r in await self.get_records(chat_id)]  # type: ignore[arg-type]

    async def save_message(
        self,
        chat_id: str,
        role: str,
        content: str,
        model: Optional[str] = None,
        provider_id: Optional[int] = None,
        tokens_prompt: Optional[int] = None,
        tokens_completion: Optional[int] = None,
    ) -> int:
        """Append one message and return its id."""
        if role not in ROLES:
            raise ValueError(f"Invalid message role: {role}")
        row = await self._store.get(
            "INSERT INTO messages "
            "(chat_id, role, content, model, provider_id, tokens_prompt, tokens_completion) "
            "VALUES (?, ?, ?, ?, ?, ?, ?) RETURNING id",
            (chat_id, role, content, model, provider_id, tokens_prompt, tokens_completion),
        )
        if row is None:
            raise RuntimeError("INSERT into messages returned no id")
        return int(row["id"])


__all__ = ["row_to_message_record", "MessageRepository"]
