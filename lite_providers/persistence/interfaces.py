"""Row-store protocol and stored-record DTOs for the persistence layer.

The relational backend itself is not part of this package. Repositories talk
to it only through :class:`RowStore`, three coroutines taking SQL text with
``?`` placeholders and a parameter sequence. Rows are mappings keyed by column
name.

Failure semantics: backend exceptions propagate unchanged; repositories add no
translation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from ..base.models import ProviderConfig

Row = Mapping[str, Any]


@runtime_checkable
class RowStore(Protocol):
    """Minimal async row-level database contract."""

    async def get(self, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
        """Return the first row (or ``None``)."""
        ...

    async def get_all(self, sql: str, params: Sequence[Any] = ()) -> List[Row]:
        """Return every row."""
        ...

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> None:
        """Run a statement that returns no rows."""
        ...


@dataclass(frozen=True)
class StoredProviderConfig:
    """A persisted provider config plus its row identity."""

    id: int
    name: str
    config: ProviderConfig
    is_default: bool = False


@dataclass(frozen=True)
class MessageRecord:
    """A persisted chat message row."""

    id: int
    chat_id: str
    role: str
    content: str
    model: Optional[str] = None
    provider_id: Optional[int] = None
    tokens_prompt: Optional[int] = None
    tokens_completion: Optional[int] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class ModelPreference:
    """Per-provider model usage: favorite flag and last-used timestamp."""

    id: int
    provider_id: int
    model_id: str
    model_name: str
    is_favorite: bool = False
    last_used: Optional[str] = None


__all__ = ["Row", "RowStore", "StoredProviderConfig", "MessageRecord", "ModelPreference"]
