"""Streaming helpers that operate on normalized ``StreamChunk`` sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterable, List, Optional

from ..models import FinishReason, StreamChunk


@dataclass(frozen=True)
class StreamResult:
    """Outcome of a fully consumed stream."""

    text: str
    finish_reason: Optional[FinishReason]
    chunks: int


async def accumulate_chunks(chunks: AsyncIterable[StreamChunk]) -> StreamResult:
    """Consume a chunk stream and fold it into concatenated text.

    The last non-null ``finish_reason`` wins. Errors raised by the stream
    propagate unchanged; nothing partial is returned in that case.
    """
    parts: List[str] = []
    finish: Optional[FinishReason] = None
    count = 0
    async for chunk in chunks:
        count += 1
        if chunk.delta:
            parts.append(chunk.delta)
        if chunk.finish_reason:
            finish = chunk.finish_reason
    return StreamResult(text="".join(parts), finish_reason=finish, chunks=count)


__all__ = ["StreamResult", "accumulate_chunks"]
