"""
StreamChunk DTO: one incremental piece of a streamed generation.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .chat_response import FinishReason


@dataclass(frozen=True)
class StreamChunk:
    """Incremental text fragment plus an optional terminal reason.

    ``delta`` may be empty, e.g. for a chunk that only carries
    ``finish_reason``.
    """

    delta: str
    finish_reason: Optional[FinishReason] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["StreamChunk"]
