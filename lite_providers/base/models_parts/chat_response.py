"""
Response DTOs for chat and legacy completion calls.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Optional

FinishReason = Literal["stop", "length", "content_filter", "tool_calls"]


@dataclass(frozen=True)
class Usage:
    """Vendor-reported token usage, passed through unchanged."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ChatCompletionResponse:
    id: str
    model: str
    content: str
    finish_reason: Optional[FinishReason] = None
    usage: Optional[Usage] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CompletionResponse:
    id: str
    model: str
    text: str
    finish_reason: Optional[FinishReason] = None
    usage: Optional[Usage] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["FinishReason", "Usage", "ChatCompletionResponse", "CompletionResponse"]
