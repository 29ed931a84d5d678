"""
Request DTOs for chat and legacy text completion calls.

Sampling parameters left as ``None`` are omitted from vendor payloads.
``stop`` accepts a single string or a sequence of strings. All fields are
keyword-only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .message import Message

Stop = Union[str, Sequence[str], None]


@dataclass(frozen=True, kw_only=True)
class SamplingParams:
    """Optional generation parameters shared by both request kinds."""

    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    stop: Stop = None
    stream: bool = False


@dataclass(frozen=True, kw_only=True)
class ChatCompletionRequest(SamplingParams):
    """Chat request: a model id and an ordered message sequence."""

    model: str
    messages: Tuple[Message, ...]

    def __post_init__(self) -> None:
        # Freeze list input so the request cannot change after construction.
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))


@dataclass(frozen=True, kw_only=True)
class CompletionRequest(SamplingParams):
    """Legacy text completion request: a model id and a single prompt."""

    model: str
    prompt: str


__all__ = ["SamplingParams", "ChatCompletionRequest", "CompletionRequest", "Stop"]
