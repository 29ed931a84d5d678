"""
Pydantic DTOs and validators for inbound completion requests.

Purpose
-------
Validate untrusted JSON payloads (HTTP bodies, CLI input, stored drafts)
before they become the frozen request dataclasses consumed by adapters. Roles
and numeric parameter bounds are enforced here so adapters can trust their
inputs.

Failure semantics
-----------------
The DTO classes raise ``pydantic.ValidationError``. The ``parse_*`` helpers
translate that into :class:`RequestValidationError` so callers only handle the
provider error taxonomy.
"""

from __future__ import annotations

from typing import Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import RequestValidationError
from ..models import ChatCompletionRequest, CompletionRequest, Message

Role = Literal["system", "user", "assistant"]


class MessageDTO(BaseModel):
    """A chat message with a closed role set and plain text content."""

    model_config = ConfigDict(extra="forbid")

    role: Role
    content: str


class _SamplingDTO(BaseModel):
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    stop: Union[str, List[str], None] = None
    stream: bool = False

    def sampling_kwargs(self) -> dict:
        stop = tuple(self.stop) if isinstance(self.stop, list) else self.stop
        return {
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
            "stop": stop,
            "stream": self.stream,
        }


class ChatCompletionRequestDTO(_SamplingDTO):
    """Validated chat request.

    Parameters:
        model: Target model identifier (non-empty).
        messages: Ordered, non-empty list of messages.
        max_tokens: If provided, must be positive.
        temperature: If provided, within [0.0, 2.0].
        top_p: If provided, within [0.0, 1.0].
        frequency_penalty / presence_penalty: If provided, within [-2.0, 2.0].
    """

    model: str = Field(..., min_length=1)
    messages: List[MessageDTO] = Field(..., min_length=1)

    def to_request(self) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            messages=tuple(Message(role=m.role, content=m.content) for m in self.messages),
            **self.sampling_kwargs(),
        )


class CompletionRequestDTO(_SamplingDTO):
    """Validated legacy completion request."""

    model: str = Field(..., min_length=1)
    prompt: str

    def to_request(self) -> CompletionRequest:
        return CompletionRequest(model=self.model, prompt=self.prompt, **self.sampling_kwargs())


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request"


def parse_chat_request(payload: Mapping[str, Any]) -> ChatCompletionRequest:
    """Validate a JSON-like payload and return a ``ChatCompletionRequest``.

    Raises:
        RequestValidationError: when the payload violates any constraint.
    """
    try:
        dto = ChatCompletionRequestDTO.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(message=_summarize(exc), raw=exc.errors()) from exc
    return dto.to_request()


def parse_completion_request(payload: Mapping[str, Any]) -> CompletionRequest:
    """Validate a JSON-like payload and return a ``CompletionRequest``."""
    try:
        dto = CompletionRequestDTO.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(message=_summarize(exc), raw=exc.errors()) from exc
    return dto.to_request()


__all__ = [
    "Role",
    "MessageDTO",
    "ChatCompletionRequestDTO",
    "CompletionRequestDTO",
    "parse_chat_request",
    "parse_completion_request",
]
