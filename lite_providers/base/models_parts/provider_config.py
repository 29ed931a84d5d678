"""
ProviderConfig DTO and the closed set of provider types.

`ProviderType` is the closed tagged union the factory dispatches over.
String types are normalized once at construction: any spelling that matches a
member after trimming and lowercasing (`" Custom "`) becomes that member.
Unrecognized strings are kept as supplied so that validation can report an
unsupported value instead of failing at construction.
"""
from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union


class ProviderType(str, Enum):
    """Supported provider types."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    CUSTOM = "custom"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class ProviderConfig:
    """Connection settings for one provider account.

    Attributes:
        type: Provider type (``ProviderType`` or its string value).
        api_key: Secret API key; required at adapter construction.
        base_url: Optional endpoint override; required for ``custom``.
        organization: Optional organization id (OpenAI-compatible only).
        custom_headers: Extra headers merged into every request.
    """

    type: Union[ProviderType, str]
    api_key: str
    base_url: Optional[str] = None
    organization: Optional[str] = None
    custom_headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.type, str) and not isinstance(self.type, ProviderType):
            with contextlib.suppress(ValueError):
                object.__setattr__(self, "type", ProviderType(self.type.strip().lower()))

    @property
    def type_name(self) -> str:
        """Plain string form of ``type`` for logging and cache keys."""
        return self.type.value if isinstance(self.type, ProviderType) else str(self.type or "")

    def __repr__(self) -> str:
        # Never render the secret.
        return (
            f"ProviderConfig(type={self.type_name!r}, api_key='***', "
            f"base_url={self.base_url!r}, organization={self.organization!r})"
        )


__all__ = ["ProviderType", "ProviderConfig"]
