"""
Model DTO for provider model listings.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelPricing:
    """Prices in currency units per one million tokens."""

    prompt_tokens: float
    completion_tokens: float


@dataclass(frozen=True)
class Model:
    """A single model listing entry.

    Attributes:
        id: Vendor model identifier.
        name: Human-friendly display name.
        provider: Provider type owning this model.
        context_window: Maximum context size in tokens.
        supports_chat: Usable with chat completion calls.
        supports_completion: Usable with legacy text completion calls.
        pricing: Optional per-1M-token pricing.
    """

    id: str
    name: str
    provider: str
    context_window: int
    supports_chat: bool = True
    supports_completion: bool = False
    pricing: Optional[ModelPricing] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Model", "ModelPricing"]
