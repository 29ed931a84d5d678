"""Anthropic model catalog.

Anthropic is served from a static catalog; listing performs no network call.
All entries are chat-only with a 200k token context window. Prices are per
one million tokens.
"""

from __future__ import annotations

from typing import List

from ..base.models import Model, ModelPricing, ProviderType

PROVIDER = ProviderType.ANTHROPIC.value
_CONTEXT_WINDOW = 200000

_CATALOG = (
    ("claude-3-5-sonnet-20241022", "Claude 3.5 Sonnet", 3, 15),
    ("claude-3-5-haiku-20241022", "Claude 3.5 Haiku", 1, 5),
    ("claude-3-opus-20240229", "Claude 3 Opus", 15, 75),
    ("claude-3-sonnet-20240229", "Claude 3 Sonnet", 3, 15),
    ("claude-3-haiku-20240307", "Claude 3 Haiku", 0.25, 1.25),
)


def catalog_models() -> List[Model]:
    """Return a fresh list of the static Claude catalog."""
    return [
        Model(
            id=model_id,
            name=name,
            provider=PROVIDER,
            context_window=_CONTEXT_WINDOW,
            supports_chat=True,
            supports_completion=False,
            pricing=ModelPricing(prompt_tokens=prompt, completion_tokens=completion),
        )
        for model_id, name, prompt, completion in _CATALOG
    ]


__all__ = ["PROVIDER", "catalog_models"]
