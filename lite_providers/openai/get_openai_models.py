"""
OpenAI models fetcher.

Lists models via ``GET {base_url}/models``, keeps ids containing ``gpt`` and
enriches each from a static table of known model families. Lookup order is
exact id, then the longest known prefix (so ``gpt-4o-mini-2024-07-18`` maps to
``gpt-4o-mini`` rather than ``gpt-4``), then a default of 4096 tokens with no
pricing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, NamedTuple, Optional

from ..base.constants import DEFAULT_CONTEXT_WINDOW
from ..base.http import ProviderTransport
from ..base.logging import LogContext, normalized_log_event
from ..base.models import Model, ModelPricing


class KnownModel(NamedTuple):
    name: str
    context_window: int
    pricing: ModelPricing


KNOWN_MODELS: Dict[str, KnownModel] = {
    "gpt-4": KnownModel("GPT-4", 8192, ModelPricing(30, 60)),
    "gpt-4-turbo": KnownModel("GPT-4 Turbo", 128000, ModelPricing(10, 30)),
    "gpt-4o": KnownModel("GPT-4o", 128000, ModelPricing(5, 15)),
    "gpt-4o-mini": KnownModel("GPT-4o Mini", 128000, ModelPricing(0.15, 0.6)),
    "gpt-3.5-turbo": KnownModel("GPT-3.5 Turbo", 16385, ModelPricing(0.5, 1.5)),
}


def lookup_known_model(model_id: str) -> Optional[KnownModel]:
    """Return table info by exact id, else by longest matching prefix."""
    if model_id in KNOWN_MODELS:
        return KNOWN_MODELS[model_id]
    matches = [k for k in KNOWN_MODELS if model_id.startswith(k)]
    if not matches:
        return None
    return KNOWN_MODELS[max(matches, key=len)]


def to_model(model_id: str, provider: str) -> Model:
    info = lookup_known_model(model_id)
    return Model(
        id=model_id,
        name=info.name if info else model_id,
        provider=provider,
        context_window=info.context_window if info else DEFAULT_CONTEXT_WINDOW,
        supports_chat=True,
        supports_completion="gpt-3.5" in model_id,
        pricing=info.pricing if info else None,
    )


def _model_ids(data: Any) -> List[str]:
    items = data.get("data") if isinstance(data, dict) else None
    ids: List[str] = []
    for item in items or []:
        if isinstance(item, dict) and isinstance(item.get("id"), str):
            ids.append(item["id"])
    return ids


async def fetch_models(
    transport: ProviderTransport,
    base_url: str,
    provider: str,
    logger: logging.Logger,
) -> List[Model]:
    """Fetch and normalize the model listing for an OpenAI-compatible endpoint."""
    data = await transport.send_json(f"{base_url}/models", method="GET")
    models = [to_model(mid, provider) for mid in _model_ids(data) if "gpt" in mid]
    normalized_log_event(
        logger,
        "models.fetch",
        LogContext(provider=provider),
        phase="finalize",
        attempt=None,
        emitted=len(models),
        tokens=None,
    )
    return models


__all__ = ["KNOWN_MODELS", "KnownModel", "lookup_known_model", "to_model", "fetch_models"]
