"""
OpenRouter: get models

``GET {base_url}/models`` returns every routed model with a ``context_length``
and per-token prices as decimal strings. Prices are converted to per-1M-token
floats; every model supports both chat and legacy completion.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..base.constants import DEFAULT_CONTEXT_WINDOW, TOKENS_PER_PRICING_UNIT
from ..base.http import ProviderTransport
from ..base.logging import LogContext, normalized_log_event
from ..base.models import Model, ModelPricing, ProviderType

PROVIDER = ProviderType.OPENROUTER.value


def _per_million(value: Any) -> float:
    try:
        return float(value) * TOKENS_PER_PRICING_UNIT
    except (TypeError, ValueError):
        return 0.0


def _pricing(raw: Any) -> Optional[ModelPricing]:
    if not isinstance(raw, dict):
        return None
    return ModelPricing(
        prompt_tokens=_per_million(raw.get("prompt")),
        completion_tokens=_per_million(raw.get("completion")),
    )


def to_model(item: Dict[str, Any]) -> Model:
    """Normalize one OpenRouter listing entry."""
    model_id = str(item["id"])
    return Model(
        id=model_id,
        name=str(item.get("name") or model_id),
        provider=PROVIDER,
        context_window=int(item.get("context_length") or DEFAULT_CONTEXT_WINDOW),
        supports_chat=True,
        supports_completion=True,
        pricing=_pricing(item.get("pricing")),
    )


async def fetch_models(transport: ProviderTransport, base_url: str, logger: logging.Logger) -> List[Model]:
    data = await transport.send_json(f"{base_url}/models", method="GET")
    items = data.get("data") if isinstance(data, dict) else None
    models = [to_model(item) for item in items or [] if isinstance(item, dict) and item.get("id")]
    normalized_log_event(
        logger,
        "models.fetch",
        LogContext(provider=PROVIDER),
        phase="finalize",
        attempt=None,
        emitted=len(models),
        tokens=None,
    )
    return models


__all__ = ["PROVIDER", "to_model", "fetch_models"]
