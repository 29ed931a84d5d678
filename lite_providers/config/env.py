"""lite_providers.config.env
=========================

Mapping from provider type to environment variable names, plus small lookup
helpers.

Naming convention: ``<TYPE>_API_KEY``, ``<TYPE>_BASE_URL``,
``<TYPE>_ORGANIZATION`` and ``<TYPE>_MODEL`` (e.g. ``OPENROUTER_API_KEY``).
Helpers never raise on unknown providers or unset variables; callers decide
how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "organization": "ORGANIZATION",
    "model": "MODEL",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the string looks like a placeholder/test value.

    Heuristics (case-insensitive, surrounding spaces ignored): contains
    'placeholder', 'changeme' or 'example', or starts with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def env_var_name(provider: str, field: str) -> Optional[str]:
    """Return the env var name for a provider field, e.g. ``OPENAI_API_KEY``."""
    suffix = ENV_FIELD_MAP.get(field)
    name = (provider or "").strip().upper()
    if not suffix or not name:
        return None
    return f"{name}_{suffix}"


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key from the process environment.

    Returns:
        ``(value, env_var_used)``; ``(None, None)`` when unset or empty.
    """
    name = env_var_name(provider, "api_key")
    if name and (val := os.environ.get(name)):
        return val, name
    return None, None


def env_overrides(provider: str) -> Dict[str, str]:
    """Collect every set ``<TYPE>_*`` variable for the provider."""
    out: Dict[str, str] = {}
    for field in ENV_FIELD_MAP:
        name = env_var_name(provider, field)
        if name is None:
            continue
        val = os.getenv(name)
        if val is not None:
            out[field] = val
    return out


__all__ = [
    "ENV_FIELD_MAP",
    "is_placeholder",
    "env_var_name",
    "resolve_provider_key",
    "env_overrides",
]
