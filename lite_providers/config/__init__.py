"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, base URLs).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``LITE_PROVIDERS_CONFIG_FILE``
    3. Environment variables (e.g. OPENAI_MODEL, OPENAI_API_KEY)
    4. In-code overrides passed to the helper (``None`` values ignored)
* Provide single call sites: ``get_provider_config`` for the merged mapping and
  ``load_provider_config`` for an immutable ``ProviderConfig``.

External Config File (Optional)
-------------------------------
JSON is attempted first, then YAML. Structure example:

```
openai:
  model: gpt-4o-mini
openrouter:
  base_url: https://openrouter.ai/api/v1
  custom_headers:
    X-Title: My App
```

A ``.env`` file (path from ``LITE_PROVIDERS_DOTENV_FILE``, default ``.env``)
is read once; it fills unset variables and replaces placeholder values only.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..base.errors import ConfigurationError
from ..base.models import ProviderConfig, ProviderType
from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_MODEL,
)
from .env import env_overrides, is_placeholder

CONFIG_FILE_ENV = "LITE_PROVIDERS_CONFIG_FILE"
DOTENV_FILE_ENV = "LITE_PROVIDERS_DOTENV_FILE"

# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPENAI_DEFAULT_BASE_URL},
    "anthropic": {"model": ANTHROPIC_DEFAULT_MODEL, "base_url": ANTHROPIC_DEFAULT_BASE_URL},
    "openrouter": {"model": OPENROUTER_DEFAULT_MODEL, "base_url": OPENROUTER_DEFAULT_BASE_URL},
    "custom": {},
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse KEY=VALUE lines from the dotenv file, once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                os.environ[k] = v


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(message=f"Invalid config file {path}: {exc}", raw=exc) from exc
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget cached file/dotenv state so the next lookup re-reads them."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def _coerce_headers(value: Any) -> Dict[str, str]:
    if value is None or value == "":
        return {}
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(message="custom_headers must be a JSON object", raw=exc) from exc
    if not isinstance(value, Mapping):
        raise ConfigurationError(message="custom_headers must be a JSON object")
    return {str(k): str(v) for k, v in value.items()}


def load_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> ProviderConfig:
    """Build an immutable ``ProviderConfig`` from the merged sources.

    Missing keys are not rejected here; adapter construction (or
    ``validate_config``) reports them.
    """
    cfg = get_provider_config(provider, overrides)
    name = (provider or "").lower().strip()
    try:
        ptype: ProviderType | str = ProviderType(name)
    except ValueError:
        ptype = name
    return ProviderConfig(
        type=ptype,
        api_key=str(cfg.get("api_key") or ""),
        base_url=cfg.get("base_url") or None,
        organization=cfg.get("organization") or None,
        custom_headers=_coerce_headers(cfg.get("custom_headers")),
    )


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "DEFAULTS",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "get_provider_config",
    "load_provider_config",
    "get_model",
    "reset_config_cache",
]
