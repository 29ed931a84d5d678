"""Provider Factory utilities.

Purpose
-------
Create adapter instances implementing :class:`LLMProvider` from a
``ProviderConfig``. The mapping is closed over :class:`ProviderType`: every
member has exactly one entry, and ``custom`` reuses the OpenAI-compatible
adapter. Adapters are imported lazily with ``importlib`` so importing the
factory never pulls in every vendor module.

Failure semantics
-----------------
- Unknown type: :class:`ConfigurationError` ("Unsupported provider type: X").
- Adapter constructor errors (missing key, missing custom base URL) are
  ``ConfigurationError`` and propagate unchanged.
- :func:`validate_config` never raises; it collects messages instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import import_module
from typing import Dict, List, Optional, Tuple

import httpx

from .errors import ConfigurationError
from .interfaces import LLMProvider
from .logging import LogContext, get_logger, log_event
from .models import ProviderConfig, ProviderType

_logger = get_logger("lite_providers.factory")


@dataclass(frozen=True)
class ConfigValidation:
    """Result of :func:`validate_config`."""

    valid: bool
    errors: List[str] = field(default_factory=list)


class ProviderFactory:
    """Create provider adapters keyed by :class:`ProviderType`."""

    # Closed mapping from provider type to (module path, class name)
    _PROVIDERS: Dict[ProviderType, Tuple[str, str]] = {
        ProviderType.OPENAI: ("lite_providers.openai.client", "OpenAIProvider"),
        ProviderType.ANTHROPIC: ("lite_providers.anthropic.client", "AnthropicProvider"),
        ProviderType.OPENROUTER: ("lite_providers.openrouter.client", "OpenRouterProvider"),
        ProviderType.CUSTOM: ("lite_providers.openai.client", "OpenAIProvider"),
    }

    @staticmethod
    def _resolve_type(value: object) -> Optional[ProviderType]:
        if isinstance(value, ProviderType):
            return value
        try:
            return ProviderType(str(value).lower().strip())
        except ValueError:
            return None

    @classmethod
    def create(cls, config: ProviderConfig, client: Optional[httpx.AsyncClient] = None) -> LLMProvider:
        """Create a provider adapter instance.

        Parameters
        ----------
        config:
            Provider configuration; ``type`` selects the adapter.
        client:
            Optional ``httpx.AsyncClient`` handed to the adapter (tests inject
            clients backed by ``httpx.MockTransport``).

        Raises
        ------
        ConfigurationError
            If the type is unsupported or the adapter rejects the config.
        """
        ptype = cls._resolve_type(config.type)
        if ptype is None:
            raise ConfigurationError(
                message=f"Unsupported provider type: {config.type_name}",
                provider=config.type_name or "unknown",
            )
        module_path, class_name = cls._PROVIDERS[ptype]
        klass = getattr(import_module(module_path), class_name)
        provider = klass(config, client=client)
        log_event(
            _logger,
            "provider.create",
            LogContext(provider=ptype.value),
            adapter=class_name,
            base_url=config.base_url,
        )
        return provider

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported provider types in deterministic order."""
        return tuple(t.value for t in cls._PROVIDERS)


def create_provider(config: ProviderConfig, client: Optional[httpx.AsyncClient] = None) -> LLMProvider:
    """Module-level helper delegating to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(config, client=client)


def supported_providers() -> Tuple[str, ...]:
    return ProviderFactory.supported()


def validate_config(config: ProviderConfig) -> ConfigValidation:
    """Check a config without constructing an adapter.

    Reports, in order: missing type, unsupported type, missing API key and
    missing base URL for ``custom``. Never raises.
    """
    errors: List[str] = []
    type_name = config.type_name
    ptype = ProviderFactory._resolve_type(config.type) if type_name else None
    if not type_name:
        errors.append("Provider type is required")
    elif ptype is None:
        errors.append(f"Unsupported provider type: {type_name}")
    if not config.api_key:
        errors.append("API key is required")
    if ptype is ProviderType.CUSTOM and not config.base_url:
        errors.append("Base URL is required for custom providers")
    return ConfigValidation(valid=not errors, errors=errors)


__all__ = [
    "ConfigValidation",
    "ProviderFactory",
    "create_provider",
    "supported_providers",
    "validate_config",
]
