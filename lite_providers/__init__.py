"""lite_providers package

Uniform async client layer over several LLM vendor APIs (OpenAI-compatible,
Anthropic, OpenRouter and custom OpenAI-shaped endpoints).

Public API (re-exported):
    - Version: ``__version__``
    - Registry: :class:`ProviderManager`
    - Factory: :func:`create_provider`, :func:`validate_config`,
      :func:`supported_providers`
    - Configuration: :func:`load_provider_config`, :func:`get_provider_config`
    - Data types: ``ProviderConfig``, ``ProviderType``, ``Message``,
      ``ChatCompletionRequest``, ``CompletionRequest``, responses and
      ``StreamChunk``
    - Exceptions: :class:`ProviderError` and its subclasses, :class:`ErrorCode`
"""

from .base import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    ConfigurationError,
    ConfigValidation,
    ErrorCode,
    LLMProvider,
    Message,
    Model,
    ModelPricing,
    ProviderConfig,
    ProviderError,
    ProviderManager,
    ProviderType,
    RequestValidationError,
    StreamChunk,
    TransportError,
    UnsupportedOperationError,
    Usage,
    create_provider,
    supported_providers,
    validate_config,
)
from .config import get_provider_config, load_provider_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "CompletionRequest",
    "CompletionResponse",
    "ConfigurationError",
    "ConfigValidation",
    "ErrorCode",
    "LLMProvider",
    "Message",
    "Model",
    "ModelPricing",
    "ProviderConfig",
    "ProviderError",
    "ProviderManager",
    "ProviderType",
    "RequestValidationError",
    "StreamChunk",
    "TransportError",
    "UnsupportedOperationError",
    "Usage",
    "create_provider",
    "supported_providers",
    "validate_config",
    "get_provider_config",
    "load_provider_config",
]
