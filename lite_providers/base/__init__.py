"""Provider-agnostic core: models, errors, transport, factory and registry."""

from .errors import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    RequestValidationError,
    TransportError,
    UnsupportedOperationError,
)
from .factory import ConfigValidation, ProviderFactory, create_provider, supported_providers, validate_config
from .interfaces import LLMProvider
from .manager import ProviderManager, provider_cache_key
from .models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CompletionRequest,
    CompletionResponse,
    Message,
    Model,
    ModelPricing,
    ProviderConfig,
    ProviderType,
    StreamChunk,
    Usage,
)

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "ProviderError",
    "RequestValidationError",
    "TransportError",
    "UnsupportedOperationError",
    "ConfigValidation",
    "ProviderFactory",
    "create_provider",
    "supported_providers",
    "validate_config",
    "LLMProvider",
    "ProviderManager",
    "provider_cache_key",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "CompletionRequest",
    "CompletionResponse",
    "Message",
    "Model",
    "ModelPricing",
    "ProviderConfig",
    "ProviderType",
    "StreamChunk",
    "Usage",
]
