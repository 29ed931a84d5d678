"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``lite_providers.base.models_parts`` to keep a stable import path.
"""

from .models_parts.chat_request import ChatCompletionRequest, CompletionRequest, SamplingParams, Stop
from .models_parts.chat_response import ChatCompletionResponse, CompletionResponse, FinishReason, Usage
from .models_parts.message import ROLES, Message, Role
from .models_parts.model_info import Model, ModelPricing
from .models_parts.provider_config import ProviderConfig, ProviderType
from .models_parts.stream_chunk import StreamChunk

__all__ = [
    "ChatCompletionRequest",
    "CompletionRequest",
    "SamplingParams",
    "Stop",
    "ChatCompletionResponse",
    "CompletionResponse",
    "FinishReason",
    "Usage",
    "Message",
    "Role",
    "ROLES",
    "Model",
    "ModelPricing",
    "ProviderConfig",
    "ProviderType",
    "StreamChunk",
]
