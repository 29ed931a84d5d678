"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings and default numbers.
Wire-level values here are reproduced exactly for vendor compatibility.

# pragma: allowlist secret
"""
from __future__ import annotations

# SSE framing
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"

# Anthropic wire constants
ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096

# OpenRouter informational headers
OPENROUTER_DEFAULT_REFERER = ""
OPENROUTER_DEFAULT_TITLE = "Lite"

# Context window assumed for unknown OpenAI-compatible models
DEFAULT_CONTEXT_WINDOW = 4096

# OpenRouter publishes prices per token; models carry prices per 1M tokens
TOKENS_PER_PRICING_UNIT = 1_000_000

# Model list cache lifetime (seconds)
MODEL_CACHE_TTL_SECONDS = 3600

# Number of API key characters included in registry cache keys
CACHE_KEY_SECRET_PREFIX = 8

__all__ = [
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "ANTHROPIC_VERSION",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "OPENROUTER_DEFAULT_REFERER",
    "OPENROUTER_DEFAULT_TITLE",
    "DEFAULT_CONTEXT_WINDOW",
    "TOKENS_PER_PRICING_UNIT",
    "MODEL_CACHE_TTL_SECONDS",
    "CACHE_KEY_SECRET_PREFIX",
]
