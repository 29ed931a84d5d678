"""Interface protocols split one per file."""

from .llm_provider import LLMProvider

__all__ = ["LLMProvider"]
