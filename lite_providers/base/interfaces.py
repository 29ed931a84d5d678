"""Provider interface public surface.

Re-exports the protocol implementations under
``lite_providers.base.interfaces_parts``.
"""

from .interfaces_parts import LLMProvider

__all__ = ["LLMProvider"]
