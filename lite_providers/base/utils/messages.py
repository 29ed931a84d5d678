"""Message helpers shared across providers.

Helpers here are side-effect free and operate on provider-agnostic DTOs only.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..models import Message


def split_system_messages(messages: Iterable[Message]) -> Tuple[Optional[str], List[Message]]:
    """Separate system messages from the conversation.

    Returns ``(system_text, rest)`` where ``system_text`` joins every system
    message's content with a blank line (``None`` when there are none) and
    ``rest`` keeps the remaining messages in their original order.
    """
    system_parts: List[str] = []
    rest: List[Message] = []
    for m in messages:
        if m.role == "system":
            system_parts.append(m.content)
        else:
            rest.append(m)
    return ("\n\n".join(system_parts) if system_parts else None), rest


__all__ = ["split_system_messages"]
