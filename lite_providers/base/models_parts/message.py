"""
Message DTO used across providers.

An ordered list of messages forms a conversation; order is preserved exactly
as supplied by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Tuple

Role = Literal["system", "user", "assistant"]

ROLES: Tuple[str, ...] = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    """A single chat message (``role`` + plain text ``content``)."""

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


__all__ = ["Message", "Role", "ROLES"]
