"""Per-call logging context.

One :class:`LogContext` is built per provider call and passed to every event
that call emits, so ``chat.start`` and ``chat.end`` (or ``stream.start`` and
``stream.finalize``) carry identical identifying fields.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Identifying fields shared by the events of one call.

    ``kind`` distinguishes chat from legacy completion streams;
    ``response_id`` is filled in once the vendor reports one.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    kind: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "provider": self.provider,
            "model": self.model,
            "kind": self.kind,
            "response_id": self.response_id,
        }
        out.update(self.extra)
        return {k: v for k, v in out.items() if v is not None}


__all__ = ["LogContext"]
