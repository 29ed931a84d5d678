"""Streaming primitives: SSE decoding and chunk accumulation."""

from .sse import iter_sse_events
from .streaming import StreamResult, accumulate_chunks

__all__ = ["iter_sse_events", "StreamResult", "accumulate_chunks"]
