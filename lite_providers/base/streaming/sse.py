"""Server-Sent Events line decoder.

Framing rule reproduced exactly: the byte stream is UTF-8 decoded
incrementally, split on ``\\n``, and only lines starting with ``"data: "``
are events. The ``[DONE]`` sentinel payload is dropped. A trailing partial
line with no terminating newline is never emitted.
"""
from __future__ import annotations

import codecs
from typing import AsyncIterable, AsyncIterator

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL


async def iter_sse_events(chunks: AsyncIterable[bytes]) -> AsyncIterator[str]:
    """Yield raw ``data:`` payload strings from an async byte stream.

    Partial lines (and partial multi-byte characters) are buffered across
    chunk boundaries, so the output does not depend on how the bytes were
    split. When the source exposes ``aclose`` it is closed when this
    generator finishes, is closed early, or fails.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    buffer = ""
    try:
        async for chunk in chunks:
            buffer += decoder.decode(chunk)
            lines = buffer.split("\n")
            buffer = lines.pop()
            for line in lines:
                if not line.startswith(SSE_DATA_PREFIX):
                    continue
                data = line[len(SSE_DATA_PREFIX):]
                if data == SSE_DONE_SENTINEL:
                    continue
                yield data
    finally:
        aclose = getattr(chunks, "aclose", None)
        if aclose is not None:
            await aclose()


__all__ = ["iter_sse_events"]
