"""Translated SSE streams.

Couples :meth:`ProviderTransport.stream_events` with a per-vendor event
translator and the ``stream.*`` logging events. Every adapter's streaming
methods go through :func:`stream_translated`.
"""

from __future__ import annotations

import logging
from contextlib import aclosing
from typing import AsyncIterator, Callable, Optional

from ..errors import ProviderError
from ..logging import LogContext, normalized_log_event
from ..models import StreamChunk
from .transport import ProviderTransport

EventTranslator = Callable[[str, Optional[logging.Logger], Optional[LogContext]], Optional[StreamChunk]]


async def stream_translated(
    transport: ProviderTransport,
    url: str,
    body: dict,
    translate: EventTranslator,
    logger: logging.Logger,
    ctx: LogContext,
) -> AsyncIterator[StreamChunk]:
    """Open an SSE stream and yield each event translated to a ``StreamChunk``.

    Events the translator rejects (``None``) are skipped. Closing this
    generator early closes the underlying response. Errors propagate after any
    chunks already yielded.
    """
    normalized_log_event(logger, "stream.start", ctx, phase="start", attempt=None, emitted=None, tokens=None)
    emitted = 0
    try:
        async with aclosing(transport.stream_events(url, method="POST", body=body)) as events:
            async for raw in events:
                chunk = translate(raw, logger, ctx)
                if chunk is None:
                    continue
                emitted += 1
                yield chunk
    except ProviderError as exc:
        normalized_log_event(
            logger,
            "stream.error",
            ctx,
            phase="finalize",
            attempt=None,
            error_code=exc.code.value,
            emitted=emitted,
            tokens=None,
            level=logging.WARNING,
            status=exc.status_code,
            error=exc.message,
        )
        raise
    normalized_log_event(
        logger,
        "stream.finalize",
        ctx,
        phase="finalize",
        attempt=None,
        emitted=emitted,
        tokens=None,
    )


__all__ = ["EventTranslator", "stream_translated"]
