from __future__ import annotations

from typing import AsyncIterator

import pytest

from lite_providers.base.models import StreamChunk
from lite_providers.base.streaming import accumulate_chunks


async def _chunks(*items: StreamChunk) -> AsyncIterator[StreamChunk]:
    for item in items:
        yield item


async def test_accumulate_concatenates_and_keeps_last_finish_reason():
    result = await accumulate_chunks(
        _chunks(
            StreamChunk(delta="Hel"),
            StreamChunk(delta="lo"),
            StreamChunk(delta="", finish_reason="length"),
            StreamChunk(delta="", finish_reason=None),
        )
    )
    assert result.text == "Hello"
    assert result.finish_reason == "length"
    assert result.chunks == 4


async def test_accumulate_propagates_stream_errors():
    async def _broken() -> AsyncIterator[StreamChunk]:
        yield StreamChunk(delta="partial")
        raise RuntimeError("dropped")

    with pytest.raises(RuntimeError):
        await accumulate_chunks(_broken())
