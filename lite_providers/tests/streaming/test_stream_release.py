"""Resource release for abandoned and failed streams.

The HTTP response behind a stream must be closed when the consumer stops
early (``aclose``), when the stream ends, and when it fails mid-way.
"""
from __future__ import annotations

from contextlib import aclosing

import httpx
import pytest

from lite_providers.base.errors import ErrorCode, TransportError
from lite_providers.base.models import ChatCompletionRequest, Message, ProviderConfig, ProviderType
from lite_providers.openai import OpenAIProvider


def _request() -> ChatCompletionRequest:
    return ChatCompletionRequest(model="gpt-4o", messages=[Message(role="user", content="hi")])


def _delta(text: str) -> str:
    return '{"choices": [{"delta": {"content": "%s"}, "finish_reason": null}]}' % text


async def test_abandoned_stream_closes_response(make_client, tracking_stream, sse):
    stream = tracking_stream([sse(_delta("a"), _delta("b"), _delta("c"))])
    client = make_client(lambda request: httpx.Response(200, stream=stream))
    provider = OpenAIProvider(ProviderConfig(type=ProviderType.OPENAI, api_key="sk-test"), client=client)

    received = []
    async with aclosing(provider.create_chat_completion_stream(_request())) as chunks:
        async for chunk in chunks:
            received.append(chunk.delta)
            break

    assert received == ["a"]
    assert stream.closed


async def test_completed_stream_closes_response(make_client, tracking_stream, sse):
    stream = tracking_stream([sse(_delta("a"))])
    client = make_client(lambda request: httpx.Response(200, stream=stream))
    provider = OpenAIProvider(ProviderConfig(type=ProviderType.OPENAI, api_key="sk-test"), client=client)

    deltas = [c.delta async for c in provider.create_chat_completion_stream(_request())]

    assert deltas == ["a"]
    assert stream.closed


async def test_mid_stream_failure_delivers_partial_chunks_then_raises(make_client, tracking_stream, sse):
    first = sse(_delta("one"), done=False)
    second = sse(_delta("two"))
    stream = tracking_stream([first, second], fail_after=1)
    client = make_client(lambda request: httpx.Response(200, stream=stream))
    provider = OpenAIProvider(ProviderConfig(type=ProviderType.OPENAI, api_key="sk-test"), client=client)

    received = []
    with pytest.raises(TransportError) as info:
        async for chunk in provider.create_chat_completion_stream(_request()):
            received.append(chunk.delta)

    assert received == ["one"]
    assert info.value.status_code is None
    assert info.value.code == ErrorCode.NETWORK
    assert stream.closed


async def test_stream_error_status_raises_before_any_chunk(make_client):
    client = make_client(lambda request: httpx.Response(401, json={"error": {"message": "bad key"}}))
    provider = OpenAIProvider(ProviderConfig(type=ProviderType.OPENAI, api_key="sk-test"), client=client)

    received = []
    with pytest.raises(TransportError) as info:
        async for chunk in provider.create_chat_completion_stream(_request()):
            received.append(chunk)

    assert received == []
    assert info.value.status_code == 401
    assert info.value.code == ErrorCode.AUTH
    assert str(info.value) == "bad key"
