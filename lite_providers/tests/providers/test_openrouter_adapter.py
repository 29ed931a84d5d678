from __future__ import annotations

import httpx
import pytest

from lite_providers.base.models import ChatCompletionRequest, Message, ProviderConfig, ProviderType
from lite_providers.openrouter import OpenRouterProvider


async def test_default_informational_headers(make_client):
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured.update(request.headers)
        return httpx.Response(200, json={"id": "g", "model": "m", "choices": [{"message": {"content": "k"}}]})

    provider = OpenRouterProvider(
        ProviderConfig(type=ProviderType.OPENROUTER, api_key="sk-or"), client=make_client(handler)
    )
    await provider.create_chat_completion(ChatCompletionRequest(model="m", messages=[Message(role="user", content="q")]))

    assert captured["authorization"] == "Bearer sk-or"
    assert captured["http-referer"] == ""
    assert captured["x-title"] == "Lite"


async def test_custom_headers_override_title_and_referer(make_client):
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured.update(request.headers)
        return httpx.Response(200, json={"data": []})

    config = ProviderConfig(
        type=ProviderType.OPENROUTER,
        api_key="sk-or",
        custom_headers={"X-Title": "My App", "HTTP-Referer": "https://example.org"},
    )
    await OpenRouterProvider(config, client=make_client(handler)).get_models()

    assert captured["x-title"] == "My App"
    assert captured["http-referer"] == "https://example.org"


async def test_model_listing_converts_pricing_to_per_million(make_client):
    body = {
        "data": [
            {
                "id": "anthropic/claude-3-haiku",
                "name": "Claude 3 Haiku",
                "context_length": 200000,
                "pricing": {"prompt": "0.00000025", "completion": "0.00000125"},
            }
        ]
    }
    provider = OpenRouterProvider(
        ProviderConfig(type=ProviderType.OPENROUTER, api_key="sk-or"),
        client=make_client(lambda r: httpx.Response(200, json=body)),
    )
    (model,) = await provider.get_models()

    assert model.provider == "openrouter"
    assert model.context_window == 200000
    assert model.supports_chat and model.supports_completion
    assert model.pricing.prompt_tokens == pytest.approx(0.25)
    assert model.pricing.completion_tokens == pytest.approx(1.25)
