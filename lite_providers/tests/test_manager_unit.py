"""ProviderManager tests with a fake factory and a controllable clock."""
from __future__ import annotations

from typing import AsyncIterator, List

import pytest

from lite_providers.base.errors import ConfigurationError
from lite_providers.base.manager import ProviderManager, provider_cache_key
from lite_providers.base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    Message,
    Model,
    ProviderConfig,
    ProviderType,
    StreamChunk,
)


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class _FakeProvider:
    def __init__(self, config: ProviderConfig) -> None:
        self.config = config
        self.model_calls = 0

    def get_type(self) -> str:
        return self.config.type_name

    async def get_models(self) -> List[Model]:
        self.model_calls += 1
        return [Model(id=f"m{self.model_calls}", name="M", provider=self.get_type(), context_window=1)]

    async def create_chat_completion(self, request):
        return ChatCompletionResponse(id="r", model=request.model, content="hi")

    async def _stream(self) -> AsyncIterator[StreamChunk]:
        yield StreamChunk(delta="a")

    def create_chat_completion_stream(self, request):
        return self._stream()

    async def create_completion(self, request):
        raise NotImplementedError

    def create_completion_stream(self, request):
        raise NotImplementedError


class _Factory:
    def __init__(self) -> None:
        self.created: List[_FakeProvider] = []

    def __call__(self, config: ProviderConfig) -> _FakeProvider:
        provider = _FakeProvider(config)
        self.created.append(provider)
        return provider


@pytest.fixture()
def clock() -> _Clock:
    return _Clock()


@pytest.fixture()
def factory() -> _Factory:
    return _Factory()


@pytest.fixture()
def manager(factory, clock) -> ProviderManager:
    return ProviderManager(factory=factory, clock=clock)


CONFIG = ProviderConfig(type=ProviderType.OPENAI, api_key="sk-abcdefgh-rest")


def test_cache_key_format():
    assert provider_cache_key(CONFIG) == "openai:default:sk-abcde"
    cfg = ProviderConfig(type=ProviderType.CUSTOM, api_key="xyz", base_url="http://h/v1")
    assert provider_cache_key(cfg) == "custom:http://h/v1:xyz"


def test_get_provider_is_cached(manager, factory):
    assert manager.get_provider(CONFIG) is manager.get_provider(CONFIG)
    assert len(factory.created) == 1


def test_keys_sharing_first_eight_chars_collide(manager, factory):
    other = ProviderConfig(type=ProviderType.OPENAI, api_key="sk-abcdefgh-different")
    assert manager.get_provider(CONFIG) is manager.get_provider(other)
    assert len(factory.created) == 1


def test_different_base_urls_do_not_collide(manager, factory):
    other = ProviderConfig(type=ProviderType.OPENAI, api_key=CONFIG.api_key, base_url="http://proxy/v1")
    assert manager.get_provider(CONFIG) is not manager.get_provider(other)


def test_configuration_errors_propagate():
    with pytest.raises(ConfigurationError):
        ProviderManager().get_provider(ProviderConfig(type=ProviderType.OPENAI, api_key=""))


async def test_models_cached_within_ttl(manager, clock):
    first = await manager.get_models(CONFIG)
    clock.now += 3599
    second = await manager.get_models(CONFIG)
    assert [m.id for m in first] == [m.id for m in second] == ["m1"]


async def test_models_refetched_after_ttl(manager, clock):
    await manager.get_models(CONFIG)
    clock.now += 3600
    refreshed = await manager.get_models(CONFIG)
    assert [m.id for m in refreshed] == ["m2"]


async def test_use_cache_false_refetches_and_refreshes(manager, clock):
    await manager.get_models(CONFIG)
    assert [m.id for m in await manager.get_models(CONFIG, use_cache=False)] == ["m2"]
    assert [m.id for m in await manager.get_models(CONFIG)] == ["m2"]


async def test_clear_provider_cache_keeps_adapter(manager, factory):
    await manager.get_models(CONFIG)
    manager.clear_provider_cache(CONFIG)
    assert [m.id for m in await manager.get_models(CONFIG)] == ["m2"]
    assert len(factory.created) == 1


async def test_remove_provider_drops_adapter_and_models(manager, factory):
    await manager.get_models(CONFIG)
    manager.remove_provider(CONFIG)
    assert [m.id for m in await manager.get_models(CONFIG)] == ["m1"]
    assert len(factory.created) == 2


async def test_clear_cache_keeps_adapters(manager, factory):
    adapter = manager.get_provider(CONFIG)
    await manager.get_models(CONFIG)
    manager.clear_cache()
    assert manager.get_provider(CONFIG) is adapter
    assert len(factory.created) == 1
    assert [m.id for m in await manager.get_models(CONFIG)] == ["m2"]


def test_missing_api_key_is_configuration_error_not_type_error():
    config = ProviderConfig(type=ProviderType.OPENAI, api_key=None)
    assert provider_cache_key(config) == "openai:default:"
    with pytest.raises(ConfigurationError):
        ProviderManager().get_provider(config)


async def test_chat_calls_are_delegated(manager):
    request = ChatCompletionRequest(model="m", messages=[Message(role="user", content="x")])
    response = await manager.create_chat_completion(CONFIG, request)
    chunks = [c async for c in manager.create_chat_completion_stream(CONFIG, request)]
    assert response.content == "hi"
    assert [c.delta for c in chunks] == ["a"]
