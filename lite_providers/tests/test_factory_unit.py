from __future__ import annotations

import pytest

from lite_providers.anthropic import AnthropicProvider
from lite_providers.base.errors import ConfigurationError
from lite_providers.base.factory import ProviderFactory, create_provider, supported_providers, validate_config
from lite_providers.base.interfaces import LLMProvider
from lite_providers.base.models import ProviderConfig, ProviderType
from lite_providers.openai import OpenAIProvider
from lite_providers.openrouter import OpenRouterProvider


def test_mapping_covers_every_provider_type():
    assert set(ProviderFactory._PROVIDERS) == set(ProviderType)
    assert set(supported_providers()) == {"openai", "anthropic", "openrouter", "custom"}


@pytest.mark.parametrize(
    "ptype, klass, base_url",
    [
        (ProviderType.OPENAI, OpenAIProvider, None),
        (ProviderType.ANTHROPIC, AnthropicProvider, None),
        (ProviderType.OPENROUTER, OpenRouterProvider, None),
        (ProviderType.CUSTOM, OpenAIProvider, "http://localhost:1234/v1"),
    ],
)
def test_create_provider_dispatch(ptype, klass, base_url):
    provider = create_provider(ProviderConfig(type=ptype, api_key="key-123", base_url=base_url))
    assert isinstance(provider, klass)
    assert isinstance(provider, LLMProvider)
    assert provider.get_type() == ptype.value


def test_string_type_is_accepted():
    assert isinstance(create_provider(ProviderConfig(type="anthropic", api_key="k")), AnthropicProvider)


@pytest.mark.parametrize("ptype", list(ProviderType))
def test_missing_api_key_fails_for_every_type(ptype):
    with pytest.raises(ConfigurationError):
        create_provider(ProviderConfig(type=ptype, api_key="", base_url="http://x"))


def test_unknown_type_is_configuration_error():
    with pytest.raises(ConfigurationError) as info:
        create_provider(ProviderConfig(type="gemini", api_key="k"))
    assert info.value.message == "Unsupported provider type: gemini"


def test_validate_config_valid():
    result = validate_config(ProviderConfig(type=ProviderType.OPENAI, api_key="k"))
    assert result.valid is True
    assert result.errors == []


def test_validate_config_collects_all_errors():
    result = validate_config(ProviderConfig(type=ProviderType.CUSTOM, api_key=""))
    assert result.valid is False
    assert result.errors == ["API key is required", "Base URL is required for custom providers"]


def test_validate_config_type_errors():
    assert validate_config(ProviderConfig(type="", api_key="k")).errors == ["Provider type is required"]
    assert validate_config(ProviderConfig(type="nope", api_key="k")).errors == ["Unsupported provider type: nope"]


@pytest.mark.parametrize("spelling", ["Custom", " custom ", "CUSTOM"])
def test_mixed_case_custom_without_base_url_fails(spelling):
    config = ProviderConfig(type=spelling, api_key="sk-abcdefgh")
    assert config.type is ProviderType.CUSTOM
    with pytest.raises(ConfigurationError) as info:
        create_provider(config)
    assert info.value.message == "Base URL is required for custom providers"
    result = validate_config(config)
    assert result.valid is False
    assert result.errors == ["Base URL is required for custom providers"]


def test_mixed_case_known_type_dispatches_normally():
    provider = create_provider(ProviderConfig(type=" OpenRouter", api_key="k"))
    assert isinstance(provider, OpenRouterProvider)
    assert provider.get_type() == "openrouter"
