from __future__ import annotations

import pytest

import relay_providers
from relay_providers.anthropic import AnthropicProvider
from relay_providers.base.errors import MissingAPIKeyError
from relay_providers.base.factory import ProviderFactory, UnknownProviderError, create_provider
from relay_providers.llamacpp import LlamaCppProvider
from relay_providers.openai import OpenAIProvider

from ..helpers import fake_openai_client


def test_factory_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("nope")


def test_factory_import_failure(monkeypatch):
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"bogus": {"module": "does.not.exist", "class": "X"}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("bogus")


def test_factory_missing_class(monkeypatch):
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"odd": {"module": "relay_providers.openai.client", "class": "Nope"}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError, match="not found"):
        ProviderFactory.create("odd")


def test_factory_builds_by_name_case_insensitive():
    provider = create_provider(" OpenAI ", api_key="sk-test", client=fake_openai_client())
    assert isinstance(provider, OpenAIProvider)  # nosec B101
    assert provider.name == "openai"  # nosec B101


def test_factory_rejects_unknown_config_field():
    with pytest.raises(UnknownProviderError, match="Invalid arguments"):
        ProviderFactory.create("openai", api_key="x", bogus_field=1)


def test_missing_key_propagates_unwrapped():
    with pytest.raises(MissingAPIKeyError) as info:
        ProviderFactory.create("anthropic")
    assert "ANTHROPIC_API_KEY" in str(info.value)  # nosec B101


def test_llamacpp_needs_no_key():
    provider = relay_providers.create("llamacpp", client=fake_openai_client())
    assert isinstance(provider, LlamaCppProvider)  # nosec B101
    assert provider.base_url == "http://127.0.0.1:8080/v1"  # nosec B101
    caps = provider.capabilities()
    assert caps.embedding and caps.list_models  # nosec B101
    assert not (caps.tool_use or caps.reasoning or caps.image)  # nosec B101


def test_env_key_resolved_at_construction(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-key")
    provider = relay_providers.create("anthropic", client=object())
    assert isinstance(provider, AnthropicProvider)  # nosec B101


def test_supported_names():
    assert ProviderFactory.supported() == (  # nosec B101
        "openai",
        "anthropic",
        "gemini",
        "deepseek",
        "mistral",
        "groq",
        "llamacpp",
    )
