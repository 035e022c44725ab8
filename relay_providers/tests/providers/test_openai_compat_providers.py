"""Façade behaviour of the OpenAI-compatible providers with fake SDK clients."""
from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai
import pytest

from relay_providers.base.errors import MissingAPIKeyError, RateLimitError, ToolSchemaError
from relay_providers.base.models import EmbeddingParams, FinishReason, Tool
from relay_providers.deepseek import DeepSeekProvider
from relay_providers.groq import GroqProvider
from relay_providers.mistral import MistralProvider
from relay_providers.openai import OpenAIProvider

from ..helpers import ClosingIterator, Recorder, fake_openai_client, openai_chunk, simple_params


def _completion(content="4"):
    return SimpleNamespace(
        id="chatcmpl-abc",
        created=1,
        model="gpt-test",
        choices=[SimpleNamespace(index=0, message=SimpleNamespace(content=content, tool_calls=None), finish_reason="stop")],
        usage=SimpleNamespace(prompt_tokens=3, completion_tokens=1, total_tokens=4, completion_tokens_details=None),
    )


def test_missing_key_raises_at_construction():
    with pytest.raises(MissingAPIKeyError, match="OPENAI_API_KEY"):
        OpenAIProvider()


def test_env_key_and_base_url(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk")
    monkeypatch.setenv("GROQ_BASE_URL", "http://proxy/v1")
    provider = GroqProvider(client=fake_openai_client())
    assert provider.base_url == "http://proxy/v1"  # nosec B101


def test_default_base_urls():
    assert DeepSeekProvider(api_key="k", client=fake_openai_client()).base_url == "https://api.deepseek.com"  # nosec B101
    assert MistralProvider(api_key="k", client=fake_openai_client()).base_url == "https://api.mistral.ai/v1/"  # nosec B101


def test_real_sdk_client_constructed():
    provider = OpenAIProvider(api_key="sk-test", timeout_seconds=5, max_retries=0)
    assert isinstance(provider._client, openai.OpenAI)  # nosec B101


def test_completion_round_trip():
    create = Recorder(result=_completion())
    provider = OpenAIProvider(api_key="sk", client=fake_openai_client(create=create))
    out = provider.completion(simple_params(model="gpt-test"))
    assert out.message.content == "4"  # nosec B101
    assert out.usage.total_tokens == 4  # nosec B101
    assert create.calls[0]["model"] == "gpt-test"  # nosec B101
    assert len(create.calls[0]["messages"]) == 2  # nosec B101


def test_completion_error_classified():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    native = openai.APIStatusError("Too many requests", response=httpx.Response(429, request=request), body=None)
    provider = OpenAIProvider(api_key="sk", client=fake_openai_client(create=Recorder(error=native)))
    with pytest.raises(RateLimitError) as info:
        provider.completion(simple_params())
    assert info.value.raw is native  # nosec B101
    assert info.value.__cause__ is native  # nosec B101


def test_tool_schema_error_prevents_network_call():
    create = Recorder(result=_completion())
    provider = OpenAIProvider(api_key="sk", client=fake_openai_client(create=create))
    bad = Tool.define("get_weather", "", {"type": "object", "required": [1]})
    with pytest.raises(ToolSchemaError):
        provider.completion(simple_params(tools=(bad,)))
    with pytest.raises(ToolSchemaError):
        provider.completion_stream(simple_params(tools=(bad,)))
    assert create.calls == []  # nosec B101


def test_stream_end_to_end():
    create = Recorder(result=lambda: ClosingIterator([openai_chunk("4"), openai_chunk(" ("), openai_chunk(")", finish_reason="stop")]))
    provider = OpenAIProvider(api_key="sk", client=fake_openai_client(create=create))
    stream = provider.completion_stream(simple_params())
    chunks = list(stream)
    assert [c.delta.content for c in chunks[:-1]] == ["4", " (", ")"]  # nosec B101
    assert chunks[-1].finish_reason is FinishReason.STOP  # nosec B101
    assert not chunks[-1].delta.tool_calls  # nosec B101
    assert stream.error(timeout=2.0) is None  # nosec B101
    assert create.calls[0]["stream"] is True  # nosec B101


def test_embeddings_and_listing():
    embed = Recorder(
        result=SimpleNamespace(
            data=[SimpleNamespace(embedding=[0.1, 0.2], index=0), SimpleNamespace(embedding=[0.3], index=1)],
            model="text-embedding-3-small",
            usage=SimpleNamespace(prompt_tokens=4, completion_tokens=None, total_tokens=4),
        )
    )
    models = Recorder(result=[SimpleNamespace(id="gpt-b", created=2, owned_by="openai"), SimpleNamespace(id="gpt-a", created=1, owned_by="openai")])
    provider = OpenAIProvider(api_key="sk", client=fake_openai_client(embeddings=embed, models=models))
    out = provider.embedding(EmbeddingParams(model="text-embedding-3-small", input=("a", "b"), dimensions=64))
    assert [d.embedding for d in out.data] == [(0.1, 0.2), (0.3,)]  # nosec B101
    assert embed.calls[0]["input"] == ["a", "b"] and embed.calls[0]["dimensions"] == 64  # nosec B101
    assert provider.list_models().ids() == ["gpt-b", "gpt-a"]  # nosec B101


def test_capability_gated_operations():
    provider = GroqProvider(api_key="gsk", client=fake_openai_client())
    caps = provider.capabilities()
    assert not caps.embedding and not caps.reasoning and caps.list_models  # nosec B101
    with pytest.raises(NotImplementedError):
        provider.embedding(EmbeddingParams(model="x", input="y"))
