from __future__ import annotations

from types import SimpleNamespace

import anthropic
import httpx
import pytest

from relay_providers.anthropic import AnthropicProvider
from relay_providers.anthropic.errors import convert_anthropic_error
from relay_providers.base.errors import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    InvalidRequestError,
    MissingAPIKeyError,
    ProviderError,
    RateLimitError,
)

from ..helpers import Recorder, simple_params


def _status_error(status: int, message: str) -> anthropic.APIStatusError:
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    return anthropic.APIStatusError(message, response=httpx.Response(status, request=request), body=None)


def test_status_classes():
    assert isinstance(convert_anthropic_error(_status_error(401, "bad key")), AuthenticationError)  # nosec B101
    assert isinstance(convert_anthropic_error(_status_error(429, "prompt is too long")), RateLimitError)  # nosec B101
    assert type(convert_anthropic_error(_status_error(529, "overloaded"))) is ProviderError  # nosec B101


def test_bad_request_refinement():
    assert isinstance(convert_anthropic_error(_status_error(400, "prompt is too long: 250000 tokens")), ContextLengthError)  # nosec B101
    assert isinstance(convert_anthropic_error(_status_error(400, "Output blocked by content filter")), ContentFilterError)  # nosec B101
    assert type(convert_anthropic_error(_status_error(400, "max_tokens: field required"))) is InvalidRequestError  # nosec B101


def test_error_text_names_provider():
    err = convert_anthropic_error(RuntimeError("socket"))
    assert "[anthropic]" in str(err)  # nosec B101


def test_completion_raises_classified_error():
    native = _status_error(404, "model: claude-nope")
    client = SimpleNamespace(messages=SimpleNamespace(create=Recorder(error=native)))
    provider = AnthropicProvider(api_key="sk-ant", client=client)
    with pytest.raises(ProviderError) as info:
        provider.completion(simple_params(model="claude-nope"))
    assert info.value.code.value == "model_not_found"  # nosec B101


def test_key_and_base_url_resolved_from_environment(monkeypatch):
    with pytest.raises(MissingAPIKeyError, match="ANTHROPIC_API_KEY"):
        AnthropicProvider(client=SimpleNamespace())
    monkeypatch.setenv("ANTHROPIC_API_KEY", " sk-ant ")
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "http://proxy.local")
    provider = AnthropicProvider(client=SimpleNamespace())
    assert provider.base_url == "http://proxy.local"  # nosec B101
