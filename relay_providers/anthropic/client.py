"""Anthropic provider adapter.

Purpose:
- Implement chat completion and streaming over ``anthropic.Anthropic``'s
  Messages API, with canonical request/response conversion and error
  classification.

Notes:
- Streaming uses ``messages.create(stream=True)`` and translates the raw
  event stream; the SDK stream object is closed when the producer exits.
- Embeddings and model listing are not offered (see the capability record).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import anthropic

from ..base.cancellation import CancellationToken
from ..base.capabilities import Capabilities
from ..base.dto import ProviderConfig
from ..base.errors import MissingAPIKeyError, ProviderError
from ..base.models import ChatCompletion, CompletionParams
from ..base.provider_base import BaseProvider
from ..base.streaming import ChunkStream, StreamState
from ..base.utils.ids import generate_id
from ..config.env import get_env_var_name, resolve_base_url, resolve_provider_key
from .converters import PROVIDER_NAME, build_message_kwargs, convert_response
from .errors import convert_anthropic_error
from .stream_helpers import AnthropicStreamTranslator

__all__ = ["AnthropicProvider", "ANTHROPIC_CAPABILITIES"]

MESSAGE_ID_PREFIX = "msg_"

ANTHROPIC_CAPABILITIES = Capabilities(
    completion=True,
    streaming=True,
    tool_use=True,
    reasoning=True,
    image=True,
    pdf=True,
    embedding=False,
    list_models=False,
)


class AnthropicProvider(BaseProvider):
    """Anthropic Messages API adapter."""

    provider_name = PROVIDER_NAME
    default_capabilities = ANTHROPIC_CAPABILITIES

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        *,
        client: Optional[anthropic.Anthropic] = None,
        **overrides: Any,
    ) -> None:
        super().__init__()
        cfg = (config or ProviderConfig()).with_overrides(**overrides)
        api_key = cfg.api_key or resolve_provider_key(PROVIDER_NAME)[0]
        if not api_key:
            raise MissingAPIKeyError(PROVIDER_NAME, get_env_var_name(PROVIDER_NAME) or "")
        self.base_url = cfg.base_url or resolve_base_url(PROVIDER_NAME)
        self._client = client or self._make_client(cfg, api_key)

    def _make_client(self, cfg: ProviderConfig, api_key: str) -> anthropic.Anthropic:
        kwargs: Dict[str, Any] = {"api_key": api_key}
        if self.base_url:
            kwargs["base_url"] = self.base_url
        if cfg.timeout_seconds is not None:
            kwargs["timeout"] = cfg.timeout_seconds
        if cfg.max_retries is not None:
            kwargs["max_retries"] = cfg.max_retries
        if cfg.default_headers:
            kwargs["default_headers"] = dict(cfg.default_headers)
        if cfg.http_client is not None:
            kwargs["http_client"] = cfg.http_client
        return anthropic.Anthropic(**kwargs)

    def convert_error(self, exc: Optional[BaseException]) -> Optional[ProviderError]:
        return convert_anthropic_error(exc)

    def completion(self, params: CompletionParams) -> ChatCompletion:
        kwargs = build_message_kwargs(params)
        return self._call(
            "chat",
            params.model,
            lambda: self._client.messages.create(**kwargs),
            lambda resp: convert_response(resp, params.model),
        )

    def completion_stream(
        self,
        params: CompletionParams,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> ChunkStream:
        kwargs = build_message_kwargs(params)
        # The native message id from message_start replaces this one.
        state = StreamState(id=generate_id(MESSAGE_ID_PREFIX), model=params.model)
        return self._open_stream(
            state,
            lambda: self._client.messages.create(stream=True, **kwargs),
            AnthropicStreamTranslator(),
            cancellation_token,
        )
