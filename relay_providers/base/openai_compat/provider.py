"""
Generic provider for OpenAI-compatible HTTP APIs.

Purpose
-------
`CompatibleProvider` drives ``openai.OpenAI`` against any backend that speaks
the Chat Completions wire format. A backend is described by a
`CompatibleConfig` (name, default endpoint, whether a key is mandatory,
capability record); backend quirks are applied to the canonical params by
overriding ``prepare_params``.

Construction
------------
Credentials and endpoint resolve once: explicit `ProviderConfig` value, then
the backend's env var (looked up by name in ``config.env``), then the backend
default. A missing mandatory key
raises `MissingAPIKeyError` naming the env var.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import openai

from ..cancellation import CancellationToken
from ..capabilities import Capabilities
from ...config.env import get_env_var_name, resolve_base_url, resolve_provider_key
from ..dto import ProviderConfig
from ..errors import MissingAPIKeyError, ProviderError
from ..models import (
    ChatCompletion,
    CompletionParams,
    EmbeddingData,
    EmbeddingParams,
    EmbeddingResponse,
    ModelInfo,
    ModelsResponse,
)
from ..provider_base import BaseProvider
from ..streaming import ChunkStream, StreamState
from ..utils.ids import generate_id
from .errors import convert_openai_error
from .request import build_chat_kwargs
from .response import COMPLETION_ID_PREFIX, convert_completion, convert_usage
from .stream import OpenAIStreamTranslator


@dataclass(frozen=True)
class CompatibleConfig:
    """Static description of one OpenAI-compatible backend."""

    name: str
    default_base_url: Optional[str]
    capabilities: Capabilities
    default_api_key: Optional[str] = None
    require_api_key: bool = True


class CompatibleProvider(BaseProvider):
    """Chat, streaming, embeddings and model listing over ``openai.OpenAI``."""

    compat: CompatibleConfig

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        *,
        client: Optional[openai.OpenAI] = None,
        **overrides: Any,
    ) -> None:
        self.provider_name = self.compat.name
        self.default_capabilities = self.compat.capabilities
        super().__init__()
        cfg = (config or ProviderConfig()).with_overrides(**overrides)
        spec = self.compat
        api_key = cfg.api_key or resolve_provider_key(spec.name)[0] or spec.default_api_key
        if not api_key and spec.require_api_key:
            raise MissingAPIKeyError(spec.name, get_env_var_name(spec.name) or "")
        self.base_url = cfg.base_url or resolve_base_url(spec.name) or spec.default_base_url
        self._client = client or self._make_client(cfg, api_key or "")

    def _make_client(self, cfg: ProviderConfig, api_key: str) -> openai.OpenAI:
        kwargs: Dict[str, Any] = {"api_key": api_key, "base_url": self.base_url}
        if cfg.timeout_seconds is not None:
            kwargs["timeout"] = cfg.timeout_seconds
        if cfg.max_retries is not None:
            kwargs["max_retries"] = cfg.max_retries
        if cfg.default_headers:
            kwargs["default_headers"] = dict(cfg.default_headers)
        if cfg.http_client is not None:
            kwargs["http_client"] = cfg.http_client
        return openai.OpenAI(**kwargs)

    def prepare_params(self, params: CompletionParams) -> CompletionParams:
        """Hook for backend quirks; returns a new params value, never mutates."""
        return params

    def convert_error(self, exc: Optional[BaseException]) -> Optional[ProviderError]:
        return convert_openai_error(self.name, exc)

    def completion(self, params: CompletionParams) -> ChatCompletion:
        prepared = self.prepare_params(params)
        kwargs = build_chat_kwargs(self.name, prepared)
        return self._call(
            "chat",
            prepared.model,
            lambda: self._client.chat.completions.create(**kwargs),
            lambda resp: convert_completion(resp, prepared.model),
        )

    def completion_stream(
        self,
        params: CompletionParams,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> ChunkStream:
        prepared = self.prepare_params(params)
        kwargs = build_chat_kwargs(self.name, prepared, stream=True)
        state = StreamState(id=generate_id(COMPLETION_ID_PREFIX), model=prepared.model)
        return self._open_stream(
            state,
            lambda: self._client.chat.completions.create(**kwargs),
            OpenAIStreamTranslator(),
            cancellation_token,
        )

    def embedding(self, params: EmbeddingParams) -> EmbeddingResponse:
        self._require(self.capabilities().embedding, "embeddings")
        kwargs: Dict[str, Any] = {
            "model": params.model,
            "input": params.input if isinstance(params.input, str) else list(params.input),
        }
        if params.dimensions is not None:
            kwargs["dimensions"] = params.dimensions

        def _convert(resp: Any) -> EmbeddingResponse:
            return EmbeddingResponse(
                data=tuple(
                    EmbeddingData(embedding=tuple(d.embedding), index=d.index)
                    for d in resp.data
                ),
                model=getattr(resp, "model", None) or params.model,
                usage=convert_usage(getattr(resp, "usage", None)),
            )

        return self._call(
            "embedding",
            params.model,
            lambda: self._client.embeddings.create(**kwargs),
            _convert,
        )

    def list_models(self) -> ModelsResponse:
        self._require(self.capabilities().list_models, "model listing")

        def _collect() -> ModelsResponse:
            # SyncPage iteration follows pagination until exhausted.
            return ModelsResponse(
                data=tuple(
                    ModelInfo(
                        id=m.id,
                        created=getattr(m, "created", None),
                        owned_by=getattr(m, "owned_by", None),
                    )
                    for m in self._client.models.list()
                )
            )

        return self._call("models.list", "", _collect, lambda resp: resp)


__all__ = ["CompatibleConfig", "CompatibleProvider"]
