"""Gemini provider adapter.

Purpose:
- Implement completion, streaming, embeddings and model listing over
  ``google.genai.Client``.

Notes:
- The key is read from ``GEMINI_API_KEY`` then ``GOOGLE_API_KEY`` when the
  config does not carry one.
- Gemini has no response id; one is generated per call.
- Model listing iterates the SDK pager, which follows ``next_page_token``
  until the listing is exhausted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types

from ..base.cancellation import CancellationToken
from ..base.capabilities import Capabilities
from ..base.dto import ProviderConfig
from ..base.errors import MissingAPIKeyError, ProviderError
from ..base.models import (
    ChatCompletion,
    CompletionParams,
    EmbeddingData,
    EmbeddingParams,
    EmbeddingResponse,
    ModelInfo,
    ModelsResponse,
)
from ..base.provider_base import BaseProvider
from ..base.streaming import ChunkStream, StreamState
from ..base.utils.ids import generate_id
from ..config.env import get_env_var_name, resolve_provider_key
from .converters import COMPLETION_ID_PREFIX, PROVIDER_NAME, build_request, convert_response
from .errors import convert_gemini_error
from .stream_helpers import GeminiStreamTranslator

OWNER = "google"

GEMINI_CAPABILITIES = Capabilities(
    completion=True,
    streaming=True,
    tool_use=True,
    reasoning=True,
    image=True,
    pdf=False,
    embedding=True,
    list_models=True,
)


class GeminiProvider(BaseProvider):
    """Google Gemini adapter."""

    provider_name = PROVIDER_NAME
    default_capabilities = GEMINI_CAPABILITIES

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        *,
        client: Optional[genai.Client] = None,
        **overrides: Any,
    ) -> None:
        super().__init__()
        cfg = (config or ProviderConfig()).with_overrides(**overrides)
        api_key = cfg.api_key or resolve_provider_key(PROVIDER_NAME)[0]
        if not api_key:
            raise MissingAPIKeyError(PROVIDER_NAME, get_env_var_name(PROVIDER_NAME) or "")
        self.base_url = cfg.base_url
        self._client = client or self._make_client(cfg, api_key)

    def _make_client(self, cfg: ProviderConfig, api_key: str) -> genai.Client:
        http: Dict[str, Any] = {}
        if self.base_url:
            http["base_url"] = self.base_url
        if cfg.timeout_seconds is not None:
            # HttpOptions.timeout is in milliseconds.
            http["timeout"] = int(cfg.timeout_seconds * 1000)
        if cfg.default_headers:
            http["headers"] = dict(cfg.default_headers)
        if cfg.http_client is not None:
            http["httpx_client"] = cfg.http_client
        if http:
            return genai.Client(api_key=api_key, http_options=types.HttpOptions(**http))
        return genai.Client(api_key=api_key)

    def convert_error(self, exc: Optional[BaseException]) -> Optional[ProviderError]:
        return convert_gemini_error(exc)

    def completion(self, params: CompletionParams) -> ChatCompletion:
        contents, config = build_request(params)
        return self._call(
            "chat",
            params.model,
            lambda: self._client.models.generate_content(model=params.model, contents=contents, config=config),
            lambda resp: convert_response(resp, params.model),
        )

    def completion_stream(
        self,
        params: CompletionParams,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> ChunkStream:
        contents, config = build_request(params)
        state = StreamState(id=generate_id(COMPLETION_ID_PREFIX), model=params.model)
        return self._open_stream(
            state,
            lambda: self._client.models.generate_content_stream(
                model=params.model, contents=contents, config=config
            ),
            GeminiStreamTranslator(),
            cancellation_token,
        )

    def embedding(self, params: EmbeddingParams) -> EmbeddingResponse:
        config = None
        if params.dimensions is not None:
            config = types.EmbedContentConfig(output_dimensionality=params.dimensions)
        return self._call(
            "embedding",
            params.model,
            lambda: self._client.models.embed_content(
                model=params.model, contents=params.inputs(), config=config
            ),
            lambda resp: self._convert_embeddings(resp, params.model),
        )

    @staticmethod
    def _convert_embeddings(resp: Any, model: str) -> EmbeddingResponse:
        data = [
            EmbeddingData(embedding=tuple(e.values or ()), index=i)
            for i, e in enumerate(getattr(resp, "embeddings", None) or [])
        ]
        return EmbeddingResponse(data=tuple(data), model=model)

    def list_models(self) -> ModelsResponse:
        return self._call("models.list", "", self._collect_models, lambda items: ModelsResponse(data=tuple(items)))

    def _collect_models(self) -> List[ModelInfo]:
        return [ModelInfo(id=m.name, owned_by=OWNER) for m in self._client.models.list()]


__all__ = ["GeminiProvider", "GEMINI_CAPABILITIES"]
