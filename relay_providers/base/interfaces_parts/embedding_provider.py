"""EmbeddingProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import EmbeddingParams, EmbeddingResponse


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Providers that can produce embedding vectors."""

    def embedding(self, params: EmbeddingParams) -> EmbeddingResponse:
        ...
