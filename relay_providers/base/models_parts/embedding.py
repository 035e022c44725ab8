"""
Embedding request/response DTOs.
"""
from __future__ import annotations

from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .chat_completion import Usage


OBJECT_EMBEDDING = "embedding"
OBJECT_LIST = "list"


class EmbeddingParams(BaseModel):
    """Embedding request: a single string or a batch of strings."""

    model_config = ConfigDict(frozen=True)

    model: str
    input: Union[str, Tuple[str, ...]]
    dimensions: Optional[int] = None

    def inputs(self) -> List[str]:
        """Return the input as a list, wrapping a single string."""
        return [self.input] if isinstance(self.input, str) else list(self.input)


class EmbeddingData(BaseModel):
    model_config = ConfigDict(frozen=True)

    object: str = OBJECT_EMBEDDING
    embedding: Tuple[float, ...]
    index: int


class EmbeddingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    object: str = OBJECT_LIST
    data: Tuple[EmbeddingData, ...]
    model: str
    usage: Optional[Usage] = None


__all__ = [
    "EmbeddingData",
    "EmbeddingParams",
    "EmbeddingResponse",
    "OBJECT_EMBEDDING",
    "OBJECT_LIST",
]
