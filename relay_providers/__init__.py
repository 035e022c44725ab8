"""relay_providers package

One calling convention over several LLM vendors.

Purpose:
    Callers build `CompletionParams`, obtain an adapter with :func:`create`
    and receive the same `ChatCompletion` / `ChatCompletionChunk` shapes and
    the same `ProviderError` taxonomy whichever backend answered.

Public API (re-exported):
    - Version: ``__version__``
    - Factory: :func:`create`, ``ProviderFactory``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Core models: ``CompletionParams``, ``Message``, ``ChatCompletion``,
      ``ChatCompletionChunk``

Notes:
    - Vendor SDKs are imported only when their adapter is created.
"""

from typing import Any, Optional

from .base.dto import ProviderConfig
from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.models import (
    ChatCompletion,
    ChatCompletionChunk,
    CompletionParams,
    EmbeddingParams,
    Message,
    Tool,
)

__version__ = "0.1.0"


def create(provider: str, config: Optional[ProviderConfig] = None, **overrides: Any) -> Any:
    """Create an adapter by name, e.g. ``create("openai", api_key=...)``."""
    return ProviderFactory.create(provider, config, **overrides)


__all__ = [
    "__version__",
    "create",
    "ProviderFactory",
    "UnknownProviderError",
    "ProviderConfig",
    "ProviderError",
    "ErrorCode",
    "ChatCompletion",
    "ChatCompletionChunk",
    "CompletionParams",
    "EmbeddingParams",
    "Message",
    "Tool",
]
