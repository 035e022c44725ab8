"""Provider Protocol (single-class module).

The contract every adapter implements: chat completion, streamed chat
completion, a static capability record and a name.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..capabilities import Capabilities
from ..models import ChatCompletion, CompletionParams
from ..streaming import ChunkStream


@runtime_checkable
class Provider(Protocol):
    """Minimal interface for chat providers.

    Implementations map `CompletionParams` to the SDK request, normalize the
    result to canonical models, and never leak SDK objects upstream. Failures
    are raised as `ProviderError` subclasses.
    """

    @property
    def name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"``."""
        ...

    def capabilities(self) -> Capabilities:
        ...

    def completion(self, params: CompletionParams) -> ChatCompletion:
        ...

    def completion_stream(
        self,
        params: CompletionParams,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> ChunkStream:
        """Start a streamed completion.

        Request-building failures raise here; SDK failures arrive through
        ``ChunkStream.error()``.
        """
        ...
