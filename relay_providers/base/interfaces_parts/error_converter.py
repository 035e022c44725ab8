"""ErrorConverter Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..errors import ProviderError


@runtime_checkable
class ErrorConverter(Protocol):
    """Maps a native SDK exception onto the canonical error taxonomy."""

    def convert_error(self, exc: Optional[BaseException]) -> Optional[ProviderError]:
        """Return ``None`` for ``None``; otherwise a `ProviderError`."""
        ...
