"""
Error classification helpers shared by the per-provider classifiers.

The status-code table is common to every provider. Message-substring
refinement of a 400 is not: each provider passes its own ``refine_bad_request``
callable because wording differs between vendors. That refinement is a
best-effort heuristic that depends on provider phrasing and may misclassify.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Type

from .provider_error import (
    AuthenticationError,
    InvalidRequestError,
    ModelNotFoundError,
    ProviderError,
    RateLimitError,
)


def extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.code`` (google-genai)
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "code"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, Type[ProviderError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: ModelNotFoundError,
    429: RateLimitError,
}


def error_for_status(
    provider: str,
    status: Optional[int],
    message: str,
    *,
    raw: Optional[BaseException] = None,
    refine_bad_request: Optional[Callable[[str], Optional[Type[ProviderError]]]] = None,
) -> ProviderError:
    """Build the canonical error for an HTTP-style status.

    401/403 → authentication, 404 → model not found, 429 → rate limit,
    400 → invalid request (optionally refined by ``refine_bad_request`` on the
    lowercased message), everything else → generic provider error.
    """
    cls = _HTTP_STATUS_MAP.get(status, ProviderError) if status is not None else ProviderError
    if status == 400 and refine_bad_request is not None:
        cls = refine_bad_request((message or "").lower()) or cls
    return cls(provider, message, raw=raw)


__all__ = [
    "extract_status",
    "error_for_status",
    "_HTTP_STATUS_MAP",
]
