"""Anthropic error classification.

``anthropic.APIStatusError`` carries the HTTP status. 400s are refined by
message substrings: "prompt is too long" and similar wording mark a
context-length failure. Connection errors and non-SDK exceptions become the
generic provider error.
"""

from __future__ import annotations

from typing import Optional, Type

import anthropic

from ..base.errors import ContentFilterError, ContextLengthError, ProviderError, error_for_status

PROVIDER_NAME = "anthropic"

_CONTEXT_MARKERS = ("prompt is too long", "context window", "context length", "too many tokens")
_CONTENT_FILTER_MARKERS = ("content filter", "content policy", "safety")


def refine_bad_request(message: str) -> Optional[Type[ProviderError]]:
    if any(m in message for m in _CONTEXT_MARKERS):
        return ContextLengthError
    if any(m in message for m in _CONTENT_FILTER_MARKERS):
        return ContentFilterError
    return None


def convert_anthropic_error(exc: Optional[BaseException]) -> Optional[ProviderError]:
    if exc is None:
        return None
    if isinstance(exc, ProviderError):
        return exc
    if not isinstance(exc, anthropic.APIStatusError):
        return ProviderError(PROVIDER_NAME, str(exc), raw=exc)
    return error_for_status(
        PROVIDER_NAME,
        exc.status_code,
        getattr(exc, "message", None) or str(exc),
        raw=exc,
        refine_bad_request=refine_bad_request,
    )


__all__ = ["convert_anthropic_error", "refine_bad_request"]
