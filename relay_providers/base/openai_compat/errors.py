"""
Error classification for OpenAI-compatible backends.

``openai.APIStatusError`` carries the HTTP status plus the error body's
``code``; 400s are refined first by that code, then by message substrings.
Any other exception (connection failures, timeouts, non-SDK errors) becomes
the generic provider error.
"""
from __future__ import annotations

from typing import Optional, Type

import openai

from ..errors import (
    ContentFilterError,
    ContextLengthError,
    ProviderError,
    error_for_status,
)

_CONTEXT_CODES = frozenset({"context_length_exceeded", "string_above_max_length"})
_CONTENT_FILTER_CODES = frozenset({"content_filter", "content_policy_violation"})
_CONTEXT_MARKERS = ("context length", "context_length", "maximum context", "too many tokens")
_CONTENT_FILTER_MARKERS = ("content filter", "content_filter", "content management policy", "safety")


def refine_bad_request(message: str) -> Optional[Type[ProviderError]]:
    if any(m in message for m in _CONTEXT_MARKERS):
        return ContextLengthError
    if any(m in message for m in _CONTENT_FILTER_MARKERS):
        return ContentFilterError
    return None


def convert_openai_error(provider: str, exc: Optional[BaseException]) -> Optional[ProviderError]:
    """Map an OpenAI SDK exception onto the canonical taxonomy."""
    if exc is None:
        return None
    if isinstance(exc, ProviderError):
        return exc
    if not isinstance(exc, openai.APIStatusError):
        return ProviderError(provider, str(exc), raw=exc)
    message = getattr(exc, "message", None) or str(exc)
    code = getattr(exc, "code", None)
    if exc.status_code == 400 and isinstance(code, str):
        if code in _CONTEXT_CODES:
            return ContextLengthError(provider, message, raw=exc)
        if code in _CONTENT_FILTER_CODES:
            return ContentFilterError(provider, message, raw=exc)
    return error_for_status(
        provider,
        exc.status_code,
        message,
        raw=exc,
        refine_bad_request=refine_bad_request,
    )


__all__ = ["convert_openai_error", "refine_bad_request"]
