"""Gemini error classification.

``google.genai.errors.APIError`` exposes the HTTP status as ``code``. A 400
whose message mentions context or tokens is a context-length failure; one
that mentions safety or blocking is a content-filter failure.
"""

from __future__ import annotations

from typing import Optional, Type

from google.genai import errors as genai_errors

from ..base.errors import ContentFilterError, ContextLengthError, ProviderError, error_for_status

PROVIDER_NAME = "gemini"


def refine_bad_request(message: str) -> Optional[Type[ProviderError]]:
    if "context" in message or "token" in message:
        return ContextLengthError
    if "safety" in message or "block" in message:
        return ContentFilterError
    return None


def convert_gemini_error(exc: Optional[BaseException]) -> Optional[ProviderError]:
    if exc is None:
        return None
    if isinstance(exc, ProviderError):
        return exc
    if not isinstance(exc, genai_errors.APIError):
        return ProviderError(PROVIDER_NAME, str(exc), raw=exc)
    return error_for_status(
        PROVIDER_NAME,
        exc.code,
        exc.message or str(exc),
        raw=exc,
        refine_bad_request=refine_bad_request,
    )


__all__ = ["convert_gemini_error", "refine_bad_request"]
