"""
Structured provider error exception hierarchy.

Wraps provider-specific failures with a normalized `ErrorCode` so callers can
tell "your key is wrong" from "the service is down" from "the prompt exceeded
the context window" without knowing which SDK raised the original error.
Every error carries the originating provider's name and, where available,
the provider's own message.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode


class ProviderError(Exception):
    """Base class for every error surfaced by a provider adapter.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message (the provider's own text when
            one was available).
        provider: Provider key where the error originated (e.g. ``"openai"``).
        model: Optional model name associated with the failure.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode = ErrorCode.PROVIDER

    def __init__(
        self,
        provider: str,
        message: str = "",
        *,
        model: Optional[str] = None,
        raw: Optional[BaseException] = None,
    ) -> None:
        self.provider = provider
        self.message = message or (str(raw) if raw is not None else self.code.value)
        self.model = model
        self.raw = raw
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"[{self.provider}] {self.code.value}: {self.message}"

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"{type(self).__name__}(provider={self.provider!r}, message={self.message!r})"


class MissingAPIKeyError(ProviderError):
    """Raised at construction when no API key can be resolved."""

    code = ErrorCode.MISSING_API_KEY

    def __init__(self, provider: str, env_var: str = "") -> None:
        self.env_var = env_var
        hint = f"; set {env_var} or pass api_key" if env_var else ""
        super().__init__(provider, f"no API key provided{hint}")


class AuthenticationError(ProviderError):
    """The provider rejected the credentials (401/403)."""

    code = ErrorCode.AUTHENTICATION


class RateLimitError(ProviderError):
    """The provider throttled the request (429)."""

    code = ErrorCode.RATE_LIMIT


class InvalidRequestError(ProviderError):
    """The request was malformed or rejected as invalid (400)."""

    code = ErrorCode.INVALID_REQUEST


class ContextLengthError(InvalidRequestError):
    """The prompt exceeded the model's context window."""

    code = ErrorCode.CONTEXT_LENGTH_EXCEEDED


class ContentFilterError(InvalidRequestError):
    """The provider's safety system blocked the request or the output."""

    code = ErrorCode.CONTENT_FILTERED


class ModelNotFoundError(ProviderError):
    """The requested model does not exist or is not accessible (404)."""

    code = ErrorCode.MODEL_NOT_FOUND


class ToolSchemaError(InvalidRequestError):
    """A tool definition could not be converted to the provider's schema.

    Raised while building the native request, before any network call.
    """

    def __init__(self, provider: str, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(provider, f"tool {tool_name!r}: {message}")


__all__ = [
    "ProviderError",
    "MissingAPIKeyError",
    "AuthenticationError",
    "RateLimitError",
    "InvalidRequestError",
    "ContextLengthError",
    "ContentFilterError",
    "ModelNotFoundError",
    "ToolSchemaError",
]
