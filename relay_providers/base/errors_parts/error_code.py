"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by every provider adapter. Values
are lowercase snake_case and are considered a stable public contract for
logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error kinds, independent of any provider."""

    MISSING_API_KEY = "missing_api_key"  # pragma: allowlist secret - enum label, not a credential
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    INVALID_REQUEST = "invalid_request"
    CONTEXT_LENGTH_EXCEEDED = "context_length_exceeded"
    CONTENT_FILTERED = "content_filtered"
    MODEL_NOT_FOUND = "model_not_found"
    PROVIDER = "provider_error"


__all__ = ["ErrorCode"]
