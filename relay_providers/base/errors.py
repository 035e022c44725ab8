"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    ErrorCode,
    InvalidRequestError,
    MissingAPIKeyError,
    ModelNotFoundError,
    ProviderError,
    RateLimitError,
    ToolSchemaError,
    error_for_status,
    extract_status,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "MissingAPIKeyError",
    "AuthenticationError",
    "RateLimitError",
    "InvalidRequestError",
    "ContextLengthError",
    "ContentFilterError",
    "ModelNotFoundError",
    "ToolSchemaError",
    "error_for_status",
    "extract_status",
]
