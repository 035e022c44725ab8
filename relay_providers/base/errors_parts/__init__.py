"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `relay_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    InvalidRequestError,
    MissingAPIKeyError,
    ModelNotFoundError,
    ProviderError,
    RateLimitError,
    ToolSchemaError,
)
from .classification import error_for_status, extract_status

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
