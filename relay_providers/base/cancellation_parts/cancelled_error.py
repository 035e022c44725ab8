"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
to callers that opt into an exception instead of a quiet stop.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively."""

__all__ = ["CancelledError"]
