"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the cancellation constructs used by streaming calls via the canonical
``relay_providers.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is polled by the stream producer while it waits for
  the next native event or for queue space, and by the consumer while it
  waits for the next chunk.
- ``CancelledError`` is raised only by code that explicitly asks for it via
  ``raise_if_cancelled``; a cancelled stream ends quietly.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
