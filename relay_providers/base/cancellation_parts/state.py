"""Internal state holder for cancellation tokens.

The ``event`` lets waiters block with a timeout instead of spinning; it is set
exactly once, when the token is cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Event
from typing import Optional


@dataclass
class State:
    """Internal state for cooperative cancellation tokens."""

    event: Event = field(default_factory=Event)
    reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self.event.is_set()


__all__ = ["State"]
