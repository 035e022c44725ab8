"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used by streaming calls to stop the
producer thread early. Cancellation is cooperative: the producer checks the
token at every point where it may block. Work that blocks outside the
producer's control (a socket read inside an SDK stream) registers a callback
with ``on_cancel`` so the cancelling thread can interrupt it.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List, Optional

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Thread-safe. Child tokens inherit cancellation when the parent is
    cancelled; cancelling a child never affects the parent.
    """

    def __init__(self, *, parent: "Optional[CancellationToken]" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        self._callbacks: List[Callable[[], None]] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> Optional[str]:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Request cooperative cancellation, run callbacks and cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.reason = reason
            self._state.event.set()
            children = list(self._children)
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        for callback in callbacks:
            callback()
        for child in children:
            child.cancel(reason)

    def on_cancel(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` on the cancelling thread; immediately if already cancelled."""
        with self._lock:
            if not self._state.cancelled:
                self._callbacks.append(callback)
                return
        callback()

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def unlink_child(self, token: "CancellationToken") -> None:
        """Stop cascading to ``token``; unknown tokens are ignored."""
        with self._lock:
            self._children = [c for c in self._children if c is not token]

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return ``cancelled``."""
        return self._state.event.wait(timeout)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
