"""
Threaded chunk stream returned by ``completion_stream``.

Purpose
-------
Run one streaming call on a producer thread and hand canonical chunks to the
caller through a bounded queue, with a separate single-slot error signal.

Lifecycle
---------
1. The caller thread builds the native request; conversion errors raise
   there, before any thread exists.
2. The producer opens the native stream (``starter``), feeds every native
   event through ``translate`` into the shared `StreamState`, and puts each
   resulting chunk on a queue of size one (a put blocks until the consumer
   reads it).
3. When the native stream ends, the producer puts the final chunk.
4. On a native failure the producer records the classified error, stops
   emitting, closes the content channel and only then releases the error
   signal. Chunks already delivered stay valid.
5. On cancellation (the caller's token, ``close()``, or the consumer
   abandoning iteration) the native stream is closed and the producer exits
   with neither a final chunk nor an error.

The producer checks cancellation after every native event and while waiting
for queue space; the consumer checks it while waiting for the next chunk. A
producer blocked inside the SDK waiting for the next native event is released
by the cancelling thread, which closes the native stream through the token's
``on_cancel`` hook.
"""
from __future__ import annotations

import contextlib
import logging
import queue
import threading
import time
from typing import Any, Callable, Iterable, Iterator, Optional

from ..cancellation import CancellationToken
from ..errors import ProviderError
from ..logging import LogContext, normalized_log_event
from ..models import ChatCompletionChunk
from .stream_metrics import StreamMetrics
from .stream_state import StreamState

# Interval at which blocked waits re-check cancellation and channel closure.
POLL_INTERVAL_S = 0.05

Translator = Callable[[StreamState, Any], Iterable[Optional[ChatCompletionChunk]]]


class ChunkStream:
    """Iterable of `ChatCompletionChunk` plus an ``error()`` signal.

    Iterate to receive chunks in arrival order; after iteration ends, call
    ``error()`` to learn whether the stream ended because of a failure.
    Usable as a context manager, which closes (cancels) the stream on exit.
    """

    def __init__(
        self,
        *,
        provider: str,
        state: StreamState,
        starter: Callable[[], Iterable[Any]],
        translate: Translator,
        convert_error: Callable[[BaseException], ProviderError],
        logger: logging.Logger,
        ctx: Optional[LogContext] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        self.provider = provider
        self.state = state
        self.metrics = StreamMetrics()
        self._starter = starter
        self._translate = translate
        self._convert_error = convert_error
        self._logger = logger
        self._ctx = ctx or LogContext(provider=provider, model=state.model)
        self._parent_token = cancellation_token
        self._token = cancellation_token.child() if cancellation_token is not None else CancellationToken()
        self._native: Any = None
        self._queue: "queue.Queue[ChatCompletionChunk]" = queue.Queue(maxsize=1)
        self._content_closed = threading.Event()
        self._done = threading.Event()
        self._error: Optional[ProviderError] = None
        self._thread = threading.Thread(
            target=self._produce,
            name=f"{provider}-stream",
            daemon=True,
        )
        self._started = False

    def start(self) -> "ChunkStream":
        """Start the producer thread (idempotent)."""
        if not self._started:
            self._started = True
            self._thread.start()
        return self

    # ------------------------------------------------------------------ consumer

    def __iter__(self) -> Iterator[ChatCompletionChunk]:
        self.start()
        finished = False
        try:
            while True:
                try:
                    chunk = self._queue.get(timeout=POLL_INTERVAL_S)
                except queue.Empty:
                    if self._token.cancelled:
                        return
                    if self._content_closed.is_set() and self._queue.empty():
                        finished = True
                        return
                    continue
                if chunk.finish_reason is not None:
                    finished = True
                yield chunk
        finally:
            if not finished and not self._content_closed.is_set():
                self._token.cancel("stream abandoned by consumer")

    def error(self, timeout: Optional[float] = None) -> Optional[ProviderError]:
        """Wait for the producer to finish and return its error, if any.

        Returns ``None`` for a clean finish and for a cancelled stream.
        """
        self.start()
        self._done.wait(timeout)
        return self._error

    @property
    def cancelled(self) -> bool:
        return self._token.cancelled

    def close(self) -> None:
        """Cancel the stream and close the native stream from this thread."""
        self._token.cancel("stream closed by consumer")

    def __enter__(self) -> "ChunkStream":
        return self.start()

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------ producer

    def _put(self, chunk: ChatCompletionChunk, started: float) -> bool:
        while not self._token.cancelled:
            try:
                self._queue.put(chunk, timeout=POLL_INTERVAL_S)
            except queue.Full:
                continue
            self.metrics.record_emit(started, time.perf_counter())
            return True
        return False

    def _close_native(self) -> None:
        # Runs on the producer thread at exit and on whichever thread cancels.
        close = getattr(self._native, "close", None)
        if callable(close):
            with contextlib.suppress(Exception):
                close()

    def _open_native(self) -> Any:
        native = self._native = self._starter()
        self._token.on_cancel(self._close_native)
        return native

    def _produce(self) -> None:
        started = time.perf_counter()
        outcome = "end"
        normalized_log_event(self._logger, "stream.start", self._ctx, phase="start", attempt=1)
        try:
            native = self._open_native()
            for event in native:
                if self._token.cancelled:
                    outcome = "cancelled"
                    break
                for chunk in self._translate(self.state, event):
                    if chunk is not None and not self._put(chunk, started):
                        outcome = "cancelled"
                        break
                if outcome == "cancelled":
                    break
            if outcome == "end" and self._token.cancelled:
                outcome = "cancelled"
            if outcome == "end":
                for chunk in self.state.closing_chunks():
                    if not self._put(chunk, started):
                        outcome = "cancelled"
                        break
        except Exception as exc:  # noqa: BLE001 - every failure becomes the error signal
            if self._token.cancelled:
                outcome = "cancelled"
            else:
                outcome = "error"
                self._error = exc if isinstance(exc, ProviderError) else self._convert_error(exc)
        finally:
            self._close_native()
            if self._parent_token is not None:
                self._parent_token.unlink_child(self._token)
            self.metrics.finish(started, time.perf_counter())
            self._content_closed.set()
            self._log_outcome(outcome)
            self._done.set()

    def _log_outcome(self, outcome: str) -> None:
        common = dict(
            attempt=1,
            emitted=self.metrics.emitted > 0,
            emitted_count=self.metrics.emitted,
            time_to_first_chunk_ms=self.metrics.time_to_first_chunk_ms,
            total_duration_ms=self.metrics.total_duration_ms,
        )
        if outcome == "error" and self._error is not None:
            normalized_log_event(
                self._logger,
                "stream.error",
                self._ctx,
                phase="finalize",
                error_code=self._error.code.value,
                error=self._error.message,
                **common,
            )
        elif outcome == "cancelled":
            normalized_log_event(
                self._logger,
                "stream.cancelled",
                self._ctx,
                phase="finalize",
                reason=self._token.reason,
                **common,
            )
        else:
            normalized_log_event(
                self._logger,
                "stream.end",
                self._ctx,
                phase="finalize",
                tokens=self.state.usage,
                finish_reason=self.state.resolved_finish_reason().value,
                **common,
            )


__all__ = ["ChunkStream", "POLL_INTERVAL_S", "Translator"]
