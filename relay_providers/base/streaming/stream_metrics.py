"""Streaming metrics collected per call and reported in ``stream.*`` events."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class StreamMetrics:
    """Timing and volume of one streaming call."""

    emitted: int = 0
    time_to_first_chunk_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None

    def record_emit(self, started: float, now: float) -> None:
        if self.emitted == 0:
            self.time_to_first_chunk_ms = round((now - started) * 1000.0, 3)
        self.emitted += 1

    def finish(self, started: float, now: float) -> None:
        self.total_duration_ms = round((now - started) * 1000.0, 3)


__all__ = ["StreamMetrics"]
