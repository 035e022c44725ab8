"""Streaming reconstruction: per-call state plus the threaded chunk stream."""

from .stream_state import StreamState, TOOL_CALL_ID_PREFIX
from .stream_metrics import StreamMetrics
from .chunk_stream import ChunkStream, POLL_INTERVAL_S, Translator

__all__ = [
    "ChunkStream",
    "StreamMetrics",
    "StreamState",
    "Translator",
    "POLL_INTERVAL_S",
    "TOOL_CALL_ID_PREFIX",
]
