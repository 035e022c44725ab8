"""
OpenAI Chat Completions stream translation.

Feeds SDK ``ChatCompletionChunk`` events into a `StreamState`. Tool-call
deltas are addressed by the backend's ``index``; the first delta for an
index (or one carrying a new id) opens a call, later ones append argument
fragments to it.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import ChatCompletionChunk
from ..streaming import StreamState
from .response import convert_finish_reason, convert_usage, reasoning_text


class OpenAIStreamTranslator:
    """Stateful translator for one stream (``translate(state, event)``)."""

    def __init__(self) -> None:
        self._positions: Dict[int, int] = {}
        self._seen_native_id = False

    def __call__(self, state: StreamState, event: Any) -> List[Optional[ChatCompletionChunk]]:
        out: List[Optional[ChatCompletionChunk]] = []
        native_id = getattr(event, "id", None)
        if native_id and not self._seen_native_id and state.emitted == 0:
            state.id = native_id
            self._seen_native_id = True
        state.on_usage(convert_usage(getattr(event, "usage", None)))
        for choice in getattr(event, "choices", None) or ():
            delta = getattr(choice, "delta", None)
            if delta is not None:
                out.append(state.on_reasoning_delta(reasoning_text(delta)))
                out.append(state.on_text_delta(getattr(delta, "content", None)))
                for tc in getattr(delta, "tool_calls", None) or ():
                    out.append(self._tool_call_delta(state, tc))
            reason = getattr(choice, "finish_reason", None)
            if reason:
                state.on_finish(convert_finish_reason(reason))
        return out

    def _tool_call_delta(self, state: StreamState, tc: Any) -> Optional[ChatCompletionChunk]:
        idx = getattr(tc, "index", None)
        if idx is None:
            idx = len(self._positions)
        fn = getattr(tc, "function", None)
        call_id = getattr(tc, "id", None)
        pos = self._positions.get(idx)
        if pos is None or (call_id and state.tool_calls[pos].id != call_id):
            pos = state.on_tool_call_start(call_id, getattr(fn, "name", None))
            self._positions[idx] = pos
        return state.on_tool_call_arguments(getattr(fn, "arguments", None), index=pos)


__all__ = ["OpenAIStreamTranslator"]
