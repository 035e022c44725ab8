"""Gemini streaming helpers.

Each item of ``generate_content_stream`` is a partial
``GenerateContentResponse``. Text and thought parts become deltas; a
``function_call`` part arrives whole, so it opens a call and delivers its
full arguments in one step. Usage metadata is cumulative and replaces the
snapshot on every item that carries it.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..base.models import ChatCompletionChunk
from ..base.streaming import StreamState
from .converters import candidate_parts, convert_finish_reason, convert_usage, function_call_arguments


class GeminiStreamTranslator:
    def __call__(self, state: StreamState, event: Any) -> List[Optional[ChatCompletionChunk]]:
        state.on_usage(convert_usage(getattr(event, "usage_metadata", None)))
        candidate, parts = candidate_parts(event)
        out: List[Optional[ChatCompletionChunk]] = []
        for part in parts:
            fc = getattr(part, "function_call", None)
            if fc is not None:
                state.on_tool_call_start(getattr(fc, "id", None), fc.name)
                out.append(state.on_tool_call_arguments(function_call_arguments(fc.args)))
            elif getattr(part, "thought", None):
                out.append(state.on_reasoning_delta(part.text))
            else:
                out.append(state.on_text_delta(getattr(part, "text", None)))
        reason = getattr(candidate, "finish_reason", None)
        if reason is not None:
            state.on_finish(convert_finish_reason(reason))
        return out


__all__ = ["GeminiStreamTranslator"]
