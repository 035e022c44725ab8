"""Anthropic streaming helpers.

Purpose:
- Translate raw Messages API stream events (``message_start``,
  ``content_block_start``, ``content_block_delta``, ``message_delta`` ...)
  into `StreamState` transitions.

Notes:
- ``message_start`` carries the message id and the prompt token count;
  ``message_delta`` carries the stop reason and the output token count. The
  prompt count is kept so each usage snapshot is complete.
- ``input_json_delta`` fragments append to the current tool call; a fragment
  with no open call is dropped.
- ``content_block_stop`` completes the tool call opened by that block. A
  zero-argument call arrives as ``input={}`` with an empty fragment, so its
  arguments become ``"{}"`` there.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.models import ChatCompletionChunk, Usage
from ..base.streaming import StreamState
from .converters import convert_stop_reason


class AnthropicStreamTranslator:
    """Stateful translator for one stream (``translate(state, event)``)."""

    def __init__(self) -> None:
        self.prompt_tokens: Optional[int] = None
        self._tool_blocks: Dict[Any, int] = {}

    def __call__(self, state: StreamState, event: Any) -> List[Optional[ChatCompletionChunk]]:
        kind = getattr(event, "type", None)
        if kind == "message_start":
            message = getattr(event, "message", None)
            if getattr(message, "id", None) and state.emitted == 0:
                state.id = message.id
            usage = getattr(message, "usage", None)
            if usage is not None:
                self.prompt_tokens = getattr(usage, "input_tokens", None)
                state.on_usage(Usage.from_counts(self.prompt_tokens, getattr(usage, "output_tokens", None)))
            return []
        if kind == "content_block_start":
            block = getattr(event, "content_block", None)
            if getattr(block, "type", None) == "tool_use":
                pos = state.on_tool_call_start(block.id, block.name)
                self._tool_blocks[getattr(event, "index", None)] = pos
            return []
        if kind == "content_block_stop":
            pos = self._tool_blocks.pop(getattr(event, "index", None), None)
            return [state.on_tool_call_end(pos)] if pos is not None else []
        if kind == "content_block_delta":
            return [self._delta(state, getattr(event, "delta", None))]
        if kind == "message_delta":
            delta = getattr(event, "delta", None)
            stop_reason = getattr(delta, "stop_reason", None)
            if stop_reason:
                state.on_finish(convert_stop_reason(stop_reason))
            usage = getattr(event, "usage", None)
            if usage is not None:
                prompt = getattr(usage, "input_tokens", None)
                state.on_usage(
                    Usage.from_counts(
                        prompt if prompt is not None else self.prompt_tokens,
                        getattr(usage, "output_tokens", None),
                    )
                )
            return []
        return []

    @staticmethod
    def _delta(state: StreamState, delta: Any) -> Optional[ChatCompletionChunk]:
        kind = getattr(delta, "type", None)
        if kind == "text_delta":
            return state.on_text_delta(delta.text)
        if kind == "thinking_delta":
            return state.on_reasoning_delta(delta.thinking)
        if kind == "input_json_delta":
            return state.on_tool_call_arguments(delta.partial_json)
        return None


__all__ = ["AnthropicStreamTranslator"]
