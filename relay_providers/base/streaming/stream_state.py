"""
Streaming reconstruction state.

Purpose
-------
`StreamState` turns the provider-specific stream events, once classified by a
provider translator, into well-formed incremental chunks plus exactly one
final chunk. One instance belongs to one streaming call and is only touched
by that call's producer thread.

Event rules
-----------
- text delta: appended to the text buffer; one chunk carrying that delta.
- reasoning delta: appended to the reasoning buffer; one chunk carrying it.
- tool-call start: a new call with empty arguments becomes current; no chunk.
- argument delta: appended to the addressed (default: current) call; a chunk
  carrying the updated call, also for an empty fragment. No call to address
  means no-op.
- tool-call end: a call whose arguments are still empty reads ``"{}"``; a
  chunk carrying it. Calls still open when the native stream ends are
  completed the same way before the final chunk.
- usage: replaces the snapshot.
- finish signal: recorded; no chunk.

`final_chunk` closes the state. Its finish reason is ``tool_calls`` when any
call was accumulated, else a recorded ``length``/``content_filter``, else
``stop``.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..models import (
    ChatCompletionChunk,
    ChunkChoice,
    ChunkDelta,
    FinishReason,
    FunctionCall,
    Reasoning,
    ToolCall,
    Usage,
    ROLE_ASSISTANT,
)
from ..utils.ids import generate_id

TOOL_CALL_ID_PREFIX = "call_"
EMPTY_ARGUMENTS = "{}"


@dataclass
class StreamState:
    """Per-stream accumulator (see module docstring for event rules)."""

    id: str
    model: str
    created: int = field(default_factory=lambda: int(time.time()))
    text: List[str] = field(default_factory=list)
    reasoning: List[str] = field(default_factory=list)
    tool_calls: List[ToolCall] = field(default_factory=list)
    current_tool: int = -1
    finish_reason: Optional[FinishReason] = None
    usage: Optional[Usage] = None
    emitted: int = 0
    closed: bool = False
    _role_sent: bool = field(default=False, repr=False)

    @property
    def content(self) -> str:
        return "".join(self.text)

    @property
    def reasoning_content(self) -> str:
        return "".join(self.reasoning)

    def chunk(
        self,
        delta: ChunkDelta,
        *,
        finish_reason: Optional[FinishReason] = None,
        usage: Optional[Usage] = None,
    ) -> ChatCompletionChunk:
        """Wrap ``delta`` in a chunk stamped with this stream's id/model/created."""
        if not self._role_sent and not delta.role:
            delta = delta.model_copy(update={"role": ROLE_ASSISTANT})
        self._role_sent = True
        self.emitted += 1
        return ChatCompletionChunk(
            id=self.id,
            created=self.created,
            model=self.model,
            choices=(ChunkChoice(index=0, delta=delta, finish_reason=finish_reason),),
            usage=usage,
        )

    def on_text_delta(self, text: Optional[str]) -> Optional[ChatCompletionChunk]:
        if not text:
            return None
        self.text.append(text)
        return self.chunk(ChunkDelta(content=text))

    def on_reasoning_delta(self, text: Optional[str]) -> Optional[ChatCompletionChunk]:
        if not text:
            return None
        self.reasoning.append(text)
        return self.chunk(ChunkDelta(reasoning=Reasoning(content=text)))

    def on_tool_call_start(self, call_id: Optional[str], name: Optional[str]) -> int:
        """Open a new tool call and make it current; return its position."""
        self.tool_calls.append(
            ToolCall(
                id=call_id or generate_id(TOOL_CALL_ID_PREFIX),
                function=FunctionCall(name=name or "", arguments=""),
            )
        )
        self.current_tool = len(self.tool_calls) - 1
        return self.current_tool

    def on_tool_call_arguments(
        self, fragment: Optional[str], index: Optional[int] = None
    ) -> Optional[ChatCompletionChunk]:
        """Append an argument fragment to call ``index`` (default: current)."""
        pos = self._position(index)
        if pos is None:
            return None
        call = self.tool_calls[pos]
        return self._replace_arguments(pos, call.function.arguments + (fragment or ""))

    def on_tool_call_end(self, index: Optional[int] = None) -> Optional[ChatCompletionChunk]:
        """Complete call ``index`` (default: current); empty arguments become ``"{}"``."""
        pos = self._position(index)
        if pos is None or self.tool_calls[pos].function.arguments:
            return None
        return self._replace_arguments(pos, EMPTY_ARGUMENTS)

    def complete_tool_calls(self) -> List[ChatCompletionChunk]:
        """Run ``on_tool_call_end`` for every call that never received arguments."""
        chunks = [self.on_tool_call_end(pos) for pos in range(len(self.tool_calls))]
        return [c for c in chunks if c is not None]

    def _position(self, index: Optional[int]) -> Optional[int]:
        pos = self.current_tool if index is None else index
        if pos < 0 or pos >= len(self.tool_calls):
            return None
        return pos

    def _replace_arguments(self, pos: int, arguments: str) -> ChatCompletionChunk:
        call = self.tool_calls[pos]
        updated = call.model_copy(
            update={"function": call.function.model_copy(update={"arguments": arguments})}
        )
        self.tool_calls[pos] = updated
        return self.chunk(ChunkDelta(tool_calls=(updated.model_copy(update={"index": pos}),)))

    def on_usage(self, usage: Optional[Usage]) -> None:
        if usage is not None:
            self.usage = usage

    def on_finish(self, reason: Optional[FinishReason]) -> None:
        if reason is not None:
            self.finish_reason = reason

    def resolved_finish_reason(self) -> FinishReason:
        if self.tool_calls:
            return FinishReason.TOOL_CALLS
        if self.finish_reason in (FinishReason.LENGTH, FinishReason.CONTENT_FILTER):
            return self.finish_reason
        return FinishReason.STOP

    def closing_chunks(self) -> List[ChatCompletionChunk]:
        """Complete calls left without arguments, then close; the final chunk is last."""
        return self.complete_tool_calls() + [self.final_chunk()]

    def final_chunk(self) -> ChatCompletionChunk:
        """Close the state and return the single terminal chunk."""
        if self.closed:
            raise RuntimeError("stream state already closed")
        self.closed = True
        return self.chunk(
            ChunkDelta(),
            finish_reason=self.resolved_finish_reason(),
            usage=self.usage,
        )


__all__ = ["EMPTY_ARGUMENTS", "StreamState", "TOOL_CALL_ID_PREFIX"]
