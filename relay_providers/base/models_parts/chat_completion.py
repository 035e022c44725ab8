"""
Canonical response DTOs: complete responses and streamed chunks.

Both shapes follow the OpenAI Chat Completions layout (id, object, created,
model, choices, usage) so that callers see one response schema regardless of
which backend produced it.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .message import Message, Reasoning
from .tool import ToolCall


OBJECT_CHAT_COMPLETION = "chat.completion"
OBJECT_CHAT_COMPLETION_CHUNK = "chat.completion.chunk"


class FinishReason(str, Enum):
    """Terminal classification of why generation stopped."""

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"


class Usage(BaseModel):
    """Token accounting for one call."""

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    reasoning_tokens: Optional[int] = None

    @classmethod
    def from_counts(
        cls,
        prompt: Optional[int],
        completion: Optional[int],
        total: Optional[int] = None,
        reasoning: Optional[int] = None,
    ) -> "Usage":
        """Build usage, computing ``total`` as prompt + completion when absent."""
        p = int(prompt or 0)
        c = int(completion or 0)
        return cls(
            prompt_tokens=p,
            completion_tokens=c,
            total_tokens=int(total) if total is not None else p + c,
            reasoning_tokens=int(reasoning) if reasoning is not None else None,
        )


class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = 0
    message: Message
    finish_reason: Optional[FinishReason] = None


class ChatCompletion(BaseModel):
    """A complete (non-streamed) response."""

    model_config = ConfigDict(frozen=True)

    id: str
    object: str = OBJECT_CHAT_COMPLETION
    created: int
    model: str
    choices: Tuple[Choice, ...]
    usage: Optional[Usage] = None

    @property
    def message(self) -> Message:
        """Shortcut for the first choice's message."""
        return self.choices[0].message


class ChunkDelta(BaseModel):
    """Incremental message fragment carried by a chunk."""

    model_config = ConfigDict(frozen=True)

    role: Optional[str] = None
    content: Optional[str] = None
    reasoning: Optional[Reasoning] = None
    tool_calls: Optional[Tuple[ToolCall, ...]] = None

    def is_empty(self) -> bool:
        return not (self.role or self.content or self.reasoning or self.tool_calls)


class ChunkChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = 0
    delta: ChunkDelta = ChunkDelta()
    finish_reason: Optional[FinishReason] = None


class ChatCompletionChunk(BaseModel):
    """One incremental unit of a streamed completion."""

    model_config = ConfigDict(frozen=True)

    id: str
    object: str = OBJECT_CHAT_COMPLETION_CHUNK
    created: int
    model: str
    choices: Tuple[ChunkChoice, ...]
    usage: Optional[Usage] = None

    @property
    def delta(self) -> ChunkDelta:
        return self.choices[0].delta

    @property
    def finish_reason(self) -> Optional[FinishReason]:
        return self.choices[0].finish_reason


__all__ = [
    "ChatCompletion",
    "ChatCompletionChunk",
    "Choice",
    "ChunkChoice",
    "ChunkDelta",
    "FinishReason",
    "Usage",
    "OBJECT_CHAT_COMPLETION",
    "OBJECT_CHAT_COMPLETION_CHUNK",
]
