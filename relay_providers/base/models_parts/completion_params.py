"""
CompletionParams DTO for provider-agnostic chat invocations.

Adapters map this normalized request shape to specific SDK calls. The request
carries model selection, messages, sampling parameters, tool definitions and
policy, reasoning effort, a response-format directive, and an escape-hatch
``extra`` mapping forwarded verbatim to OpenAI-compatible backends.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .message import Message
from .tool import Tool, ToolChoiceParam


class ReasoningEffort(str, Enum):
    """Requested depth of model deliberation."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


RESPONSE_FORMAT_TEXT = "text"
RESPONSE_FORMAT_JSON_OBJECT = "json_object"
RESPONSE_FORMAT_JSON_SCHEMA = "json_schema"


class JSONSchema(BaseModel):
    """Named JSON Schema for schema-constrained output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = "response"
    description: Optional[str] = None
    schema_: Dict[str, Any] = Field(default_factory=dict, alias="schema")
    strict: Optional[bool] = None


class ResponseFormat(BaseModel):
    """Response-format directive: free text, any JSON object, or a JSON schema."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text", "json_object", "json_schema"] = "text"
    json_schema: Optional[JSONSchema] = None


class StreamOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    include_usage: bool = True


class CompletionParams(BaseModel):
    """One canonical chat-completion request.

    Attributes:
        model: Target model identifier.
        messages: Ordered conversation; owned by the caller.
        temperature / top_p / max_tokens / stop: Sampling controls.
        tools / tool_choice / parallel_tool_calls: Tool calling controls.
        reasoning_effort: Optional deliberation level.
        response_format: Optional output-shape directive.
        stream: Whether the caller asked for streaming (informational; the
            façade method chosen decides).
        seed / user / stream_options: Passed through where supported.
        extra: Provider-specific pass-through fields.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    messages: Tuple[Message, ...]
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    stop: Optional[Tuple[str, ...]] = None
    tools: Optional[Tuple[Tool, ...]] = None
    tool_choice: Optional[ToolChoiceParam] = None
    parallel_tool_calls: Optional[bool] = None
    reasoning_effort: Optional[ReasoningEffort] = None
    response_format: Optional[ResponseFormat] = None
    stream: bool = False
    stream_options: Optional[StreamOptions] = None
    seed: Optional[int] = None
    user: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)

    def wants_reasoning(self) -> bool:
        """Return True if a non-``none`` reasoning effort was requested."""
        return self.reasoning_effort is not None and self.reasoning_effort is not ReasoningEffort.NONE


__all__ = [
    "CompletionParams",
    "JSONSchema",
    "ReasoningEffort",
    "ResponseFormat",
    "StreamOptions",
    "RESPONSE_FORMAT_TEXT",
    "RESPONSE_FORMAT_JSON_OBJECT",
    "RESPONSE_FORMAT_JSON_SCHEMA",
]
