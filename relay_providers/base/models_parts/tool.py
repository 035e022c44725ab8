"""
Tool definitions and tool-call records.

`Tool` describes a callable the model may invoke (OpenAI-style
``{"type": "function", "function": {...}}`` shape). `ToolCall` is an emitted
invocation whose arguments are a JSON-encoded string; during streaming the
string is accumulated fragment by fragment and is valid JSON once complete.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FunctionDefinition(BaseModel):
    """Schema of a callable function.

    ``parameters`` is a JSON-Schema object: ``{"type": "object",
    "properties": {...}, "required": [...]}``. It is kept as a plain mapping
    so property order survives conversion; ``required`` is validated by the
    provider request converters, not here.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    parameters: Optional[Dict[str, Any]] = None


class Tool(BaseModel):
    """A tool the model may call."""

    model_config = ConfigDict(frozen=True)

    type: Literal["function"] = "function"
    function: FunctionDefinition

    @classmethod
    def define(
        cls,
        name: str,
        description: str = "",
        parameters: Optional[Dict[str, Any]] = None,
    ) -> "Tool":
        return cls(function=FunctionDefinition(name=name, description=description, parameters=parameters))


class FunctionCall(BaseModel):
    """Target function name and its JSON-encoded arguments."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    arguments: str = ""


class ToolCall(BaseModel):
    """A tool invocation emitted by the model.

    ``index`` is only populated on streamed chunks, where it identifies which
    in-progress call a delta belongs to.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    type: Literal["function"] = "function"
    function: FunctionCall = Field(default_factory=FunctionCall)
    index: Optional[int] = None


class ToolChoiceFunction(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class ToolChoice(BaseModel):
    """Force a specific function (the "specific-function" tool-choice policy)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["function"] = "function"
    function: ToolChoiceFunction

    @classmethod
    def for_function(cls, name: str) -> "ToolChoice":
        return cls(function=ToolChoiceFunction(name=name))


# "auto" | "none" | "required" | ToolChoice(function=...)
ToolChoiceParam = Union[Literal["auto", "none", "required"], ToolChoice]


__all__ = [
    "FunctionDefinition",
    "Tool",
    "FunctionCall",
    "ToolCall",
    "ToolChoice",
    "ToolChoiceFunction",
    "ToolChoiceParam",
]
