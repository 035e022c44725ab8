"""
Message DTO used across providers.

Defines the immutable `Message` model and the `Role` literal. Content is
either a plain string or an ordered tuple of `ContentPart` objects for
multimodal input; exactly one of the two shapes is populated. Helpers are
provided for the common inspection and flattening needs of the converters.
"""
from __future__ import annotations

from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .content_part import ContentPart
from .tool import ToolCall


# Message roles used across providers.
Role = Literal["system", "user", "assistant", "tool"]

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLE_TOOL = "tool"


class Reasoning(BaseModel):
    """Model deliberation text exposed separately from the final answer."""

    model_config = ConfigDict(frozen=True)

    content: str = ""


class Message(BaseModel):
    """One turn in a conversation.

    Attributes:
        role: Author role (``"system"``, ``"user"``, ``"assistant"``, ``"tool"``).
        content: Plain text or a tuple of `ContentPart` items.
        tool_calls: Tool invocations requested by an assistant turn.
        tool_call_id: Identifier of the call a ``tool`` message answers.
        reasoning: Optional reasoning block attached to an assistant turn.
        name: Optional author/function name.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: Union[str, Tuple[ContentPart, ...]] = ""
    tool_calls: Optional[Tuple[ToolCall, ...]] = None
    tool_call_id: Optional[str] = None
    reasoning: Optional[Reasoning] = None
    name: Optional[str] = None

    def is_multimodal(self) -> bool:
        """Return True if the content is a sequence of parts."""
        return not isinstance(self.content, str)

    def content_string(self) -> str:
        """Return the text view of the content.

        Plain string content is returned unchanged; for part sequences the
        text parts are concatenated and non-text parts are skipped.
        """
        if isinstance(self.content, str):
            return self.content
        return "".join(p.text or "" for p in self.content if p.type == "text")

    def content_parts(self) -> List[ContentPart]:
        """Return content as a list of parts (a single text part for strings)."""
        if isinstance(self.content, str):
            return [ContentPart.from_text(self.content)] if self.content else []
        return list(self.content)


__all__ = [
    "Message",
    "Reasoning",
    "Role",
    "ROLE_SYSTEM",
    "ROLE_USER",
    "ROLE_ASSISTANT",
    "ROLE_TOOL",
]
