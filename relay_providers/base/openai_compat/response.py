"""
OpenAI Chat Completions response conversion.

Maps SDK ``ChatCompletion`` objects (or anything shaped like them) onto the
canonical `ChatCompletion`. Reasoning text is read from the
``reasoning_content`` / ``reasoning`` extension fields some compatible
backends add to messages and deltas.
"""
from __future__ import annotations

import time
from typing import Any, List, Optional

from ..models import (
    ChatCompletion,
    Choice,
    FinishReason,
    FunctionCall,
    Message,
    Reasoning,
    ToolCall,
    Usage,
    ROLE_ASSISTANT,
)
from ..streaming.stream_state import TOOL_CALL_ID_PREFIX
from ..utils.ids import generate_id

_FINISH_REASONS = {
    "stop": FinishReason.STOP,
    "length": FinishReason.LENGTH,
    "tool_calls": FinishReason.TOOL_CALLS,
    "function_call": FinishReason.TOOL_CALLS,
    "content_filter": FinishReason.CONTENT_FILTER,
}

COMPLETION_ID_PREFIX = "chatcmpl-"


def convert_finish_reason(reason: Optional[str]) -> FinishReason:
    """Unknown or missing reasons map to ``stop``."""
    return _FINISH_REASONS.get(reason or "", FinishReason.STOP)


def reasoning_text(obj: Any) -> Optional[str]:
    """Return the reasoning extension field of a message or delta, if any."""
    for attr in ("reasoning_content", "reasoning"):
        val = getattr(obj, attr, None)
        if isinstance(val, str) and val:
            return val
    return None


def convert_usage(usage: Any) -> Optional[Usage]:
    if usage is None:
        return None
    details = getattr(usage, "completion_tokens_details", None)
    return Usage.from_counts(
        getattr(usage, "prompt_tokens", None),
        getattr(usage, "completion_tokens", None),
        getattr(usage, "total_tokens", None),
        getattr(details, "reasoning_tokens", None) if details is not None else None,
    )


def convert_tool_calls(raw_calls: Any) -> Optional[List[ToolCall]]:
    if not raw_calls:
        return None
    calls = []
    for tc in raw_calls:
        fn = getattr(tc, "function", None)
        calls.append(
            ToolCall(
                id=getattr(tc, "id", None) or generate_id(TOOL_CALL_ID_PREFIX),
                function=FunctionCall(
                    name=getattr(fn, "name", None) or "",
                    arguments=getattr(fn, "arguments", None) or "",
                ),
            )
        )
    return calls


def convert_choice(raw: Any) -> Choice:
    msg = raw.message
    tool_calls = convert_tool_calls(getattr(msg, "tool_calls", None))
    reasoning = reasoning_text(msg)
    finish = convert_finish_reason(getattr(raw, "finish_reason", None))
    if tool_calls and finish is FinishReason.STOP:
        finish = FinishReason.TOOL_CALLS
    message = Message(
        role=ROLE_ASSISTANT,
        content=getattr(msg, "content", None) or "",
        tool_calls=tuple(tool_calls) if tool_calls else None,
        reasoning=Reasoning(content=reasoning) if reasoning else None,
    )
    return Choice(index=getattr(raw, "index", 0) or 0, message=message, finish_reason=finish)


def convert_completion(resp: Any, model: str) -> ChatCompletion:
    """Convert an SDK chat completion to the canonical model."""
    choices = tuple(convert_choice(c) for c in (getattr(resp, "choices", None) or ()))
    if not choices:
        choices = (Choice(message=Message(role=ROLE_ASSISTANT), finish_reason=FinishReason.STOP),)
    return ChatCompletion(
        id=getattr(resp, "id", None) or generate_id(COMPLETION_ID_PREFIX),
        created=getattr(resp, "created", None) or int(time.time()),
        model=getattr(resp, "model", None) or model,
        choices=choices,
        usage=convert_usage(getattr(resp, "usage", None)),
    )


__all__ = [
    "COMPLETION_ID_PREFIX",
    "convert_choice",
    "convert_completion",
    "convert_finish_reason",
    "convert_tool_calls",
    "convert_usage",
    "reasoning_text",
]
