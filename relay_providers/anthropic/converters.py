"""Anthropic Messages API request/response conversion.

Purpose:
- Build ``client.messages.create`` kwargs from canonical `CompletionParams`.
- Convert an SDK ``Message`` back into a canonical `ChatCompletion`.

Mapping notes:
- All ``system`` messages are joined with newlines into the ``system`` field.
- ``tool`` messages become ``user`` turns holding a ``tool_result`` block
  keyed by ``tool_use_id``; consecutive results share one user turn.
- Assistant tool calls become ``tool_use`` blocks; arguments that are not a
  JSON object are sent as an empty input.
- Reasoning effort enables extended thinking with a tiered budget and raises
  ``max_tokens`` to twice that budget when it is lower.
- Image parts map to base64 or URL image sources; PDF ``file`` parts map to
  base64 document blocks.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from ..base.logging import get_logger, log_event
from ..base.models import (
    ChatCompletion,
    Choice,
    CompletionParams,
    ContentPart,
    FinishReason,
    FunctionCall,
    Message,
    Reasoning,
    ReasoningEffort,
    Tool,
    ToolCall,
    ToolChoice,
    Usage,
    ROLE_ASSISTANT,
    ROLE_TOOL,
    ROLE_USER,
)
from ..base.utils.messages import parse_data_url, split_system_messages
from ..base.utils.tools import required_fields
from ..config.defaults import (
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_MAX_TOKENS_BUDGET_FACTOR,
    ANTHROPIC_THINKING_BUDGETS,
)

PROVIDER_NAME = "anthropic"
PDF_MIME = "application/pdf"

_logger = get_logger("providers.anthropic")

_STOP_REASONS = {
    "end_turn": FinishReason.STOP,
    "max_tokens": FinishReason.LENGTH,
    "tool_use": FinishReason.TOOL_CALLS,
    "stop_sequence": FinishReason.STOP,
    "refusal": FinishReason.CONTENT_FILTER,
}


def convert_stop_reason(reason: Optional[str]) -> FinishReason:
    """Unknown or missing stop reasons map to ``stop``."""
    return _STOP_REASONS.get(reason or "", FinishReason.STOP)


def thinking_budget(effort: Optional[ReasoningEffort]) -> Optional[int]:
    """Return the thinking budget for ``effort`` (``None`` for none/unknown)."""
    if effort is None:
        return None
    return ANTHROPIC_THINKING_BUDGETS.get(effort.value)


def convert_image(url: str) -> Dict[str, Any]:
    parsed = parse_data_url(url)
    if parsed is not None:
        mime, data = parsed
        return {"type": "image", "source": {"type": "base64", "media_type": mime, "data": data}}
    return {"type": "image", "source": {"type": "url", "url": url}}


def convert_part(part: ContentPart) -> Optional[Dict[str, Any]]:
    if part.type == "text":
        return {"type": "text", "text": part.text or ""}
    if part.type == "image_url" and part.image_url is not None:
        return convert_image(part.image_url.url)
    if part.type == "file" and part.file is not None:
        parsed = parse_data_url(part.file.file_data)
        if parsed is not None and parsed[0] == PDF_MIME:
            return {
                "type": "document",
                "source": {"type": "base64", "media_type": PDF_MIME, "data": parsed[1]},
            }
    return None


def convert_user_content(message: Message) -> Any:
    if not message.is_multimodal():
        return message.content_string()
    blocks = [convert_part(p) for p in message.content]
    return [b for b in blocks if b is not None]


def parse_tool_input(arguments: str) -> Dict[str, Any]:
    try:
        value = json.loads(arguments) if arguments else {}
    except ValueError:
        return {}
    return value if isinstance(value, dict) else {}


def convert_assistant(message: Message) -> Dict[str, Any]:
    text = message.content_string()
    if not message.tool_calls:
        return {"role": "assistant", "content": text}
    blocks: List[Dict[str, Any]] = []
    if text:
        blocks.append({"type": "text", "text": text})
    for tc in message.tool_calls:
        blocks.append(
            {
                "type": "tool_use",
                "id": tc.id,
                "name": tc.function.name,
                "input": parse_tool_input(tc.function.arguments),
            }
        )
    return {"role": "assistant", "content": blocks}


def tool_result_block(message: Message) -> Dict[str, Any]:
    return {
        "type": "tool_result",
        "tool_use_id": message.tool_call_id or "",
        "content": message.content_string(),
    }


def convert_messages(messages: Tuple[Message, ...]) -> Tuple[List[Dict[str, Any]], Optional[str]]:
    """Return ``(native_messages, system_text)``.

    Unknown roles are skipped with a warning.
    """
    system, rest = split_system_messages(messages)
    out: List[Dict[str, Any]] = []
    for m in rest:
        if m.role == ROLE_USER:
            out.append({"role": "user", "content": convert_user_content(m)})
        elif m.role == ROLE_ASSISTANT:
            out.append(convert_assistant(m))
        elif m.role == ROLE_TOOL:
            block = tool_result_block(m)
            prev = out[-1] if out else None
            if (
                prev is not None
                and prev["role"] == "user"
                and isinstance(prev["content"], list)
                and prev["content"]
                and all(b.get("type") == "tool_result" for b in prev["content"])
            ):
                prev["content"].append(block)
            else:
                out.append({"role": "user", "content": [block]})
        else:
            log_event(_logger, "convert.skip_message", level=logging.WARNING, provider=PROVIDER_NAME, role=m.role)
    return out, system


def convert_tool(tool: Tool) -> Dict[str, Any]:
    """Map a tool to an Anthropic tool definition; property order is kept."""
    required = required_fields(PROVIDER_NAME, tool)
    params = dict(tool.function.parameters or {})
    schema: Dict[str, Any] = {"type": params.pop("type", "object")}
    schema["properties"] = params.pop("properties", {}) or {}
    params.pop("required", None)
    if required:
        schema["required"] = required
    schema.update(params)
    out: Dict[str, Any] = {"name": tool.function.name, "input_schema": schema}
    if tool.function.description:
        out["description"] = tool.function.description
    return out


def convert_tool_choice(choice: Any, parallel_tool_calls: Optional[bool]) -> Optional[Dict[str, Any]]:
    if isinstance(choice, ToolChoice):
        native: Optional[Dict[str, Any]] = {"type": "tool", "name": choice.function.name}
    elif choice == "required":
        native = {"type": "any"}
    elif choice in ("auto", "none"):
        native = {"type": choice}
    else:
        native = None
    if parallel_tool_calls is False:
        if native is None:
            native = {"type": "auto"}
        if native["type"] != "none":
            native["disable_parallel_tool_use"] = True
    return native


def apply_thinking(kwargs: Dict[str, Any], effort: Optional[ReasoningEffort]) -> None:
    budget = thinking_budget(effort)
    if budget is None:
        return
    kwargs["thinking"] = {"type": "enabled", "budget_tokens": budget}
    floor = budget * ANTHROPIC_MAX_TOKENS_BUDGET_FACTOR
    if kwargs.get("max_tokens", 0) < floor:
        kwargs["max_tokens"] = floor


def build_message_kwargs(params: CompletionParams) -> Dict[str, Any]:
    """Return ``client.messages.create`` kwargs for ``params``.

    Raises:
        ToolSchemaError: a tool's ``required`` list is malformed.
    """
    messages, system = convert_messages(params.messages)
    kwargs: Dict[str, Any] = {
        "model": params.model,
        "messages": messages,
        "max_tokens": params.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
    }
    if system:
        kwargs["system"] = system
    if params.temperature is not None:
        kwargs["temperature"] = params.temperature
    if params.top_p is not None:
        kwargs["top_p"] = params.top_p
    if params.stop:
        kwargs["stop_sequences"] = list(params.stop)
    if params.tools:
        kwargs["tools"] = [convert_tool(t) for t in params.tools]
    tool_choice = convert_tool_choice(params.tool_choice, params.parallel_tool_calls if params.tools else None)
    if tool_choice is not None:
        kwargs["tool_choice"] = tool_choice
    if params.user:
        kwargs["metadata"] = {"user_id": params.user}
    apply_thinking(kwargs, params.reasoning_effort)
    return kwargs


def convert_usage(usage: Any, prompt_tokens: Optional[int] = None) -> Optional[Usage]:
    if usage is None:
        return None
    prompt = getattr(usage, "input_tokens", None)
    return Usage.from_counts(prompt if prompt is not None else prompt_tokens, getattr(usage, "output_tokens", None))


def convert_response(resp: Any, model: str) -> ChatCompletion:
    """Convert an SDK ``Message`` to the canonical completion."""
    text: List[str] = []
    thinking: List[str] = []
    tool_calls: List[ToolCall] = []
    for block in getattr(resp, "content", None) or ():
        kind = getattr(block, "type", None)
        if kind == "text":
            text.append(block.text)
        elif kind == "thinking":
            thinking.append(getattr(block, "thinking", "") or "")
        elif kind == "tool_use":
            tool_calls.append(
                ToolCall(
                    id=block.id,
                    function=FunctionCall(name=block.name, arguments=json.dumps(block.input or {})),
                )
            )
    finish = convert_stop_reason(getattr(resp, "stop_reason", None))
    if tool_calls and finish is FinishReason.STOP:
        finish = FinishReason.TOOL_CALLS
    reasoning = "".join(thinking)
    message = Message(
        role=ROLE_ASSISTANT,
        content="".join(text),
        tool_calls=tuple(tool_calls) if tool_calls else None,
        reasoning=Reasoning(content=reasoning) if reasoning else None,
    )
    return ChatCompletion(
        id=resp.id,
        created=int(time.time()),
        model=getattr(resp, "model", None) or model,
        choices=(Choice(index=0, message=message, finish_reason=finish),),
        usage=convert_usage(getattr(resp, "usage", None)),
    )


__all__ = [
    "apply_thinking",
    "build_message_kwargs",
    "convert_assistant",
    "convert_image",
    "convert_messages",
    "convert_response",
    "convert_stop_reason",
    "convert_tool",
    "convert_tool_choice",
    "convert_usage",
    "thinking_budget",
]
