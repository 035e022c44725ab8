"""Gemini request/response conversion (google-genai).

Purpose:
- Build ``(contents, GenerateContentConfig)`` for
  ``client.models.generate_content`` from canonical `CompletionParams`.
- Convert ``GenerateContentResponse`` objects back into a `ChatCompletion`.

Mapping notes:
- System messages are joined with newlines into ``system_instruction``.
- Assistant turns use the ``model`` role; tool results become user-role
  ``function_response`` parts. Their payload is the JSON-parsed content when
  it is an object, else ``{"result": content}``. The function name comes from
  the message name, then the matching earlier tool call, then ``"function"``.
- ``data:`` image URLs become inline bytes; other URLs become file data with
  an assumed JPEG MIME type.
- Reasoning effort maps to a thinking budget with thoughts included.
- Unknown roles are skipped with a warning.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from google.genai import types

from ..base.logging import get_logger, log_event
from ..base.models import (
    ChatCompletion,
    Choice,
    CompletionParams,
    ContentPart,
    FinishReason,
    FunctionCall,
    ImageURL,
    Message,
    Reasoning,
    ReasoningEffort,
    ResponseFormat,
    Tool,
    ToolCall,
    ToolChoice,
    Usage,
    ROLE_ASSISTANT,
    ROLE_TOOL,
    ROLE_USER,
    RESPONSE_FORMAT_JSON_OBJECT,
    RESPONSE_FORMAT_JSON_SCHEMA,
)
from ..base.streaming.stream_state import TOOL_CALL_ID_PREFIX
from ..base.utils.ids import generate_id
from ..base.utils.messages import parse_data_url, split_system_messages
from ..base.utils.tools import required_fields
from ..config.defaults import (
    GEMINI_DEFAULT_IMAGE_MIME,
    GEMINI_FALLBACK_FUNCTION_NAME,
    GEMINI_THINKING_BUDGETS,
)

PROVIDER_NAME = "gemini"
COMPLETION_ID_PREFIX = "gemini-"
ROLE_MODEL = "model"
JSON_MIME = "application/json"

_logger = get_logger("providers.gemini")

_FINISH_REASONS = {
    "STOP": FinishReason.STOP,
    "MAX_TOKENS": FinishReason.LENGTH,
    "SAFETY": FinishReason.CONTENT_FILTER,
    "BLOCKLIST": FinishReason.CONTENT_FILTER,
    "PROHIBITED_CONTENT": FinishReason.CONTENT_FILTER,
    "RECITATION": FinishReason.STOP,
}


def _enum_name(value: Any) -> str:
    if value is None:
        return ""
    return str(getattr(value, "value", value))


def convert_finish_reason(reason: Any) -> FinishReason:
    """Unknown or missing reasons map to ``stop``."""
    return _FINISH_REASONS.get(_enum_name(reason), FinishReason.STOP)


def thinking_budget(effort: Optional[ReasoningEffort]) -> Optional[int]:
    if effort is None:
        return None
    return GEMINI_THINKING_BUDGETS.get(effort.value)


def convert_image(image: ImageURL) -> types.Part:
    parsed = parse_data_url(image.url)
    if parsed is not None:
        mime, payload = parsed
        try:
            return types.Part.from_bytes(data=base64.b64decode(payload, validate=True), mime_type=mime)
        except (binascii.Error, ValueError):
            pass
    return types.Part.from_uri(file_uri=image.url, mime_type=GEMINI_DEFAULT_IMAGE_MIME)


def convert_user(message: Message) -> types.Content:
    if not message.is_multimodal():
        return types.Content(role=ROLE_USER, parts=[types.Part.from_text(text=message.content_string())])
    parts: List[types.Part] = []
    for part in message.content:
        if part.type == "text":
            parts.append(types.Part.from_text(text=part.text or ""))
        elif part.type == "image_url" and part.image_url is not None:
            parts.append(convert_image(part.image_url))
    return types.Content(role=ROLE_USER, parts=parts)


def _parse_args(arguments: str) -> Dict[str, Any]:
    try:
        value = json.loads(arguments) if arguments else {}
    except ValueError:
        return {}
    return value if isinstance(value, dict) else {}


def convert_assistant(message: Message) -> Optional[types.Content]:
    parts: List[types.Part] = []
    text = message.content_string()
    if text:
        parts.append(types.Part.from_text(text=text))
    for tc in message.tool_calls or ():
        parts.append(types.Part.from_function_call(name=tc.function.name, args=_parse_args(tc.function.arguments)))
    if not parts:
        return None
    return types.Content(role=ROLE_MODEL, parts=parts)


def tool_response_payload(content: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(content)
    except ValueError:
        parsed = None
    return parsed if isinstance(parsed, dict) else {"result": content}


def convert_tool_result(message: Message, call_names: Dict[str, str]) -> types.Content:
    name = (
        message.name
        or call_names.get(message.tool_call_id or "")
        or GEMINI_FALLBACK_FUNCTION_NAME
    )
    part = types.Part.from_function_response(name=name, response=tool_response_payload(message.content_string()))
    return types.Content(role=ROLE_USER, parts=[part])


def convert_messages(messages: Tuple[Message, ...]) -> Tuple[List[types.Content], Optional[str]]:
    """Return ``(contents, system_instruction)``."""
    system, rest = split_system_messages(messages)
    contents: List[types.Content] = []
    call_names: Dict[str, str] = {}
    for m in rest:
        if m.role == ROLE_USER:
            contents.append(convert_user(m))
        elif m.role == ROLE_ASSISTANT:
            for tc in m.tool_calls or ():
                call_names[tc.id] = tc.function.name
            converted = convert_assistant(m)
            if converted is not None:
                contents.append(converted)
        elif m.role == ROLE_TOOL:
            contents.append(convert_tool_result(m, call_names))
        else:
            log_event(_logger, "convert.skip_message", level=logging.WARNING, provider=PROVIDER_NAME, role=m.role)
    return contents, system


def convert_tools(tools: Tuple[Tool, ...]) -> List[types.Tool]:
    declarations = []
    for tool in tools:
        required_fields(PROVIDER_NAME, tool)
        kwargs: Dict[str, Any] = {"name": tool.function.name, "description": tool.function.description}
        if tool.function.parameters is not None:
            kwargs["parameters_json_schema"] = dict(tool.function.parameters)
        declarations.append(types.FunctionDeclaration(**kwargs))
    return [types.Tool(function_declarations=declarations)]


def convert_tool_choice(choice: Any) -> Optional[types.ToolConfig]:
    if isinstance(choice, ToolChoice):
        cfg = types.FunctionCallingConfig(mode="ANY", allowed_function_names=[choice.function.name])
    elif choice == "auto":
        cfg = types.FunctionCallingConfig(mode="AUTO")
    elif choice == "none":
        cfg = types.FunctionCallingConfig(mode="NONE")
    elif choice == "required":
        cfg = types.FunctionCallingConfig(mode="ANY")
    else:
        return None
    return types.ToolConfig(function_calling_config=cfg)


def apply_response_format(kwargs: Dict[str, Any], fmt: Optional[ResponseFormat]) -> None:
    if fmt is None:
        return
    if fmt.type == RESPONSE_FORMAT_JSON_OBJECT:
        kwargs["response_mime_type"] = JSON_MIME
    elif fmt.type == RESPONSE_FORMAT_JSON_SCHEMA and fmt.json_schema is not None:
        kwargs["response_mime_type"] = JSON_MIME
        kwargs["response_json_schema"] = fmt.json_schema.schema_


def build_request(params: CompletionParams) -> Tuple[List[types.Content], types.GenerateContentConfig]:
    """Return ``(contents, config)`` for ``params``.

    Raises:
        ToolSchemaError: a tool's ``required`` list is malformed.
    """
    contents, system = convert_messages(params.messages)
    kwargs: Dict[str, Any] = {}
    if system is not None:
        kwargs["system_instruction"] = system
    if params.temperature is not None:
        kwargs["temperature"] = params.temperature
    if params.top_p is not None:
        kwargs["top_p"] = params.top_p
    if params.max_tokens is not None:
        kwargs["max_output_tokens"] = params.max_tokens
    if params.stop:
        kwargs["stop_sequences"] = list(params.stop)
    if params.seed is not None:
        kwargs["seed"] = params.seed
    if params.tools:
        kwargs["tools"] = convert_tools(params.tools)
    if params.tool_choice is not None:
        tool_config = convert_tool_choice(params.tool_choice)
        if tool_config is not None:
            kwargs["tool_config"] = tool_config
    budget = thinking_budget(params.reasoning_effort)
    if budget is not None:
        kwargs["thinking_config"] = types.ThinkingConfig(include_thoughts=True, thinking_budget=budget)
    apply_response_format(kwargs, params.response_format)
    return contents, types.GenerateContentConfig(**kwargs)


def function_call_arguments(args: Any) -> str:
    return json.dumps(dict(args)) if args is not None else "{}"


def convert_usage(meta: Any) -> Optional[Usage]:
    if meta is None:
        return None
    return Usage.from_counts(
        getattr(meta, "prompt_token_count", None),
        getattr(meta, "candidates_token_count", None),
        reasoning=getattr(meta, "thoughts_token_count", None),
    )


def candidate_parts(resp: Any) -> Tuple[Any, List[Any]]:
    """Return ``(first_candidate, its_parts)``; ``(None, [])`` when empty."""
    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return None, []
    candidate = candidates[0]
    content = getattr(candidate, "content", None)
    return candidate, list(getattr(content, "parts", None) or [])


def convert_response(resp: Any, model: str) -> ChatCompletion:
    candidate, parts = candidate_parts(resp)
    text: List[str] = []
    thoughts: List[str] = []
    tool_calls: List[ToolCall] = []
    for part in parts:
        fc = getattr(part, "function_call", None)
        if fc is not None:
            tool_calls.append(
                ToolCall(
                    id=getattr(fc, "id", None) or generate_id(TOOL_CALL_ID_PREFIX),
                    function=FunctionCall(name=fc.name or "", arguments=function_call_arguments(fc.args)),
                )
            )
        elif getattr(part, "thought", None):
            thoughts.append(part.text or "")
        elif getattr(part, "text", None):
            text.append(part.text)
    finish = convert_finish_reason(getattr(candidate, "finish_reason", None))
    if tool_calls and finish is FinishReason.STOP:
        finish = FinishReason.TOOL_CALLS
    reasoning = "".join(thoughts)
    message = Message(
        role=ROLE_ASSISTANT,
        content="".join(text),
        tool_calls=tuple(tool_calls) if tool_calls else None,
        reasoning=Reasoning(content=reasoning) if reasoning else None,
    )
    return ChatCompletion(
        id=generate_id(COMPLETION_ID_PREFIX),
        created=int(time.time()),
        model=model,
        choices=(Choice(index=0, message=message, finish_reason=finish),),
        usage=convert_usage(getattr(resp, "usage_metadata", None)),
    )


__all__ = [
    "COMPLETION_ID_PREFIX",
    "build_request",
    "candidate_parts",
    "convert_finish_reason",
    "convert_image",
    "convert_messages",
    "convert_response",
    "convert_tool_choice",
    "convert_tools",
    "convert_usage",
    "function_call_arguments",
    "thinking_budget",
    "tool_response_payload",
]
