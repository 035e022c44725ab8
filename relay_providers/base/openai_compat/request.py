"""
OpenAI Chat Completions request builder.

Translates `CompletionParams` into the keyword arguments accepted by
``openai.OpenAI().chat.completions.create``. Every OpenAI-compatible backend
(OpenAI, DeepSeek, Mistral, Groq, llama.cpp) shares this mapping; backend
quirks are applied to the canonical params before they get here.

System messages stay ``system``-role entries; tool results are ``tool``-role
entries keyed by ``tool_call_id``. Tool ``required`` lists are validated and
a malformed one raises `ToolSchemaError` before any network call.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import (
    CompletionParams,
    ContentPart,
    Message,
    ResponseFormat,
    StreamOptions,
    Tool,
    ToolChoice,
    RESPONSE_FORMAT_JSON_SCHEMA,
)
from ..utils.tools import required_fields


def convert_part(part: ContentPart) -> Dict[str, Any]:
    if part.type == "image_url" and part.image_url is not None:
        image: Dict[str, Any] = {"url": part.image_url.url}
        if part.image_url.detail:
            image["detail"] = part.image_url.detail
        return {"type": "image_url", "image_url": image}
    if part.type == "file" and part.file is not None:
        file: Dict[str, Any] = {"file_data": part.file.file_data}
        if part.file.filename:
            file["filename"] = part.file.filename
        return {"type": "file", "file": file}
    return {"type": "text", "text": part.text or ""}


def convert_message(message: Message) -> Dict[str, Any]:
    """Map one canonical message to an OpenAI message dict."""
    out: Dict[str, Any] = {"role": message.role}
    if message.is_multimodal():
        out["content"] = [convert_part(p) for p in message.content]
    else:
        out["content"] = message.content
    if message.tool_calls:
        out["tool_calls"] = [
            {
                "id": tc.id,
                "type": "function",
                "function": {"name": tc.function.name, "arguments": tc.function.arguments},
            }
            for tc in message.tool_calls
        ]
        if not out["content"]:
            out["content"] = None
    if message.tool_call_id:
        out["tool_call_id"] = message.tool_call_id
    if message.name:
        out["name"] = message.name
    return out


def convert_tool(provider: str, tool: Tool) -> Dict[str, Any]:
    required_fields(provider, tool)
    function: Dict[str, Any] = {"name": tool.function.name}
    if tool.function.description:
        function["description"] = tool.function.description
    if tool.function.parameters is not None:
        function["parameters"] = dict(tool.function.parameters)
    return {"type": "function", "function": function}


def convert_tool_choice(choice: Any) -> Any:
    if isinstance(choice, ToolChoice):
        return {"type": "function", "function": {"name": choice.function.name}}
    return choice


def convert_response_format(fmt: ResponseFormat) -> Dict[str, Any]:
    if fmt.type == RESPONSE_FORMAT_JSON_SCHEMA and fmt.json_schema is not None:
        schema: Dict[str, Any] = {"name": fmt.json_schema.name, "schema": fmt.json_schema.schema_}
        if fmt.json_schema.description:
            schema["description"] = fmt.json_schema.description
        if fmt.json_schema.strict is not None:
            schema["strict"] = fmt.json_schema.strict
        return {"type": "json_schema", "json_schema": schema}
    return {"type": fmt.type}


def build_chat_kwargs(provider: str, params: CompletionParams, *, stream: bool = False) -> Dict[str, Any]:
    """Return ``chat.completions.create`` kwargs for ``params``.

    Raises:
        ToolSchemaError: a tool's ``required`` list is malformed.
    """
    kwargs: Dict[str, Any] = {
        "model": params.model,
        "messages": [convert_message(m) for m in params.messages],
    }
    optional: Dict[str, Optional[Any]] = {
        "temperature": params.temperature,
        "top_p": params.top_p,
        "max_tokens": params.max_tokens,
        "seed": params.seed,
        "user": params.user,
        "parallel_tool_calls": params.parallel_tool_calls,
    }
    kwargs.update({k: v for k, v in optional.items() if v is not None})
    if params.stop:
        kwargs["stop"] = list(params.stop)
    if params.tools:
        tools: List[Dict[str, Any]] = [convert_tool(provider, t) for t in params.tools]
        kwargs["tools"] = tools
    if params.tool_choice is not None:
        kwargs["tool_choice"] = convert_tool_choice(params.tool_choice)
    if params.reasoning_effort is not None:
        kwargs["reasoning_effort"] = params.reasoning_effort.value
    if params.response_format is not None:
        kwargs["response_format"] = convert_response_format(params.response_format)
    if stream:
        kwargs["stream"] = True
        opts = params.stream_options or StreamOptions()
        kwargs["stream_options"] = {"include_usage": opts.include_usage}
    if params.extra:
        kwargs["extra_body"] = dict(params.extra)
    return kwargs


__all__ = [
    "build_chat_kwargs",
    "convert_message",
    "convert_part",
    "convert_response_format",
    "convert_tool",
    "convert_tool_choice",
]
