from __future__ import annotations

import pytest

from relay_providers.base.errors import ToolSchemaError
from relay_providers.base.models import (
    CompletionParams,
    ContentPart,
    FunctionCall,
    JSONSchema,
    Message,
    ReasoningEffort,
    ResponseFormat,
    StreamOptions,
    Tool,
    ToolCall,
    ToolChoice,
)
from relay_providers.base.openai_compat.request import build_chat_kwargs, convert_message

from ..helpers import simple_params

WEATHER = Tool.define(
    "get_weather",
    "Weather lookup",
    {"type": "object", "properties": {"location": {"type": "string"}}, "required": ["location"]},
)


def test_system_and_user_map_to_native_roles():
    kwargs = build_chat_kwargs("openai", simple_params())
    assert kwargs["messages"] == [  # nosec B101
        {"role": "system", "content": "Be terse."},
        {"role": "user", "content": "2+2?"},
    ]
    assert "stream" not in kwargs  # nosec B101


def test_optional_fields_only_when_set():
    kwargs = build_chat_kwargs(
        "openai",
        simple_params(temperature=0.2, max_tokens=10, stop=("END",), seed=3, user="u1", parallel_tool_calls=False),
    )
    assert kwargs["temperature"] == 0.2 and kwargs["max_tokens"] == 10  # nosec B101
    assert kwargs["stop"] == ["END"] and kwargs["seed"] == 3 and kwargs["user"] == "u1"  # nosec B101
    assert kwargs["parallel_tool_calls"] is False  # nosec B101
    assert "top_p" not in build_chat_kwargs("openai", simple_params())  # nosec B101


def test_assistant_tool_calls_and_tool_result():
    assistant = Message(
        role="assistant",
        tool_calls=(ToolCall(id="call_1", function=FunctionCall(name="get_weather", arguments='{"location":"Paris"}')),),
    )
    native = convert_message(assistant)
    assert native["content"] is None  # nosec B101
    assert native["tool_calls"][0]["function"]["arguments"] == '{"location":"Paris"}'  # nosec B101
    result = convert_message(Message(role="tool", content="sunny", tool_call_id="call_1"))
    assert result == {"role": "tool", "content": "sunny", "tool_call_id": "call_1"}  # nosec B101


def test_multimodal_parts():
    msg = Message(
        role="user",
        content=(ContentPart.from_text("what"), ContentPart.from_image_url("https://x/y.png", detail="low")),
    )
    native = convert_message(msg)
    assert native["content"][1] == {"type": "image_url", "image_url": {"url": "https://x/y.png", "detail": "low"}}  # nosec B101


def test_tools_tool_choice_and_reasoning():
    params = simple_params(
        tools=(WEATHER,),
        tool_choice=ToolChoice.for_function("get_weather"),
        reasoning_effort=ReasoningEffort.LOW,
    )
    kwargs = build_chat_kwargs("openai", params)
    fn = kwargs["tools"][0]["function"]
    assert fn["parameters"]["required"] == ["location"]  # nosec B101
    assert list(fn["parameters"]["properties"]) == ["location"]  # nosec B101
    assert kwargs["tool_choice"] == {"type": "function", "function": {"name": "get_weather"}}  # nosec B101
    assert kwargs["reasoning_effort"] == "low"  # nosec B101
    assert build_chat_kwargs("openai", simple_params(tool_choice="required"))["tool_choice"] == "required"  # nosec B101


def test_malformed_required_rejected_before_call():
    bad = Tool.define("get_weather", "", {"type": "object", "properties": {}, "required": 123})
    with pytest.raises(ToolSchemaError, match="get_weather"):
        build_chat_kwargs("openai", simple_params(tools=(bad,)))


def test_json_schema_format_native():
    fmt = ResponseFormat(type="json_schema", json_schema=JSONSchema(name="a", schema={"type": "object"}, strict=True))
    kwargs = build_chat_kwargs("openai", simple_params(response_format=fmt))
    assert kwargs["response_format"] == {  # nosec B101
        "type": "json_schema",
        "json_schema": {"name": "a", "schema": {"type": "object"}, "strict": True},
    }


def test_stream_flags_and_extra_body():
    params = simple_params(stream_options=StreamOptions(include_usage=False), extra={"top_k": 5})
    kwargs = build_chat_kwargs("groq", params, stream=True)
    assert kwargs["stream"] is True  # nosec B101
    assert kwargs["stream_options"] == {"include_usage": False}  # nosec B101
    assert kwargs["extra_body"] == {"top_k": 5}  # nosec B101
    default = build_chat_kwargs("groq", simple_params(), stream=True)
    assert default["stream_options"] == {"include_usage": True}  # nosec B101


def test_request_building_does_not_mutate_params():
    params = CompletionParams(model="m", messages=(Message(role="user", content="x"),), tools=(WEATHER,))
    before = params.model_dump()
    build_chat_kwargs("openai", params)
    assert params.model_dump() == before  # nosec B101
