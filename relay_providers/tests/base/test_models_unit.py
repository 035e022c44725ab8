from __future__ import annotations

import pytest
from pydantic import ValidationError

from relay_providers.base.models import (
    ChatCompletionChunk,
    ChunkChoice,
    ChunkDelta,
    CompletionParams,
    ContentPart,
    EmbeddingParams,
    FinishReason,
    JSONSchema,
    Message,
    ModelInfo,
    ModelsResponse,
    ReasoningEffort,
    Tool,
    ToolChoice,
    Usage,
)


def test_message_plain_and_multimodal_views():
    plain = Message(role="user", content="hi")
    assert not plain.is_multimodal()  # nosec B101
    assert plain.content_string() == "hi"  # nosec B101
    assert [p.text for p in plain.content_parts()] == ["hi"]  # nosec B101

    multi = Message(
        role="user",
        content=(
            ContentPart.from_text("look "),
            ContentPart.from_image_url("https://example.com/cat.png"),
            ContentPart.from_text("here"),
        ),
    )
    assert multi.is_multimodal()  # nosec B101
    assert multi.content_string() == "look here"  # nosec B101
    assert len(multi.content_parts()) == 3  # nosec B101


def test_message_is_immutable():
    msg = Message(role="user", content="hi")
    with pytest.raises(ValidationError):
        msg.content = "changed"  # type: ignore[misc]


def test_message_rejects_unknown_role():
    with pytest.raises(ValidationError):
        Message(role="robot", content="x")  # type: ignore[arg-type]


def test_image_url_data_detection():
    part = ContentPart.from_image_url("data:image/png;base64,AAAA")
    assert part.image_url is not None and part.image_url.is_data_url()  # nosec B101
    remote = ContentPart.from_image_url("https://example.com/x.jpg")
    assert remote.image_url is not None and not remote.image_url.is_data_url()  # nosec B101


def test_usage_total_computed_when_absent():
    assert Usage.from_counts(10, 5).total_tokens == 15  # nosec B101
    assert Usage.from_counts(10, 5, total=20).total_tokens == 20  # nosec B101
    u = Usage.from_counts(None, None, reasoning=3)
    assert (u.prompt_tokens, u.completion_tokens, u.reasoning_tokens) == (0, 0, 3)  # nosec B101


def test_json_schema_alias_round_trip():
    schema = JSONSchema.model_validate({"name": "answer", "schema": {"type": "object"}})
    assert schema.schema_ == {"type": "object"}  # nosec B101


def test_completion_params_wants_reasoning():
    base = CompletionParams(model="m", messages=(Message(role="user", content="x"),))
    assert not base.wants_reasoning()  # nosec B101
    high = base.model_copy(update={"reasoning_effort": ReasoningEffort.HIGH})
    assert high.wants_reasoning()  # nosec B101


def test_tool_helpers():
    tool = Tool.define("get_weather", "Weather lookup", {"type": "object", "properties": {}})
    assert tool.type == "function"  # nosec B101
    assert tool.function.name == "get_weather"  # nosec B101
    choice = ToolChoice.for_function("get_weather")
    assert choice.function.name == "get_weather"  # nosec B101


def test_chunk_shortcuts():
    chunk = ChatCompletionChunk(
        id="c1",
        created=1,
        model="m",
        choices=(ChunkChoice(delta=ChunkDelta(content="x"), finish_reason=FinishReason.STOP),),
    )
    assert chunk.delta.content == "x"  # nosec B101
    assert chunk.finish_reason is FinishReason.STOP  # nosec B101
    assert chunk.object == "chat.completion.chunk"  # nosec B101
    assert ChunkDelta().is_empty()  # nosec B101


def test_embedding_inputs_and_model_listing():
    assert EmbeddingParams(model="e", input="one").inputs() == ["one"]  # nosec B101
    assert EmbeddingParams(model="e", input=("a", "b")).inputs() == ["a", "b"]  # nosec B101
    listing = ModelsResponse(data=(ModelInfo(id="b"), ModelInfo(id="a")))
    assert listing.ids() == ["b", "a"]  # nosec B101
