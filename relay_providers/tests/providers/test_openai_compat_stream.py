from __future__ import annotations

from types import SimpleNamespace

from relay_providers.base.models import FinishReason
from relay_providers.base.openai_compat.stream import OpenAIStreamTranslator
from relay_providers.base.streaming import StreamState

from ..helpers import openai_chunk, openai_tool_delta


def _run(events):
    state = StreamState(id="local", model="m")
    translate = OpenAIStreamTranslator()
    chunks = []
    for event in events:
        chunks.extend(c for c in translate(state, event) if c is not None)
    chunks.extend(state.closing_chunks())
    return state, chunks


def test_native_id_adopted_and_text_order_kept():
    state, chunks = _run([openai_chunk("4"), openai_chunk(" ("), openai_chunk(")", finish_reason="stop")])
    assert [c.delta.content for c in chunks[:-1]] == ["4", " (", ")"]  # nosec B101
    assert all(c.id == "chatcmpl-native" for c in chunks)  # nosec B101
    assert chunks[-1].finish_reason is FinishReason.STOP  # nosec B101


def test_tool_call_fragments_accumulate_by_index():
    events = [
        openai_chunk(tool_calls=[openai_tool_delta(0, call_id="call_a", name="get_weather", arguments="")]),
        openai_chunk(tool_calls=[openai_tool_delta(0, arguments='{"location":')]),
        openai_chunk(tool_calls=[openai_tool_delta(1, call_id="call_b", name="get_time", arguments="{}")]),
        openai_chunk(tool_calls=[openai_tool_delta(0, arguments=' "Rome"}')]),
        openai_chunk(finish_reason="tool_calls"),
    ]
    state, chunks = _run(events)
    assert [tc.function.arguments for tc in state.tool_calls] == ['{"location": "Rome"}', "{}"]  # nosec B101
    assert [tc.id for tc in state.tool_calls] == ["call_a", "call_b"]  # nosec B101
    assert chunks[-1].finish_reason is FinishReason.TOOL_CALLS  # nosec B101
    assert chunks[-2].delta.tool_calls[0].index == 0  # nosec B101


def test_tool_calls_win_over_stop_signal():
    events = [
        openai_chunk(tool_calls=[openai_tool_delta(0, call_id="c", name="f", arguments="{}")]),
        openai_chunk(finish_reason="stop"),
    ]
    _, chunks = _run(events)
    assert chunks[-1].finish_reason is FinishReason.TOOL_CALLS  # nosec B101


def test_usage_only_chunk_and_reasoning():
    usage = SimpleNamespace(prompt_tokens=3, completion_tokens=2, total_tokens=5, completion_tokens_details=None)
    events = [
        openai_chunk(reasoning_content="hmm"),
        openai_chunk("ok", finish_reason="length"),
        SimpleNamespace(id="chatcmpl-native", choices=[], usage=usage),
    ]
    state, chunks = _run(events)
    assert chunks[0].delta.reasoning.content == "hmm"  # nosec B101
    assert chunks[-1].usage.total_tokens == 5  # nosec B101
    assert chunks[-1].finish_reason is FinishReason.LENGTH  # nosec B101


def test_zero_argument_tool_call_is_delivered():
    events = [
        openai_chunk(tool_calls=[openai_tool_delta(0, call_id="call_1", name="now", arguments="")]),
        openai_chunk(finish_reason="tool_calls"),
    ]
    state, chunks = _run(events)
    delivered = [c.delta.tool_calls[0] for c in chunks if c.delta.tool_calls]
    assert delivered[0].id == "call_1" and delivered[0].function.name == "now"  # nosec B101
    assert delivered[-1].function.arguments == "{}"  # nosec B101
    assert state.tool_calls[0].function.arguments == "{}"  # nosec B101
    assert chunks[-1].finish_reason is FinishReason.TOOL_CALLS  # nosec B101
