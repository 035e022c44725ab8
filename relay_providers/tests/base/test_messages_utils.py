from __future__ import annotations

from relay_providers.base.models import Message
from relay_providers.base.utils.ids import generate_id
from relay_providers.base.utils.messages import parse_data_url, split_system_messages


def test_split_system_messages_joins_in_order():
    messages = [
        Message(role="system", content="one"),
        Message(role="user", content="hi"),
        Message(role="system", content="two"),
        Message(role="assistant", content="hello"),
    ]
    system, rest = split_system_messages(messages)
    assert system == "one\ntwo"  # nosec B101
    assert [m.role for m in rest] == ["user", "assistant"]  # nosec B101


def test_split_without_system():
    system, rest = split_system_messages([Message(role="user", content="x")])
    assert system is None  # nosec B101
    assert len(rest) == 1  # nosec B101


def test_parse_data_url():
    assert parse_data_url("data:image/png;base64,QUJD") == ("image/png", "QUJD")  # nosec B101
    assert parse_data_url("https://example.com/a.png") is None  # nosec B101
    assert parse_data_url("data:image/png;base64") is None  # nosec B101


def test_generate_id_prefix_and_uniqueness():
    a, b = generate_id("call_"), generate_id("call_")
    assert a.startswith("call_") and len(a) == len("call_") + 24  # nosec B101
    assert a != b  # nosec B101
