from __future__ import annotations

import threading

import pytest

from relay_providers.base.cancellation import CancellationToken, CancelledError


def test_cancel_sets_reason_once():
    token = CancellationToken()
    assert not token.cancelled  # nosec B101
    token.cancel("first")
    token.cancel("second")
    assert token.cancelled  # nosec B101
    assert token.reason == "first"  # nosec B101


def test_parent_cascades_to_child_but_not_back():
    parent = CancellationToken()
    child = parent.child()
    child.cancel("child only")
    assert not parent.cancelled  # nosec B101

    other = parent.child()
    parent.cancel("stop")
    assert other.cancelled  # nosec B101
    assert other.reason == "stop"  # nosec B101


def test_child_of_cancelled_parent_starts_cancelled():
    parent = CancellationToken()
    parent.cancel("done")
    assert parent.child().cancelled  # nosec B101


def test_raise_if_cancelled():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("halt")
    with pytest.raises(CancelledError, match="halt"):
        token.raise_if_cancelled()


def test_wait_returns_on_cancel_from_other_thread():
    token = CancellationToken()
    assert token.wait(timeout=0.01) is False  # nosec B101
    timer = threading.Timer(0.05, token.cancel, args=("later",))
    timer.start()
    try:
        assert token.wait(timeout=2.0) is True  # nosec B101
    finally:
        timer.cancel()


def test_on_cancel_runs_once_on_cancelling_thread():
    token = CancellationToken()
    calls = []
    token.on_cancel(lambda: calls.append(threading.current_thread().name))
    worker = threading.Thread(target=token.cancel, args=("stop",), name="canceller")
    worker.start()
    worker.join(2.0)
    token.cancel("again")
    assert calls == ["canceller"]  # nosec B101


def test_on_cancel_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel("done")
    calls = []
    token.on_cancel(lambda: calls.append("ran"))
    assert calls == ["ran"]  # nosec B101


def test_unlinked_child_no_longer_cascades():
    parent = CancellationToken()
    child = parent.child()
    parent.unlink_child(child)
    parent.unlink_child(CancellationToken())
    parent.cancel("stop")
    assert not child.cancelled  # nosec B101
