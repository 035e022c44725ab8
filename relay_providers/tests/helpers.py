"""Shared fakes for provider tests.

SDK clients are replaced by ``SimpleNamespace`` trees whose leaf callables
record their keyword arguments and return canned native objects.
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterable, List, Optional

from relay_providers.base.models import ChatCompletionChunk, CompletionParams, Message


class Recorder:
    """Callable that records kwargs and returns (or raises) a canned value."""

    def __init__(self, result: Any = None, error: Optional[BaseException] = None) -> None:
        self.result = result
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result() if callable(self.result) else self.result


class ClosingIterator:
    """Native stream stand-in that yields ``events`` and records ``close``."""

    def __init__(self, events: Iterable[Any], fail_with: Optional[BaseException] = None) -> None:
        self._events = list(events)
        self._fail_with = fail_with
        self.closed = False

    def __iter__(self):
        yield from self._events
        if self._fail_with is not None:
            raise self._fail_with

    def close(self) -> None:
        self.closed = True


def simple_params(model: str = "test-model", **kwargs: Any) -> CompletionParams:
    messages = kwargs.pop(
        "messages",
        (Message(role="system", content="Be terse."), Message(role="user", content="2+2?")),
    )
    return CompletionParams(model=model, messages=tuple(messages), **kwargs)


def collect(stream: Iterable[ChatCompletionChunk]) -> List[ChatCompletionChunk]:
    return list(stream)


def content_deltas(chunks: Iterable[ChatCompletionChunk]) -> List[str]:
    return [c.delta.content for c in chunks if c.delta.content]


def openai_chunk(
    content: Optional[str] = None,
    *,
    finish_reason: Optional[str] = None,
    tool_calls: Optional[list] = None,
    usage: Any = None,
    chunk_id: str = "chatcmpl-native",
    reasoning_content: Optional[str] = None,
) -> SimpleNamespace:
    delta = SimpleNamespace(content=content, tool_calls=tool_calls, reasoning_content=reasoning_content)
    choices = [SimpleNamespace(index=0, delta=delta, finish_reason=finish_reason)]
    return SimpleNamespace(id=chunk_id, choices=choices, usage=usage)


def openai_tool_delta(index: int, *, call_id: Optional[str] = None, name: Optional[str] = None, arguments: Optional[str] = None):
    return SimpleNamespace(index=index, id=call_id, function=SimpleNamespace(name=name, arguments=arguments))


def fake_openai_client(
    create: Optional[Callable[..., Any]] = None,
    embeddings: Optional[Callable[..., Any]] = None,
    models: Optional[Callable[..., Any]] = None,
) -> SimpleNamespace:
    return SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=create or Recorder())),
        embeddings=SimpleNamespace(create=embeddings or Recorder()),
        models=SimpleNamespace(list=models or Recorder(result=[])),
    )


__all__ = [
    "ClosingIterator",
    "Recorder",
    "collect",
    "content_deltas",
    "fake_openai_client",
    "openai_chunk",
    "openai_tool_delta",
    "simple_params",
]
