"""
Shared provider façade plumbing.

Purpose
-------
`BaseProvider` holds what every adapter does the same way around an SDK
call: structured ``<op>.start`` / ``<op>.end`` / ``<op>.error`` events,
conversion of any SDK exception through the adapter's ``convert_error``, and
assembly of a `ChunkStream` for streamed completions. Adapters supply the
request building, the SDK call and the response conversion.

Notes
-----
- No retries or timeouts are applied here; the SDK's own settings apply.
- Converted errors are raised ``from`` the native exception so the original
  traceback stays reachable.
"""
from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Optional, TypeVar

from .cancellation import CancellationToken
from .capabilities import Capabilities
from .errors import ProviderError
from .logging import LogContext, get_logger, normalized_log_event
from .streaming import ChunkStream, StreamState, Translator

T = TypeVar("T")


class BaseProvider:
    """Common behaviour for provider adapters (see module docstring)."""

    provider_name: str = ""
    default_capabilities: Capabilities = Capabilities()

    def __init__(self) -> None:
        self._logger = get_logger(f"providers.{self.provider_name}")

    @property
    def name(self) -> str:
        return self.provider_name

    def capabilities(self) -> Capabilities:
        return self.default_capabilities

    def convert_error(self, exc: Optional[BaseException]) -> Optional[ProviderError]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _require(self, enabled: bool, operation: str) -> None:
        if not enabled:
            raise NotImplementedError(f"{self.name} does not support {operation}")

    def _call(
        self,
        operation: str,
        model: str,
        invoke: Callable[[], Any],
        convert: Callable[[Any], T],
    ) -> T:
        """Run ``invoke`` then ``convert`` with logging and error mapping."""
        ctx = LogContext(provider=self.name, model=model)
        normalized_log_event(self._logger, f"{operation}.start", ctx, phase="start", attempt=1)
        started = time.perf_counter()
        try:
            result = convert(invoke())
        except ProviderError as err:
            self._log_error(operation, ctx, err, started)
            raise
        except Exception as exc:  # noqa: BLE001 - every SDK failure is classified
            err = self.convert_error(exc)
            self._log_error(operation, ctx, err, started)
            raise err from exc
        ctx.response_id = getattr(result, "id", None)
        normalized_log_event(
            self._logger,
            f"{operation}.end",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=True,
            tokens=getattr(result, "usage", None),
            duration_ms=round((time.perf_counter() - started) * 1000.0, 3),
        )
        return result

    def _log_error(self, operation: str, ctx: LogContext, err: ProviderError, started: float) -> None:
        normalized_log_event(
            self._logger,
            f"{operation}.error",
            ctx,
            phase="finalize",
            attempt=1,
            error_code=err.code.value,
            emitted=False,
            error=err.message,
            duration_ms=round((time.perf_counter() - started) * 1000.0, 3),
        )

    def _open_stream(
        self,
        state: StreamState,
        starter: Callable[[], Iterable[Any]],
        translate: Translator,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> ChunkStream:
        return ChunkStream(
            provider=self.name,
            state=state,
            starter=starter,
            translate=translate,
            convert_error=self.convert_error,
            logger=self._logger,
            ctx=LogContext(provider=self.name, model=state.model),
            cancellation_token=cancellation_token,
        ).start()


__all__ = ["BaseProvider"]
