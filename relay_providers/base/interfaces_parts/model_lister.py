"""ModelLister Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ModelsResponse


@runtime_checkable
class ModelLister(Protocol):
    """Providers that can enumerate their models.

    Implementations follow the SDK's pagination until it is exhausted.
    """

    def list_models(self) -> ModelsResponse:
        ...
