"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the Protocols split into single-class modules under
``relay_providers.base.interfaces_parts`` so imports stay stable.
"""

from __future__ import annotations

from .interfaces_parts import (
    EmbeddingProvider,
    ErrorConverter,
    ModelLister,
    Provider,
)

__all__ = [
    "Provider",
    "EmbeddingProvider",
    "ModelLister",
    "ErrorConverter",
]
