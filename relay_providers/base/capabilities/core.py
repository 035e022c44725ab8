"""Capability descriptor for provider adapters.

Each provider declares a frozen `Capabilities` record at construction. Callers
consult it before attempting a feature. Embedding and model listing on a
provider whose record disables them raise ``NotImplementedError`` without
calling the backend.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Capabilities:
    """Static feature flags of one provider."""

    completion: bool = True
    streaming: bool = True
    tool_use: bool = True
    reasoning: bool = False
    image: bool = False
    pdf: bool = False
    embedding: bool = False
    list_models: bool = False


__all__ = ["Capabilities"]
