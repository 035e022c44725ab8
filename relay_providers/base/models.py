"""
Canonical provider-agnostic data model (public facade).

Purpose
-------
Re-export the request, message, response, embedding and model-listing DTOs
from ``models_parts`` so callers and adapters import one stable path. Every
model here is an immutable pydantic value object; converters build new
instances rather than mutating caller-owned ones.
"""

from __future__ import annotations

from .models_parts import *  # noqa: F401,F403
from .models_parts import __all__ as _parts_all

__all__ = list(_parts_all)
