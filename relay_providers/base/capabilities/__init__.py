"""Capability descriptor (public surface)."""

from .core import Capabilities

__all__ = ["Capabilities"]
