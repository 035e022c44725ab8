"""llama.cpp server provider package."""

from .client import LlamaCppProvider

__all__ = ["LlamaCppProvider"]
