"""DeepSeek provider package."""

from .client import DeepSeekProvider

__all__ = ["DeepSeekProvider"]
