"""Mistral provider package."""

from .client import MistralProvider, patch_messages

__all__ = ["MistralProvider", "patch_messages"]
