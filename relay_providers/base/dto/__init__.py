"""Boundary DTOs for provider construction."""

from .provider_config import ProviderConfig

__all__ = ["ProviderConfig"]
