"""Configuration constants and environment helpers for relay_providers."""

from .env import (
    ENV_ALIASES,
    ENV_MAP,
    BASE_URL_ENV_MAP,
    get_env_var_candidates,
    get_env_var_name,
    resolve_base_url,
    resolve_provider_key,
)

__all__ = [
    "ENV_ALIASES",
    "ENV_MAP",
    "BASE_URL_ENV_MAP",
    "get_env_var_candidates",
    "get_env_var_name",
    "resolve_base_url",
    "resolve_provider_key",
]
