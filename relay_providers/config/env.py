"""relay_providers.config.env
==========================

Provider → environment variable mapping for credentials and base URLs.

Purpose
-------
- Single source of truth for which env vars each provider reads.
- Small lookup helpers used by provider constructors. Env is consulted only
  at construction; a built provider never re-reads the environment.

Design Notes
------------
- Canonical names live in ``ENV_MAP``. Providers that accept several names
  list them in ``ENV_ALIASES`` with the canonical one first (Gemini reads
  ``GEMINI_API_KEY`` then ``GOOGLE_API_KEY``).
- Helpers return ``None`` for unknown providers or unset variables; the caller
  decides whether that is an error.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "mistral": "MISTRAL_API_KEY",
    "groq": "GROQ_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

# Optional base URL overrides (OpenAI-compatible backends only).
BASE_URL_ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_BASE_URL",
    "anthropic": "ANTHROPIC_BASE_URL",
    "deepseek": "DEEPSEEK_BASE_URL",
    "mistral": "MISTRAL_BASE_URL",
    "groq": "GROQ_BASE_URL",
    "llamacpp": "LLAMACPP_BASE_URL",
}


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical API-key env var for ``provider`` (case-insensitive)."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API-key env var names, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first non-empty candidate.

    ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(provider):
        if val := os.environ.get(name, "").strip():
            return val, name
    return None, None


def resolve_base_url(provider: str) -> Optional[str]:
    """Return the base URL override from the environment, if any."""
    name = BASE_URL_ENV_MAP.get((provider or "").lower())
    if not name:
        return None
    return os.environ.get(name, "").strip() or None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "BASE_URL_ENV_MAP",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
    "resolve_base_url",
]
