"""Identifier helpers for ids the provider did not supply."""

from __future__ import annotations

import secrets

ID_RANDOM_BYTES = 12


def generate_id(prefix: str) -> str:
    """Return ``prefix`` followed by 24 lowercase hex characters."""
    return f"{prefix}{secrets.token_hex(ID_RANDOM_BYTES)}"


__all__ = ["generate_id", "ID_RANDOM_BYTES"]
