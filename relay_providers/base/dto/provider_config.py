"""Typed configuration object for provider construction.

Purpose
-------
Capture the settings every adapter accepts (credentials, endpoint, client
transport knobs) in one validated value passed explicitly to a provider's
constructor. Providers resolve missing ``api_key`` / ``base_url`` from the
environment once, at construction, and never consult it again.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_copy``.
- ``httpx.Client`` may be supplied and is handed to the SDK unchanged.

Notes
-----
- ``max_retries`` is forwarded to the SDK; this layer itself never retries.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """Common provider construction parameters.

    Attributes
    ----------
    api_key:
        Explicit credential. When ``None`` the provider's env vars are read.
    base_url:
        Endpoint override (proxies, self-hosted gateways, local servers).
    timeout_seconds:
        Request timeout forwarded to the SDK client.
    max_retries:
        SDK-internal retry count.
    default_headers:
        Static headers added to every request.
    http_client:
        Pre-built ``httpx.Client`` passed through to the SDK.
    extra:
        Provider-specific settings.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout_seconds: Optional[float] = None
    max_retries: Optional[int] = None
    default_headers: Dict[str, str] = Field(default_factory=dict)
    http_client: Optional[httpx.Client] = None
    extra: Dict[str, Any] = Field(default_factory=dict)

    def with_overrides(self, **overrides: Any) -> "ProviderConfig":
        """Return a copy with the non-``None`` ``overrides`` applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(updates) - set(type(self).model_fields)
        if unknown:
            raise TypeError(f"unknown config fields: {sorted(unknown)}")
        return self.model_copy(update=updates)


__all__ = ["ProviderConfig"]
