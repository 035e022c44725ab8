"""Pytest configuration for the relay_providers test suite.

Credential and base-URL variables are removed for every test so that provider
construction only sees what a test sets explicitly.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from relay_providers.config.env import BASE_URL_ENV_MAP, ENV_ALIASES, ENV_MAP


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    names = set(ENV_MAP.values()) | set(BASE_URL_ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for name in names:
        monkeypatch.delenv(name, raising=False)
    yield
