"""llama.cpp provider adapter.

Talks to a local ``llama-server`` through its OpenAI-compatible ``/v1``
endpoint. The server does not check credentials, so no key is required and a
placeholder is sent to satisfy the SDK. No API-key env var is read.
"""

from __future__ import annotations

from ..base.capabilities import Capabilities
from ..base.openai_compat import CompatibleConfig, CompatibleProvider
from ..config.defaults import LLAMACPP_DEFAULT_BASE_URL, LLAMACPP_DUMMY_API_KEY

__all__ = ["LlamaCppProvider", "LLAMACPP_CAPABILITIES"]

LLAMACPP_CAPABILITIES = Capabilities(
    completion=True,
    streaming=True,
    tool_use=False,
    reasoning=False,
    image=False,
    pdf=False,
    embedding=True,
    list_models=True,
)


class LlamaCppProvider(CompatibleProvider):
    compat = CompatibleConfig(
        name="llamacpp",
        default_base_url=LLAMACPP_DEFAULT_BASE_URL,
        capabilities=LLAMACPP_CAPABILITIES,
        default_api_key=LLAMACPP_DUMMY_API_KEY,
        require_api_key=False,
    )
