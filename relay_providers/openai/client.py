"""OpenAI provider adapter built on the OpenAI-compatible base.

Everything (request mapping, stream reconstruction, error classification) is
inherited from `CompatibleProvider`; this module only pins OpenAI's endpoint,
credential variables and capabilities.
"""

from __future__ import annotations

from ..base.capabilities import Capabilities
from ..base.openai_compat import CompatibleConfig, CompatibleProvider
from ..config.defaults import OPENAI_DEFAULT_BASE_URL

__all__ = ["OpenAIProvider", "OPENAI_CAPABILITIES"]

OPENAI_CAPABILITIES = Capabilities(
    completion=True,
    streaming=True,
    tool_use=True,
    reasoning=True,
    image=True,
    pdf=False,
    embedding=True,
    list_models=True,
)


class OpenAIProvider(CompatibleProvider):
    """OpenAI Chat Completions, embeddings and model listing."""

    compat = CompatibleConfig(
        name="openai",
        default_base_url=OPENAI_DEFAULT_BASE_URL,
        capabilities=OPENAI_CAPABILITIES,
    )
