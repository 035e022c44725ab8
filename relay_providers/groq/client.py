"""Groq provider adapter (OpenAI-compatible API).

Groq hosts neither embedding nor vision models and ignores reasoning
parameters; its capability record says so.
"""

from __future__ import annotations

from ..base.capabilities import Capabilities
from ..base.openai_compat import CompatibleConfig, CompatibleProvider
from ..config.defaults import GROQ_DEFAULT_BASE_URL

__all__ = ["GroqProvider", "GROQ_CAPABILITIES"]

GROQ_CAPABILITIES = Capabilities(
    completion=True,
    streaming=True,
    tool_use=True,
    reasoning=False,
    image=False,
    pdf=False,
    embedding=False,
    list_models=True,
)


class GroqProvider(CompatibleProvider):
    compat = CompatibleConfig(
        name="groq",
        default_base_url=GROQ_DEFAULT_BASE_URL,
        capabilities=GROQ_CAPABILITIES,
    )
